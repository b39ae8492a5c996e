from pathlib import Path
from typing import Optional

import yaml

BRANDING_KEYS = (
    "name",
    "short_name",
    "display",
    "start_url",
    "theme_color",
    "background_color",
    "tile_color",
)


def load_branding(path: Optional[Path] = None) -> dict:
    """
    Read branding fields from a YAML file.

    Missing files yield an empty dict. Unknown keys and null values are
    dropped; values are coerced to str.
    """
    if path is None:
        path = Path(__file__).resolve().parents[1] / "config" / "branding.yml"
    path = Path(path)
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Branding file must contain a mapping: {path}")
    return {key: str(data[key]) for key in BRANDING_KEYS if data.get(key) is not None}
