"""
Configuration for the favicon service.

Settings come from the environment (or .env) and an optional branding YAML
file; explicit settings win over the file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from faviconkit.branding import BRANDING_KEYS, load_branding
from faviconkit.models import Options


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Source images
    favicon_path: str = "./static/favicon.png"
    apple_touch_icon_path: Optional[str] = None

    # Routing
    favicon_base_path: str = "/"
    favicon_workers: int = 1

    # Branding (overrides branding_file)
    branding_file: Optional[str] = None
    app_name: Optional[str] = None
    app_short_name: Optional[str] = None
    app_display: Optional[str] = None
    app_start_url: Optional[str] = None
    app_theme_color: Optional[str] = None
    app_background_color: Optional[str] = None
    app_tile_color: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def router_prefix(base_path: str) -> str:
    """APIRouter prefixes must not end with a slash; the root maps to ''."""
    return base_path.rstrip("/")


def load_options(settings: Settings) -> Options:
    """Read the configured source images and merge the branding fields."""
    branding = {}
    if settings.branding_file:
        branding = load_branding(Path(settings.branding_file))

    overrides = {
        "name": settings.app_name,
        "short_name": settings.app_short_name,
        "display": settings.app_display,
        "start_url": settings.app_start_url,
        "theme_color": settings.app_theme_color,
        "background_color": settings.app_background_color,
        "tile_color": settings.app_tile_color,
    }
    for key in BRANDING_KEYS:
        if overrides[key] is not None:
            branding[key] = overrides[key]
    if "name" not in branding:
        raise ValueError("App name is not configured (set APP_NAME or name in the branding file)")

    apple_touch_icon = None
    if settings.apple_touch_icon_path:
        apple_touch_icon = Path(settings.apple_touch_icon_path).read_bytes()

    return Options(
        favicon=Path(settings.favicon_path).read_bytes(),
        apple_touch_icon=apple_touch_icon,
        **branding,
    )
