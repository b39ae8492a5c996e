"""
Web app manifest generation.

The manifest references the installable-app icons under the same base path
the favicon routes are registered on.
"""

import logging
from typing import Iterable

from pydantic import ValidationError

from .catalog import MANIFEST_ICONS
from .errors import SerializationError
from .models import Branding, IconDescriptor, ManifestIcon, WebManifest

logger = logging.getLogger(__name__)


def normalize_base_path(base_path: str) -> str:
    """Return ``base_path`` ending with exactly one ``/`` (empty becomes ``/``)."""
    return base_path.rstrip("/") + "/"


def build_manifest(
    branding: Branding,
    base_path: str = "/",
    icons: Iterable[IconDescriptor] = MANIFEST_ICONS,
) -> WebManifest:
    prefix = normalize_base_path(base_path)
    try:
        return WebManifest(
            name=branding.name,
            short_name=branding.short_name,
            display=branding.display,
            start_url=branding.start_url,
            background_color=branding.background_color,
            theme_color=branding.theme_color,
            icons=[
                ManifestIcon(src=prefix + icon.name, sizes=icon.sizes, type=icon.mime_type)
                for icon in icons
            ],
        )
    except ValidationError as exc:
        raise SerializationError(f"Invalid webmanifest: {exc}") from exc


def render_manifest(
    branding: Branding,
    base_path: str = "/",
    icons: Iterable[IconDescriptor] = MANIFEST_ICONS,
) -> bytes:
    """Serialize the manifest once to compact JSON; start_url is omitted when unset."""
    manifest = build_manifest(branding, base_path, icons)
    try:
        payload = manifest.model_dump_json(exclude_none=True)
    except (ValueError, TypeError) as exc:
        raise SerializationError(f"Webmanifest could not be serialized: {exc}") from exc
    logger.debug("Webmanifest references %s", [icon.src for icon in manifest.icons])
    return payload.encode("utf-8")
