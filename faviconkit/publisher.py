"""
Favicon route publishing.

Derives every asset up front and only then registers the GET endpoints, so a
failed setup leaves the caller's router untouched.
"""

import logging
from typing import Iterable, List, Optional

from fastapi import APIRouter
from fastapi.responses import Response

from .browserconfig import render_browserconfig
from .catalog import (
    BROWSERCONFIG_MEDIA_TYPE,
    BROWSERCONFIG_PATH,
    WEBMANIFEST_MEDIA_TYPE,
    WEBMANIFEST_PATH,
)
from .errors import FaviconSetupError
from .icon_set import build_icon_set
from .image_io import decode
from .manifest import render_manifest
from .models import GeneratedAsset, Options

logger = logging.getLogger(__name__)


def _asset_endpoint(asset: GeneratedAsset):
    async def serve_asset():
        return Response(content=asset.content, media_type=asset.media_type)

    return serve_asset


def publish(router: APIRouter, assets: Iterable[GeneratedAsset]) -> None:
    """Register one GET endpoint per asset on ``router``."""
    assets = list(assets)
    seen = set()
    for asset in assets:
        if asset.path in seen:
            raise ValueError(f"Duplicate favicon path: {asset.path}")
        seen.add(asset.path)

    staging = APIRouter()
    for asset in assets:
        staging.add_api_route(
            asset.path,
            _asset_endpoint(asset),
            methods=["GET"],
            name=asset.path.lstrip("/"),
            response_class=Response,
            include_in_schema=False,
        )
    router.include_router(staging)


def generate(
    options: Options,
    base_path: str = "/",
    *,
    max_workers: Optional[int] = None,
) -> List[GeneratedAsset]:
    """
    Derive every icon and both metadata documents from ``options``.

    Returns the catalog icons in order, followed by the webmanifest and the
    browserconfig.
    """
    primary = decode(options.favicon)
    alternate = None
    if options.apple_touch_icon is not None:
        alternate = decode(options.apple_touch_icon)

    branding = options.resolve()
    assets = build_icon_set(primary, alternate, max_workers=max_workers)
    assets.append(
        GeneratedAsset(
            path=WEBMANIFEST_PATH,
            content=render_manifest(branding, base_path),
            media_type=WEBMANIFEST_MEDIA_TYPE,
        )
    )
    assets.append(
        GeneratedAsset(
            path=BROWSERCONFIG_PATH,
            content=render_browserconfig(branding.tile_color),
            media_type=BROWSERCONFIG_MEDIA_TYPE,
        )
    )
    return assets


def setup(
    router: APIRouter,
    options: Options,
    *,
    base_path: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> List[GeneratedAsset]:
    """
    Generate the favicon set and register it on ``router``.

    Args:
        router: Router the endpoints are added to. Include it in the app
            after calling setup, FastAPI copies routes at include time.
        options: Branding and source images
        base_path: Prefix used for manifest icon URLs, defaults to router.prefix
        max_workers: Render icons on a thread pool when greater than 1

    Returns:
        The registered assets

    Raises:
        FaviconSetupError: DecodeError, EncodeError or SerializationError.
            No route is registered in that case.
    """
    if base_path is None:
        base_path = router.prefix
    try:
        assets = generate(options, base_path, max_workers=max_workers)
    except FaviconSetupError as exc:
        logger.error("Favicon setup failed [%s]: %s", exc.error_code, exc)
        raise

    publish(router, assets)
    logger.info(
        "Registered %d favicon routes for %r under %s (%d bytes)",
        len(assets),
        options.name,
        base_path or "/",
        sum(len(asset.content) for asset in assets),
    )
    return assets
