import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from PIL import Image

from .catalog import ICON_CATALOG
from .image_io import transform
from .models import GeneratedAsset, IconDescriptor

logger = logging.getLogger(__name__)


def _render(descriptor: IconDescriptor, primary: Image.Image, alternate: Image.Image) -> GeneratedAsset:
    source = alternate if descriptor.source == "alternate" else primary
    content = transform(source, descriptor.size, descriptor.format)
    logger.debug("Rendered %s (%s, %d bytes)", descriptor.name, descriptor.sizes, len(content))
    return GeneratedAsset(path=descriptor.path, content=content, media_type=descriptor.mime_type)


def build_icon_set(
    primary: Image.Image,
    alternate: Optional[Image.Image] = None,
    catalog: Iterable[IconDescriptor] = ICON_CATALOG,
    *,
    max_workers: Optional[int] = None,
) -> List[GeneratedAsset]:
    """
    Render every catalog entry from the decoded source rasters.

    Args:
        primary: Decoded favicon raster
        alternate: Decoded touch icon raster; ``primary`` is used when None
        catalog: Descriptors to render
        max_workers: Render on a thread pool when greater than 1

    Returns:
        One GeneratedAsset per descriptor, in catalog order
    """
    if alternate is None:
        alternate = primary
    descriptors = list(catalog)

    if max_workers and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="favicon") as pool:
            futures = [pool.submit(_render, d, primary, alternate) for d in descriptors]
            return [future.result() for future in futures]

    return [_render(d, primary, alternate) for d in descriptors]
