import io
import logging

from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)

# Pillow falls back to nearest-neighbour for palette and bilevel modes.
_RGBA_MODES = {"1", "P", "PA"}
# Deep greyscale (32-bit int, float, 16-bit) is narrowed to 8-bit; PNG cannot store I or F.
_GREYSCALE_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N", "F"}


def decode(data: bytes) -> Image.Image:
    if not data:
        raise DecodeError("Source image is empty")
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (
        UnidentifiedImageError,
        OSError,
        SyntaxError,
        EOFError,
        ValueError,
        Image.DecompressionBombError,
    ) as exc:
        raise DecodeError(f"Source image could not be decoded: {exc}") from exc

    source_format = image.format
    if image.mode in _RGBA_MODES:
        image = image.convert("RGBA")
    elif image.mode == "CMYK":
        image = image.convert("RGB")
    elif image.mode in _GREYSCALE_MODES:
        image = image.convert("L")
    logger.debug("Decoded %s source %dx%d (%s)", source_format, image.width, image.height, image.mode)
    return image


def resize(image: Image.Image, size: int) -> Image.Image:
    """
    Resample to exactly ``size`` x ``size`` with a Lanczos filter.

    Non-square sources are squashed, not cropped. The input image is left
    untouched; Pillow returns a new raster.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"size must be a positive integer, got {size!r}")
    return image.resize((size, size), Image.Resampling.LANCZOS)


def encode(image: Image.Image, fmt: str = "PNG") -> bytes:
    buf = io.BytesIO()
    try:
        image.save(buf, format=fmt)
    except (OSError, ValueError, KeyError) as exc:
        raise EncodeError(f"Icon could not be encoded as {fmt}: {exc}") from exc
    return buf.getvalue()


def transform(image: Image.Image, size: int, fmt: str = "PNG") -> bytes:
    return encode(resize(image, size), fmt)
