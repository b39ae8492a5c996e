import io

import pytest
from PIL import Image


def _png_bytes(size=(512, 512), color=(200, 40, 40, 255), mode="RGBA") -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def make_png():
    """Factory for encoded PNG sources."""
    return _png_bytes


@pytest.fixture
def favicon_png() -> bytes:
    return _png_bytes()


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Ensure cached settings do not leak between tests."""
    from app.deps import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
