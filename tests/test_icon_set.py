import io

from PIL import Image

from faviconkit.catalog import APPLE_TOUCH_ICON, FAVICON_16, ICON_CATALOG
from faviconkit.icon_set import build_icon_set
from faviconkit.image_io import decode


def test_catalog_has_seven_unique_png_icons():
    names = [d.name for d in ICON_CATALOG]
    assert len(names) == 7
    assert len(set(names)) == 7
    assert all(d.mime_type == "image/png" and d.format == "PNG" for d in ICON_CATALOG)
    assert [d.name for d in ICON_CATALOG if d.source == "alternate"] == ["apple-touch-icon.png"]


def test_build_icon_set_matches_catalog_sizes(favicon_png):
    assets = build_icon_set(decode(favicon_png))
    assert [a.path for a in assets] == ["/" + d.name for d in ICON_CATALOG]
    for descriptor, asset in zip(ICON_CATALOG, assets):
        assert asset.media_type == descriptor.mime_type
        with Image.open(io.BytesIO(asset.content)) as img:
            assert img.format == "PNG"
            assert img.size == (descriptor.size, descriptor.size)


def test_missing_alternate_reuses_primary(favicon_png):
    primary = decode(favicon_png)
    implicit = build_icon_set(primary)
    explicit = build_icon_set(primary, decode(favicon_png))
    assert [a.content for a in implicit] == [a.content for a in explicit]


def test_alternate_only_feeds_touch_icon(make_png):
    primary = decode(make_png(color=(255, 0, 0, 255)))
    alternate = decode(make_png(color=(0, 0, 255, 255)))
    assets = {a.path: a for a in build_icon_set(primary, alternate)}

    with Image.open(io.BytesIO(assets[APPLE_TOUCH_ICON.path].content)) as touch:
        r, g, b, _ = touch.convert("RGBA").getpixel((90, 90))
        assert b > 200 and r < 50
    with Image.open(io.BytesIO(assets[FAVICON_16.path].content)) as small:
        r, g, b, _ = small.convert("RGBA").getpixel((8, 8))
        assert r > 200 and b < 50


def test_thread_pool_output_matches_sequential(favicon_png):
    image = decode(favicon_png)
    sequential = build_icon_set(image)
    parallel = build_icon_set(image, max_workers=4)
    assert parallel == sequential


def test_custom_catalog_subset(favicon_png):
    assets = build_icon_set(decode(favicon_png), catalog=[FAVICON_16])
    assert [a.path for a in assets] == ["/favicon-16x16.png"]
