from xml.sax.saxutils import escape

from .catalog import MSTILE_150

# The tile reference is root-absolute and does not follow the router base path.
_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<browserconfig>
    <msapplication>
        <tile>
            <square150x150logo src="{tile_src}"/>
            <TileColor>{tile_color}</TileColor>
        </tile>
    </msapplication>
</browserconfig>"""


def render_browserconfig(tile_color: str) -> bytes:
    """Build the legacy tile configuration (``browserconfig.xml``)."""
    document = _TEMPLATE.format(tile_src=MSTILE_150.path, tile_color=escape(tile_color))
    return document.encode("utf-8")
