"""
Core Data Models for the favicon set.

Defines the structures shared by the derivation pipeline:
- Options: Branding and source images supplied once at setup
- Branding: Options with every default resolved
- IconDescriptor: One entry of the fixed icon catalog
- GeneratedAsset: Servable bytes with their path and media type
- WebManifest: The installable-app manifest document
"""

from dataclasses import dataclass
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_DISPLAY = "standalone"
DEFAULT_THEME_COLOR = "#ffffff"
DEFAULT_BACKGROUND_COLOR = "#ffffff"
DEFAULT_TILE_COLOR = "#da532c"


@dataclass(frozen=True)
class Branding:
    name: str
    short_name: str
    display: str
    start_url: Optional[str]
    theme_color: str
    background_color: str
    tile_color: str


class Options(BaseModel):
    """
    Input bundle for favicon setup.

    Unset optional fields are ``None``. An explicit empty string is kept as
    given; only ``None`` falls back to a default in :meth:`resolve`.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="App name used in the webmanifest")
    short_name: Optional[str] = Field(default=None, description="Short app name, defaults to name")
    display: Optional[str] = Field(default=None, description="Webmanifest display mode")
    start_url: Optional[str] = Field(default=None, description="Webmanifest start URL")
    theme_color: Optional[str] = Field(default=None, description="Webmanifest theme color")
    background_color: Optional[str] = Field(default=None, description="Webmanifest background color")
    tile_color: Optional[str] = Field(default=None, description="Browserconfig tile color")
    favicon: bytes = Field(..., repr=False, description="Encoded base icon")
    apple_touch_icon: Optional[bytes] = Field(
        default=None,
        repr=False,
        description="Alternative icon for apple-touch-icon, defaults to favicon",
    )

    def resolve(self) -> Branding:
        return Branding(
            name=self.name,
            short_name=self.name if self.short_name is None else self.short_name,
            display=DEFAULT_DISPLAY if self.display is None else self.display,
            start_url=self.start_url,
            theme_color=DEFAULT_THEME_COLOR if self.theme_color is None else self.theme_color,
            background_color=(
                DEFAULT_BACKGROUND_COLOR if self.background_color is None else self.background_color
            ),
            tile_color=DEFAULT_TILE_COLOR if self.tile_color is None else self.tile_color,
        )


@dataclass(frozen=True)
class IconDescriptor:
    name: str
    size: int
    format: str = "PNG"
    mime_type: str = "image/png"
    source: Literal["primary", "alternate"] = "primary"

    @property
    def path(self) -> str:
        return "/" + self.name

    @property
    def sizes(self) -> str:
        return f"{self.size}x{self.size}"


@dataclass(frozen=True)
class GeneratedAsset:
    path: str
    content: bytes
    media_type: str


class ManifestIcon(BaseModel):
    """Icon reference inside the webmanifest."""
    src: str
    sizes: str
    type: str


class WebManifest(BaseModel):
    """Web app manifest document (``site.webmanifest``)."""
    model_config = ConfigDict(frozen=True)

    name: str
    short_name: str
    display: str
    start_url: Optional[str] = None
    background_color: str
    theme_color: str
    icons: List[ManifestIcon] = Field(default_factory=list)
