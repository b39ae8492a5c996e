"""Derive a favicon set from one source image and serve it with FastAPI."""

from .errors import DecodeError, EncodeError, FaviconSetupError, SerializationError
from .models import Branding, GeneratedAsset, IconDescriptor, Options
from .publisher import generate, publish, setup

__all__ = [
    "Branding",
    "DecodeError",
    "EncodeError",
    "FaviconSetupError",
    "GeneratedAsset",
    "IconDescriptor",
    "Options",
    "SerializationError",
    "generate",
    "publish",
    "setup",
]
