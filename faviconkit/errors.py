"""Exceptions raised while deriving and registering the favicon set."""


class FaviconSetupError(Exception):
    """Base exception with machine-readable code for setup failures."""

    def __init__(self, message: str, *, error_code: str):
        super().__init__(message)
        self.error_code = error_code


class DecodeError(FaviconSetupError):
    """Raised when source bytes are not a decodable image."""

    def __init__(self, message: str = "Source image could not be decoded"):
        super().__init__(message, error_code="decode_failed")


class EncodeError(FaviconSetupError):
    """Raised when a resized icon cannot be serialized to its target format."""

    def __init__(self, message: str = "Icon could not be encoded"):
        super().__init__(message, error_code="encode_failed")


class SerializationError(FaviconSetupError):
    """Raised when a metadata document cannot be built."""

    def __init__(self, message: str = "Document could not be serialized"):
        super().__init__(message, error_code="serialization_failed")
