"""
Exceptions raised by the VizHash image pipeline.

The generated image is a security artifact, so every failure surfaces to the
caller instead of producing a degraded picture.
"""


class VizHashError(Exception):
    """Base exception for all VizHash errors."""
    pass


class DecodeError(VizHashError):
    """Raised when photo bytes are not a supported image format."""
    pass


class FontLoadError(VizHashError):
    """Raised when the font asset is missing or cannot be parsed."""
    pass


class ConfigError(VizHashError):
    """Raised when required configuration (the server secret) is absent."""
    pass
