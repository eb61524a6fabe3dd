"""
VizHash: deterministic visual hashes composited with a person's photo.

A human verifier compares the pattern ring around a permit photo with a
freshly generated reference to detect replayed screenshots.
"""

from .assets import FontAsset, VizHashAssets
from .compositor import compose
from .encoder import DrawInstruction, ShapeKind, VisualParameters, derive_parameters
from .exceptions import ConfigError, DecodeError, FontLoadError, VizHashError
from .renderer import render
from .rolling_input import current_input, window_key
from .service import REFERENCE_CAPTION, SHAPE_COUNT, VizHashService

__all__ = [
    "ConfigError",
    "DecodeError",
    "DrawInstruction",
    "FontAsset",
    "FontLoadError",
    "REFERENCE_CAPTION",
    "SHAPE_COUNT",
    "ShapeKind",
    "VisualParameters",
    "VizHashAssets",
    "VizHashError",
    "VizHashService",
    "compose",
    "current_input",
    "derive_parameters",
    "render",
    "window_key",
]
