"""
Pattern Renderer
----------------

Paints VisualParameters onto a fresh canvas. Shapes are drawn in sequence
order (painter's algorithm); each shape is rasterized into an anti-aliased
coverage mask over its bounding box and blended onto that part of the
canvas with its own alpha using integer arithmetic, so the same parameters
and size always give identical pixels.

The canvas is a BGR numpy array (HxWx3, uint8), the layout OpenCV uses.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence, Tuple

import cv2
import numpy as np

from .encoder import Color, DrawInstruction, ShapeKind, VisualParameters

# Upper bound on either canvas dimension
MAX_CANVAS_SIZE = 4096

# Ellipses and rectangles are drawn with this height/width ratio so the
# rotation angle stays visible
ASPECT = 0.6

Canvas = np.ndarray


def _clamp(value: Any, low: float, high: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return low
    if not math.isfinite(number):
        return low
    return min(high, max(low, number))


def _clamp_color(color: Any) -> Color:
    try:
        channels = list(color)[:3]
    except TypeError:
        channels = []
    channels += [0] * (3 - len(channels))
    return tuple(int(_clamp(c, 0, 255)) for c in channels)


def _shape_kind(kind: Any) -> ShapeKind:
    try:
        return ShapeKind(int(kind) % len(ShapeKind))
    except (TypeError, ValueError):
        return ShapeKind.ELLIPSE


def _rotated_polygon(
    cx: float,
    cy: float,
    points: Sequence[Tuple[float, float]],
    angle_deg: float,
) -> np.ndarray:
    angle = math.radians(angle_deg)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    rotated = [
        (round(cx + px * cos_a - py * sin_a), round(cy + px * sin_a + py * cos_a))
        for px, py in points
    ]
    return np.array(rotated, dtype=np.int32)


def _draw_mask(
    mask: np.ndarray,
    kind: ShapeKind,
    cx: int,
    cy: int,
    radius: int,
    rotation: int,
) -> None:
    if kind == ShapeKind.ELLIPSE:
        axes = (radius, max(1, int(radius * ASPECT)))
        cv2.ellipse(mask, (cx, cy), axes, rotation, 0, 360, 255, -1, cv2.LINE_AA)
    elif kind == ShapeKind.RECTANGLE:
        half_h = radius * ASPECT
        corners = [(-radius, -half_h), (radius, -half_h), (radius, half_h), (-radius, half_h)]
        cv2.fillPoly(mask, [_rotated_polygon(cx, cy, corners, rotation)], 255, cv2.LINE_AA)
    elif kind == ShapeKind.TRIANGLE:
        corners = [
            (radius * math.cos(math.radians(a)), radius * math.sin(math.radians(a)))
            for a in (-90, 30, 150)
        ]
        cv2.fillPoly(mask, [_rotated_polygon(cx, cy, corners, rotation)], 255, cv2.LINE_AA)
    else:
        ends = _rotated_polygon(cx, cy, [(-radius, 0), (radius, 0)], rotation)
        thickness = max(1, radius // 5)
        start = (int(ends[0][0]), int(ends[0][1]))
        end = (int(ends[1][0]), int(ends[1][1]))
        cv2.line(mask, start, end, 255, thickness, cv2.LINE_AA)


def _blend(canvas: Canvas, mask: np.ndarray, color_bgr: Color, alpha: float) -> None:
    alpha_int = int(round(alpha * 255))
    weight = (mask.astype(np.uint32) * alpha_int + 127) // 255
    weight = weight[:, :, np.newaxis]
    color = np.array(color_bgr, dtype=np.uint32)
    blended = (canvas.astype(np.uint32) * (255 - weight) + color * weight + 127) // 255
    canvas[...] = blended.astype(np.uint8)


def draw_instruction(canvas: Canvas, instruction: DrawInstruction) -> None:
    """
    Paint a single instruction onto the canvas in place.

    Out-of-range fields are clamped rather than rejected.
    """
    height, width = canvas.shape[:2]
    side = min(width, height)

    kind = _shape_kind(instruction.kind)
    cx = int(round(_clamp(instruction.x, 0.0, 1.0) * (width - 1)))
    cy = int(round(_clamp(instruction.y, 0.0, 1.0) * (height - 1)))
    radius = max(1, int(_clamp(instruction.size, 0.0, 1.0) * side / 2))
    rotation = int(_clamp(instruction.rotation, -1e9, 1e9)) % 360
    alpha = _clamp(instruction.alpha, 0.0, 1.0)
    red, green, blue = _clamp_color(instruction.color)

    # Covers rotated rectangle corners (~1.17 x radius) plus line width and AA fringe
    pad = radius + radius // 2 + 2
    x0, x1 = max(0, cx - pad), min(width, cx + pad + 1)
    y0, y1 = max(0, cy - pad), min(height, cy + pad + 1)
    if x0 >= x1 or y0 >= y1:
        return

    mask = np.zeros((y1 - y0, x1 - x0), dtype=np.uint8)
    _draw_mask(mask, kind, cx - x0, cy - y0, radius, rotation)
    _blend(canvas[y0:y1, x0:x1], mask, (blue, green, red), alpha)


def new_canvas(width: int, height: int, background: Color) -> Canvas:
    red, green, blue = _clamp_color(background)
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:, :] = (blue, green, red)
    return canvas


def render(parameters: VisualParameters, size: int, height: Optional[int] = None) -> Canvas:
    """
    Render the visual-hash pattern.

    Args:
        parameters: Output of derive_parameters()
        size: Canvas width in pixels (and height unless `height` is given)
        height: Optional canvas height for non-square output

    Returns:
        BGR canvas of shape (height, size, 3)
    """
    width = int(_clamp(size, 1, MAX_CANVAS_SIZE))
    canvas_height = width if height is None else int(_clamp(height, 1, MAX_CANVAS_SIZE))

    canvas = new_canvas(width, canvas_height, parameters.background)
    for instruction in parameters.instructions:
        draw_instruction(canvas, instruction)
    return canvas

