"""
Hash Encoder
------------

Expands an input string into a deterministic sequence of drawing
instructions. The byte stream is SHA-256 in counter mode:

    block_i = sha256(input_utf8 || uint32_be(i))

The first BACKGROUND_BYTES of the stream pick the background color, then
every instruction consumes INSTRUCTION_BYTES consecutive bytes. Positions and
sizes are emitted as fractions of the canvas so the same parameters can be
rendered at any size.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Tuple

BACKGROUND_BYTES = 3
INSTRUCTION_BYTES = 12

# Shape size as a fraction of the canvas side
MIN_SIZE = 0.04
MAX_SIZE = 0.40

# Per-shape opacity
MIN_ALPHA = 0.35
MAX_ALPHA = 0.90


class ShapeKind(IntEnum):
    ELLIPSE = 0
    RECTANGLE = 1
    TRIANGLE = 2
    LINE = 3


Color = Tuple[int, int, int]


@dataclass(frozen=True)
class DrawInstruction:
    """One shape to paint. x, y and size are fractions of the canvas side."""
    kind: ShapeKind
    x: float
    y: float
    size: float
    color: Color
    rotation: int
    alpha: float


@dataclass(frozen=True)
class VisualParameters:
    """Background color plus the ordered instructions derived from one input."""
    background: Color
    instructions: Tuple[DrawInstruction, ...]

    def __len__(self) -> int:
        return len(self.instructions)


def _byte_stream(data: bytes) -> Iterator[int]:
    counter = 0
    while True:
        block = hashlib.sha256(data + counter.to_bytes(4, "big")).digest()
        yield from block
        counter += 1


def _take(stream: Iterator[int], n: int) -> bytes:
    return bytes(next(stream) for _ in range(n))


def _decode_instruction(chunk: bytes) -> DrawInstruction:
    kind = ShapeKind(chunk[0] % len(ShapeKind))
    x = int.from_bytes(chunk[1:3], "big") / 0xFFFF
    y = int.from_bytes(chunk[3:5], "big") / 0xFFFF
    size = MIN_SIZE + (chunk[5] / 0xFF) * (MAX_SIZE - MIN_SIZE)
    color = (chunk[6], chunk[7], chunk[8])
    rotation = int.from_bytes(chunk[9:11], "big") % 360
    alpha = MIN_ALPHA + (chunk[11] / 0xFF) * (MAX_ALPHA - MIN_ALPHA)
    return DrawInstruction(
        kind=kind,
        x=x,
        y=y,
        size=size,
        color=color,
        rotation=rotation,
        alpha=alpha,
    )


def derive_parameters(input: str, count: int) -> VisualParameters:
    """
    Derive the visual parameters for an input string.

    Pure function: identical input and count always give the identical
    sequence, on every platform. An empty string is a valid input. A
    negative count is treated as zero.

    Args:
        input: Arbitrary string, usually the rolling input
        count: Number of drawing instructions to produce

    Returns:
        VisualParameters with `count` instructions
    """
    stream = _byte_stream(input.encode("utf-8"))
    bg = _take(stream, BACKGROUND_BYTES)
    # Keep the background light so dark shapes and captions stay readable
    background = tuple(128 + (b >> 1) for b in bg)

    instructions = tuple(
        _decode_instruction(_take(stream, INSTRUCTION_BYTES))
        for _ in range(max(0, count))
    )
    return VisualParameters(background=background, instructions=instructions)
