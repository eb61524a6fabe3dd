"""
Photo Compositor
----------------

Places a photo over a rendered pattern and encodes the result as JPEG.

The photo is scaled to a fraction of the canvas's shorter side and centered,
so a ring of the pattern stays visible around it. That ring is what a human
verifier compares against a freshly rendered reference. An optional caption
is written into a darkened band along the bottom edge.
"""

from __future__ import annotations

import io
import logging
from typing import Optional

import cv2
import numpy as np
from PIL import Image, ImageDraw

from .assets import FontAsset
from .exceptions import DecodeError, FontLoadError, VizHashError
from .renderer import Canvas

logger = logging.getLogger(__name__)

DEFAULT_PHOTO_FRACTION = 0.8
DEFAULT_JPEG_QUALITY = 90

# Caption band height as a fraction of the canvas height
CAPTION_BAND = 0.12
# Band pixels keep this much of their brightness (out of 255)
CAPTION_SHADE = 90
CAPTION_COLOR = (255, 255, 255)
CAPTION_MIN_FONT = 6

# EXIF tag holding the camera orientation
EXIF_ORIENTATION = 0x0112


def read_orientation(photo: bytes) -> int:
    """EXIF orientation (1-8) of encoded image bytes; 1 when there is no tag."""
    try:
        with Image.open(io.BytesIO(photo)) as image:
            orientation = image.getexif().get(EXIF_ORIENTATION, 1)
    except (OSError, SyntaxError, ValueError):
        # Metadata Pillow cannot parse carries no usable orientation
        return 1
    return orientation if isinstance(orientation, int) and 1 <= orientation <= 8 else 1


def apply_orientation(image: np.ndarray, orientation: int) -> np.ndarray:
    """Rotate/flip a decoded image so it displays upright for the EXIF orientation."""
    if orientation == 2:
        image = image[:, ::-1]
    elif orientation == 3:
        image = image[::-1, ::-1]
    elif orientation == 4:
        image = image[::-1]
    elif orientation == 5:
        image = image.swapaxes(0, 1)
    elif orientation == 6:
        image = cv2.rotate(image, cv2.ROTATE_90_CLOCKWISE)
    elif orientation == 7:
        image = image.swapaxes(0, 1)[::-1, ::-1]
    elif orientation == 8:
        image = cv2.rotate(image, cv2.ROTATE_90_COUNTERCLOCKWISE)
    return np.ascontiguousarray(image)


def decode_photo(photo: bytes) -> np.ndarray:
    """
    Decode photo bytes into a uint8 BGR or BGRA array, turned upright
    according to its EXIF orientation tag.

    Raises:
        DecodeError: If the bytes are empty or not a supported image
    """
    if not photo:
        raise DecodeError("Photo data is empty")

    buffer = np.frombuffer(photo, dtype=np.uint8)
    try:
        image = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise DecodeError(f"Photo could not be decoded: {e}") from e

    if image is None or image.size == 0:
        raise DecodeError("Photo data is not a supported image format")

    if image.dtype == np.uint16:
        image = (image >> 8).astype(np.uint8)
    elif image.dtype != np.uint8:
        raise DecodeError(f"Unsupported photo sample type: {image.dtype}")

    if image.ndim == 2 or image.shape[2] == 1:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    elif image.shape[2] not in (3, 4):
        raise DecodeError(f"Unsupported photo channel count: {image.shape[2]}")
    return apply_orientation(image, read_orientation(photo))


def fit_photo(photo: np.ndarray, box: int) -> np.ndarray:
    """Scale a photo so its longer side equals `box`, keeping the aspect ratio."""
    height, width = photo.shape[:2]
    scale = box / max(height, width)
    new_width = max(1, int(round(width * scale)))
    new_height = max(1, int(round(height * scale)))
    interpolation = cv2.INTER_AREA if scale < 1 else cv2.INTER_CUBIC
    return cv2.resize(photo, (new_width, new_height), interpolation=interpolation)


def paste_centered(canvas: Canvas, photo: np.ndarray) -> None:
    """Paste a BGR/BGRA photo into the middle of the canvas, in place."""
    canvas_h, canvas_w = canvas.shape[:2]
    photo_h, photo_w = photo.shape[:2]
    top = (canvas_h - photo_h) // 2
    left = (canvas_w - photo_w) // 2
    region = canvas[top:top + photo_h, left:left + photo_w]

    if photo.shape[2] == 4:
        alpha = photo[:, :, 3:4].astype(np.uint32)
        color = photo[:, :, :3].astype(np.uint32)
        mixed = (color * alpha + region.astype(np.uint32) * (255 - alpha) + 127) // 255
        region[...] = mixed.astype(np.uint8)
    else:
        region[...] = photo


def draw_caption(canvas: Canvas, caption: str, font: FontAsset) -> None:
    """
    Write a caption into a darkened band at the bottom of the canvas, in place.

    The font size starts at the band height and shrinks until the text fits
    the canvas width.
    """
    if font is None:
        raise FontLoadError("No font available to render the caption")

    height, width = canvas.shape[:2]
    band_height = max(CAPTION_MIN_FONT + 2, int(round(height * CAPTION_BAND)))
    band_height = min(band_height, height)
    band = canvas[height - band_height:height]
    band[...] = ((band.astype(np.uint32) * CAPTION_SHADE) // 255).astype(np.uint8)

    image = Image.fromarray(cv2.cvtColor(band, cv2.COLOR_BGR2RGB))
    draw = ImageDraw.Draw(image)

    font_size = max(CAPTION_MIN_FONT, int(band_height * 0.7))
    sized = font.sized(font_size)
    left, top, right, bottom = draw.textbbox((0, 0), caption, font=sized)
    while right - left > width * 0.92 and font_size > CAPTION_MIN_FONT:
        font_size -= 1
        sized = font.sized(font_size)
        left, top, right, bottom = draw.textbbox((0, 0), caption, font=sized)

    x = (width - (right - left)) // 2 - left
    y = (band_height - (bottom - top)) // 2 - top
    draw.text((x, y), caption, font=sized, fill=CAPTION_COLOR)

    band[...] = cv2.cvtColor(np.asarray(image), cv2.COLOR_RGB2BGR)


def encode_jpeg(canvas: Canvas, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    quality = min(100, max(1, int(quality)))
    ok, encoded = cv2.imencode(".jpg", canvas, [int(cv2.IMWRITE_JPEG_QUALITY), quality])
    if not ok:
        raise VizHashError("JPEG encoding failed")
    return encoded.tobytes()


def compose(
    background: Canvas,
    photo: bytes,
    caption: Optional[str],
    font: FontAsset,
    photo_fraction: float = DEFAULT_PHOTO_FRACTION,
    jpeg_quality: int = DEFAULT_JPEG_QUALITY,
) -> bytes:
    """
    Composite a photo (and optional caption) over a rendered pattern.

    Args:
        background: Canvas from render(); not modified
        photo: JPEG/PNG bytes of the photo to center
        caption: Text for the bottom band, or None for no caption
        font: Font used for the caption
        photo_fraction: Share of the canvas's shorter side the photo may occupy
        jpeg_quality: JPEG quality, 1-100

    Returns:
        JPEG bytes with the same dimensions as the background

    Raises:
        DecodeError: If the photo bytes cannot be decoded
        FontLoadError: If the caption font cannot be used
    """
    try:
        decoded = decode_photo(photo)
    except DecodeError as e:
        logger.warning(f"Rejecting photo for VizHash composite: {e}")
        raise

    canvas = background.copy()
    height, width = canvas.shape[:2]
    fraction = min(1.0, max(0.0, float(photo_fraction)))
    box = max(1, int(min(height, width) * fraction))
    paste_centered(canvas, fit_photo(decoded, box))

    if caption is not None:
        draw_caption(canvas, caption, font)

    return encode_jpeg(canvas, jpeg_quality)
