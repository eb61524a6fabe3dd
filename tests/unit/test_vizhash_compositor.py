"""
Unit tests for greenlight.vizhash.compositor
"""
import io

import cv2
import numpy as np
import pytest
from PIL import Image
from greenlight.vizhash.assets import FontAsset
from greenlight.vizhash.compositor import (
    EXIF_ORIENTATION,
    apply_orientation,
    compose,
    decode_photo,
    fit_photo,
    read_orientation,
)
from greenlight.vizhash.exceptions import DecodeError, FontLoadError
from greenlight.vizhash.renderer import new_canvas

GRAY = (60, 60, 60)
RED_BGR = (0, 0, 255)


def _close(pixel, expected, tolerance=12):
    return all(abs(int(p) - int(e)) <= tolerance for p, e in zip(pixel, expected))


@pytest.fixture
def background():
    return new_canvas(100, 100, GRAY)


class TestDecodePhoto:
    """Tests for photo decoding"""

    def test_empty_bytes(self):
        with pytest.raises(DecodeError):
            decode_photo(b"")

    def test_garbage_bytes(self):
        with pytest.raises(DecodeError):
            decode_photo(b"definitely not an image")

    def test_grayscale_becomes_bgr(self, encode_png):
        gray = np.full((10, 12), 128, dtype=np.uint8)
        image = decode_photo(encode_png(gray))
        assert image.shape == (10, 12, 3)

    def test_alpha_channel_kept(self, encode_png):
        bgra = np.zeros((8, 8, 4), dtype=np.uint8)
        image = decode_photo(encode_png(bgra))
        assert image.shape == (8, 8, 4)

    def test_jpeg_input(self, make_photo):
        image = decode_photo(make_photo(20, 10, RED_BGR, ".jpg"))
        assert image.shape == (10, 20, 3)


def _phone_jpeg(orientation: int) -> bytes:
    """40x20 JPEG, top half red and bottom half blue, with an EXIF orientation tag."""
    image = Image.new("RGB", (40, 20), (0, 0, 255))
    image.paste((255, 0, 0), (0, 0, 40, 10))
    exif = Image.Exif()
    exif[EXIF_ORIENTATION] = orientation
    buffer = io.BytesIO()
    image.save(buffer, "JPEG", quality=95, exif=exif.tobytes())
    return buffer.getvalue()


class TestOrientation:
    """EXIF orientation is applied after decoding"""

    def test_rotated_clockwise(self):
        image = decode_photo(_phone_jpeg(6))

        assert image.shape == (40, 20, 3)
        # Stored top rows end up on the right
        assert _close(image[20, 17], RED_BGR, 30)
        assert _close(image[20, 2], (255, 0, 0), 30)

    def test_rotated_counter_clockwise(self):
        image = decode_photo(_phone_jpeg(8))

        assert image.shape == (40, 20, 3)
        assert _close(image[20, 2], RED_BGR, 30)
        assert _close(image[20, 17], (255, 0, 0), 30)

    def test_no_tag(self, make_photo):
        assert read_orientation(make_photo(20, 10, RED_BGR, ".jpg")) == 1
        assert decode_photo(make_photo(20, 10, RED_BGR, ".png")).shape == (10, 20, 3)

    def test_tag_read(self):
        assert read_orientation(_phone_jpeg(6)) == 6

    @pytest.mark.parametrize(
        "orientation, expected",
        [
            (1, lambda a: a),
            (2, lambda a: a[:, ::-1]),
            (3, lambda a: np.rot90(a, 2)),
            (4, lambda a: a[::-1]),
            (5, lambda a: a.swapaxes(0, 1)),
            (6, lambda a: np.rot90(a, -1)),
            (7, lambda a: np.rot90(a.swapaxes(0, 1), 2)),
            (8, lambda a: np.rot90(a, 1)),
        ],
    )
    def test_all_orientations(self, orientation, expected):
        stored = np.arange(2 * 3 * 3, dtype=np.uint8).reshape(2, 3, 3)
        result = apply_orientation(stored, orientation)
        assert np.array_equal(result, expected(stored))
        assert result.flags["C_CONTIGUOUS"]


class TestFitPhoto:
    """Tests for aspect-preserving scaling"""

    def test_landscape(self):
        photo = np.zeros((100, 200, 3), dtype=np.uint8)
        assert fit_photo(photo, 80).shape == (40, 80, 3)

    def test_portrait_upscaled(self):
        photo = np.zeros((30, 15, 3), dtype=np.uint8)
        assert fit_photo(photo, 60).shape == (60, 30, 3)


class TestCompose:
    """Tests for compose"""

    def test_output_is_jpeg_with_background_dimensions(self, make_photo, jpeg_to_array, font):
        background = new_canvas(120, 90, GRAY)
        data = compose(background, make_photo(40, 40, RED_BGR), None, font)

        assert data[:3] == b"\xff\xd8\xff"
        assert jpeg_to_array(data).shape == (90, 120, 3)

    def test_photo_centered_with_pattern_ring(self, background, make_photo, jpeg_to_array, font):
        image = jpeg_to_array(compose(background, make_photo(50, 50, RED_BGR), None, font))

        assert _close(image[50, 50], RED_BGR)
        # 0.8 of 100px leaves a 10px ring on each side
        assert _close(image[3, 3], GRAY)
        assert _close(image[96, 50], GRAY)

    def test_aspect_ratio_preserved(self, background, make_photo, jpeg_to_array, font):
        image = jpeg_to_array(compose(background, make_photo(200, 100, RED_BGR), None, font))

        # 80x40 photo, rows 30..69
        assert _close(image[50, 50], RED_BGR)
        assert _close(image[20, 50], GRAY)
        assert _close(image[80, 50], GRAY)

    def test_background_not_mutated(self, background, make_photo, font):
        before = background.copy()
        compose(background, make_photo(50, 50, RED_BGR), "CAPTION", font)
        assert np.array_equal(background, before)

    def test_transparent_photo_shows_background(self, background, encode_png, jpeg_to_array, font):
        clear = np.zeros((40, 40, 4), dtype=np.uint8)
        clear[:, :, 2] = 255
        image = jpeg_to_array(compose(background, encode_png(clear), None, font))
        assert _close(image[50, 50], GRAY)

    def test_undecodable_photo(self, background, font):
        with pytest.raises(DecodeError):
            compose(background, b"\x00\x01\x02", None, font)

    def test_empty_photo(self, background, font):
        with pytest.raises(DecodeError):
            compose(background, b"", None, font)

    def test_caption_changes_bottom_band_only(self, make_photo, jpeg_to_array, font):
        background = new_canvas(200, 200, (200, 200, 200))
        photo = make_photo(50, 50, RED_BGR)

        plain = jpeg_to_array(compose(background, photo, None, font)).astype(int)
        captioned = jpeg_to_array(compose(background, photo, "REFERENCE TICKET", font)).astype(int)

        assert np.abs(plain[185:] - captioned[185:]).mean() > 20
        assert np.abs(plain[:100] - captioned[:100]).max() <= 12

    def test_caption_without_font(self, background, make_photo):
        with pytest.raises(FontLoadError):
            compose(background, make_photo(10, 10, RED_BGR), "CAPTION", None)

    def test_deterministic(self, background, make_photo, font):
        photo = make_photo(30, 50, RED_BGR)
        first = compose(background, photo, "CAPTION", font)
        second = compose(background, photo, "CAPTION", font)
        assert first == second


class TestFontAsset:
    """Tests for font loading"""

    def test_missing_font(self, tmp_path):
        with pytest.raises(FontLoadError):
            FontAsset.load(tmp_path / "nope.ttf")

    def test_corrupt_font(self, tmp_path):
        path = tmp_path / "broken.ttf"
        path.write_bytes(b"this is not a font file")
        with pytest.raises(FontLoadError):
            FontAsset.load(path)

    def test_sized(self, font):
        assert font.sized(20).size == 20
