"""
Shared pytest fixtures for permit backend tests.
"""
import os
from unittest.mock import patch

import cv2
import numpy as np
import pytest

from greenlight.core.config import ASSETS_DIR, VizHashConfig
from greenlight.vizhash.assets import FontAsset
from greenlight.vizhash.service import VizHashService


@pytest.fixture
def mock_env(tmp_path):
    """Fixture to set common test environment variables."""
    env_vars = {
        "APP_SECRET": "topsecret",
        "STORAGE_BACKEND": "memory",
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_greenlight",
        "PERSON_PHOTO_DIR": str(tmp_path / "photos"),
        "VIZHASH_IMAGE_SIZE": "128",
        "LOG_LEVEL": "WARNING",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture(scope="session")
def vizhash_config():
    return VizHashConfig(
        secret="topsecret",
        font_path=ASSETS_DIR / "lato_regular.ttf",
        missing_photo_path=ASSETS_DIR / "missing_photo.png",
        example_photo_path=ASSETS_DIR / "example_photo.png",
    )


@pytest.fixture(scope="session")
def vizhash_service(vizhash_config):
    """One service (and one asset load) shared by the whole session."""
    return VizHashService(vizhash_config)


@pytest.fixture(scope="session")
def font():
    return FontAsset.load(ASSETS_DIR / "lato_regular.ttf")


def encode_image(image: np.ndarray, ext: str = ".png") -> bytes:
    ok, encoded = cv2.imencode(ext, image)
    assert ok
    return encoded.tobytes()


def solid_image(width: int, height: int, bgr, ext: str = ".png") -> bytes:
    """Encoded image of a single color."""
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:, :] = bgr
    return encode_image(image, ext)


def decode_jpeg(data: bytes) -> np.ndarray:
    image = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_COLOR)
    assert image is not None
    return image


@pytest.fixture
def make_photo():
    """Factory fixture: make_photo(width, height, bgr, ext=".png") -> encoded bytes."""
    return solid_image


@pytest.fixture
def jpeg_to_array():
    """Decode JPEG bytes produced by the compositor into a BGR array."""
    return decode_jpeg


@pytest.fixture
def encode_png():
    """Encode an arbitrary BGR/BGRA/grayscale array as PNG bytes."""
    return encode_image
