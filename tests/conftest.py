"""
Pytest configuration and fixtures for meme compositor tests
"""

import numpy as np
import pytest

from config import Settings
from core.raster import RasterBuffer

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture
def blue_base():
    """Create a 20x20 fully opaque blue base buffer"""
    return RasterBuffer.new(20, 20, BLUE)


@pytest.fixture
def red_overlay():
    """Create a 10x10 fully opaque red overlay buffer"""
    return RasterBuffer.new(10, 10, RED)


@pytest.fixture
def gradient_image():
    """Create a 16x16 opaque buffer with a distinct value in every pixel"""
    pixels = np.zeros((16, 16, 4), dtype=np.uint8)
    ys, xs = np.mgrid[0:16, 0:16]
    pixels[:, :, 0] = xs * 16
    pixels[:, :, 1] = ys * 16
    pixels[:, :, 2] = 128
    pixels[:, :, 3] = 255
    return RasterBuffer(pixels)


@pytest.fixture
def avatar():
    """Create a 64x64 opaque avatar with a left/right colour split"""
    pixels = np.zeros((64, 64, 4), dtype=np.uint8)
    pixels[:, :32] = (0, 255, 0, 255)
    pixels[:, 32:] = (255, 255, 0, 255)
    return RasterBuffer(pixels)


@pytest.fixture
def small_template():
    """Create a 250x250 opaque white template (small variant)"""
    return RasterBuffer.new(250, 250, (255, 255, 255, 255))


@pytest.fixture
def test_settings():
    """Create Settings isolated from the process environment"""
    return Settings(environment="test")
