import numpy as np
import cv2
import pytest

GREEN = (0, 255, 0)
BLUE = (255, 0, 0)
RED = (0, 0, 255)


def solid(height, width, bgr):
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:] = bgr
    return image


@pytest.fixture
def green_image():
    return solid(100, 100, GREEN)


@pytest.fixture
def blue_image():
    return solid(100, 100, BLUE)


@pytest.fixture
def half_green_image():
    image = solid(100, 100, BLUE)
    image[:, :50] = GREEN
    return image


@pytest.fixture
def red_background():
    return solid(50, 50, RED)


@pytest.fixture
def textured_image():
    """Blocky random texture with plenty of corners for keypoint detection."""
    rng = np.random.RandomState(0)
    blocks = rng.randint(0, 256, size=(40, 60)).astype(np.uint8)
    gray = cv2.resize(blocks, (240, 160), interpolation=cv2.INTER_NEAREST)
    return cv2.cvtColor(gray, cv2.COLOR_GRAY2BGR)


@pytest.fixture
def scene_image(textured_image):
    """textured_image placed at (x=48, y=32) on a plain grey canvas."""
    scene = solid(240, 320, (128, 128, 128))
    h, w = textured_image.shape[:2]
    scene[32:32 + h, 48:48 + w] = textured_image
    return scene
