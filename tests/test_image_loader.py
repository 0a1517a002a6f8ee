import cv2
import numpy as np
import pytest

from vision_demos.utils.image_loader import load_image, load_image_pair, is_image_file


def test_load_image_is_bgr(tmp_path):
    path = tmp_path / "gray.png"
    cv2.imwrite(str(path), np.full((10, 12), 200, dtype=np.uint8))

    image = load_image(path)

    assert image.shape == (10, 12, 3)


def test_load_image_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "missing.png")


def test_load_image_pair(tmp_path, green_image, red_background):
    path1 = tmp_path / "a.png"
    path2 = tmp_path / "b.png"
    cv2.imwrite(str(path1), green_image)
    cv2.imwrite(str(path2), red_background)

    img1, img2 = load_image_pair(path1, path2)

    np.testing.assert_array_equal(img1, green_image)
    np.testing.assert_array_equal(img2, red_background)


def test_is_image_file():
    assert is_image_file("frame.PNG")
    assert not is_image_file("notes.txt")
