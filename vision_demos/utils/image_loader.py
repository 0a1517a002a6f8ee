"""
Image loading utilities.
Low-level helper functions for loading and saving images on disk.
"""

from pathlib import Path
import cv2

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".bmp", ".tif", ".tiff"}


def load_image(path):
    """
    Load a single BGR image from disk.

    Args:
        path: Path to image file

    Returns:
        np.ndarray: Image as numpy array (BGR)

    Raises:
        FileNotFoundError: If image cannot be read
    """
    img = cv2.imread(str(path))
    if img is None:
        raise FileNotFoundError(f"Could not read image from: {path}")

    return img


def load_image_pair(path1, path2):
    """
    Load two images from disk and return them.

    Args:
        path1: Path to first image
        path2: Path to second image

    Returns:
        tuple: (img1, img2) as numpy arrays
    """
    img1 = load_image(path1)
    img2 = load_image(path2)
    return img1, img2


def save_image(path, image):
    """
    Write an image to disk, creating the parent directory if needed.

    Returns:
        str: Path the image was written to
    """
    path = Path(path)
    if path.parent != Path("."):
        path.parent.mkdir(parents=True, exist_ok=True)

    if not cv2.imwrite(str(path), image):
        raise RuntimeError(f"Could not write image to: {path}")

    return str(path)


def is_image_file(path):
    """True if path has one of the supported image extensions."""
    return Path(path).suffix.lower() in IMAGE_EXTENSIONS
