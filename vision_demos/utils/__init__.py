"""
Utility functions for image loading and HSV range handling.
"""
from .image_loader import load_image, load_image_pair, save_image, is_image_file
from .hsv import hue_band, as_hsv_triple, keyed_fraction

__all__ = [
    'load_image',
    'load_image_pair',
    'save_image',
    'is_image_file',
    'hue_band',
    'as_hsv_triple',
    'keyed_fraction',
]
