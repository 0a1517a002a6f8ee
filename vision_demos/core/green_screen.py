"""
Colour-key compositing.
Detects a hue range in an image and replaces it with a background image.
"""

import numpy as np
import cv2

from ..utils.hsv import hue_band, keyed_fraction

MASK_THRESHOLD = 100
DIAGNOSTIC_WINDOW = "Masked background"


def detect_colour(src, lower, upper, kernel_size=5):
    """
    Detect pixels of src whose HSV value lies within [lower, upper].

    The raw range mask is cleaned with two morphological openings followed
    by two closings, using a cross-shaped structuring element.

    Args:
        src: Input BGR image
        lower: Inclusive lower HSV bound (3 values)
        upper: Inclusive upper HSV bound (3 values)
        kernel_size: Side length of the structuring element

    Returns:
        np.ndarray: Single-channel uint8 mask, 255 where the colour was found
    """
    hsv = cv2.cvtColor(src, cv2.COLOR_BGR2HSV)
    mask = cv2.inRange(hsv, np.asarray(lower), np.asarray(upper))

    kernel = cv2.getStructuringElement(cv2.MORPH_CROSS, (kernel_size, kernel_size))

    mask = cv2.morphologyEx(mask, cv2.MORPH_OPEN, kernel)
    mask = cv2.morphologyEx(mask, cv2.MORPH_OPEN, kernel)
    mask = cv2.morphologyEx(mask, cv2.MORPH_CLOSE, kernel)
    mask = cv2.morphologyEx(mask, cv2.MORPH_CLOSE, kernel)

    return mask


class GreenScreen:
    """
    Replaces a key colour in an image with a background image.

    The key colour is given as an HSV triple; pixels within +/- hue_tolerance
    of its hue (and at least its saturation and value) are taken from the
    background, resized to the source dimensions.
    """

    def __init__(self,
                 hue_tolerance=10,
                 kernel_size=5,
                 interpolation=cv2.INTER_LINEAR,
                 show_diagnostic=False):
        """
        Initialize green screen compositor.

        Args:
            hue_tolerance: Half-width of the hue band around the key colour
            kernel_size: Structuring element size for mask clean-up
            interpolation: cv2 interpolation flag used to resize the background
            show_diagnostic: If True, show the masked background in a window
        """
        self.hue_tolerance = hue_tolerance
        self.kernel_size = kernel_size
        self.interpolation = interpolation
        self.show_diagnostic = show_diagnostic

    def key_mask(self, src, hsv):
        """
        Compute the mask of pixels to keep from the source.

        Args:
            src: Input BGR image
            hsv: Key colour (hue, saturation, value)

        Returns:
            np.ndarray: Single-channel mask, 0 on key-coloured pixels and 255 elsewhere
        """
        lower, upper = hue_band(hsv, tolerance=self.hue_tolerance)
        mask = detect_colour(src, lower, upper, kernel_size=self.kernel_size)

        _, mask = cv2.threshold(mask, MASK_THRESHOLD, 255, cv2.THRESH_BINARY)
        return cv2.bitwise_not(mask)

    def _composite(self, src, background, keep):
        height, width = src.shape[:2]
        background = cv2.resize(background, (width, height),
                                interpolation=self.interpolation)

        replaced = cv2.bitwise_not(keep)
        masked_background = cv2.bitwise_and(background, background, mask=replaced)

        if self.show_diagnostic:
            cv2.imshow(DIAGNOSTIC_WINDOW, masked_background)

        masked_source = cv2.bitwise_and(src, src, mask=keep)

        return cv2.add(masked_source, masked_background)

    def apply(self, src, background, hsv):
        """
        Composite src over background wherever src shows the key colour.

        Args:
            src: Input BGR image
            background: Replacement background (any size, BGR)
            hsv: Key colour (hue, saturation, value)

        Returns:
            np.ndarray: Composite image with the dimensions of src
        """
        keep = self.key_mask(src, hsv)
        return self._composite(src, background, keep)

    def apply_with_debug(self, src, background, hsv):
        """
        Composite and return the intermediate masks as well.

        Returns:
            dict: {
                'composite': Composite image,
                'keep_mask': Mask of pixels kept from src,
                'replaced_mask': Mask of pixels taken from background,
                'keyed_fraction': Share of pixels taken from background
            }
        """
        keep = self.key_mask(src, hsv)
        replaced = cv2.bitwise_not(keep)

        return {
            'composite': self._composite(src, background, keep),
            'keep_mask': keep,
            'replaced_mask': replaced,
            'keyed_fraction': keyed_fraction(replaced)
        }


def green_screen(src, background, hsv):
    """
    Replace the hsv key colour in src with background, using default settings.

    The masked-background diagnostic window is not shown; use
    GreenScreen(show_diagnostic=True) to display it.
    """
    return GreenScreen().apply(src, background, hsv)
