"""
HSV colour range helpers.

OpenCV stores 8-bit hue in [0, 180] and saturation/value in [0, 255].
"""

import numpy as np

HUE_MAX = 180
CHANNEL_MAX = 255


def as_hsv_triple(hsv):
    """
    Validate an HSV target colour and return it as a float array.

    Args:
        hsv: Sequence of (hue, saturation, value)

    Returns:
        np.ndarray: Shape (3,) array

    Raises:
        ValueError: If hsv does not have exactly three components
    """
    triple = np.asarray(hsv, dtype=np.float64).reshape(-1)
    if triple.shape != (3,):
        raise ValueError(f"Expected an (H, S, V) triple, got: {hsv!r}")
    return triple


def hue_band(hsv, tolerance=10):
    """
    Derive the inclusive HSV range around a target colour.

    The hue is widened by +/- tolerance and clamped to [0, 180]. The lower
    bound keeps the target saturation and value; the upper bound opens them
    to the channel maximum.

    Args:
        hsv: Target (hue, saturation, value)
        tolerance: Hue half-width

    Returns:
        tuple: (lower, upper) as int32 np.ndarray of shape (3,), rounded
    """
    h, s, v = as_hsv_triple(hsv)

    lower = np.array([max(0, h - tolerance), s, v])
    upper = np.array([min(HUE_MAX, h + tolerance), CHANNEL_MAX, CHANNEL_MAX])

    return np.rint(lower).astype(np.int32), np.rint(upper).astype(np.int32)


def keyed_fraction(mask):
    """
    Fraction of non-zero pixels in a single-channel mask.

    Args:
        mask: Single-channel mask (non-zero = selected)

    Returns:
        float: Value in [0, 1]
    """
    if mask.size == 0:
        return 0.0
    return float(np.count_nonzero(mask)) / mask.size
