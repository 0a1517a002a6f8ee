"""
OpenCV demonstration programs: green-screen compositing and object localisation.
"""

# Main pipeline
from .pipeline import GreenScreenPipeline

# Core components
from .core.green_screen import GreenScreen, detect_colour, green_screen
from .core.object_localiser import ObjectLocaliser
from .core.batch_processor import BatchProcessor
from .core.visualizer import Visualizer

# Utilities
from .utils.image_loader import load_image, load_image_pair, save_image
from .utils.hsv import hue_band, keyed_fraction

__all__ = [
    # Pipeline
    'GreenScreenPipeline',
    # Core
    'GreenScreen',
    'detect_colour',
    'green_screen',
    'ObjectLocaliser',
    'BatchProcessor',
    'Visualizer',
    # Utils
    'load_image',
    'load_image_pair',
    'save_image',
    'hue_band',
    'keyed_fraction',
]
