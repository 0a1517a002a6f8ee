"""
Core pipeline components for colour keying and object localisation.
"""
from .green_screen import GreenScreen, detect_colour, green_screen
from .object_localiser import ObjectLocaliser
from .batch_processor import BatchProcessor
from .visualizer import Visualizer

__all__ = [
    'GreenScreen',
    'detect_colour',
    'green_screen',
    'ObjectLocaliser',
    'BatchProcessor',
    'Visualizer',
]
