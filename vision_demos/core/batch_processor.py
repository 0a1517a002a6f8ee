"""
Batch green-screen processing of a directory of frames.
High-level component for compositing image sequences.
"""

from pathlib import Path
import numpy as np
import pandas as pd

from ..utils.image_loader import load_image, save_image, is_image_file


class BatchProcessor:
    """
    Applies a GreenScreen compositor to every frame in a directory.

    Frames are processed in filename order and written next to each other
    in the output directory as <stem>_keyed.png.
    """

    def __init__(self, green_screen, output_dir, hsv, suffix="_keyed.png"):
        """
        Initialize batch processor.

        Args:
            green_screen: GreenScreen instance used for compositing
            output_dir: Directory for composited frames
            hsv: Key colour (hue, saturation, value)
            suffix: Appended to each frame stem to name its output file
        """
        self.green_screen = green_screen
        self.output_dir = Path(output_dir)
        self.hsv = hsv
        self.suffix = suffix

    @staticmethod
    def list_frames(input_dir):
        """
        List image files in a directory, sorted by name.

        Raises:
            NotADirectoryError: If input_dir is not a directory
            ValueError: If input_dir contains no image files
        """
        input_dir = Path(input_dir)
        if not input_dir.is_dir():
            raise NotADirectoryError(input_dir)

        frames = sorted(p for p in input_dir.iterdir() if p.is_file() and is_image_file(p))

        if not frames:
            raise ValueError(f"No image files found in: {input_dir}")

        return frames

    def process_frame(self, frame_path, background):
        """
        Composite a single frame and write it to the output directory.

        Returns:
            tuple: (output_path, keyed_fraction)
        """
        frame_path = Path(frame_path)
        src = load_image(frame_path)

        result = self.green_screen.apply_with_debug(src, background, self.hsv)

        output_path = save_image(self.output_dir / f"{frame_path.stem}{self.suffix}",
                                 result['composite'])
        return output_path, result['keyed_fraction']

    def process_frames(self, frame_paths, background):
        """
        Composite a sequence of frames.

        Args:
            frame_paths: Ordered list of frame image paths
            background: Background image (BGR)

        Returns:
            dict: {
                'frames': Frame file names,
                'paths': Output image paths,
                'keyed_fraction': Array of keyed pixel fractions per frame
            }
        """
        results = {
            'frames': [],
            'paths': [],
            'keyed_fraction': []
        }

        for frame_path in frame_paths:
            frame_path = Path(frame_path)

            try:
                output_path, fraction = self.process_frame(frame_path, background)
            except FileNotFoundError as err:
                print(f"[WARN] {err}, skipping")
                continue

            results['frames'].append(frame_path.name)
            results['paths'].append(output_path)
            results['keyed_fraction'].append(fraction)

            print(f"[INFO] {frame_path.name}: {fraction:.1%} keyed")

        results['keyed_fraction'] = np.array(results['keyed_fraction'])

        return results

    def process_directory(self, input_dir, background):
        """
        Composite every frame in input_dir.

        Returns:
            dict: Same format as process_frames()
        """
        return self.process_frames(self.list_frames(input_dir), background)

    @staticmethod
    def create_summary_dataframe(results):
        """
        Create a pandas DataFrame summarising a batch run.

        Args:
            results: Dict from process_frames()

        Returns:
            pd.DataFrame: Columns frame, output_path, keyed_fraction
        """
        return pd.DataFrame({
            'frame': results['frames'],
            'output_path': results['paths'],
            'keyed_fraction': results['keyed_fraction']
        })
