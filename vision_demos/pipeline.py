"""
Main pipeline for green-screen compositing.
Orchestrates all components: compositing, batch processing and visualization.
"""

from pathlib import Path
from .core.green_screen import GreenScreen
from .core.batch_processor import BatchProcessor
from .core.visualizer import Visualizer
from .utils.hsv import as_hsv_triple
from .utils.image_loader import load_image

DEFAULT_HSV = (60, 100, 100)


class GreenScreenPipeline:
    """
    High-level pipeline for replacing a key colour in images.

    Accepts either a single image or a directory of frames as input.
    """

    def __init__(self,
                 input_path,
                 background_path,
                 results_dir="results",
                 hsv=DEFAULT_HSV,
                 hue_tolerance=10,
                 kernel_size=5,
                 show_diagnostic=False):
        """
        Initialize green screen pipeline.

        Args:
            input_path: Image file or directory of frames to composite
            background_path: Background image file
            results_dir: Directory for output files (images, video, CSV) (default: "results")
            hsv: Key colour (hue, saturation, value) in OpenCV HSV scale
            hue_tolerance: Half-width of the hue band around the key colour
            kernel_size: Structuring element size for mask clean-up
            show_diagnostic: Whether to show the masked background window
        """
        self.input_path = Path(input_path)
        self.background_path = Path(background_path)
        self.results_dir = Path(results_dir)

        # Store configuration
        self.hsv = tuple(float(c) for c in as_hsv_triple(hsv))
        self.hue_tolerance = hue_tolerance
        self.kernel_size = kernel_size
        self.show_diagnostic = show_diagnostic

        # Components (initialized in setup)
        self.background = None
        self.green_screen = None
        self.batch_processor = None
        self.visualizer = None

    def setup(self):
        """
        Initialize all pipeline components.

        Must be called before running the pipeline.
        """
        # 1. Load background
        self.background = load_image(self.background_path)

        # 2. Setup compositor
        self.green_screen = GreenScreen(
            hue_tolerance=self.hue_tolerance,
            kernel_size=self.kernel_size,
            show_diagnostic=self.show_diagnostic
        )

        # 3. Setup visualizer
        self.visualizer = Visualizer(
            output_dir=self.results_dir
        )

        # 4. Setup batch processor
        self.batch_processor = BatchProcessor(
            green_screen=self.green_screen,
            output_dir=self.results_dir,
            hsv=self.hsv
        )

        print(f"[INFO] Pipeline initialized")
        print(f"[INFO] Input: {self.input_path}")
        print(f"[INFO] Background: {self.background_path} {self.background.shape}")
        print(f"[INFO] Results directory: {self.results_dir}")
        print(f"[INFO] Key colour (HSV): {self.hsv} +/- {self.hue_tolerance}")

    def run(self, create_video=False, video_filename="green_screen.mp4", video_fps=10):
        """
        Run the compositor over every input frame.

        Args:
            create_video: Whether to assemble the composited frames into a video
            video_filename: Output video filename
            video_fps: Frames per second for output video

        Returns:
            dict: Pipeline results including per-frame outputs and the summary dataframe
        """
        if self.batch_processor is None:
            raise RuntimeError("Pipeline not initialized. Call setup() first.")

        # 1. Composite frames
        if self.input_path.is_dir():
            frame_paths = self.batch_processor.list_frames(self.input_path)
        else:
            frame_paths = [self.input_path]

        print(f"\n[INFO] Compositing {len(frame_paths)} frame(s)...")
        results = self.batch_processor.process_frames(frame_paths, self.background)

        # 2. Save summary
        summary_df = self.batch_processor.create_summary_dataframe(results)
        csv_path = self.results_dir / "green_screen_summary.csv"
        summary_df.to_csv(csv_path, index=False)
        print(f"[INFO] Summary saved to: {csv_path}")

        # 3. Create video
        video_path = None
        if create_video and results['paths']:
            print(f"[INFO] Creating video...")
            video_path = self.visualizer.create_video(
                results['paths'],
                output_filename=video_filename,
                fps=video_fps
            )

        print(f"\n[INFO] Pipeline complete!")

        return {
            'composited': results,
            'summary_df': summary_df,
            'video_path': video_path
        }

    def run_single(self, show=True, output_filename="composite.jpg"):
        """
        Composite a single input image, save it and optionally display it.

        Args:
            show: Whether to display the result and wait for a key press
            output_filename: Name of the saved composite under results_dir

        Returns:
            np.ndarray: Composite image
        """
        if self.green_screen is None:
            raise RuntimeError("Pipeline not initialized. Call setup() first.")

        src = load_image(self.input_path)
        composite = self.green_screen.apply(src, self.background, self.hsv)

        self.visualizer.save(output_filename, composite)

        if show:
            self.visualizer.show("Green screen", composite)
            self.visualizer.wait_and_close()

        return composite
