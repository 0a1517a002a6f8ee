"""
Display and output utilities for composited and annotated images.
High-level component for windows, saved images and videos.
"""

from pathlib import Path
import cv2

from ..utils.image_loader import save_image


class Visualizer:
    """
    Shows results in OpenCV windows and writes them to an output directory.

    Supports single images and frame-sequence videos.
    """

    def __init__(self, output_dir):
        """
        Initialize visualizer.

        Args:
            output_dir: Directory to save output files (images, videos)
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def show(window_name, image):
        """Open (or reuse) an auto-sized window and show image in it."""
        cv2.namedWindow(window_name, cv2.WINDOW_AUTOSIZE)
        cv2.imshow(window_name, image)

    @staticmethod
    def wait_and_close(delay=0):
        """
        Block until a key is pressed (or delay ms elapse), then close all windows.

        Returns:
            int: Key code returned by cv2.waitKey
        """
        key = cv2.waitKey(delay)
        cv2.destroyAllWindows()
        return key

    def save(self, filename, image):
        """
        Save image under the output directory.

        Returns:
            str: Path to saved image
        """
        output_path = save_image(self.output_dir / filename, image)
        print(f"[INFO] Image saved to: {output_path}")
        return output_path

    def create_video(self, frame_paths, output_filename="output.mp4", fps=10):
        """
        Create a video from a sequence of image files.

        Frames with a different size from the first one are resized to match.

        Args:
            frame_paths: Ordered list of image paths
            output_filename: Output video filename
            fps: Frames per second for output video

        Returns:
            str: Path to saved video file
        """
        if not frame_paths:
            raise ValueError("No frames to write")

        first_img = cv2.imread(str(frame_paths[0]))

        if first_img is None:
            raise RuntimeError(f"Could not read first image: {frame_paths[0]}")

        height, width = first_img.shape[:2]

        fourcc = cv2.VideoWriter_fourcc(*"mp4v")
        video_path = self.output_dir / output_filename
        writer = cv2.VideoWriter(str(video_path), fourcc, fps, (width, height))
        print(f"[INFO] Saving video to: {video_path}")

        for path in frame_paths:
            frame = cv2.imread(str(path))

            if frame is None:
                print(f"[WARN] Could not read image {path}, skipping")
                continue

            if frame.shape[:2] != (height, width):
                frame = cv2.resize(frame, (width, height))

            writer.write(frame)

        writer.release()
        print(f"[INFO] Video saved to: {video_path}")

        return str(video_path)
