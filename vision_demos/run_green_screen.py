"""
Green-screen compositing of a single image or a directory of frames.

Usage:
    python -m vision_demos.run_green_screen --input PATH --background PATH [--hsv H S V]
"""

import argparse
import sys

from .pipeline import GreenScreenPipeline, DEFAULT_HSV


def build_parser():
    parser = argparse.ArgumentParser(description="Green Screen Compositing")
    parser.add_argument('--input', '-i', required=True,
                        help='Image file or directory of frames to composite')
    parser.add_argument('--background', '-b', required=True,
                        help='Background image file')
    parser.add_argument('--hsv', type=float, nargs=3, default=list(DEFAULT_HSV),
                        metavar=('H', 'S', 'V'),
                        help='Key colour in OpenCV HSV scale (default: %(default)s)')
    parser.add_argument('--tolerance', type=int, default=10,
                        help='Hue tolerance around the key colour (default: 10)')
    parser.add_argument('--output-dir', default='results',
                        help='Directory for outputs (default: results)')
    parser.add_argument('--video', metavar='NAME',
                        help='Also assemble composited frames into this video file')
    parser.add_argument('--fps', type=int, default=10,
                        help='Video frames per second (default: 10)')
    parser.add_argument('--show', action='store_true',
                        help='Display the result (single image) and the masked background')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    pipeline = GreenScreenPipeline(
        input_path=args.input,
        background_path=args.background,
        results_dir=args.output_dir,
        hsv=args.hsv,
        hue_tolerance=args.tolerance,
        show_diagnostic=args.show
    )
    pipeline.setup()

    if pipeline.input_path.is_dir():
        pipeline.run(
            create_video=args.video is not None,
            video_filename=args.video or "green_screen.mp4",
            video_fps=args.fps
        )
        if args.show:
            # Diagnostic window holds the last frame's masked background
            pipeline.visualizer.wait_and_close()
    else:
        pipeline.run_single(show=args.show)

    return 0


if __name__ == "__main__":
    sys.exit(main())
