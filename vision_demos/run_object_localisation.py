"""
Object localisation between two images using BRISK feature matching.

Usage:
    python -m vision_demos.run_object_localisation [--img1 PATH] [--img2 PATH] [--output PATH]
"""

import argparse
import sys
import cv2

from .core.object_localiser import ObjectLocaliser
from .utils.image_loader import load_image_pair, save_image

WINDOW_NAME = "Image"


def build_parser():
    parser = argparse.ArgumentParser(description="Object Localisation (BRISK feature matching)")
    parser.add_argument('--img1', default='Picture 2.jpg',
                        help='Path to object image (default: "Picture 2.jpg")')
    parser.add_argument('--img2', default='Picture 3.jpg',
                        help='Path to scene image (default: "Picture 3.jpg")')
    parser.add_argument('--output', '-o', default='Out 1.jpg',
                        help='Path of annotated output image (default: "Out 1.jpg")')
    parser.add_argument('--method', default='BRISK', choices=['BRISK', 'ORB'],
                        help='Feature detector (default: BRISK)')
    parser.add_argument('--ratio', type=float, default=0.75,
                        help='Ratio test threshold (default: 0.75)')
    parser.add_argument('--no-display', action='store_true',
                        help='Do not open a window or wait for a key press')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Load images
    try:
        img1, img2 = load_image_pair(args.img1, args.img2)
    except FileNotFoundError:
        print("Could not open image/s.")
        return -1

    if not args.no_display:
        cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_AUTOSIZE)

    localiser = ObjectLocaliser(feature_method=args.method, ratio=args.ratio)

    if args.method == 'BRISK':
        output_image = localiser.brisk(img1, img2)
    else:
        output_image = localiser.localise(img1, img2)

    save_image(args.output, output_image)
    print(f"[INFO] Output saved to: {args.output}")

    if not args.no_display:
        cv2.imshow(WINDOW_NAME, output_image)
        cv2.waitKey(0)
        cv2.destroyAllWindows()

    return 0


if __name__ == "__main__":
    sys.exit(main())
