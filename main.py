"""
Entry point for running the demonstration programs.

Usage:
    python main.py green-screen --input PATH --background PATH [options]
    python main.py localise [--img1 PATH] [--img2 PATH] [options]
"""

import sys

from vision_demos import run_green_screen, run_object_localisation

COMMANDS = {
    'green-screen': run_green_screen.main,
    'localise': run_object_localisation.main,
}


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    if not argv or argv[0] not in COMMANDS:
        print(f"Usage: python main.py {{{','.join(COMMANDS)}}} [options]")
        return 2

    return COMMANDS[argv[0]](argv[1:])


if __name__ == "__main__":
    sys.exit(main())
