"""
Run an LC-3 object image in the terminal:

    python -m lc3vm program.obj

Usage and file errors are reported but still exit with status 0.
"""

from __future__ import print_function

import sys

from .console import TerminalConsole
from .exceptions import LoadError
from .machine import LC3


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("Usage: lc3vm <image-file>")
        return 0
    filename = argv[0]
    try:
        with open(filename, "rb") as fp:
            image = fp.read()
    except (IOError, OSError):
        print("can't open file: %s" % filename)
        return 0
    console = TerminalConsole()
    lc3 = LC3(console=console)
    try:
        lc3.load_image(image)
    except LoadError as exc:
        print("can't load image %s: %s" % (filename, exc))
        return 0
    try:
        with console:
            lc3.run()
    except KeyboardInterrupt:
        # the console is already back in its original mode
        print()
        return -2
    return 0

if __name__ == '__main__':
    sys.exit(main())
