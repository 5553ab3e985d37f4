from ._version import __version__
from .console import BufferedConsole, TerminalConsole
from .exceptions import LC3Error, LoadError, IllegalOpcode
from .loader import load_image, load_file, dump_image
from .machine import LC3
