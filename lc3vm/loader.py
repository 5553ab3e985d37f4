"""
LC-3 object images: the first big-endian word is the origin, the rest are
big-endian words loaded verbatim starting at that origin.
"""

from array import array
import sys

from .exceptions import LoadError
from .memory import MEMORY_SIZE

MAX_IMAGE_BYTES = 2 + 2 * MEMORY_SIZE


def _to_words(data):
    words = array('H')
    words.frombytes(data)
    if sys.byteorder == 'little':
        words.byteswap()
    return words

def load_image(memory, data):
    """
    Place image bytes in memory. Returns (origin, word_count).
    """
    if not data:
        raise LoadError("empty image")
    if len(data) > MAX_IMAGE_BYTES:
        raise LoadError("image of %d bytes does not fit in memory" % len(data))
    if len(data) < 2:
        raise LoadError("image has no origin")
    if len(data) % 2:
        raise LoadError("image has an odd number of bytes (%d)" % len(data))
    words = _to_words(bytes(data))
    origin, body = words[0], words[1:]
    if origin + len(body) > MEMORY_SIZE:
        raise LoadError("image at x%04X with %d words runs past xFFFF" %
                        (origin, len(body)))
    memory.memory[origin:origin + len(body)] = body
    return origin, len(body)

def load_file(memory, filename):
    with open(filename, 'rb') as fp:
        data = fp.read()
    return load_image(memory, data)

def dump_image(memory, origin, count):
    """
    Inverse of load_image: the object bytes for count words at origin.
    """
    words = array('H', [origin])
    words.extend(memory.words(origin, origin + count))
    if sys.byteorder == 'little':
        words.byteswap()
    return words.tobytes()
