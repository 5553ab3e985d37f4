"""
Consoles the machine talks to. A console answers four questions:

    key_ready() - is a character waiting? (never blocks)
    getc()      - the next character code, blocking; EOF on end of input
    putc(value) - emit one byte, the low 8 bits of value
    write(text) - emit text (prompts and notices)
    flush()
"""

import os
import select
import sys

EOF = 0xFFFF


class Console(object):
    def key_ready(self):
        raise NotImplementedError

    def getc(self):
        raise NotImplementedError

    def putc(self, value):
        self.write(chr(value & 0xFF))

    def write(self, text):
        raise NotImplementedError

    def flush(self):
        pass


class BufferedConsole(Console):
    """
    A console fed from a string; everything written is collected in
    self.output.
    """
    def __init__(self, text=""):
        self.char_buffer = [ord(char) for char in text]
        self.output = ""

    def feed(self, text):
        self.char_buffer.extend(ord(char) for char in text)

    def key_ready(self):
        return len(self.char_buffer) > 0

    def getc(self):
        if len(self.char_buffer) == 0:
            return EOF
        return self.char_buffer.pop(0)

    def write(self, text):
        self.output += text


class TerminalConsole(Console):
    """
    The host terminal. Use as a context manager: entering switches stdin to
    non-canonical, no-echo mode, leaving restores the saved mode whatever
    the exit path.

        with TerminalConsole() as console:
            machine = LC3(console=console)
            ...
    """
    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.original_mode = None

    def fileno(self):
        return self.stdin.fileno()

    def __enter__(self):
        self.disable_input_buffering()
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.restore_input_buffering()
        return False

    def isatty(self):
        try:
            return os.isatty(self.fileno())
        except (AttributeError, ValueError, OSError):
            return False

    def disable_input_buffering(self):
        if not self.isatty():
            return
        import termios
        fd = self.fileno()
        self.original_mode = termios.tcgetattr(fd)
        mode = termios.tcgetattr(fd)
        mode[3] &= ~(termios.ICANON | termios.ECHO) # lflag
        mode[6][termios.VMIN] = 1
        mode[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSANOW, mode)

    def restore_input_buffering(self):
        if self.original_mode is None:
            return
        import termios
        termios.tcsetattr(self.fileno(), termios.TCSANOW, self.original_mode)
        self.original_mode = None

    def key_ready(self):
        readable, _, _ = select.select([self.fileno()], [], [], 0)
        return len(readable) > 0

    def getc(self):
        data = os.read(self.fileno(), 1)
        if not data:
            return EOF
        return data[0]

    def putc(self, value):
        # program output is raw bytes, whatever the encoding of stdout
        buffer = getattr(self.stdout, "buffer", None)
        if buffer is None:
            self.stdout.write(chr(value & 0xFF))
            return
        self.stdout.flush()
        buffer.write(bytes([value & 0xFF]))

    def write(self, text):
        self.stdout.write(text)

    def flush(self):
        self.stdout.flush()
