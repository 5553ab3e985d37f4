from array import array

from .decoder import lc_bin, lc_hex

MEMORY_SIZE = 1 << 16

KBSR = 0xFE00 ## keyboard status, bit 15 = a key is ready
KBDR = 0xFE02 ## keyboard data, low byte = the pending character


class Memory(object):
    """
    The 64K words of LC-3 memory. The keyboard registers live in ordinary
    slots; reading KBSR polls the console first, so LDI/LDR/LD reach the
    device without any special casing in the instructions.
    """
    def __init__(self, console=None, machine=None):
        self.console = console
        self.machine = machine
        self.memory = array('H', [0] * MEMORY_SIZE)

    def __len__(self):
        return MEMORY_SIZE

    def clear(self):
        self.memory = array('H', [0] * MEMORY_SIZE)

    def trace(self, text):
        if self.machine is not None and self.machine.debug:
            self.machine.Print(text)

    def read(self, location):
        location = lc_bin(location)
        if location == KBSR and self.console is not None:
            if self.console.key_ready():
                self.memory[KBSR] = 1 << 15
                self.memory[KBDR] = lc_bin(self.console.getc())
            else:
                self.memory[KBSR] = 0
        return self.memory[location]

    def peek(self, location):
        return self.memory[lc_bin(location)]

    def write(self, location, value):
        self.memory[lc_bin(location)] = lc_bin(value)
        self.trace("    memory[%s] <= %s" % (lc_hex(location), lc_hex(value)))

    def words(self, start, stop):
        """ Raw words in [start, stop) """
        return self.memory[start:stop]
