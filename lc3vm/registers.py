from .decoder import lc_bin, lc_hex

PC_START = 0x3000

FL_POS = 1 << 0
FL_ZRO = 1 << 1
FL_NEG = 1 << 2


class RegisterFile(object):
    """
    R0-R7, the program counter and the condition flags. The flags hold
    exactly one of FL_POS, FL_ZRO, FL_NEG, so that the nzp field of a BR
    instruction can be tested with a single AND.
    """
    def __init__(self, machine=None):
        self.machine = machine
        self.reset()

    def reset(self):
        self.register = [0] * 8
        self._pc = PC_START
        self.cond = FL_ZRO

    def trace(self, text):
        if self.machine is not None and self.machine.debug:
            self.machine.Print(text)

    def get(self, position):
        return self.register[position]

    def set(self, position, value):
        self.register[position] = lc_bin(value)
        self.trace("    R%d <= %s" % (position, lc_hex(value)))

    @property
    def pc(self):
        return self._pc

    @pc.setter
    def pc(self, value):
        self._pc = lc_bin(value)
        self.trace("    PC <= %s" % lc_hex(value))

    def increment_pc(self, value=1):
        self._pc = lc_bin(self._pc + value)

    def update_flags(self, position):
        value = self.register[position]
        if value == 0:
            self.cond = FL_ZRO
        elif value >> 15:
            self.cond = FL_NEG
        else:
            self.cond = FL_POS
        self.trace("    NZP <= %s" % (self.nzp(),))

    def nzp(self):
        return (int(self.cond == FL_NEG),
                int(self.cond == FL_ZRO),
                int(self.cond == FL_POS))
