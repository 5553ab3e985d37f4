from .decoder import lc_hex

TRAP_GETC = 0x20  # get character from keyboard, not echoed
TRAP_OUT = 0x21   # output a character
TRAP_PUTS = 0x22  # output a word string
TRAP_IN = 0x23    # get character from keyboard, echoed
TRAP_PUTSP = 0x24 # output a byte string
TRAP_HALT = 0x25  # halt the program

trap_names = {
    TRAP_GETC: "GETC",
    TRAP_OUT: "OUT",
    TRAP_PUTS: "PUTS",
    TRAP_IN: "IN",
    TRAP_PUTSP: "PUTSP",
    TRAP_HALT: "HALT",
}


class TrapHandler(object):
    """
    The operating system services, done in Python rather than by jumping
    through the trap vector table. R7 is not written.
    """
    prompt = "Enter a character: "

    def __init__(self, machine):
        self.machine = machine
        self.services = {
            TRAP_GETC: self.GETC,
            TRAP_OUT: self.OUT,
            TRAP_PUTS: self.PUTS,
            TRAP_IN: self.IN,
            TRAP_PUTSP: self.PUTSP,
            TRAP_HALT: self.HALT,
        }

    def __call__(self, vector):
        if vector in self.services:
            self.services[vector]()
        elif self.machine.warn:
            self.machine.Error("Warning: invalid TRAP vector: %s\n" % lc_hex(vector))

    @property
    def console(self):
        return self.machine.console

    def putc(self, value):
        self.console.putc(value)

    def GETC(self):
        registers = self.machine.registers
        registers.set(0, self.console.getc())
        registers.update_flags(0)

    def OUT(self):
        self.putc(self.machine.registers.get(0))
        self.console.flush()

    def PUTS(self):
        memory = self.machine.memory
        location = self.machine.registers.get(0)
        char = memory.peek(location)
        while char:
            self.putc(char)
            location += 1
            char = memory.peek(location)
        self.console.flush()

    def IN(self):
        registers = self.machine.registers
        self.console.write(self.prompt)
        self.console.flush()
        char = self.console.getc()
        self.putc(char)
        self.console.flush()
        registers.set(0, char)
        registers.update_flags(0)

    def PUTSP(self):
        memory = self.machine.memory
        location = self.machine.registers.get(0)
        chars = memory.peek(location)
        while chars:
            self.putc(chars & 0xFF)
            if chars >> 8:
                self.putc(chars >> 8)
            location += 1
            chars = memory.peek(location)
        self.console.flush()

    def HALT(self):
        self.machine.halt()
        self.console.write("halt\n")
        self.console.flush()
