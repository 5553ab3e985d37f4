class LC3Error(Exception):
    pass


class LoadError(LC3Error, ValueError):
    """ The image could not be placed in memory """


class IllegalOpcode(LC3Error):
    """
    Raised when the machine fetches RTI or the reserved opcode.
    """
    def __init__(self, instruction, location):
        self.instruction = instruction
        self.location = location
        LC3Error.__init__(self, "bad opcode x%04X at x%04X" %
                          (instruction & 0xFFFF, location & 0xFFFF))
