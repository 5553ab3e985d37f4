import sys

from .console import BufferedConsole
from .decoder import lc_hex, opcode, trapvect8
from .disassembler import ascii_str, disassemble
from .exceptions import IllegalOpcode
from .loader import load_file, load_image
from .memory import Memory
from .operations import operations
from .registers import RegisterFile, PC_START
from .traps import TrapHandler


class LC3(object):
    """
    The LC3 Computer. This object loads and executes LC3 object images,
    one instruction at a time.
    """
    def __init__(self, console=None, kernel=None):
        self.kernel = kernel
        self.console = console if console is not None else BufferedConsole()
        self.memory = Memory(self.console, machine=self)
        self.registers = RegisterFile(machine=self)
        self.traps = TrapHandler(self)
        # Functions for interpreting instructions:
        self.apply = dict(operations)
        self.apply[0b1000] = self.RTI
        self.apply[0b1101] = self.RESERVED
        self.apply[0b1111] = self.TRAP
        self.initialize()

    def initialize(self):
        self.debug = False
        self.warn = True
        self.breakpoints = {}
        self.orig = PC_START
        self.instruction_count = 0
        self.running = True
        self.suspended = False
        self.cancelled = False
        self.memory.clear()
        self.registers.reset()

    def reset_registers(self):
        self.registers.reset()
        self.running = True
        self.suspended = False
        self.cancelled = False
        self.instruction_count = 0

    @property
    def halted(self):
        return not self.running

    def halt(self):
        self.running = False

    def cancel(self):
        """
        Ask the machine to stop before the next instruction. Safe to call
        from a signal handler.
        """
        self.cancelled = True

    def Print(self, *args, **kwargs):
        end = kwargs.get("end", "\n")
        self.console.write(" ".join(str(arg) for arg in args) + end)

    def Error(self, string):
        if self.kernel:
            self.kernel.Error(string)
        else:
            sys.stderr.write(string)

    def load(self, filename):
        self.orig, count = load_file(self.memory, filename)
        self.reset_registers()
        return self.orig, count

    def load_image(self, data):
        self.orig, count = load_image(self.memory, data)
        self.reset_registers()
        return self.orig, count

    def run(self):
        self.suspended = False
        if self.debug:
            self.Print("Tracing Script! PC* is incremented Program Counter")
            self.Print("(Instr) INSTR (PC*: xHEX)")
            self.Print("----------------------------------------------------")
        try:
            while self.running:
                self.step()
                if self.running and self.registers.pc in self.breakpoints:
                    self.suspended = True
                    self.Print("...breakpoint hit at", lc_hex(self.registers.pc))
                    break
        except IllegalOpcode as exc:
            self.Error("%s\n" % exc)
            self.halt()
        finally:
            self.console.flush()

    def step(self):
        if self.cancelled:
            self.halt()
            return
        if not self.running:
            return
        pc = self.registers.pc
        instruction = self.memory.read(pc)
        self.registers.increment_pc()
        self.instruction_count += 1
        if self.debug:
            self.Print("(%s) %s (%s*: %s)" % (
                self.instruction_count,
                disassemble(instruction, pc),
                lc_hex(self.registers.pc),
                lc_hex(instruction)))
        self.apply[opcode(instruction)](instruction, self.registers, self.memory)

    def TRAP(self, instruction, registers, memory):
        self.traps(trapvect8(instruction))

    def RTI(self, instruction, registers, memory):
        raise IllegalOpcode(instruction, registers.pc - 1)

    def RESERVED(self, instruction, registers, memory):
        raise IllegalOpcode(instruction, registers.pc - 1)

    def dump_registers(self):
        registers = self.registers
        self.Print()
        self.Print("=" * 60)
        self.Print("Registers:")
        self.Print("=" * 60)
        self.Print("PC:", lc_hex(registers.pc))
        for r, v in zip("NZP", registers.nzp()):
            self.Print("%s: %s" % (r, v), end=" ")
        self.Print()
        for key in range(8):
            self.Print("R%d: %s" % (key, lc_hex(registers.get(key))), end=" ")
            if key % 4 == 3:
                self.Print()

    def dump(self, start=None, stop=None, raw=False, header=True):
        if start is None:
            start = self.orig
        if stop is None:
            stop = start + 10
        else:
            stop = stop + 1
        if stop <= start:
            stop = start + 10
        if stop - start > 100:
            stop = start + 100
        if header:
            self.Print("=" * 60)
            self.Print("Memory dump:" if raw else "Memory disassembled:")
            self.Print("=" * 60)
        for location in range(start, min(stop, len(self.memory))):
            instruction = self.memory.peek(location)
            if raw:
                self.Print("%-10s %s: %s %s" % (
                    "", lc_hex(location), lc_hex(instruction),
                    ascii_str(instruction)))
            else:
                self.Print("%-10s %s: %s  %s" % (
                    "", lc_hex(location), lc_hex(instruction),
                    disassemble(instruction, location)))
