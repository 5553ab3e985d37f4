import inspect

from .decoder import is_hex, parse_hex, lc_hex
from .exceptions import IllegalOpcode
from .loader import dump_image
from .machine import LC3


class Shell(object):
    """
    Interactive directives over an LC3. Text that is not a %directive is
    an object image written as hex words, the first being the origin:

        x3000
        x9000 xF025
    """
    usage = {
        "image": "%image FILENAME",
        "save": "%save FILENAME HEXSTART HEXSTOP",
        "exe": "%exe",
        "cont": "%cont",
        "step": "%step",
        "regs": "%regs",
        "dump": "%dump [HEXSTART [HEXSTOP]]",
        "dis": "%dis [HEXSTART [HEXSTOP]]",
        "mem": "%mem HEXLOCATION HEXVALUE",
        "pc": "%pc HEXVALUE",
        "reg": "%reg REGISTER HEXVALUE",
        "reset": "%reset",
        "d": "%d",
        "bp": "%bp [clear | HEXLOCATION]",
    }

    def __init__(self, machine=None, kernel=None, console=None):
        if machine is None:
            machine = LC3(console=console, kernel=kernel)
        self.lc3 = machine

    def Print(self, *args, **kwargs):
        self.lc3.Print(*args, **kwargs)

    def Error(self, string):
        self.lc3.Error(string)

    def report(self):
        if self.lc3.suspended:
            self.Print("=" * 60)
            self.Print("Computation SUSPENDED")
            self.Print("=" * 60)
        else:
            self.Print("=" * 60)
            self.Print("Computation completed")
            self.Print("=" * 60)
        self.Print("Instructions:", self.lc3.instruction_count)
        self.lc3.dump_registers()

    def execute(self, text):
        words = [word.strip() for word in text.split()]
        if not words:
            return True
        if not words[0].startswith("%"):
            return self.assemble_hex(words)
        directive = "do_" + words[0][1:]
        if not hasattr(self, directive):
            self.Error("Invalid Interactive Magic Directive\nHint: %help")
            return False
        method = getattr(self, directive)
        try:
            inspect.signature(method).bind(*words[1:])
        except TypeError:
            self.Error("Usage: %s\n" % self.usage.get(words[0][1:], words[0]))
            return False
        return method(*words[1:])

    def assemble_hex(self, words):
        bad = [word for word in words if not is_hex(word)]
        if bad:
            self.Error("Not a hex word: %s\n" % bad[0])
            return False
        values = [parse_hex(word) for word in words]
        data = b"".join(bytes(((value >> 8) & 0xFF, value & 0xFF))
                        for value in values)
        origin, count = self.lc3.load_image(data)
        self.Print("Loaded %d words at %s. Use %%dis or %%dump to examine; "
                   "use %%exe to run." % (count, lc_hex(origin)))
        return True

    def do_image(self, filename):
        origin, count = self.lc3.load(filename)
        self.Print("Loaded %s: %d words at %s" % (filename, count, lc_hex(origin)))
        return True

    def do_save(self, filename, start, stop):
        start = parse_hex(start)
        stop = parse_hex(stop)
        if stop < start:
            self.Error("Stop %s is before start %s\n" % (lc_hex(stop), lc_hex(start)))
            return False
        count = stop - start + 1
        with open(filename, "wb") as fp:
            fp.write(dump_image(self.lc3.memory, start, count))
        self.Print("Saved %d words at %s to %s" % (count, lc_hex(start), filename))
        return True

    def do_exe(self):
        self.lc3.reset_registers()
        self.lc3.run()
        self.report()
        return True

    def do_cont(self):
        self.lc3.run()
        self.report()
        return True

    def do_step(self):
        orig_debug = self.lc3.debug
        self.lc3.debug = True
        try:
            self.lc3.step()
        except IllegalOpcode as exc:
            self.Error("%s\n" % exc)
            self.lc3.halt()
        finally:
            self.lc3.debug = orig_debug
        self.lc3.dump_registers()
        return True

    def do_regs(self):
        self.lc3.dump_registers()
        return True

    def do_dump(self, *args):
        self.lc3.dump(*[parse_hex(word) for word in args], raw=True)
        return True

    def do_dis(self, *args):
        self.lc3.dump(*[parse_hex(word) for word in args])
        return True

    def do_mem(self, location, value):
        location = parse_hex(location)
        self.lc3.memory.write(location, parse_hex(value))
        self.lc3.dump(location, location, raw=True, header=False)
        return True

    def do_pc(self, value):
        self.lc3.instruction_count = 0
        self.lc3.registers.pc = parse_hex(value)
        self.lc3.dump_registers()
        return True

    def do_reg(self, register, value):
        self.lc3.registers.set(int(register.upper().lstrip("R")), parse_hex(value))
        self.lc3.dump_registers()
        return True

    def do_reset(self):
        self.lc3.initialize()
        self.lc3.dump_registers()
        return True

    def do_d(self):
        self.lc3.debug = not self.lc3.debug
        self.Print("Debug is now %s" % ["off", "on"][int(self.lc3.debug)])
        return True

    def do_bp(self, *args):
        if args:
            if args[0] == "clear":
                self.lc3.breakpoints = {}
                self.Print("All breakpoints cleared")
                return True
            self.lc3.breakpoints[parse_hex(args[0])] = True
        if self.lc3.breakpoints:
            self.Print("=" * 60)
            self.Print("Breakpoints")
            self.Print("=" * 60)
            for count, location in enumerate(sorted(self.lc3.breakpoints), 1):
                self.Print("    %d) " % count, end="")
                self.lc3.dump(location, location, header=False)
        else:
            self.Print("    No breakpoints set")
        return True
