from __future__ import print_function

from metakernel import MetaKernel

from ._version import __version__
from .console import Console, EOF
from .shell import Shell


class KernelConsole(Console):
    """
    Console backed by the notebook: input comes from raw_input prompts,
    output goes to the cell. The keyboard is always ready; polling it with
    nothing buffered prompts for the next line, and an empty line reads as
    EOF.
    """
    def __init__(self, kernel):
        self.kernel = kernel
        self.char_buffer = []

    def fill(self):
        ### No prompt for input:
        data = self.kernel.raw_input()
        data = data.replace("\\n", "\n")
        if len(data) == 0:
            self.char_buffer = [EOF]
        else:
            self.char_buffer = [ord(char) for char in data]

    def key_ready(self):
        if len(self.char_buffer) == 0:
            self.fill()
        return True

    def getc(self):
        if len(self.char_buffer) == 0:
            self.fill()
        return self.char_buffer.pop(0)

    def write(self, text):
        self.kernel.Print(text, end="")


class LC3Kernel(MetaKernel):
    implementation = 'lc3vm'
    implementation_version = __version__
    language = 'LC3 object code'
    language_version = '0.1'
    banner = "lc3vm - run Little Computer 3 object images"
    language_info = {
        'name': 'lc3',
        'mimetype': 'text/plain',
        'file_extension': '.obj',
    }
    directives = ["%bp", "%cont", "%d", "%dis", "%dump", "%exe", "%image",
                  "%mem", "%pc", "%reg", "%regs", "%reset", "%save", "%step"]

    def __init__(self, *args, **kwargs):
        super(LC3Kernel, self).__init__(*args, **kwargs)
        self.lc3_shell = Shell(kernel=self, console=KernelConsole(self))

    def get_usage(self):
        return """This is the lc3vm Jupyter kernel.

LC3 Interactive Magic Directives:

 %image FILENAME                    - load an object image
 %save FILENAME STARTHEX STOPHEX    - write memory as an object image
 %bp [clear | SUSPENDHEX]           - show, clear, or set breakpoints
 %cont                              - continue running
 %d                                 - toggle tracing
 %dis [STARTHEX [STOPHEX]]          - dump memory as program
 %dump [STARTHEX [STOPHEX]]         - list memory in hex
 %exe                               - execute the program from x3000
 %mem HEXLOCATION HEXVALUE          - set memory
 %pc HEXVALUE                       - set PC
 %reg REG HEXVALUE                  - set register REG to HEXVALUE
 %regs                              - show registers
 %reset                             - reset LC3 to start state
 %step                              - execute the next instruction, increment PC

Any other cell is an object image in hex words, the first one being the
origin, for example:

    x3000 x9000 xF025

HEX values begin with an 'x' and are composed of 4 0-F digits or letters.
"""

    def get_completions(self, info):
        token = info["help_obj"]
        return [item for item in self.directives if item.startswith(token)]

    def do_execute_direct(self, code):
        try:
            self.lc3_shell.execute(code.rstrip())
        except Exception as exc:
            self.Error(str(exc))
        except KeyboardInterrupt:
            self.Error("Keyboard Interrupt!")

    def do_execute_file(self, filename):
        self.lc3_shell.execute("%image " + filename)
        self.lc3_shell.execute("%exe")

    def repr(self, data):
        return repr(data)


if __name__ == '__main__':
    from ipykernel.kernelapp import IPKernelApp
    IPKernelApp.launch_instance(kernel_class=LC3Kernel)
