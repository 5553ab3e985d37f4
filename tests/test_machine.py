import pytest

from lc3vm.console import BufferedConsole
from lc3vm.exceptions import IllegalOpcode
from lc3vm.machine import LC3
from lc3vm.registers import FL_NEG, FL_POS


def image(origin, *words):
    data = b""
    for word in (origin,) + words:
        data += bytes([word >> 8, word & 0xFF])
    return data

def test_initial_state():
    lc3 = LC3()
    assert lc3.registers.pc == 0x3000
    assert not lc3.halted

def test_not_after_one_step():
    lc3 = LC3()
    lc3.load_image(bytes([0x30, 0x00, 0x90, 0x00]))
    lc3.step()
    assert lc3.registers.pc == 0x3001
    assert lc3.registers.get(0) == 0xFFFF
    assert lc3.registers.cond == FL_NEG

def test_branch_to_self_loops():
    lc3 = LC3()
    lc3.load_image(image(0x3000, 0x05FF)) # BRz #-1
    for _ in range(50):
        lc3.step()
        assert lc3.registers.pc == 0x3000
    assert not lc3.halted
    assert lc3.instruction_count == 50

def test_halt_stops_fetching(monkeypatch):
    lc3 = LC3()
    lc3.load_image(image(0x3000, 0xF025, 0x1021)) # HALT; ADD R0, R0, #1
    reads = []
    original = lc3.memory.read
    monkeypatch.setattr(lc3.memory, "read",
                        lambda location: reads.append(location) or original(location))
    lc3.run()
    assert lc3.halted
    assert reads == [0x3000]
    lc3.step()
    assert reads == [0x3000]
    assert lc3.registers.get(0) == 0
    assert lc3.registers.pc == 0x3001

def test_trap_does_not_link_r7():
    lc3 = LC3()
    lc3.load_image(image(0x3000, 0xF021, 0xF025)) # OUT; HALT
    lc3.registers.set(7, 0x1234)
    lc3.run()
    assert lc3.registers.get(7) == 0x1234

def test_hello_world():
    lc3 = LC3()
    # LEA R0, #2; PUTS; HALT; "Hi"
    lc3.load_image(image(0x3000, 0xE002, 0xF022, 0xF025, 0x48, 0x69, 0x00))
    lc3.run()
    assert lc3.console.output == "Hihalt\n"
    assert lc3.instruction_count == 3

def test_count_loop():
    lc3 = LC3()
    # AND R0, R0, #0; ADD R0, R0, #1; ADD R1, R0, #-10; BRn #-3; HALT
    lc3.load_image(image(0x3000, 0x5020, 0x1021, 0x1236, 0x09FD, 0xF025))
    lc3.run()
    assert lc3.registers.get(0) == 10
    assert lc3.registers.get(1) == 0

def test_echo_through_keyboard_registers():
    lc3 = LC3(console=BufferedConsole("k"))
    # LDI R1, KBSR; BRzp #-2; LDI R0, KBDR; OUT; HALT; KBSR; KBDR
    lc3.load_image(image(0x3000, 0xA204, 0x07FE, 0xA003, 0xF021, 0xF025,
                         0xFE00, 0xFE02))
    lc3.run()
    assert lc3.registers.get(0) == ord("k")
    assert lc3.registers.cond == FL_POS
    assert lc3.console.output == "khalt\n"

@pytest.mark.parametrize("instruction", [0x8000, 0xD000])
def test_illegal_opcode_halts(instruction, capsys):
    lc3 = LC3()
    lc3.load_image(image(0x3000, instruction))
    lc3.run()
    assert lc3.halted
    assert "bad opcode x%04X at x3000" % instruction in capsys.readouterr().err

def test_illegal_opcode_from_step():
    lc3 = LC3()
    lc3.load_image(image(0x3000, 0xD123))
    with pytest.raises(IllegalOpcode) as info:
        lc3.step()
    assert info.value.instruction == 0xD123
    assert info.value.location == 0x3000

def test_cancel_before_step():
    lc3 = LC3()
    lc3.load_image(image(0x3000, 0x05FF))
    lc3.cancel()
    lc3.run()
    assert lc3.halted
    assert lc3.instruction_count == 0

def test_breakpoint_suspends():
    lc3 = LC3()
    lc3.load_image(image(0x3000, 0x1021, 0x1021, 0xF025))
    lc3.breakpoints[0x3001] = True
    lc3.run()
    assert lc3.suspended
    assert not lc3.halted
    assert lc3.registers.get(0) == 1
    lc3.run()
    assert lc3.halted
    assert lc3.registers.get(0) == 2

def test_trace_output():
    lc3 = LC3()
    lc3.load_image(image(0x3000, 0x107D, 0xF025))
    lc3.registers.set(1, 5)
    lc3.debug = True
    lc3.run()
    output = lc3.console.output
    assert "(1) ADD R0, R1, #-3 (x3001*: x107D)" in output
    assert "R0 <= x0002" in output
    assert "NZP <= (0, 0, 1)" in output

def test_load_resets_registers():
    lc3 = LC3()
    lc3.registers.set(2, 7)
    lc3.registers.pc = 0x5000
    lc3.load_image(image(0x4000, 0xF025))
    assert lc3.orig == 0x4000
    assert lc3.registers.pc == 0x3000
    assert lc3.registers.get(2) == 0
