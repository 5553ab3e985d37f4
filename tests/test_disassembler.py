import pytest

from lc3vm.disassembler import disassemble


@pytest.mark.parametrize("instruction, text", [
    (0x107D, "ADD R0, R1, #-3"),
    (0x1401, "ADD R2, R0, R1"),
    (0x5020, "AND R0, R0, #0"),
    (0x9000, "NOT R0, R0"),
    (0x05FF, "BRz x3000"),
    (0x0E02, "BRnzp x3003"),
    (0x0000, "NOP"),
    (0xC1C0, "RET"),
    (0xC080, "JMP R2"),
    (0x4802, "JSR x3003"),
    (0x4080, "JSRR R2"),
    (0x2201, "LD R1, x3002"),
    (0xA401, "LDI R2, x3002"),
    (0x68FF, "LDR R4, R3, #-1"),
    (0xE7FE, "LEA R3, x2FFF"),
    (0x3000, "ST R0, x3001"),
    (0x707F, "STR R0, R1, #-1"),
    (0xF022, "PUTS"),
    (0xF025, "HALT"),
    (0xF030, "TRAP x0030"),
    (0xD123, ";; RESERVED x0123"),
])
def test_disassemble(instruction, text):
    assert disassemble(instruction, 0x3000) == text
