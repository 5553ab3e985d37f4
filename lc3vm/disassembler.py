"""
Turn instruction words back into LC-3 assembly, for traces and memory
listings. `location` is the address the instruction was fetched from.
"""

from .decoder import (opcode, dr, sr1, sr2, imm_mode, jsr_mode, imm5,
                      offset6, pc_offset9, pc_offset11, trapvect8,
                      lc_hex, lc_int, lc_bin)
from .traps import trap_names

mnemonic = {
    0b0000: "BR",
    0b0001: "ADD",
    0b0010: "LD",
    0b0011: "ST",
    0b0100: "JSR",
    0b0101: "AND",
    0b0110: "LDR",
    0b0111: "STR",
    0b1000: "RTI",
    0b1001: "NOT",
    0b1010: "LDI",
    0b1011: "STI",
    0b1100: "JMP",
    0b1101: "RESERVED",
    0b1110: "LEA",
    0b1111: "TRAP",
}


def ascii_str(i):
    if i < 256:
        if i < 32 or i > 127: # integers
            return "(or %s)" % i
        else: # int, or ASCII
            return "(or %s, %s)" % (i, repr(chr(i)))
    else:
        return ""

def target(location, offset):
    return lc_hex(lc_bin(location + 1 + offset))

def BR_format(instruction, location):
    nzp = dr(instruction)
    instr = "BR"
    for flag, name in ((4, "n"), (2, "z"), (1, "p")):
        if nzp & flag:
            instr += name
    if not nzp:
        return "NOP"
    return "%s %s" % (instr, target(location, pc_offset9(instruction)))

def ADD_format(instruction, location, name="ADD"):
    if imm_mode(instruction):
        return "%s R%d, R%d, #%s" % (name, dr(instruction), sr1(instruction),
                                     lc_int(imm5(instruction)))
    else:
        return "%s R%d, R%d, R%d" % (name, dr(instruction), sr1(instruction),
                                     sr2(instruction))

def AND_format(instruction, location):
    return ADD_format(instruction, location, "AND")

def NOT_format(instruction, location):
    return "NOT R%d, R%d" % (dr(instruction), sr1(instruction))

def JMP_format(instruction, location):
    base = sr1(instruction)
    if base == 7:
        return "RET"
    else:
        return "JMP R%d" % base

def JSR_format(instruction, location):
    if jsr_mode(instruction):
        return "JSR %s" % target(location, pc_offset11(instruction))
    else:
        return "JSRR R%d" % sr1(instruction)

def pc_relative_format(instruction, location):
    return "%s R%d, %s" % (mnemonic[opcode(instruction)], dr(instruction),
                           target(location, pc_offset9(instruction)))

def base_offset_format(instruction, location):
    return "%s R%d, R%d, #%s" % (mnemonic[opcode(instruction)],
                                 dr(instruction), sr1(instruction),
                                 lc_int(offset6(instruction)))

def TRAP_format(instruction, location):
    vector = trapvect8(instruction)
    if vector in trap_names:
        return trap_names[vector]
    return "TRAP %s" % lc_hex(vector)

def RESERVED_format(instruction, location):
    return ";; %s %s" % (mnemonic[opcode(instruction)],
                         lc_hex(instruction & 0b0000111111111111))

formats = {
    0b0000: BR_format,
    0b0001: ADD_format,
    0b0010: pc_relative_format,
    0b0011: pc_relative_format,
    0b0100: JSR_format,
    0b0101: AND_format,
    0b0110: base_offset_format,
    0b0111: base_offset_format,
    0b1000: RESERVED_format,
    0b1001: NOT_format,
    0b1010: pc_relative_format,
    0b1011: pc_relative_format,
    0b1100: JMP_format,
    0b1101: RESERVED_format,
    0b1110: pc_relative_format,
    0b1111: TRAP_format,
}

def disassemble(instruction, location):
    return formats[opcode(instruction)](instruction, location)
