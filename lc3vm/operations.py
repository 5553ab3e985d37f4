"""
The LC-3 operations that only touch registers and memory. Each takes the
instruction word, the RegisterFile and the Memory; the PC has already been
incremented, so every PC-relative address is computed from the
incremented PC.

TRAP, RTI and the reserved opcode need the machine and are handled there.
"""

from .decoder import (dr, sr1, sr2, imm_mode, jsr_mode, imm5, offset6,
                      pc_offset9, pc_offset11, lc_hex)


def BR(instruction, registers, memory):
    if registers.cond & dr(instruction): # nzp field
        registers.pc = registers.pc + pc_offset9(instruction)
        registers.trace("    True - branching to %s" % lc_hex(registers.pc))
    else:
        registers.trace("    False - continuing...")

def ADD(instruction, registers, memory):
    dst = dr(instruction)
    if imm_mode(instruction):
        operand = imm5(instruction)
    else:
        operand = registers.get(sr2(instruction))
    registers.set(dst, registers.get(sr1(instruction)) + operand)
    registers.update_flags(dst)

def AND(instruction, registers, memory):
    dst = dr(instruction)
    if imm_mode(instruction):
        operand = imm5(instruction)
    else:
        operand = registers.get(sr2(instruction))
    registers.set(dst, registers.get(sr1(instruction)) & operand)
    registers.update_flags(dst)

def NOT(instruction, registers, memory):
    dst = dr(instruction)
    registers.set(dst, ~registers.get(sr1(instruction)))
    registers.update_flags(dst)

def JMP(instruction, registers, memory):
    # JMP R7 is RET
    registers.pc = registers.get(sr1(instruction))

def JSR(instruction, registers, memory):
    # R7 is linked first, so JSRR R7 jumps to the return address
    registers.set(7, registers.pc)
    if jsr_mode(instruction): # JSR
        registers.pc = registers.pc + pc_offset11(instruction)
    else:                     # JSRR
        registers.pc = registers.get(sr1(instruction))

def LD(instruction, registers, memory):
    dst = dr(instruction)
    registers.set(dst, memory.read(registers.pc + pc_offset9(instruction)))
    registers.update_flags(dst)

def LDI(instruction, registers, memory):
    dst = dr(instruction)
    location = memory.read(registers.pc + pc_offset9(instruction))
    registers.set(dst, memory.read(location))
    registers.update_flags(dst)

def LDR(instruction, registers, memory):
    dst = dr(instruction)
    location = registers.get(sr1(instruction)) + offset6(instruction)
    registers.set(dst, memory.read(location))
    registers.update_flags(dst)

def LEA(instruction, registers, memory):
    dst = dr(instruction)
    registers.set(dst, registers.pc + pc_offset9(instruction))
    registers.update_flags(dst)

def ST(instruction, registers, memory):
    memory.write(registers.pc + pc_offset9(instruction),
                 registers.get(dr(instruction)))

def STI(instruction, registers, memory):
    location = memory.read(registers.pc + pc_offset9(instruction))
    memory.write(location, registers.get(dr(instruction)))

def STR(instruction, registers, memory):
    location = registers.get(sr1(instruction)) + offset6(instruction)
    memory.write(location, registers.get(dr(instruction)))

operations = {
    0b0000: BR,
    0b0001: ADD,
    0b0010: LD,
    0b0011: ST,
    0b0100: JSR,
    0b0101: AND,
    0b0110: LDR,
    0b0111: STR,
    0b1001: NOT,
    0b1010: LDI,
    0b1011: STI,
    0b1100: JMP, # and RET
    0b1110: LEA,
}
