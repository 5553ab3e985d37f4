"""
Bit-field extraction and number formatting for LC-3 instruction words.

Every instruction is one 16-bit word. If RX is used in an instruction,
these are the positions:

    0000 111 222 000 333
    op   DR  SR1     SR2
"""

def lc_bin(v):
    """ Truncate any extra bytes """
    return v & 0xFFFF

def lc_hex(h):
    """ Format the value in the form xFFFF """
    try:
        return 'x%04X' % lc_bin(h)
    except TypeError:
        return h

def lc_int(v):
    """ Signed (two's-complement) view of a 16-bit word """
    if v & (1 << 15): # negative
        return -((~(v & 0xFFFF) + 1) & 0xFFFF)
    else:
        return v & 0xFFFF

def is_composed_of(s, letters):
    return len(s) > 0 and sum([s.count(letter) for letter in letters]) == len(s)

def is_hex(s):
    if len(s) > 1 and s[0] in "xX":
        return is_composed_of(s[1:].upper(), "0123456789ABCDEF")
    return False

def parse_hex(s):
    """ Parse xFFFF (or a bare hex string) into an int """
    if s[:1] in "xX":
        s = s[1:]
    return int(s, 16)

def sext(binary, bits):
    """
    Sign-extend the low `bits` bits of binary to 16 bits; check the most
    significant bit of the field.
    """
    binary &= (1 << bits) - 1
    if binary & (1 << (bits - 1)):
        return (0xFFFF << bits | binary) & 0xFFFF
    else:
        return binary

def opcode(instruction):
    return (instruction >> 12) & 0xF

def dr(instruction):
    """ Destination register (or source register of a store, or nzp) """
    return (instruction >> 9) & 0x7

def sr1(instruction):
    """ First source register, also the base register """
    return (instruction >> 6) & 0x7

def sr2(instruction):
    return instruction & 0x7

def imm_mode(instruction):
    return (instruction >> 5) & 0x1

def jsr_mode(instruction):
    return (instruction >> 11) & 0x1

def imm5(instruction):
    return sext(instruction & 0x1F, 5)

def offset6(instruction):
    return sext(instruction & 0x3F, 6)

def pc_offset9(instruction):
    return sext(instruction & 0x1FF, 9)

def pc_offset11(instruction):
    return sext(instruction & 0x7FF, 11)

def trapvect8(instruction):
    return instruction & 0xFF
