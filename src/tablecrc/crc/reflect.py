"""
Bit reversal primitives.
Used to turn the normal-form polynomial into its reflected (LSB-first) form.
"""


def reverse8(bits: int) -> int:
    """Reverse the low 8 bits of bits; higher bits are dropped"""
    return (((bits >> 7) & 0x01) |
            ((bits >> 5) & 0x02) |
            ((bits >> 3) & 0x04) |
            ((bits >> 1) & 0x08) |
            ((bits << 1) & 0x10) |
            ((bits << 3) & 0x20) |
            ((bits << 5) & 0x40) |
            ((bits << 7) & 0x80))


def reverse16(bits: int) -> int:
    """Reverse the low 16 bits of bits"""
    return reverse8((bits >> 8) & 0xff) | (reverse8(bits & 0xff) << 8)


def reverse32(bits: int) -> int:
    """Reverse the low 32 bits of bits"""
    return reverse16((bits >> 16) & 0xffff) | (reverse16(bits & 0xffff) << 16)


_REVERSERS = {
    8: reverse8,
    16: reverse16,
    32: reverse32,
}


def reflect(value: int, width: int) -> int:
    """
    Reverse the bit order of a width-bit value.
    
    Args:
        value: Value to reflect (bits above width are ignored)
        width: Register width in bits, one of 8, 16 or 32
        
    Returns:
        Reflected value
    """
    try:
        reverser = _REVERSERS[width]
    except KeyError:
        raise ValueError(f"Unsupported reflection width: {width}") from None
    return reverser(value)
