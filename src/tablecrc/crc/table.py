"""
CRC-32 lookup table construction.
Each entry is the modulo-2 remainder of one byte against the reflected polynomial.
"""

import logging
import threading
from typing import Optional, Tuple
from tablecrc.config import POLYNOMIAL, CRC_WIDTH, CRC_MASK, TABLE_SIZE
from .reflect import reflect

logger = logging.getLogger(__name__)

REFLECTED_POLYNOMIAL = reflect(POLYNOMIAL, CRC_WIDTH)


def modulo2(value: int, reflected_polynomial: int = REFLECTED_POLYNOMIAL) -> int:
    """
    Divide one byte by the reflected polynomial (modulo 2).
    
    The byte sits in the low end of a reflected shift register. Every set
    bit feeds the polynomial back into the register and folds the
    polynomial, aligned to that bit, into the remainder.
    
    Args:
        value: Byte value (0-255)
        reflected_polynomial: Polynomial in reflected form
        
    Returns:
        32-bit remainder for the byte
    """
    remainder = 0
    for bit in range(8):
        if value & (1 << bit):
            value ^= reflected_polynomial << (bit + 1)
            remainder ^= reflected_polynomial >> (7 - bit)
    return remainder & CRC_MASK


def build_table(reflected_polynomial: int = REFLECTED_POLYNOMIAL) -> Tuple[int, ...]:
    """Build the 256-entry lookup table; the tuple is never mutated"""
    table = tuple(modulo2(i, reflected_polynomial) for i in range(TABLE_SIZE))
    logger.debug("Built CRC table for reflected polynomial 0x%08x", reflected_polynomial)
    return table


_table: Optional[Tuple[int, ...]] = None
_table_lock = threading.Lock()


def get_table() -> Tuple[int, ...]:
    """Return the shared table for the configured polynomial, building it on first use"""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                _table = build_table()
    return _table
