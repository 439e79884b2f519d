"""
Table-driven CRC-32 update loop.
Every call is pure given (table, data, seed), so the shared table can be
read from any number of threads at once.
"""

from typing import Sequence, Union
from tablecrc.config import CRC_MASK, FINAL_XOR, DEFAULT_SEED
from .table import get_table

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: BytesLike, seed: int) -> BytesLike:
    """
    Validate the arguments and return data as a sequence of byte values.
    
    Contiguous byte buffers are iterated in place. Strided views and
    buffers with wider item formats are copied out to bytes first.
    """
    if isinstance(data, str):
        raise TypeError("CRC input must be bytes-like, not str; encode it first")
    if not 0 <= seed <= CRC_MASK:
        raise ValueError(f"Seed must be an unsigned 32-bit value, got {seed}")
    
    if isinstance(data, (bytes, bytearray)):
        return data
    view = memoryview(data)
    if view.ndim == 1 and view.c_contiguous and view.format == 'B':
        return view
    return view.tobytes()


def crc32(table: Sequence[int], data: BytesLike, seed: int = DEFAULT_SEED) -> int:
    """
    Compute the reflected CRC-32 of data using a prebuilt table.
    
    Args:
        table: 256-entry lookup table from build_table()
        data: Bytes to checksum
        seed: Previous checksum to continue from (0 for a fresh one)
        
    Returns:
        32-bit checksum
    """
    crc = seed ^ FINAL_XOR
    for byte in _as_bytes(data, seed):
        crc = table[byte ^ (crc & 0xff)] ^ (crc >> 8)
    return crc ^ FINAL_XOR


def crc32_stepwise(table: Sequence[int], data: BytesLike, seed: int = DEFAULT_SEED) -> int:
    """Same as crc32(), with each step of the update spelled out"""
    crc = seed ^ FINAL_XOR
    for byte in _as_bytes(data, seed):
        lower8bit = crc & 0xff
        index = byte ^ lower8bit
        upper24bit = crc >> 8
        entry = table[index]
        crc = entry ^ upper24bit
    return crc ^ FINAL_XOR


def checksum(data: BytesLike, seed: int = DEFAULT_SEED) -> int:
    """Compute the CRC-32 of data with the shared table"""
    return crc32(get_table(), data, seed)
