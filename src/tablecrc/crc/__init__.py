"""
Table-driven reflected CRC-32 (polynomial 0x04C11DB7, reflected 0xEDB88320).
"""

from .reflect import reverse8, reverse16, reverse32, reflect
from .table import POLYNOMIAL, REFLECTED_POLYNOMIAL, build_table, get_table, modulo2
from .engine import crc32, crc32_stepwise, checksum
