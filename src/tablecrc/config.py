"""
Configuration parameters for the table-driven CRC-32 checksum.
"""

# CRC-32 generator polynomial in normal (MSB-first) form
POLYNOMIAL = 0x04C11DB7
CRC_WIDTH = 32
CRC_MASK = 0xFFFFFFFF

# Pre/post complement applied around the update loop
FINAL_XOR = 0xFFFFFFFF
DEFAULT_SEED = 0

# One table entry per possible byte value
TABLE_SIZE = 256

# File hashing
READ_BUFFER_SIZE = 64 * 1024  # 64KB

# Table dump layout
TABLE_COLUMNS = 16

# Logging configuration
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
