"""
Table-driven reflected CRC-32 checksum.
"""
