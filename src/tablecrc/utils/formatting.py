"""
Text rendering of checksums and lookup tables for console output.
"""

from typing import List, Optional, Sequence
from tablecrc.config import TABLE_COLUMNS


def format_checksum(value: int) -> str:
    """Render a checksum as 8 zero-padded lowercase hex digits"""
    return f'{value:08x}'


def format_table_entries(table: Sequence[int]) -> List[str]:
    """One line per entry: right-aligned decimal index, then the value in hex"""
    return [f'{i:>3}:{entry:08x}' for i, entry in enumerate(table)]


def format_table(table: Sequence[int], columns: int = TABLE_COLUMNS,
                 name: Optional[str] = None) -> str:
    """
    Render the table as C array initializer rows.
    
    Args:
        table: Lookup table entries
        columns: Entries per row
        name: If given, wrap the rows in a static const uint32_t declaration
        
    Returns:
        Multi-line string without trailing newline
    """
    if columns <= 0:
        raise ValueError("columns must be positive")
    
    rows = []
    for start in range(0, len(table), columns):
        cells = ' '.join(f'0x{entry:08x},' for entry in table[start:start + columns])
        rows.append('    ' + cells)
    
    if name is None:
        return '\n'.join(rows)
    return '\n'.join([f'static const uint32_t {name}[] = {{'] + rows + ['};'])
