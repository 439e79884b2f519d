"""
Command line entry point for the CRC-32 checksum.
Prints checksums of strings and files, and can dump the lookup table.
"""

import sys
import logging
import argparse
from tablecrc.crc.engine import checksum
from tablecrc.crc.table import get_table
from tablecrc.utils.formatting import format_checksum, format_table, format_table_entries
from tablecrc.config import DEFAULT_SEED, READ_BUFFER_SIZE, LOG_LEVEL, LOG_FORMAT

logger = logging.getLogger(__name__)

DEMO_TEXTS = ['a', 'abcd']


def parse_seed(text: str) -> int:
    """Parse a seed given in decimal or 0x-prefixed hex"""
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed: {text!r}")
    if not 0 <= value <= 0xFFFFFFFF:
        raise argparse.ArgumentTypeError(f"seed out of 32-bit range: {text!r}")
    return value


def checksum_file(path: str, seed: int = DEFAULT_SEED, chunk_size: int = READ_BUFFER_SIZE) -> int:
    """
    Compute the CRC-32 of a file without loading it whole.
    
    Each chunk's checksum becomes the seed for the next one, which gives
    the same result as hashing the file contents in one call.
    """
    crc = seed
    with open(path, 'rb') as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            crc = checksum(chunk, crc)
    return crc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Table-driven CRC-32 checksum')
    parser.add_argument('text', nargs='*', help='Strings to checksum (UTF-8 encoded)')
    parser.add_argument('--file', '-f', action='append', default=[], help='File to checksum (repeatable)')
    parser.add_argument('--seed', type=parse_seed, default=DEFAULT_SEED,
                        help=f'Initial CRC value, decimal or 0x hex (default: {DEFAULT_SEED})')
    parser.add_argument('--table', action='store_true', help='Print the lookup table as a C array')
    parser.add_argument('--list-table', action='store_true', help='Print every table entry with its index')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    return parser


def print_result(label: str, crc: int) -> None:
    print(f"data:{label}")
    print(f"crc :{format_checksum(crc)}")


def main(argv=None) -> int:
    """Main function; returns the process exit status"""
    args = build_parser().parse_args(argv)
    
    logging.basicConfig(level=logging.DEBUG if args.verbose else LOG_LEVEL, format=LOG_FORMAT)
    
    table = get_table()
    
    if args.list_table:
        for line in format_table_entries(table):
            print(line)
    
    texts = args.text
    if not texts and not args.file and not (args.table or args.list_table):
        texts = DEMO_TEXTS
    
    for text in texts:
        print_result(text, checksum(text.encode('utf-8'), args.seed))
    
    status = 0
    for path in args.file:
        try:
            crc = checksum_file(path, args.seed)
        except OSError as e:
            logger.error("Cannot read %s: %s", path, e)
            status = 1
            continue
        print_result(path, crc)
    
    if args.table:
        print(format_table(table, name='crc32_table'))
    
    return status


if __name__ == '__main__':
    sys.exit(main())
