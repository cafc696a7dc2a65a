"""
Argument parsing for the CLI interface.

Provides functions to create the per-mode argument parsers and to split
the command line into a mode and its options. Match is the default mode
when the first argument is not a mode word.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..config import DEFAULT_CHUNK_SIZE, DEFAULT_DB_FILE, DEFAULT_THRESHOLD

# Mode words are case-insensitive; 'create' is an alias for build
MODE_ALIASES = {
    'BUILD': 'build',
    'CREATE': 'build',
    'MATCH': 'match',
}


def create_build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Create the argument parser for build mode.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog=prog,
        description='Build a MinHash signature database from a directory of ROMs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s /path/to/roms
      Sign every ROM under the directory into minhash.db

  %(prog)s /path/to/roms -c 128 --db vcs.db
      Use 128 byte chunks (32 signature components) and a custom database
        """
    )

    parser.add_argument(
        'directory',
        type=Path,
        nargs='?',
        default=None,
        help='Directory of ROM files to sign'
    )

    parser.add_argument(
        '-c', '--chunk-size',
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f'Chunk size in bytes (8-2048, must divide 4096). Default: {DEFAULT_CHUNK_SIZE}'
    )

    parser.add_argument(
        '-db', '--db',
        type=Path,
        default=Path(DEFAULT_DB_FILE),
        help=f'Name of MinHash database file. Default: {DEFAULT_DB_FILE}'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bar (useful for piping output)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )

    return parser


def create_match_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Create the argument parser for match mode.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog=prog,
        description='Find ROMs in a MinHash database that resemble a ROM file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s pitfall.bin
      List database entries at least 80% similar to pitfall.bin

  %(prog)s pitfall.bin -s 50 -v --sort
      Lower the threshold, show counters and rank by similarity
        """
    )

    parser.add_argument(
        'rom',
        type=Path,
        nargs='?',
        default=None,
        help='ROM file to compare against the database'
    )

    parser.add_argument(
        '-s', '--sensitivity',
        type=float,
        default=DEFAULT_THRESHOLD,
        help=f'Match sensitivity as a similarity percentage. Default: {DEFAULT_THRESHOLD}'
    )

    parser.add_argument(
        '-db', '--db',
        type=Path,
        default=Path(DEFAULT_DB_FILE),
        help=f'Name of MinHash database file. Default: {DEFAULT_DB_FILE}'
    )

    parser.add_argument(
        '--sort',
        action='store_true',
        help='Sort matches by similarity instead of database order'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )

    return parser


def split_mode(argv: Sequence[str]) -> tuple[str, list[str]]:
    """
    Split a command line into mode and remaining arguments.

    Examples:
        >>> split_mode(['BUILD', 'roms'])
        ('build', ['roms'])
        >>> split_mode(['pitfall.bin'])
        ('match', ['pitfall.bin'])
    """
    argv = list(argv)
    if argv:
        mode = MODE_ALIASES.get(argv[0].upper())
        if mode is not None:
            return mode, argv[1:]
    return 'match', argv


def create_parser(mode: str, prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Create the parser for a mode ('build' or 'match')."""
    if mode == 'build':
        return create_build_parser(prog)
    if mode == 'match':
        return create_match_parser(prog)
    raise ValueError(f"Unknown mode: {mode}")


def parse_arguments(argv: Optional[Sequence[str]] = None) -> tuple[str, argparse.Namespace, argparse.ArgumentParser]:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv[1:])

    Returns:
        Tuple of (mode, parsed arguments, parser used)

    Examples:
        >>> mode, args, _ = parse_arguments(['build', 'roms', '-c', '128'])
        >>> mode, args.chunk_size
        ('build', 128)
    """
    if argv is None:
        argv = sys.argv[1:]
    mode, rest = split_mode(argv)
    parser = create_parser(mode, prog=f"minhashrom {mode}")
    return mode, parser.parse_args(rest), parser


__all__ = [
    'MODE_ALIASES',
    'create_build_parser',
    'create_match_parser',
    'create_parser',
    'split_mode',
    'parse_arguments',
]
