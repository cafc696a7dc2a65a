"""
Allow running the package with: python -m minhashrom

Match is the default mode; 'build' (or 'create') signs a directory.

Examples:
    python -m minhashrom build /path/to/roms      # Build minhash.db
    python -m minhashrom match pitfall.bin        # Match against minhash.db
    python -m minhashrom pitfall.bin -s 60        # Match (implicit mode)
"""

import sys


def main():
    from .cli import main as cli_main
    sys.exit(cli_main(sys.argv[1:]))


if __name__ == '__main__':
    main()
