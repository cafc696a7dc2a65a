"""
CLI workflow orchestration for the MinHash ROM matcher.

Provides the CLIOrchestrator class that coordinates the build and match
workflows from argument parsing through final reporting.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Sequence

from ..database import EntryReader, build_database
from ..errors import MinHashRomError
from ..matcher import SimilarityMatcher, resolve_rom_path
from ..scanner import load_rom, compute_signature
from ..utils.validators import require_chunk_size, validate_threshold
from .arg_parser import parse_arguments
from .reporting import (
    print_build_header,
    print_build_summary,
    print_match_header,
    print_match,
    print_match_summary,
)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI build and match workflows.

    Every library failure surfaces as a MinHashRomError; the orchestrator
    reports it as a single log line and turns it into exit code 1.
    """

    def __init__(self, argv: Optional[Sequence[str]] = None):
        """
        Initialize the orchestrator.

        Args:
            argv: Command line arguments (default: sys.argv[1:])
        """
        self.argv = argv
        self.logger = logging.getLogger(__name__)
        self.mode = None
        self.args = None
        self.parser = None

    def run(self) -> int:
        """
        Execute the selected workflow.

        Returns:
            Exit code (0 for success, 1 for error)
        """
        self._setup_phase()

        try:
            if self.mode == 'build':
                return self._build_phase()
            return self._match_phase()
        except MinHashRomError as e:
            self.logger.error(e.message)
            return 1

    def _setup_phase(self) -> None:
        """Parse arguments and setup logging."""
        self.mode, self.args, self.parser = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)

    def _usage(self) -> int:
        """Print usage when the positional argument is missing."""
        self.parser.print_help()
        return 0

    def _build_phase(self) -> int:
        """
        Build a signature database.

        Returns:
            0 for success
        """
        # Reject a bad chunk size before touching any file
        require_chunk_size(self.args.chunk_size)

        if self.args.directory is None:
            return self._usage()

        db_path = os.fspath(self.args.db)
        print_build_header(db_path, self.args.chunk_size)

        stats = build_database(
            self.args.directory,
            db_path=db_path,
            chunk_size=self.args.chunk_size,
            show_progress=not self.args.no_progress,
        )
        if stats.files_skipped:
            self.logger.debug(f"Skipped {stats.files_skipped:,} files with unsupported sizes")

        print_build_summary(stats)
        return 0

    def _match_phase(self) -> int:
        """
        Match a ROM against a signature database.

        Returns:
            0 for success, 1 for an invalid threshold
        """
        if self.args.rom is None:
            return self._usage()

        is_valid, error = validate_threshold(self.args.sensitivity)
        if not is_valid:
            self.logger.error(error)
            return 1

        # Load the query first so a missing ROM is reported before the database
        image = load_rom(resolve_rom_path(self.args.rom))

        db_path = os.fspath(self.args.db)
        with EntryReader.open(db_path) as reader:
            if self.args.verbose:
                print_match_header(db_path, reader.chunk_size)

            query = compute_signature(image, reader.chunk_size)
            matcher = SimilarityMatcher(query, self.args.sensitivity)
            try:
                self._report_matches(matcher, reader)
            finally:
                if self.args.verbose:
                    print_match_summary(matcher.stats)

        return 0

    def _report_matches(self, matcher: SimilarityMatcher, reader: EntryReader) -> None:
        """Print matches as they stream in, or all at once when sorting."""
        if not self.args.sort:
            for match in matcher.scan(reader):
                print_match(match)
            return

        matches = sorted(matcher.scan(reader), key=lambda m: -m.similarity)
        for match in matches:
            print_match(match)


__all__ = ['CLIOrchestrator', 'setup_logging']
