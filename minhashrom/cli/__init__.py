"""
CLI package for the MinHash ROM matcher.

Provides the command-line interface for building signature databases and
matching ROMs against them.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
- parse_arguments: Split argv into a mode and parsed options
"""

from __future__ import annotations

from typing import Optional, Sequence

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments, split_mode
from .reporting import format_match_line, print_match_summary


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the selected workflow.

    Returns:
        Exit code (0 for success, 1 for error)

    Examples:
        >>> # Called from __main__.py
        >>> exit_code = main()
        >>> sys.exit(exit_code)
    """
    orchestrator = CLIOrchestrator(argv)
    return orchestrator.run()


__all__ = [
    # Main entry point
    'main',
    # Core classes
    'CLIOrchestrator',
    # Utilities
    'setup_logging',
    'create_parser',
    'parse_arguments',
    'split_mode',
    'format_match_line',
    'print_match_summary',
]
