"""CLI Utility Functions"""

import logging
import sys


def strip_comment_lines(text: str) -> str:
    """Drop lines starting with '#', as git does for commit message files."""
    return '\n'.join(line for line in text.split('\n') if not line.startswith('#'))


def read_diff_file(path: str) -> str:
    """Read the changes from ``path`` ("-" for stdin) without comment lines."""
    if path == '-':
        return strip_comment_lines(sys.stdin.read())
    with open(path, 'r', encoding='utf-8') as f:
        return strip_comment_lines(f.read())


def setup_logging(verbose: bool) -> None:
    """Send debug logs to stderr when verbose, otherwise stay quiet."""
    logger = logging.getLogger("commitmsg")
    logger.handlers.clear()
    if not verbose:
        logger.addHandler(logging.NullHandler())
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False


def format_cost(cents: float) -> str:
    return f"Cost {cents:.2f} cent"
