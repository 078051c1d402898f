"""CLI Argument Parsing"""

import argparse
import argcomplete

from commitmsg import STYLE_NAMES, __version__
from commitmsg.config import parse_duration


def _duration(value: str) -> float:
    try:
        seconds = parse_duration(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be positive, got '{value}'")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='commit-msg',
        description='Suggest a commit message from the changes in a git diff using the OpenAI API',
        epilog='Example (prepare-commit-msg hook): commit-msg --file "$COMMIT_MSG_FILE"'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Input options
    parser.add_argument('-f', '--file', type=str, metavar='PATH',
                        help='File with the changes, usually $COMMIT_MSG_FILE in a prepare-commit-msg hook ("-" for stdin)')
    parser.add_argument('--timeout', type=_duration, metavar='DURATION',
                        help='Timeout for the request to OpenAI, e.g. 5s, 1m30s (default: 5s)')

    # Style options
    parser.add_argument('-s', '--style', type=str, choices=STYLE_NAMES, help='Commit message style')
    parser.add_argument('--conventional', action=argparse.BooleanOptionalAction, default=None,
                        help='Follow the Conventional Commits format (--no-conventional overrides the config)')

    # Output options
    parser.add_argument('--cost', action=argparse.BooleanOptionalAction, default=None,
                        help='Print the cost of the request (--no-cost overrides the config)')
    parser.add_argument('--verbose', action='store_true', help='Show debug info (request, tokens used)')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure defaults')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
