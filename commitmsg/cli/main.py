"""CLI Main Entry Point"""

import os
import sys

from commitmsg.assistant import CommitAssistant, UnexpectedStateError, UnsureError
from commitmsg.config import load_config, parse_duration
from commitmsg.llm import ErrorKind, LLMError, OpenAIClient
from commitmsg.output import Spinner, frame_message, print_error
from commitmsg.prompts import MessageConfig

from commitmsg.cli.args import parse_args
from commitmsg.cli.commands import display_config, run_install_completion, run_setup
from commitmsg.cli.utils import format_cost, read_diff_file, setup_logging

STATUS_URL = "https://status.openai.com/"

EXIT_CODES = {
    ErrorKind.UNEXPECTED_STATE: 2,
    ErrorKind.UNSURE: 3,
    ErrorKind.TIMEOUT: 4,
    ErrorKind.TRANSPORT: 5,
    ErrorKind.DECODE: 6,
    ErrorKind.VALIDATION: 7,
}


def _build_assistant(api_key: str) -> CommitAssistant:
    return CommitAssistant(OpenAIClient(api_key))


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    if args.setup:
        return run_setup(), True
    return 0, False


def _resolve_settings(args, config):
    """Resolve style, compliance, timeout and cost flag.

    Precedence: CLI args > environment variables > config file
    """
    style = args.style or os.environ.get('CM_STYLE') or config.style
    conventional = config.conventional_commit if args.conventional is None else args.conventional
    show_cost = config.show_cost if args.cost is None else args.cost

    if args.timeout is not None:
        timeout = args.timeout
    elif os.environ.get('CM_TIMEOUT'):
        raw = os.environ["CM_TIMEOUT"]
        timeout = parse_duration(raw)
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got '{raw}'")
    else:
        timeout = config.timeout_seconds

    return MessageConfig(style=style, conventional_commit=conventional), timeout, show_cost


def _display_message(message):
    """Display commit message with horizontal rules and colored type."""
    print(f"\n{frame_message(message)}")


def handle_error(err: LLMError) -> int:
    """Report ``err`` to the user and return its exit code."""
    if isinstance(err, UnsureError):
        print(err.message)
    elif isinstance(err, UnexpectedStateError):
        print_error(f"Unexpected number of messages returned ({err.count})")
    elif err.kind == ErrorKind.TIMEOUT:
        print_error("Request timed out.")
        print(f"See API status at {STATUS_URL}", file=sys.stderr)
        print("or try again with a longer timeout (see --timeout flag).", file=sys.stderr)
    elif err.kind == ErrorKind.VALIDATION:
        print_error(f"Invalid request: {err}")
    else:
        print_error(f"Request failed: {err}")
    return EXIT_CODES.get(err.kind, 1)


def _generate_commit_flow(args, config) -> int:
    """Main commit message generation flow.

    Returns:
        int: Exit code
    """
    if not args.file:
        print_error("No input given. Pass the file with the changes: --file PATH")
        return 1

    api_key = os.environ.get('OPENAI_API_KEY')
    if not api_key:
        print_error(
            "No API key found. Set OPENAI_API_KEY environment variable:\n"
            "  export OPENAI_API_KEY='your-key-here'"
        )
        return 1

    try:
        message_config, timeout, show_cost = _resolve_settings(args, config)
    except ValueError as e:
        print_error(f"Invalid CM_TIMEOUT: {e}")
        return 1

    try:
        git_diff = read_diff_file(args.file)
    except OSError as e:
        print_error(f"Could not read file '{args.file}': {e}")
        return 1

    assistant = _build_assistant(api_key)
    try:
        with Spinner():
            result = assistant.get_commit_message(git_diff, message_config, timeout=timeout)
    except LLMError as e:
        return handle_error(e)

    if sys.stdout.isatty():
        _display_message(result.message)
    else:
        print(result.message)

    if show_cost:
        print(format_cost(result.cost))

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = load_config()
    return _generate_commit_flow(args, config)


if __name__ == "__main__":
    sys.exit(main())
