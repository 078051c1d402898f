"""Terminal Output Formatting Package

The suggested message goes to stdout so a prepare-commit-msg hook can capture
it. Everything else (errors, the spinner) goes to stderr, and each stream
decides on colour by itself.
"""

import re
import sys
import os
import threading
import time

from commitmsg import COMMIT_TYPES


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


# Win32 standard handle ids
_WIN_HANDLES = {'stdout': -11, 'stderr': -12}


def _supports_color(stream, name: str) -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(stream, 'isatty') or not stream.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(_WIN_HANDLES[name]), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓─⠋'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color(sys.stdout, 'stdout')
STDERR_COLORS_ENABLED = _supports_color(sys.stderr, 'stderr')
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
RULE = '─' if UNICODE_ENABLED else '-'


def _colorize(text: str, *codes: str, enabled: bool | None = None) -> str:
    if enabled is None:
        enabled = COLORS_ENABLED
    if not enabled:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    enabled = STDERR_COLORS_ENABLED
    print(f"{_colorize(CROSS, Colors.RED, enabled=enabled)} {_colorize(message, Colors.RED, enabled=enabled)}",
          file=sys.stderr)


_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'perf': Colors.GREEN,
    'ci': Colors.CYAN,
    'build': Colors.CYAN,
}

# Every type the model may use gets a colour; unlisted ones are dimmed
COMMIT_TYPE_COLORS = {t: _TYPE_COLORS.get(t, Colors.DIM) for t in COMMIT_TYPES}

_TYPE_PREFIX = re.compile(r'^(\w+)(\([^)]*\))?(!)?:')


def colorize_commit_type(subject: str) -> str:
    """Color the conventional commit prefix of ``subject``.

    A breaking-change marker ('!') is shown in red whatever the type.
    """
    if not COLORS_ENABLED:
        return subject
    match = _TYPE_PREFIX.match(subject)
    if not match or match.group(1) not in COMMIT_TYPE_COLORS:
        return subject

    commit_type, scope, bang = match.groups()
    prefix = _colorize(commit_type + (scope or ''), Colors.BOLD, COMMIT_TYPE_COLORS[commit_type])
    if bang:
        prefix += _colorize(bang, Colors.BOLD, Colors.RED)
    return prefix + _colorize(':', Colors.BOLD) + subject[match.end():]


def frame_message(message: str) -> str:
    """Return ``message`` between two rules as wide as its longest line."""
    lines = message.split('\n')
    width = max((len(line) for line in lines), default=0) or 40
    rule = dim(RULE * width)
    subject = colorize_commit_type(lines[0])
    if subject == lines[0]:
        subject = bold(subject)
    return '\n'.join([rule, subject, *lines[1:], rule])


class Spinner:
    """Animated spinner on stderr while waiting for the API. Use as context manager.

    Shows ``label`` and the seconds elapsed.
    Does nothing when stderr is not a terminal.
    """
    FRAMES_UNICODE = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
    FRAMES_ASCII = ['-', '\\', '|', '/']

    def __init__(self, label: str = 'Asking OpenAI'):
        self.label = label
        self._thread = None
        self._stop_event = threading.Event()
        self._frames = self.FRAMES_UNICODE if UNICODE_ENABLED else self.FRAMES_ASCII

    def _spin(self):
        started = time.monotonic()
        idx = 0
        while not self._stop_event.is_set():
            frame = self._frames[idx % len(self._frames)]
            elapsed = time.monotonic() - started
            print(f'\r\033[K{frame} {self.label} ({elapsed:.1f}s)', end='', flush=True, file=sys.stderr)
            idx += 1
            self._stop_event.wait(0.08)

    def __enter__(self):
        if hasattr(sys.stderr, 'isatty') and sys.stderr.isatty():
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *args):
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None
            print('\r\033[K', end='', flush=True, file=sys.stderr)


__all__ = [
    "Colors", "COLORS_ENABLED", "STDERR_COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "RULE",
    "success", "info", "dim", "bold",
    "print_success", "print_error",
    "colorize_commit_type", "frame_message", "Spinner", "COMMIT_TYPE_COLORS",
]
