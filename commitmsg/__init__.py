"""
Commit Message Suggester

Suggest a commit message for a git diff using the OpenAI chat completion API.
"""

from enum import Enum

__version__ = "1.0.0"


class Style(str, Enum):
    """Tone of the generated commit message."""
    DESCRIPTIVE_NEUTRAL = "descriptive-and-neutral"
    CONVERSATIONAL_CASUAL = "conversational-and-casual"
    LIST_BASED = "list-based"
    PROBLEM_SOLUTION = "problem-solution"


DEFAULT_STYLE = Style.DESCRIPTIVE_NEUTRAL

# Centralized style descriptions - single source of truth
# Used by: prompts/builder.py (system prompt), cli/commands.py (setup wizard)
STYLE_DESCRIPTIONS = {
    Style.DESCRIPTIVE_NEUTRAL: (
        "Use a descriptive and neutral tone. State plainly what changed and why, "
        "without opinions or filler."
    ),
    Style.CONVERSATIONAL_CASUAL: (
        "Use a conversational and casual tone, as if explaining the change to a "
        "teammate. Keep it friendly but still precise."
    ),
    Style.LIST_BASED: (
        "Write the body as a bulleted list. Each bullet starts with '- ' and "
        "describes one change."
    ),
    Style.PROBLEM_SOLUTION: (
        "Write the body as two paragraphs. The first starts with 'Problem:' and "
        "describes what was wrong or missing. The second starts with 'Solution:' "
        "and describes how this commit addresses it."
    ),
}

STYLE_NAMES = [style.value for style in Style]

# Conventional commit types offered to the model when compliance is requested
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'refactor': 'Code restructuring without behavior change',
    'chore': 'Maintenance tasks, dependencies, tooling',
    'docs': 'Documentation only changes',
    'test': 'Adding or updating tests',
    'style': 'Formatting, whitespace, no code change',
    'perf': 'Performance improvement',
    'ci': 'CI/CD configuration changes',
    'build': 'Build system or external dependency changes',
}
