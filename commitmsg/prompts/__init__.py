"""Prompt Building Package"""

from commitmsg.prompts.builder import (
    EXAMPLE_DIFF,
    EXAMPLE_TEMPLATES,
    MessageConfig,
    PromptBuilder,
    UNSURE_MARKER,
    resolve_style,
)

__all__ = [
    "EXAMPLE_DIFF",
    "EXAMPLE_TEMPLATES",
    "MessageConfig",
    "PromptBuilder",
    "UNSURE_MARKER",
    "resolve_style",
]
