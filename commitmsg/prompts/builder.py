"""Prompt Builder - Construct the few-shot conversation for commit message generation."""

from dataclasses import dataclass

from commitmsg import COMMIT_TYPES, DEFAULT_STYLE, STYLE_DESCRIPTIONS, Style
from commitmsg.llm.base import Message, Role, ValidationError

MAX_SUBJECT_LENGTH = 50
BODY_WRAP_WIDTH = 72

# Marker the model is told to answer with when it cannot describe the change
UNSURE_MARKER = "unsure"

EXAMPLE_DIFF = """\
diff --git a/README.md b/README.md
new file mode 100644
index 0000000..ca34b6a
--- /dev/null
+++ b/README.md
@@ -0,0 +1,6 @@
+# Commit Message
+
+Create a commit message suggestion from the git diff using the openAI API.
+
+Note that this means that filename and lines changed is sent to openAI. If that
+bothers you - don't use this tool."""

# Example answer components for EXAMPLE_DIFF
_SUBJECT_DESCRIPTIVE = "Add README describing the tool"
_SUBJECT_CONVERSATIONAL = "Add a README so folks know what this does"
_SUBJECT_LIST = "Add README for the commit message tool"
_SUBJECT_PROBLEM = "Add README on tool usage and data sharing"

_BODY_DESCRIPTIVE = """\
Introduce a README.md that describes how the tool suggests a commit
message from a git diff using the OpenAI API. It also notes that file
names and changed lines are sent to OpenAI."""

_BODY_CONVERSATIONAL = """\
The repo didn't say what the tool does, so this adds a README.md that
walks through how it turns your git diff into a commit message with the
OpenAI API. Heads up: it also calls out that file names and changed
lines get sent to OpenAI."""

_BODY_LIST = """\
- Describe how commit messages are suggested from a git diff
- Explain that the OpenAI API generates the suggestion
- Warn that file names and changed lines are sent to OpenAI"""

_BODY_PROBLEM = """\
Problem: The repository had no documentation, so it was unclear what
the tool does and which data it shares with OpenAI.

Solution: Add a README.md that explains how commit messages are
suggested from a git diff and warns that file names and changed lines
are sent to the OpenAI API."""

_EXAMPLE_TYPE = "docs"

# Lookup table: style -> (subject, body)
EXAMPLE_TEMPLATES: dict[Style, tuple[str, str]] = {
    Style.DESCRIPTIVE_NEUTRAL: (_SUBJECT_DESCRIPTIVE, _BODY_DESCRIPTIVE),
    Style.CONVERSATIONAL_CASUAL: (_SUBJECT_CONVERSATIONAL, _BODY_CONVERSATIONAL),
    Style.LIST_BASED: (_SUBJECT_LIST, _BODY_LIST),
    Style.PROBLEM_SOLUTION: (_SUBJECT_PROBLEM, _BODY_PROBLEM),
}


@dataclass(frozen=True)
class MessageConfig:
    """Tone and format of the requested commit message."""
    style: Style | str = DEFAULT_STYLE
    conventional_commit: bool = False


def resolve_style(value: Style | str) -> Style:
    """Return the Style for ``value`` or raise ValidationError."""
    try:
        return Style(value)
    except ValueError:
        valid = ", ".join(s.value for s in Style)
        raise ValidationError(f"Unknown style '{value}'. Use one of: {valid}") from None


class PromptBuilder:
    """Builds the four-message few-shot conversation sent to the model.

    The order never changes: system instructions, the example diff, the
    example answer, then the diff to describe.
    """

    def build(self, git_diff: str, config: MessageConfig | None = None) -> list[Message]:
        config = config or MessageConfig()
        style = resolve_style(config.style)
        return [
            Message(Role.SYSTEM, self._build_system_prompt(style, config.conventional_commit)),
            Message(Role.USER, EXAMPLE_DIFF),
            Message(Role.ASSISTANT, self._build_example_answer(style, config.conventional_commit)),
            Message(Role.USER, git_diff),
        ]

    def _build_system_prompt(self, style: Style, conventional_commit: bool) -> str:
        sections = [
            self._build_role_section(),
            self._build_format_section(),
            STYLE_DESCRIPTIONS[style],
            self._build_conventional_section() if conventional_commit else "",
            self._build_unsure_section(),
        ]
        return "\n\n".join(filter(None, sections))

    def _build_role_section(self) -> str:
        return (
            "You are a helpful assistant that suggests git commit messages. "
            "The commit message should explain the changes made in the files. "
            "Only respond with the commit subject and the commit body separated "
            "by a blank line."
        )

    def _build_format_section(self) -> str:
        return f"""Format rules:
- The subject is at most {MAX_SUBJECT_LENGTH} characters long
- The subject uses the imperative mood ("Add", not "Added" or "Adds")
- Separate the subject from the body with a blank line
- Wrap the body at {BODY_WRAP_WIDTH} characters"""

    def _build_conventional_section(self) -> str:
        types_list = "\n".join(f"  - {t}: {desc}" for t, desc in COMMIT_TYPES.items())
        return f"""Follow the Conventional Commits specification. Prefix the subject with the most appropriate type:
{types_list}
Denote breaking changes with a '!' after the type, e.g. 'feat!: drop support for v1 tokens'."""

    def _build_unsure_section(self) -> str:
        return (
            f"If you cannot tell what the changes do, answer with the single word "
            f"'{UNSURE_MARKER}' and nothing else."
        )

    def _build_example_answer(self, style: Style, conventional_commit: bool) -> str:
        subject, body = EXAMPLE_TEMPLATES[style]
        if conventional_commit:
            subject = f"{_EXAMPLE_TYPE}: {subject[0].lower()}{subject[1:]}"
        return f"{subject}\n\n{body}"
