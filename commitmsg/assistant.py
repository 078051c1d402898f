"""Commit Message Assistant - turn a git diff into a single commit message suggestion."""

import logging
from dataclasses import dataclass

from commitmsg.llm import GPT_3_5_TURBO, ErrorKind, LLMError, OpenAIClient
from commitmsg.prompts import MessageConfig, PromptBuilder, UNSURE_MARKER

logger = logging.getLogger(__name__)

MODEL = GPT_3_5_TURBO
# Low temperature keeps completions focused and close to the examples
TEMPERATURE = 0.2


class UnexpectedStateError(LLMError):
    """The provider returned a number of answers other than one."""
    kind = ErrorKind.UNEXPECTED_STATE

    def __init__(self, count: int):
        super().__init__(f"unexpected number of messages returned, got {count}")
        self.count = count


class UnsureError(LLMError):
    """The model signalled it could not describe the change."""
    kind = ErrorKind.UNSURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass
class CommitMessageResult:
    """Suggested commit message. ``cost`` is in cents."""
    message: str
    cost: float


class CommitAssistant:
    """Suggests commit messages using a chat completion client."""

    def __init__(self, client: OpenAIClient, builder: PromptBuilder | None = None):
        self.client = client
        self.builder = builder or PromptBuilder()

    def get_commit_message(
        self,
        git_diff: str,
        config: MessageConfig | None = None,
        timeout: float | None = None,
    ) -> CommitMessageResult:
        """Ask the model for a commit message describing ``git_diff``.

        Raises ValidationError for an unknown style, the client's errors for
        failed requests, UnexpectedStateError when the answer count is not
        one and UnsureError when the model answers with the unsure marker.
        """
        messages = self.builder.build(git_diff, config)

        response = self.client.chat_completion_request(messages, MODEL, TEMPERATURE, timeout=timeout)

        if len(response.messages) != 1:
            raise UnexpectedStateError(len(response.messages))

        message = response.messages[0]
        if UNSURE_MARKER in message:
            logger.debug("Model answered with the unsure marker")
            raise UnsureError(message)

        return CommitMessageResult(message=message, cost=response.cost * 100)
