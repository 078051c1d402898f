"""LLM Base Classes and Shared Code"""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Author of a chat message.

    A conversation usually starts with a system message, followed by
    alternating user and assistant messages. Assistant messages written by
    hand serve as examples of the desired answer.
    """
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single chat message sent to the model."""
    role: Role
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role.value, "content": self.content}


class ErrorKind(str, Enum):
    """Closed set of failure kinds callers can branch on."""
    VALIDATION = "validation"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    DECODE = "decode"
    UNEXPECTED_STATE = "unexpected_state"
    UNSURE = "unsure"


class LLMError(Exception):
    """Raised when LLM operations fail."""
    kind: ErrorKind = ErrorKind.TRANSPORT


class ValidationError(LLMError):
    """Invalid parameters, rejected before any request is made."""
    kind = ErrorKind.VALIDATION


class TransportError(LLMError):
    """The request could not be completed or returned a non-200 status."""
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class RequestTimeoutError(LLMError):
    """The caller's deadline elapsed before a response arrived."""
    kind = ErrorKind.TIMEOUT


class DecodeError(LLMError):
    """The provider answered with a body we could not decode."""
    kind = ErrorKind.DECODE
