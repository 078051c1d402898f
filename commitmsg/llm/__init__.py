"""LLM Client Package"""

from commitmsg.llm.base import (
    DecodeError,
    ErrorKind,
    LLMError,
    Message,
    RequestTimeoutError,
    Role,
    TransportError,
    ValidationError,
)
from commitmsg.llm.openai import (
    CHAT_COMPLETION_URL,
    ChatCompletionRequest,
    ChatCompletionResponse,
    OpenAIClient,
    Usage,
)
from commitmsg.llm.pricing import GPT_3_5_TURBO, MODEL_PRICING, cost

__all__ = [
    "CHAT_COMPLETION_URL",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "DecodeError",
    "ErrorKind",
    "GPT_3_5_TURBO",
    "LLMError",
    "MODEL_PRICING",
    "Message",
    "OpenAIClient",
    "RequestTimeoutError",
    "Role",
    "TransportError",
    "Usage",
    "ValidationError",
    "cost",
]
