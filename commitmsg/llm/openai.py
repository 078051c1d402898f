"""OpenAI Chat Completion Client

https://platform.openai.com/docs/guides/chat/introduction
"""

import http.client
import json
import logging
import socket
import time
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Sequence

from commitmsg.llm import pricing
from commitmsg.llm.base import (
    DecodeError,
    Message,
    RequestTimeoutError,
    TransportError,
    ValidationError,
)

logger = logging.getLogger(__name__)

CHAT_COMPLETION_URL = "https://api.openai.com/v1/chat/completions"
READ_CHUNK_SIZE = 8192


@dataclass
class ChatCompletionRequest:
    """Body of a chat completion request.

    temperature decides how deterministic the model is. It must lie in
    [0, 1]: lower values give more focused completions, higher values more
    varied ones.
    """
    model: str
    messages: Sequence[Message]
    temperature: float

    def __post_init__(self):
        if not 0 <= self.temperature <= 1:
            raise ValidationError(
                f"temperature must be between 0 and 1 (inclusive), got {self.temperature}"
            )

    def to_json(self) -> bytes:
        payload = {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
        }
        return json.dumps(payload).encode('utf-8')


@dataclass
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class ChatCompletionResponse:
    """Decoded chat completion. ``cost`` is in dollars."""
    created: datetime
    model: str
    cost: float
    messages: list[str] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)


def _require_int(data: dict, key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'{key}' must be an integer, got {value!r}")
    return value


def decode_response(data: dict, model: str) -> ChatCompletionResponse:
    """Turn a raw chat completion body into a ChatCompletionResponse."""
    try:
        created = datetime.fromtimestamp(_require_int(data, "created"), tz=timezone.utc)
        if not isinstance(data["model"], str):
            raise TypeError("'model' must be a string")

        raw_usage = data["usage"]
        usage = Usage(
            prompt_tokens=raw_usage.get("prompt_tokens", 0),
            completion_tokens=raw_usage.get("completion_tokens", 0),
            total_tokens=_require_int(raw_usage, "total_tokens"),
        )

        answers = []
        for choice in data["choices"]:
            content = choice["message"]["content"]
            if not isinstance(content, str):
                raise TypeError("choice content must be a string")
            answers.append(content)
    except (KeyError, TypeError, AttributeError, ValueError, OverflowError, OSError) as e:
        raise DecodeError(f"Unexpected response shape: {e}") from e

    return ChatCompletionResponse(
        created=created,
        model=model,
        cost=pricing.cost(model, usage.total_tokens),
        messages=answers,
        usage=usage,
    )


def _set_read_timeout(response, seconds: float) -> None:
    # http.client keeps the socket behind response.fp (a buffered SocketIO)
    sock = getattr(getattr(getattr(response, "fp", None), "raw", None), "_sock", None)
    if sock is not None:
        sock.settimeout(seconds)


def _read_body(response, deadline: float | None) -> bytes:
    """Read the response body, failing once ``deadline`` has passed."""
    if deadline is None:
        return response.read()

    read1 = getattr(response, "read1", None)
    if read1 is None:
        payload = response.read()
        if time.monotonic() >= deadline:
            raise TimeoutError("deadline passed while reading the response")
        return payload

    chunks = []
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise TimeoutError("deadline passed while reading the response")
        _set_read_timeout(response, remaining)
        chunk = read1(READ_CHUNK_SIZE)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


class OpenAIClient:
    """OpenAI chat completion client.

    ``opener`` performs the HTTP call and defaults to ``urllib.request.urlopen``.
    It is called as ``opener(request, timeout=...)`` and must return a context
    manager exposing ``status`` and ``read()``; ``read1()`` is used when
    present so a deadline can be checked while the body arrives.
    """

    def __init__(self, api_key: str, opener: Callable | None = None, url: str = CHAT_COMPLETION_URL):
        self.api_key = api_key
        self.url = url
        self._opener = opener

    def _build_http_request(self, body: ChatCompletionRequest) -> urllib.request.Request:
        return urllib.request.Request(
            self.url,
            data=body.to_json(),
            method="POST",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
        )

    def _call_api(self, req: urllib.request.Request, timeout: float | None) -> bytes:
        """Make a single API call and return the raw body.

        With a ``timeout`` the whole call, including reading the body, must
        finish before the deadline.
        """
        opener = self._opener or urllib.request.urlopen
        deadline = None if timeout is None else time.monotonic() + timeout
        kwargs = {} if timeout is None else {"timeout": timeout}

        try:
            with opener(req, **kwargs) as response:
                status = response.status
                reason = getattr(response, "reason", "")
                payload = _read_body(response, deadline)
        except urllib.error.HTTPError as e:
            raise TransportError(f"got status {e.code} {e.reason}, expected 200", status=e.code) from e
        except urllib.error.URLError as e:
            if isinstance(e.reason, (socket.timeout, TimeoutError)):
                raise RequestTimeoutError(f"Request timed out after {timeout}s") from e
            raise TransportError(f"could not do request: {e.reason}") from e
        except (socket.timeout, TimeoutError) as e:
            raise RequestTimeoutError(f"Request timed out after {timeout}s") from e
        except http.client.HTTPException as e:
            raise TransportError(f"Incomplete response: {e}") from e
        except OSError as e:
            raise TransportError(f"could not do request: {e}") from e

        if status != 200:
            raise TransportError(f"got status {status} {reason}".rstrip() + ", expected 200", status=status)
        return payload

    def chat_completion_request(
        self,
        messages: Sequence[Message],
        model: str,
        temperature: float,
        timeout: float | None = None,
    ) -> ChatCompletionResponse:
        """Send ``messages`` to ``model`` and return the decoded completion.

        ``timeout`` is the deadline in seconds for the whole call; ``None``
        waits indefinitely and a non-positive value fails immediately.
        """
        body = ChatCompletionRequest(model=model, messages=list(messages), temperature=temperature)

        if timeout is not None and timeout <= 0:
            raise RequestTimeoutError("Deadline already exceeded before the request was sent")

        logger.debug("POST %s model=%s messages=%d temperature=%s", self.url, model, len(body.messages), temperature)
        t0 = time.monotonic()
        payload = self._call_api(self._build_http_request(body), timeout)
        logger.debug("Response received in %.2fs", time.monotonic() - t0)

        try:
            data = json.loads(payload.decode('utf-8'))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"could not decode response: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(f"could not decode response: expected an object, got {type(data).__name__}")

        response = decode_response(data, model)
        logger.debug(
            "Usage: %d total tokens, cost $%.6f, %d choices",
            response.usage.total_tokens, response.cost, len(response.messages),
        )
        return response
