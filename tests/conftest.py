"""Shared fixtures: a fake HTTP opener standing in for urllib.request.urlopen."""

import json
import time

import pytest


class FakeResponse:
    """Minimal stand-in for http.client.HTTPResponse."""

    def __init__(self, status=200, body=b"", reason="OK", delay=0):
        self.status = status
        self.reason = reason
        self._body = body
        self._delay = delay

    def read(self):
        if self._delay:
            time.sleep(self._delay)
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


class FakeOpener:
    """Records every request and replays a canned response or exception."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse()
        self.exc = exc
        self.requests = []
        self.timeouts = []

    def __call__(self, req, timeout=None):
        self.requests.append(req)
        self.timeouts.append(timeout)
        if self.exc is not None:
            raise self.exc
        return self.response

    @property
    def called(self):
        return bool(self.requests)

    def sent_json(self, index=-1):
        return json.loads(self.requests[index].data.decode('utf-8'))


def _completion_body(contents, total_tokens=1000, created=1680000000, model="gpt-3.5-turbo-0301"):
    """Build a chat completion response body with one choice per content."""
    return {
        "id": "chatcmpl-abc123",
        "object": "chat.completion",
        "created": created,
        "model": model,
        "usage": {
            "prompt_tokens": total_tokens // 2,
            "completion_tokens": total_tokens - total_tokens // 2,
            "total_tokens": total_tokens,
        },
        "choices": [
            {
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
                "index": i,
            }
            for i, content in enumerate(contents)
        ],
    }


@pytest.fixture
def make_opener():
    """Return a factory building a FakeOpener from choice contents or raw data."""
    def _make(contents=None, status=200, body=None, exc=None, delay=0, **kwargs):
        if body is None:
            body = _completion_body(contents if contents is not None else ["feat: add X"], **kwargs)
        if not isinstance(body, bytes):
            body = json.dumps(body).encode('utf-8')
        return FakeOpener(response=FakeResponse(status=status, body=body, delay=delay), exc=exc)
    return _make


@pytest.fixture
def completion_body():
    """Return the chat completion body builder for tests that edit raw data."""
    return _completion_body
