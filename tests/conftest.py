# Copyright (c) 2025 knguyen1
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Shared pytest fixtures.

HTTP is never touched: clients get a `FakeOpener` that records the prepared
`urllib.request.Request` objects and replays canned responses or errors.
"""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from urllib.request import Request


class FakeResponse:
    """Minimal stand-in for ``http.client.HTTPResponse``."""

    def __init__(
        self,
        status: int = 200,
        body: bytes = b"{}",
        read_error: BaseException | None = None,
    ) -> None:
        self.status = status
        self._body = body
        self._read_error = read_error
        self.reads = 0
        self.closed = False

    def read(self) -> bytes:
        self.reads += 1
        if self._read_error is not None:
            raise self._read_error
        return self._body

    def close(self) -> None:
        self.closed = True


class FakeOpener:
    """Opener double returning queued outcomes in order.

    The last outcome is repeated once the queue is exhausted.
    """

    def __init__(self, *outcomes: FakeResponse | BaseException) -> None:
        self._outcomes = list(outcomes) or [FakeResponse()]
        self.requests: list[Request] = []
        self.timeouts: list[Any] = []

    def open(self, req: Request, timeout: Any = None) -> FakeResponse:
        self.requests.append(req)
        self.timeouts.append(timeout)
        if len(self._outcomes) > 1:
            outcome = self._outcomes.pop(0)
        else:
            outcome = self._outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    @property
    def last(self) -> Request:
        return self.requests[-1]


@pytest.fixture
def config_doc() -> Callable[..., dict[str, Any]]:
    """Factory for configuration documents with overridable ``api`` fields."""

    def _make(
        *,
        baseurl: str = "https://api.example.org",
        version: str = "/3",
        key: str = "abc",
    ) -> dict[str, Any]:
        return {
            "api": {"baseurl": baseurl, "version": version, "key": key},
            "account": {"username": "foo", "password": "bar"},
        }

    return _make


@pytest.fixture
def config_stream(
    config_doc: Callable[..., dict[str, Any]],
) -> Callable[..., io.StringIO]:
    """Factory returning the configuration document as a text stream."""

    def _make(**kwargs: str) -> io.StringIO:
        return io.StringIO(json.dumps(config_doc(**kwargs)))

    return _make


@pytest.fixture
def make_opener() -> Callable[..., FakeOpener]:
    """Factory for `FakeOpener` instances."""

    return FakeOpener


@pytest.fixture
def make_response() -> Callable[..., FakeResponse]:
    """Factory for `FakeResponse` instances."""

    return FakeResponse
