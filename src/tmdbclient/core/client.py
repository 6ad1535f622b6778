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

"""Core client module."""

from __future__ import annotations

import logging
from contextlib import closing
from dataclasses import dataclass, field
from http.client import HTTPException
from typing import IO, TYPE_CHECKING, Any, Protocol, runtime_checkable
from urllib.error import HTTPError
from urllib.parse import quote
from urllib.request import OpenerDirector, Request, build_opener

from tmdbclient.core.config import (
    APIClientConfig,
    NormalizedConfig,
    load_config,
    load_config_from_env,
)
from tmdbclient.core.errors import BadRequestError

if TYPE_CHECKING:
    from tmdbclient.core.endpoints import Endpoint

_CONTENT_TYPE = "application/json;charset=utf-8"
_SUPPORTED_VERSIONS = frozenset({"3", "4"})
# characters left as-is when escaping a built URL; "%" keeps existing escapes
_URL_SAFE = "/:?&=%+@,;~!$'()*[]#"


@runtime_checkable
class APIClientContract(Protocol):
    """Client interface, mainly so tests can substitute a double."""

    def build_url(self, endpoint: Endpoint) -> str:
        """Return the absolute request URL for ``endpoint``."""

    def get(self, endpoint: Endpoint) -> bytes:
        """Fetch ``endpoint`` and return the raw response body."""


@dataclass(frozen=True, slots=True)
class APIClient:
    """TMDb client issuing authenticated GET requests.

    Parameters
    ----------
    config:
        Parsed configuration. Kept as given; requests use `normalized`.
    timeout:
        Per-request deadline in seconds. ``None`` or a non-positive value
        disables the deadline.
    opener:
        ``urllib`` opener used to submit requests. Defaults to
        ``urllib.request.build_opener()``.

    Notes
    -----
    Version ``"3"`` authenticates with an ``api_key`` query parameter,
    version ``"4"`` with an ``Authorization: Bearer`` header. Any other
    version sends no credentials at all.
    """

    config: APIClientConfig
    timeout: float | None = None
    opener: OpenerDirector = field(default_factory=build_opener, repr=False)
    _normalized: NormalizedConfig = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Derive normalized settings from `config`."""
        object.__setattr__(
            self, "_normalized", NormalizedConfig.from_config(self.config)
        )
        if self.timeout is not None and self.timeout <= 0:
            object.__setattr__(self, "timeout", None)
        if self._normalized.version not in _SUPPORTED_VERSIONS:
            self._logger.warning(
                "tmdb_unsupported_version",
                extra={
                    "version": self._normalized.version,
                    "baseurl": self._normalized.baseurl,
                },
            )

    @classmethod
    def from_env(
        cls, timeout: float | None = None, opener: OpenerDirector | None = None
    ) -> APIClient:
        """Build a client from ``TMDB_*`` environment variables.

        See `tmdbclient.core.config.load_config_from_env`.
        """
        return _make(load_config_from_env(), timeout, opener)

    @property
    def normalized(self) -> NormalizedConfig:
        """Settings derived from `config` at construction time."""
        return self._normalized

    @property
    def _logger(self) -> logging.Logger:
        return logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    def build_url(self, endpoint: Endpoint) -> str:
        """Return the absolute URL for ``endpoint``.

        Parameters
        ----------
        endpoint:
            Descriptor to render.

        Returns
        -------
        str
            ``{baseurl}/{path}``; for version ``"3"`` the API key is put
            first in the query string and any query rendered by the
            descriptor follows after ``&``.
        """
        cfg = self._normalized
        path = endpoint.render().lstrip("/")

        if cfg.version == "3":
            path, sep, existing = path.partition("?")
            query = f"api_key={cfg.key}"
            if sep:
                query = f"{query}&{existing}"
            return f"{cfg.baseurl}/{path}?{query}"

        return f"{cfg.baseurl}/{path}"

    def get(self, endpoint: Endpoint) -> bytes:
        """Fetch ``endpoint`` and return the raw response body.

        Parameters
        ----------
        endpoint:
            Descriptor to request.

        Returns
        -------
        bytes
            Response body, unparsed.

        Raises
        ------
        BadRequestError
            If the service responds with status 400 or above.
        ValueError
            If the base URL has no usable scheme (``unknown url type``).
        OSError
            On transport failures (``URLError``, ``TimeoutError``, ...).
        http.client.HTTPException
            If the connection breaks mid-response (``IncompleteRead``, ...)
            while reading a successful response.
        """
        resource = endpoint.render()
        req = self._prepare(self.build_url(endpoint))
        self._logger.debug(
            "tmdb_request",
            extra={"resource": resource, "version": self._normalized.version},
        )

        try:
            resp = self.opener.open(req, timeout=self.timeout)  # noqa: S310
        except HTTPError as err:
            # urllib reports 4xx/5xx as an exception that is also the response
            resp = err
        except (OSError, HTTPException):
            self._logger.warning(
                "tmdb_request_failed",
                extra={"resource": resource, "version": self._normalized.version},
                exc_info=True,
            )
            raise

        with closing(resp):
            status = _status_of(resp)
            if status < 400:
                return resp.read()
            self._drain(resp, resource)

        self._logger.warning(
            "tmdb_bad_request",
            extra={"resource": resource, "status_code": status},
        )
        raise BadRequestError(resource, status)

    def _drain(self, resp: Any, resource: str) -> None:
        # a failed read of an error body must not mask the status
        try:
            resp.read()
        except (OSError, HTTPException):
            self._logger.debug(
                "tmdb_error_body_unreadable",
                extra={"resource": resource},
                exc_info=True,
            )

    def _prepare(self, url: str) -> Request:
        # Request() raises ValueError on URLs without a usable scheme
        req = Request(quote(url, safe=_URL_SAFE), method="GET")  # noqa: S310
        if self._normalized.version == "4":
            req.add_header("Authorization", self._normalized.bearer_token())
        req.add_header("Content-Type", _CONTENT_TYPE)
        return req


def new(
    config_source: IO[str] | IO[bytes],
    timeout_seconds: float | None = None,
    *,
    opener: OpenerDirector | None = None,
) -> APIClient:
    """Create a client from a JSON configuration stream.

    Parameters
    ----------
    config_source:
        Stream holding a JSON document shaped like
        ``{"api": {"baseurl", "version", "key"},
        "account": {"username", "password"}}``.
    timeout_seconds:
        Per-request deadline; ``None`` or ``0`` disables it.
    opener:
        Optional ``urllib`` opener; a default one is built otherwise.

    Returns
    -------
    APIClient
        Ready-to-use client.

    Raises
    ------
    ConfigError
        If the stream does not hold a valid configuration.
    OSError
        If reading the stream fails.
    """
    return _make(load_config(config_source), timeout_seconds, opener)


def _make(
    config: APIClientConfig,
    timeout: float | None,
    opener: OpenerDirector | None,
) -> APIClient:
    if opener is None:
        return APIClient(config=config, timeout=timeout)
    return APIClient(config=config, timeout=timeout, opener=opener)


def _status_of(resp: Any) -> int:
    status = getattr(resp, "status", None)
    if status is None:
        status = resp.getcode()
    return int(status)
