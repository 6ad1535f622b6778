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

"""Core errors module."""

from __future__ import annotations

from typing import Final


class TMDbError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(TMDbError, ValueError):
    """Configuration could not be parsed into the expected schema."""


class BadRequestError(TMDbError):
    """The service answered with an HTTP status of 400 or above.

    Parameters
    ----------
    resource:
        Rendered endpoint path that was requested.
    status_code:
        HTTP status code of the response.

    Notes
    -----
    Two bad-request errors compare equal when their status codes match; the
    resource is not compared, so ``err == NOT_FOUND`` matches any
    404 response.
    """

    def __init__(self, resource: str, status_code: int) -> None:
        super().__init__(resource, status_code)
        self.resource = resource
        self.status_code = status_code

    def __str__(self) -> str:
        return f"tmdb: bad request: {self.status_code}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BadRequestError):
            return NotImplemented
        return self.status_code == other.status_code

    def __hash__(self) -> int:
        return hash((BadRequestError, self.status_code))

    @property
    def is_not_found(self) -> bool:
        """Whether the response was a 404."""
        return self.status_code == 404


# Sentinel matching any 404 response
NOT_FOUND: Final[BadRequestError] = BadRequestError("", 404)
