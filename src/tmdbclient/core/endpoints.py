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

"""Core endpoints module.

Each descriptor names one TMDb resource and renders it to the request path
(and query string, for search) that `APIClient` appends to the base URL.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable
from urllib.parse import urlencode


@runtime_checkable
class Endpoint(Protocol):
    """Anything that renders to a request path.

    Notes
    -----
    Callers may define their own descriptors; only `render` is required.
    """

    def render(self) -> str:
        """Return the request path, starting with ``/``."""


@dataclass(frozen=True, slots=True)
class MovieResource:
    """Base descriptor for ``/movie/{id}`` resources.

    Parameters
    ----------
    movie_id:
        TMDb numeric ID or IMDb ``tt``-prefixed ID. Not validated.
    """

    resource_uri: ClassVar[str] = "/movie/%s"

    movie_id: str | int

    def render(self) -> str:
        """Substitute `movie_id` into `resource_uri`."""
        return self.resource_uri % (self.movie_id,)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class MovieDetails(MovieResource):
    """Primary information about a movie."""

    resource_uri: ClassVar[str] = "/movie/%s"


@dataclass(frozen=True, slots=True)
class MovieKeywords(MovieResource):
    """Keywords that have been added to a movie."""

    resource_uri: ClassVar[str] = "/movie/%s/keywords"


@dataclass(frozen=True, slots=True)
class MovieWatchProviders(MovieResource):
    """Streaming, rental and purchase providers for a movie."""

    resource_uri: ClassVar[str] = "/movie/%s/watch/providers"


@dataclass(frozen=True, slots=True)
class MovieCredits(MovieResource):
    """Cast and crew of a movie."""

    resource_uri: ClassVar[str] = "/movie/%s/credits"


@dataclass(frozen=True, slots=True)
class MovieSearch:
    """Search movies by title.

    Parameters
    ----------
    query:
        Free-form title query.
    language:
        BCP-47 language tag for localized results.
    include_adult:
        Whether adult titles are returned.
    page:
        1-based results page.
    region:
        ISO-3166-1 code used to filter release dates.
    year:
        Release year filter (any release).
    primary_release_year:
        Primary release year filter.
    """

    resource_uri: ClassVar[str] = "/search/movie"

    query: str
    language: str = "en-US"
    include_adult: bool = False
    page: int = 1
    region: str | None = None
    year: int | None = None
    primary_release_year: int | None = None

    def params(self) -> list[tuple[str, Any]]:
        """Return query parameters in rendering order, skipping unset ones."""
        params: list[tuple[str, Any]] = [
            ("query", self.query),
            ("language", self.language),
            ("include_adult", "true" if self.include_adult else "false"),
            ("page", self.page),
        ]
        optional = (
            ("region", self.region),
            ("year", self.year),
            ("primary_release_year", self.primary_release_year),
        )
        params.extend((k, v) for k, v in optional if v is not None)
        return params

    def render(self) -> str:
        """Return ``/search/movie`` followed by the encoded query string."""
        return self.resource_uri + "?" + urlencode(self.params())

    def __str__(self) -> str:
        return self.render()
