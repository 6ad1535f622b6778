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

"""Minimal client for The Movie Database (TMDb) web API.

Build a client from a JSON configuration with `new`, describe a resource with
one of the endpoint descriptors and fetch it::

    with open("tmdb.json", "rb") as fh:
        client = new(fh, 10)
    body = client.get(MovieDetails("tt0102057"))
"""

from tmdbclient.core import (
    NOT_FOUND,
    AccountSection,
    APIClient,
    APIClientConfig,
    APIClientContract,
    APISection,
    BadRequestError,
    ConfigError,
    Endpoint,
    MovieCredits,
    MovieDetails,
    MovieKeywords,
    MovieResource,
    MovieSearch,
    MovieWatchProviders,
    NormalizedConfig,
    TMDbError,
    load_config,
    load_config_file,
    load_config_from_env,
    new,
)

__all__ = [
    "NOT_FOUND",
    "APIClient",
    "APIClientConfig",
    "APIClientContract",
    "APISection",
    "AccountSection",
    "BadRequestError",
    "ConfigError",
    "Endpoint",
    "MovieCredits",
    "MovieDetails",
    "MovieKeywords",
    "MovieResource",
    "MovieSearch",
    "MovieWatchProviders",
    "NormalizedConfig",
    "TMDbError",
    "load_config",
    "load_config_file",
    "load_config_from_env",
    "new",
]
