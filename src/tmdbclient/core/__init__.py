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

"""Core building blocks: configuration, endpoints, errors and the client."""

from tmdbclient.core.client import APIClient, APIClientContract, new
from tmdbclient.core.config import (
    AccountSection,
    APIClientConfig,
    APISection,
    NormalizedConfig,
    load_config,
    load_config_file,
    load_config_from_env,
)
from tmdbclient.core.endpoints import (
    Endpoint,
    MovieCredits,
    MovieDetails,
    MovieKeywords,
    MovieResource,
    MovieSearch,
    MovieWatchProviders,
)
from tmdbclient.core.errors import NOT_FOUND, BadRequestError, ConfigError, TMDbError

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
