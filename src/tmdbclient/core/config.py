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

"""Core config module."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Final

from tmdbclient.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_BASE_URL: Final[str] = "https://api.themoviedb.org"
DEFAULT_VERSION: Final[str] = "3"


@dataclass(frozen=True, slots=True)
class APISection:
    """The ``api`` section of a client configuration.

    Parameters
    ----------
    baseurl:
        Service root, e.g. ``https://api.themoviedb.org``.
    version:
        API version segment; surrounding slashes are tolerated (``"/3"``).
    key:
        API key (v3) or read access token (v4).
    """

    baseurl: str = ""
    version: str = ""
    key: str = field(default="", repr=False)


@dataclass(frozen=True, slots=True)
class AccountSection:
    """The ``account`` section of a client configuration.

    Parsed and carried along; no request uses these credentials.
    """

    username: str = ""
    password: str = field(default="", repr=False)


@dataclass(frozen=True, slots=True)
class APIClientConfig:
    """Client configuration as read from JSON.

    Parameters
    ----------
    api:
        Endpoint and credential settings.
    account:
        Account credentials.
    """

    api: APISection = field(default_factory=APISection)
    account: AccountSection = field(default_factory=AccountSection)

    @classmethod
    def from_dict(cls, data: object) -> APIClientConfig:
        """Build a configuration from a decoded JSON document.

        Parameters
        ----------
        data:
            Decoded JSON value; must be an object.

        Returns
        -------
        APIClientConfig
            Parsed configuration. Missing keys default to ``""``.

        Raises
        ------
        ConfigError
            If the document, a section, or a field has the wrong type.
        """
        if not isinstance(data, dict):
            msg = f"configuration must be a JSON object, got {type(data).__name__}"
            raise ConfigError(msg)
        api = _section(data, "api")
        account = _section(data, "account")
        return cls(
            api=APISection(
                baseurl=_string(api, "api", "baseurl"),
                version=_string(api, "api", "version"),
                key=_string(api, "api", "key"),
            ),
            account=AccountSection(
                username=_string(account, "account", "username"),
                password=_string(account, "account", "password"),
            ),
        )


@dataclass(frozen=True, slots=True)
class NormalizedConfig:
    """Ready-to-use settings derived from an `APIClientConfig`.

    Parameters
    ----------
    baseurl:
        Service root joined with the version segment, without stray slashes.
    key:
        API key or bearer token.
    version:
        Version segment with slashes trimmed.
    """

    baseurl: str
    key: str = field(repr=False)
    version: str

    @classmethod
    def from_config(cls, config: APIClientConfig) -> NormalizedConfig:
        """Trim and join the ``api`` section of ``config``."""
        version = config.api.version.strip("/")
        return cls(
            baseurl=config.api.baseurl.strip("/") + "/" + version,
            key=config.api.key,
            version=version,
        )

    def bearer_token(self) -> str:
        """Return the ``Authorization`` header value for v4 requests."""
        return f"Bearer {self.key}"


def load_config(source: IO[str] | IO[bytes]) -> APIClientConfig:
    """Read a JSON configuration from a file-like object.

    Parameters
    ----------
    source:
        Text or binary stream; it is read to the end.

    Returns
    -------
    APIClientConfig
        Parsed configuration.

    Raises
    ------
    ConfigError
        If the content is not valid JSON or does not match the schema.
    OSError
        If reading the stream fails.
    """
    raw = source.read()
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        msg = f"configuration is not valid JSON: {exc}"
        raise ConfigError(msg) from exc
    return APIClientConfig.from_dict(data)


def load_config_file(path: str | os.PathLike[str]) -> APIClientConfig:
    """Read a JSON configuration from ``path``."""
    with Path(path).open("rb") as fh:
        return load_config(fh)


def load_config_from_env() -> APIClientConfig:
    """Load configuration from environment variables.

    Environment
    ----
    TMDB_API_KEY:
        API key or read access token.
    TMDB_API_VERSION:
        API version, defaults to ``"3"``.
    TMDB_BASE_URL:
        Service root, defaults to ``https://api.themoviedb.org``.
    TMDB_USERNAME, TMDB_PASSWORD:
        Account credentials.

    Returns
    -------
    APIClientConfig
        Loaded configuration object.
    """
    return APIClientConfig(
        api=APISection(
            baseurl=os.getenv("TMDB_BASE_URL", DEFAULT_BASE_URL),
            version=os.getenv("TMDB_API_VERSION", DEFAULT_VERSION),
            key=os.getenv("TMDB_API_KEY", ""),
        ),
        account=AccountSection(
            username=os.getenv("TMDB_USERNAME", ""),
            password=os.getenv("TMDB_PASSWORD", ""),
        ),
    )


def _lookup(obj: Mapping[str, Any], name: str) -> Any:
    # exact key wins, otherwise first case-insensitive match
    if name in obj:
        return obj[name]
    for key, value in obj.items():
        if key.lower() == name:
            return value
    return None


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = _lookup(data, name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{name}' must be a JSON object, got {type(value).__name__}"
        raise ConfigError(msg)
    return value


def _string(section: Mapping[str, Any], section_name: str, name: str) -> str:
    value = _lookup(section, name)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"'{section_name}.{name}' must be a string, got {type(value).__name__}"
        raise ConfigError(msg)
    return value
