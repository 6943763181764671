"""
Ignite thin-protocol connection URL parsing and configuration.

URLs follow ``jdbc:ignite:thin://<host>[:<port>[..<port>]][,<host>...][/<schema>][?k=v&...]``.
IPv6 hosts go in brackets: ``[::1]:10800``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import parse_qs, urlencode

from .dialects.base import DatabaseConnection  # noqa: F401
from .dialects.ignite import IGNITE_DEFAULT_PORT, IgniteDialect
from .errors import ConnectionConfigurationError

_BOOLEAN_OPTIONS = (
    "distributedJoins",
    "enforceJoinOrder",
    "collocated",
    "replicatedOnly",
    "autoCloseServerCursor",
    "lazy",
    "skipReducerOnUpdate",
)
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_REDACTED_KEYS = {"password"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConnectionConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_port(value: str, *, url: str) -> int:
    try:
        port = int(value)
    except ValueError as exc:
        raise ConnectionConfigurationError(f"Invalid port {value!r} in {url!r}") from exc
    if not 0 < port < 65536:
        raise ConnectionConfigurationError(f"Port {port} out of range in {url!r}")
    return port


def _parse_port_range(value: str, *, url: str) -> tuple[int, int | None]:
    start, sep, end = value.partition("..")
    if not sep:
        return _parse_port(value, url=url), None
    first, last = _parse_port(start, url=url), _parse_port(end, url=url)
    if last < first:
        raise ConnectionConfigurationError(f"Port range {value!r} is reversed in {url!r}")
    return first, last


def _parse_address(item: str, *, url: str, default_port: int) -> HostAddress:
    item = item.strip()
    if item.startswith("["):
        host, bracket, remainder = item[1:].partition("]")
        if not bracket or (remainder and not remainder.startswith(":")):
            raise ConnectionConfigurationError(f"Malformed IPv6 host {item!r} in {url!r}")
        sep, port = remainder[:1], remainder[1:]
    else:
        host, sep, port = item.partition(":")
    if not host:
        raise ConnectionConfigurationError(f"Empty host in connection URL: {url!r}")
    if not sep:
        return HostAddress(host, default_port)
    first, last = _parse_port_range(port, url=url)
    return HostAddress(host, first, last)


@dataclass(frozen=True)
class HostAddress:
    host: str
    port: int
    port_range_end: int | None = None

    @property
    def ports(self) -> range:
        return range(self.port, (self.port_range_end or self.port) + 1)

    def __str__(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port_range_end is None:
            return f"{host}:{self.port}"
        return f"{host}:{self.port}..{self.port_range_end}"


@dataclass
class JdbcUrl:
    prefix: str
    addresses: list[HostAddress]
    schema: Optional[str]
    query: dict[str, str] = field(default_factory=dict)

    @property
    def host(self) -> str:
        return self.addresses[0].host

    @property
    def port(self) -> int:
        return self.addresses[0].port

    def redacted(self) -> str:
        """
        Return the URL with credentials masked but structure preserved.
        """

        query = {key: ("***" if key in _REDACTED_KEYS else value) for key, value in self.query.items()}
        result = f"{self.prefix}://" + ",".join(str(address) for address in self.addresses)
        if self.schema:
            result += f"/{self.schema}"
        if query:
            result += f"?{urlencode(query)}"
        return result


def parse_jdbc_url(url: str, *, default_port: int = IGNITE_DEFAULT_PORT) -> JdbcUrl:
    if not url or not url.startswith("jdbc:") or "://" not in url:
        raise ConnectionConfigurationError(f"Not a JDBC connection URL: {url!r}")
    prefix, _, rest = url.partition("://")
    rest, _, query_string = rest.partition("?")
    netloc, _, path = rest.partition("/")
    if not netloc:
        raise ConnectionConfigurationError(f"Connection URL has no host: {url!r}")

    addresses = [
        _parse_address(item, url=url, default_port=default_port) for item in netloc.split(",")
    ]
    # keep ``lazy=`` and friends so flag parsing rejects them
    query = {key: values[0] for key, values in parse_qs(query_string, keep_blank_values=True).items()}
    return JdbcUrl(prefix=prefix, addresses=addresses, schema=path.strip("/") or None, query=query)


@dataclass
class ConnectionConfig:
    """
    Normalized connection configuration for the Ignite thin protocol.
    """

    url: str
    jdbc: JdbcUrl
    username: str | None = None
    password: str | None = None
    flags: dict[str, bool] = field(default_factory=dict)
    options: dict[str, Any] = field(default_factory=dict)
    source: str | None = None

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a connection config by parsing ``url``.

        Only URLs the Ignite dialect recognizes are accepted.
        """

        if not IgniteDialect().matches_url(url):
            raise ConnectionConfigurationError(f"URL is not an Ignite thin URL: {url!r}")
        parsed = parse_jdbc_url(url)
        query = dict(parsed.query)
        username = query.pop("user", None)
        password = query.pop("password", None)
        flags = {key: _parse_bool(query.pop(key), key=key) for key in _BOOLEAN_OPTIONS if key in query}
        options: dict[str, Any] = dict(query)
        options.update(kwargs.pop("options", None) or {})
        return cls(
            url=url,
            jdbc=parsed,
            username=kwargs.pop("username", username),
            password=kwargs.pop("password", password),
            flags=flags,
            options=options,
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "ConnectionConfig":
        value = os.getenv(env_var)
        if not value:
            raise ConnectionConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_url(value, source=env_var, **kwargs)

    @property
    def schema(self) -> str | None:
        return self.jdbc.schema

    def redacted_url(self) -> str:
        return self.jdbc.redacted()

    def descriptive_label(self) -> str:
        redacted = self.redacted_url()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted
