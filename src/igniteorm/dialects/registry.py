"""
Explicit dialect registry consulted by the migration host.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from ..errors import DialectMismatchError, DialectRegistrationError, UnknownDialectError
from ..utils import get_logger
from .base import DatabaseConnection, Dialect
from .ignite import get_ignite_dialect

BUILTIN_DIALECTS: tuple[Callable[[], Dialect], ...] = (get_ignite_dialect,)


class DialectRegistry:
    """
    Maps dialect short names to dialect instances.

    Resolution walks dialects by descending priority, then registration order.
    """

    def __init__(self, dialects: Iterable[Dialect] = ()) -> None:
        self._dialects: dict[str, Dialect] = {}
        self.logger = get_logger("dialects.registry")
        for dialect in dialects:
            self.register(dialect)

    def register(self, dialect: Dialect) -> Dialect:
        key = dialect.short_name
        if key in self._dialects:
            raise DialectRegistrationError(f"Dialect '{key}' is already registered")
        self._dialects[key] = dialect
        self.logger.debug(
            "Registered dialect %s (priority=%s, capabilities=%s)",
            key,
            dialect.priority,
            dialect.capabilities.as_dict(),
        )
        return dialect

    def get(self, short_name: str) -> Dialect:
        try:
            return self._dialects[short_name]
        except KeyError as exc:
            available = ", ".join(sorted(self._dialects)) or "none"
            raise UnknownDialectError(
                f"Unsupported dialect: {short_name}. Available: {available}"
            ) from exc

    def names(self) -> list[str]:
        return list(self._dialects)

    def __contains__(self, short_name: object) -> bool:
        return short_name in self._dialects

    def __iter__(self) -> Iterator[Dialect]:
        return iter(self._ordered())

    def __len__(self) -> int:
        return len(self._dialects)

    def _ordered(self) -> list[Dialect]:
        # sorted() is stable, so equal priorities keep registration order.
        return sorted(self._dialects.values(), key=lambda dialect: -dialect.priority)

    def for_url(self, url: str) -> Dialect | None:
        for dialect in self._ordered():
            if dialect.matches_url(url):
                self.logger.debug("URL matched dialect %s", dialect.short_name)
                return dialect
        return None

    def for_connection(self, connection: DatabaseConnection) -> Dialect:
        """
        Return the first dialect that accepts ``connection``.

        Errors raised while querying the connection propagate unchanged.
        """

        for dialect in self._ordered():
            if dialect.is_correct_database_implementation(connection):
                self.logger.info("Resolved connection to dialect %s", dialect.short_name)
                return dialect
            self.logger.debug("Dialect %s rejected connection", dialect.short_name)
        raise DialectMismatchError(
            f"No registered dialect accepts the connection. Tried: {', '.join(self.names()) or 'none'}"
        )


def default_registry() -> DialectRegistry:
    return DialectRegistry(factory() for factory in BUILTIN_DIALECTS)
