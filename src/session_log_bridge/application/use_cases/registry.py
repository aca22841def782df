"""Category registry resolving host categories to facility logger handles.

Purpose
-------
Create one facility logger per well-known category (plus the default
category) when the bridge starts, then answer lookups without ever failing.

Contents
--------
* :class:`CategoryRegistry` – eager, read-only category → handle mapping.

System Role
-----------
Leaf component consulted by :class:`~session_log_bridge.application.use_cases.dispatch.SessionLogDispatcher`
on every call. Because unknown names fall back to the default handle, the
dispatcher has no missing-logger branch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from session_log_bridge.application.ports.facility import LoggerFactoryPort, LoggerHandle
from session_log_bridge.domain.categories import CATEGORIES, DEFAULT_CATEGORY, is_blank, namespaced

logger = logging.getLogger(__name__)


class CategoryRegistry:
    """Eagerly built mapping from category name to logger handle.

    Parameters
    ----------
    factory:
        Facility factory used once per category during construction.
    categories:
        Well-known category names; defaults to the host framework's set.

    Examples
    --------
    >>> class Handle:
    ...     def __init__(self, name):
    ...         self.name = name
    >>> class Factory:
    ...     def get_logger(self, name):
    ...         return Handle(name)
    >>> registry = CategoryRegistry(Factory())
    >>> registry.resolve("sql").name
    'persistence.logging.sql'
    >>> registry.resolve("   ").name
    'persistence.logging.default'
    """

    def __init__(self, factory: LoggerFactoryPort, categories: Iterable[str] = CATEGORIES) -> None:
        handles: dict[str, LoggerHandle] = {}
        names: dict[str, str] = {}
        for category in categories:
            names[category] = namespaced(category)
            handles[category] = factory.get_logger(names[category])
        names[DEFAULT_CATEGORY] = namespaced(DEFAULT_CATEGORY)
        handles[DEFAULT_CATEGORY] = factory.get_logger(names[DEFAULT_CATEGORY])
        self._handles = MappingProxyType(handles)
        self._names = MappingProxyType(names)
        logger.debug("category registry built", extra={"categories": len(handles)})

    def normalise(self, category: str | None) -> str:
        """Return ``category`` if registered, otherwise the default category."""

        if is_blank(category) or category not in self._handles:
            return DEFAULT_CATEGORY
        return category  # type: ignore[return-value]

    def resolve(self, category: str | None) -> LoggerHandle:
        """Return the handle for ``category``, falling back to the default handle."""

        return self._handles[self.normalise(category)]

    def handle_name(self, category: str | None) -> str:
        """Return the namespaced logger name ``category`` resolves to."""

        return self._names[self.normalise(category)]

    def names(self) -> tuple[str, ...]:
        """Return registered categories in registration order, default last."""

        return tuple(self._handles)

    def __contains__(self, category: object) -> bool:
        return category in self._handles

    def __len__(self) -> int:
        return len(self._handles)


__all__ = ["CategoryRegistry"]
