"""Closed category vocabulary and logger naming rules."""

from __future__ import annotations

ROOT_NAMESPACE = "persistence.logging"
DEFAULT_CATEGORY = "default"

CATEGORIES: tuple[str, ...] = (
    "cache",
    "connection",
    "ddl",
    "dms",
    "ejb",
    "event",
    "jpa",
    "jpars",
    "metadata",
    "metamodel",
    "misc",
    "monitoring",
    "moxy",
    "properties",
    "propagation",
    "query",
    "sequencing",
    "server",
    "sql",
    "transaction",
    "weaver",
)
# Well-known categories published by the host framework; DEFAULT_CATEGORY is not part of it.


def namespaced(category: str) -> str:
    """Return the facility logger name for ``category``.

    Examples
    --------
    >>> namespaced("sql")
    'persistence.logging.sql'
    """

    return f"{ROOT_NAMESPACE}.{category}"


def is_blank(category: object) -> bool:
    """Return ``True`` for ``None``, non-strings, and empty or whitespace-only names."""

    return not isinstance(category, str) or not category.strip()


__all__ = ["CATEGORIES", "DEFAULT_CATEGORY", "ROOT_NAMESPACE", "is_blank", "namespaced"]
