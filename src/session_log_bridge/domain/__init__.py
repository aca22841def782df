"""Domain vocabulary shared by the bridge: severities, categories, entries."""

from __future__ import annotations

from .categories import CATEGORIES, DEFAULT_CATEGORY, ROOT_NAMESPACE, namespaced
from .entry import SessionLogEntry
from .levels import TRACE, SessionLevel, SeverityTranslator, TargetLevel

__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "ROOT_NAMESPACE",
    "SessionLevel",
    "SessionLogEntry",
    "SeverityTranslator",
    "TRACE",
    "TargetLevel",
    "namespaced",
]
