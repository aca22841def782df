"""Application layer: category registry and dispatch use cases."""

from __future__ import annotations

from .use_cases.dispatch import SessionLogDispatcher
from .use_cases.registry import CategoryRegistry

__all__ = ["CategoryRegistry", "SessionLogDispatcher"]
