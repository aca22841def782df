"""Use cases composing the bridge's hot path."""

from __future__ import annotations

from .dispatch import SessionLogDispatcher
from .registry import CategoryRegistry

__all__ = ["CategoryRegistry", "SessionLogDispatcher"]
