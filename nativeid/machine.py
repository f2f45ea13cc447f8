"""Convenience entry points combining the platform reader and the protector."""

from __future__ import annotations

from .platforms import read_raw_id
from .protector import protect


def machine_id() -> str:
    """Return the raw, OS-native identifier of this machine."""
    return read_raw_id()


def protected_id(app_tag: str) -> str:
    """Return the identifier of this machine scoped to ``app_tag``.

    Lookup errors propagate unchanged and no hashing takes place.
    """
    raw_id = machine_id()
    return protect(app_tag, raw_id)


__all__ = ["machine_id", "protected_id"]
