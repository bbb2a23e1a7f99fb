"""Sole ownership of an object that can be handed over or dropped."""

from __future__ import annotations

from typing import Any


class Owner:
    """Holds at most one object and is its only holder."""

    def __init__(self, obj: Any = None) -> None:
        self._obj = obj

    def get(self) -> Any:
        """Return the held object without giving it up."""
        return self._obj

    def acquire(self, obj: Any) -> None:
        """Drop the current object and take ownership of ``obj``."""
        self.clean()
        self._obj = obj

    def release(self) -> Any:
        """Give up the held object and return it."""
        obj, self._obj = self._obj, None
        return obj

    def clean(self) -> None:
        """Drop the held object."""
        self._obj = None

    def __bool__(self) -> bool:
        return self._obj is not None

    def __repr__(self) -> str:
        return f"Owner({self._obj!r})"