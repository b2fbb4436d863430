"""Guard that keeps the public operations of hubs and facades fixed."""

from __future__ import annotations

from typing import Any, ClassVar

from .exceptions import ReadOnlyOperationError

PUBLIC_OPERATIONS: frozenset[str] = frozenset({"on", "one", "off", "trigger"})


class SealedOperations:
    """Reject instance-level reassignment or deletion of public operations.

    Subclasses list their operation names in ``_SEALED``. Other attributes
    behave normally.
    """

    _SEALED: ClassVar[frozenset[str]] = PUBLIC_OPERATIONS

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._SEALED:
            raise ReadOnlyOperationError(
                f"{type(self).__name__}.{name} is read-only and cannot be reassigned"
            )
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._SEALED:
            raise ReadOnlyOperationError(
                f"{type(self).__name__}.{name} is read-only and cannot be deleted"
            )
        super().__delattr__(name)
