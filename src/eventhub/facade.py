"""Per-component views of a shared event hub."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import TYPE_CHECKING, Any, ClassVar

from .registry import Listener, invoke_once
from .sealed import PUBLIC_OPERATIONS, SealedOperations

if TYPE_CHECKING:
    from .hub import EventHub

LOGGER = logging.getLogger(__name__)


class Facade(SealedOperations):
    """On/one/off/trigger surface for ``component`` backed by ``hub``.

    Listeners live in the hub's registry, so the hub and every facade over it
    see the same registrations. The facade only remembers what it added so
    ``cleanup()`` can detach exactly that.
    """

    _SEALED: ClassVar[frozenset[str]] = PUBLIC_OPERATIONS | {"cleanup"}

    def __init__(
        self,
        hub: EventHub,
        component: Any,
        prefix: str | None = None,
        *,
        one_uses_prefix: bool = True,
        separator: str = "-",
    ) -> None:
        self._hub = hub
        self._component = component
        self._prefix = prefix or None
        self._separator = separator
        self._one_uses_prefix = one_uses_prefix
        self._records: list[tuple[str, Listener]] = []
        self._translate: Callable[[str], str] = (
            self._prefixed if self._prefix else _unchanged
        )
        LOGGER.debug(
            "facade.created",
            extra={
                "event": "facade.created",
                "component": type(component).__name__,
                "prefix": self._prefix,
            },
        )

    @property
    def component(self) -> Any:
        return self._component

    @property
    def prefix(self) -> str | None:
        return self._prefix

    @property
    def hub(self) -> EventHub:
        return self._hub

    def translate(self, event: str) -> str:
        """Return the hub-side name for ``event``."""
        return self._translate(event)

    def _prefixed(self, event: str) -> str:
        return f"{self._prefix}{self._separator}{event}"

    def on(self, event: str, listener: Listener) -> Any:
        self._records.append((event, listener))
        self._hub.on(self._translate(event), listener)
        return self._component

    def one(self, event: str, listener: Listener) -> Any:
        if self._one_uses_prefix:
            invoke_once(self.on, self.off, event, listener)
        else:
            # Registered on the hub under the raw name and not tracked for cleanup.
            invoke_once(self._hub.on, self._hub.off, event, listener)
        return self._component

    def off(self, event: str, listener: Listener | None = None) -> Any:
        self._records = [
            (recorded_event, recorded)
            for recorded_event, recorded in self._records
            if not _matches(recorded_event, recorded, event, listener)
        ]
        self._hub.off(self._translate(event), listener)
        return self._component

    def trigger(self, event: str, *args: Any, **kwargs: Any) -> Any:
        self._hub.trigger(self._translate(event), *args, **kwargs)
        return self._component

    def cleanup(self) -> Any:
        """Detach every listener added through this facade."""
        records = list(self._records)
        for event, listener in records:
            self.off(event, listener)
        LOGGER.debug(
            "facade.cleanup",
            extra={
                "event": "facade.cleanup",
                "prefix": self._prefix,
                "removed": len(records),
            },
        )
        return self._component

    def __repr__(self) -> str:
        return (
            f"<Facade component={type(self._component).__name__} "
            f"prefix={self._prefix!r} tracked={len(self._records)}>"
        )


def _unchanged(event: str) -> str:
    return event


def _matches(
    recorded_event: str,
    recorded: Listener,
    event: str,
    listener: Listener | None,
) -> bool:
    if recorded_event != event:
        return False
    return listener is None or recorded == listener
