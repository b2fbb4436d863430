"""Listener storage and the invoke-once wrapper shared by hubs and facades.

Listener sets are insertion-ordered dicts used as sets, so membership follows
callable equality: plain functions and lambdas compare by identity, bound
methods by ``(self, function)``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
import functools
from typing import Any

Listener = Callable[..., Any]


class ListenerRegistry:
    """Map event names to ordered listener sets.

    An event never maps to an empty set: removing its last listener drops the
    event entry.
    """

    def __init__(self) -> None:
        self._events: dict[str, dict[Listener, None]] = {}

    def add(self, event: str, listener: Listener) -> bool:
        """Add ``listener`` under ``event``. Return False if it was already there."""
        listeners = self._events.get(event)
        if listeners is None:
            self._events[event] = {listener: None}
            return True
        if listener in listeners:
            return False
        listeners[listener] = None
        return True

    def discard(self, event: str, listener: Listener) -> bool:
        """Remove one listener. Return True when something was removed."""
        listeners = self._events.get(event)
        if listeners is None or listener not in listeners:
            return False
        del listeners[listener]
        if not listeners:
            del self._events[event]
        return True

    def drop(self, event: str) -> int:
        """Remove every listener for ``event`` and return how many there were."""
        return len(self._events.pop(event, ()))

    def clear(self) -> int:
        """Remove every registration and return the number of listeners dropped."""
        total = sum(len(listeners) for listeners in self._events.values())
        self._events.clear()
        return total

    def snapshot(self, event: str) -> tuple[Listener, ...]:
        """Return the listeners of ``event`` as they are right now."""
        return tuple(self._events.get(event, ()))

    def events(self) -> tuple[str, ...]:
        return tuple(self._events)

    def __contains__(self, event: object) -> bool:
        return event in self._events

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._events))

    def __len__(self) -> int:
        return len(self._events)


def invoke_once(
    subscribe: Callable[[str, Listener], Any],
    unsubscribe: Callable[[str, Listener], Any],
    event: str,
    listener: Listener,
) -> Any:
    """Subscribe a wrapper that unsubscribes itself before calling ``listener``.

    ``subscribe`` and ``unsubscribe`` are the ``on``/``off`` pair of whichever
    surface owns the registration, so a facade keeps its prefix and its
    bookkeeping. Returns whatever ``subscribe`` returns.
    """

    def wrapper(*args: Any, **kwargs: Any) -> Any:
        unsubscribe(event, wrapper)
        return listener(*args, **kwargs)

    functools.update_wrapper(wrapper, listener)
    wrapper.listener = listener  # type: ignore[attr-defined]
    return subscribe(event, wrapper)
