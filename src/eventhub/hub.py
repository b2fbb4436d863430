"""Synchronous event hub.

Usage:
    hub = EventHub()

    def on_open(name):
        print(f"opened {name}")

    hub.on("open", on_open).trigger("open", "settings")

    # Give another object its own prefixed surface on the same hub
    modal = hub.extend(ModalWidget(), "modal")
    modal.on("open", on_open)
    hub.trigger("modal-open", "dialog")  # reaches on_open
    modal.cleanup()
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
from typing import Any, ClassVar

from .config import DispatchConfig
from .facade import Facade
from .registry import Listener, ListenerRegistry, invoke_once
from .sealed import PUBLIC_OPERATIONS, SealedOperations

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Handle:
    """Capability bundle exposing one hub's operations for a host object.

    Every operation returns ``host``.
    """

    host: Any
    on: Callable[[str, Listener], Any]
    one: Callable[[str, Listener], Any]
    off: Callable[..., Any]
    trigger: Callable[..., Any]
    extend: Callable[..., Facade]


class EventHub(SealedOperations):
    """Registry of named events and the listeners dispatched for them.

    The hub acts for a *host*: the object returned by every operation. It is
    the hub itself unless another object is passed at construction.
    """

    _SEALED: ClassVar[frozenset[str]] = PUBLIC_OPERATIONS | {"extend"}

    def __init__(self, host: Any = None, *, config: DispatchConfig | None = None) -> None:
        self._registry = ListenerRegistry()
        self._host = self if host is None else host
        self._config = config or DispatchConfig()
        self._handle = Handle(
            host=self._host,
            on=self.on,
            one=self.one,
            off=self.off,
            trigger=self.trigger,
            extend=self.extend,
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Any], host: Any = None) -> EventHub:
        """Build a hub from a mapping shaped like ``load_config()`` output."""
        dispatch = DispatchConfig.model_validate(config.get("dispatch", {}))
        return cls(host, config=dispatch)

    @property
    def host(self) -> Any:
        return self._host

    @property
    def handle(self) -> Handle:
        return self._handle

    @property
    def config(self) -> DispatchConfig:
        return self._config

    @property
    def match_all(self) -> str:
        return self._config.match_all

    def on(self, event: str, listener: Listener) -> Any:
        """Register ``listener`` for ``event``; registering it twice is a no-op."""
        if self._registry.add(event, listener):
            LOGGER.debug(
                "hub.listener.added",
                extra={"event": "hub.listener.added", "event_name": event},
            )
        return self._host

    def one(self, event: str, listener: Listener) -> Any:
        """Register ``listener`` to run on the next ``event`` only."""
        return invoke_once(self.on, self.off, event, listener)

    def off(self, event: str, listener: Listener | None = None) -> Any:
        """Remove a listener, every listener of ``event``, or everything.

        ``off(match_all)`` without a listener clears the whole registry.
        """
        if listener is not None:
            if self._registry.discard(event, listener):
                LOGGER.debug(
                    "hub.listener.removed",
                    extra={"event": "hub.listener.removed", "event_name": event},
                )
        elif event == self._config.match_all:
            dropped = self._registry.clear()
            LOGGER.debug("hub.reset", extra={"event": "hub.reset", "dropped": dropped})
        else:
            dropped = self._registry.drop(event)
            if dropped:
                LOGGER.debug(
                    "hub.event.cleared",
                    extra={
                        "event": "hub.event.cleared",
                        "event_name": event,
                        "dropped": dropped,
                    },
                )
        return self._host

    def trigger(self, event: str, *args: Any, **kwargs: Any) -> Any:
        """Call every listener of ``event`` in registration order.

        Listeners registered under the match-all event are then called with
        ``event`` prepended to the arguments. Exceptions raised by a listener
        propagate and stop the rest of the pass.

        Both listener sets are captured before anything runs, so changes
        made by listeners take effect from the next trigger.
        """
        match_all = self._config.match_all
        listeners = self._registry.snapshot(event)
        relay = self._registry.snapshot(match_all) if event != match_all else ()
        LOGGER.debug(
            "hub.trigger",
            extra={
                "event": "hub.trigger",
                "event_name": event,
                "listener_count": len(listeners),
                "relay_count": len(relay),
            },
        )
        for listener in listeners:
            listener(*args, **kwargs)
        for listener in relay:
            listener(event, *args, **kwargs)
        return self._host

    def extend(self, component: Any, prefix: str | None = None) -> Facade:
        """Return a facade giving ``component`` its own view of this hub.

        With a ``prefix``, event names used through the facade become
        ``"<prefix>-<event>"`` on the hub.
        """
        return Facade(
            self,
            component,
            prefix,
            one_uses_prefix=self._config.facade_one_uses_prefix,
            separator=self._config.prefix_separator,
        )

    def listeners(self, event: str) -> tuple[Listener, ...]:
        """Return the listeners registered for ``event`` in call order."""
        return self._registry.snapshot(event)

    def event_names(self) -> tuple[str, ...]:
        return self._registry.events()

    def __repr__(self) -> str:
        host = "self" if self._host is self else type(self._host).__name__
        return f"<EventHub host={host} events={len(self._registry)}>"


def attach(host: Any, config: DispatchConfig | None = None) -> Handle:
    """Create a hub acting for ``host`` and return its handle."""
    return EventHub(host, config=config).handle
