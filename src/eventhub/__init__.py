"""Top-level package for eventhub."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import Config, DispatchConfig, LoggingConfig, load_config
    from .exceptions import ConfigValidationError, EventHubError, ReadOnlyOperationError
    from .facade import Facade
    from .hub import EventHub, Handle, attach
    from .logging_utils import configure_logging

__all__ = [
    "Config",
    "ConfigValidationError",
    "DispatchConfig",
    "EventHub",
    "EventHubError",
    "Facade",
    "Handle",
    "LoggingConfig",
    "ReadOnlyOperationError",
    "attach",
    "configure_logging",
    "load_config",
]

_EXPORTS = {
    "Config": ".config",
    "DispatchConfig": ".config",
    "LoggingConfig": ".config",
    "load_config": ".config",
    "ConfigValidationError": ".exceptions",
    "EventHubError": ".exceptions",
    "ReadOnlyOperationError": ".exceptions",
    "Facade": ".facade",
    "EventHub": ".hub",
    "Handle": ".hub",
    "attach": ".hub",
    "configure_logging": ".logging_utils",
}


def __getattr__(name: str) -> Any:
    """Lazily import symbols so ``import eventhub`` stays cheap."""
    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module

    return getattr(import_module(module_name, __name__), name)
