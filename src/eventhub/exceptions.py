"""Domain exception hierarchy for the event hub."""

from __future__ import annotations


class EventHubError(RuntimeError):
    """Base class for all event hub errors."""


class ReadOnlyOperationError(EventHubError, AttributeError):
    """Raised when a sealed hub or facade operation is reassigned or deleted."""


class ConfigValidationError(EventHubError):
    """Raised when configuration cannot be validated safely."""
