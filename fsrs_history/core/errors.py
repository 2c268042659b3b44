"""
Exception types for historical replay.
"""


class ReplayError(Exception):
    """Base class for replay failures."""
    pass


class ConfigurationError(ReplayError):
    """Raised when the replay is configured inconsistently."""
    pass


class ModelNotFoundError(ConfigurationError, KeyError):
    """Raised when a per-item model mapping has no model for an item."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"No memory model configured for item {item_id}")
        self.item_id = item_id

    def __str__(self) -> str:
        return self.args[0]


class EmptyLogError(ReplayError, ValueError):
    """Raised when a replay is requested for an empty event log."""
    pass


class EventFormatError(ReplayError, ValueError):
    """Raised when a stored or imported review record cannot be parsed."""
    pass
