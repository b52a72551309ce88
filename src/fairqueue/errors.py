"""Exceptions raised by fairqueue collections."""


class EmptyQueueError(Exception):
    """Raised when removing from a queue that holds nothing."""

    pass


class ScenarioError(Exception):
    """Raised when a scenario file cannot be read or validated."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid scenario {path}: {reason}")
