"""
Errors raised by the engine.
"""


class WatorError(Exception):
    """Base class for simulation errors."""


class CapacityExceededError(WatorError, ValueError):
    """Requested population does not fit on the grid."""

    def __init__(self, requested: int, capacity: int) -> None:
        self.requested = requested
        self.capacity = capacity
        super().__init__(
            f"capacity exceeded: {requested} entities requested for a grid of {capacity} cells"
        )


class InvariantError(WatorError, RuntimeError):
    """Board and entity lists disagree. Always a logic defect, never recovered."""
