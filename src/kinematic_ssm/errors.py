"""Exceptions raised for malformed kinematic model inputs.

All of them subclass ValueError so callers that already guard transition
construction with ``except ValueError`` keep working.
"""


class KinematicModelError(ValueError):
    """Base class for contract violations in kinematic model construction."""


class InvalidDimensionError(KinematicModelError):
    """State length is not a positive multiple of ``order + 1``.

    Also raised when a state does not match a model's fixed state length,
    in which case ``expected`` is set.
    """

    def __init__(self, state_length, order: int, expected: int | None = None):
        self.state_length = state_length
        self.order = order
        self.expected = expected
        if expected is None:
            message = (
                f"State length {state_length} is not a positive multiple of "
                f"order + 1 = {order + 1}"
            )
        else:
            message = f"State length {state_length} does not match model state length {expected}"
        super().__init__(message)


class InvalidOrderError(KinematicModelError):
    """Polynomial order is negative or not an integer."""

    def __init__(self, order):
        self.order = order
        super().__init__(f"Polynomial order must be a non-negative integer, got {order!r}")
