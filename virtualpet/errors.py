"""
Error types raised by the gesture core.
"""


class PetGestureError(Exception):
    """Base class for recoverable per-frame errors."""


class InvalidHandShape(PetGestureError):
    """A hand did not carry exactly 21 landmarks."""

    def __init__(self, count: int, expected: int = 21):
        self.count = count
        self.expected = expected
        super().__init__(f"Expected {expected} landmarks per hand, got {count}")


class DegenerateGeometry(PetGestureError):
    """A direction vector had (near) zero length."""
