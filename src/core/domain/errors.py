"""Contract violations for the change solver.

Unreachable targets are not errors: they are a normal `None` result.
Everything here is raised before a cost table is allocated, so a caller
never receives a partially filled or silently corrupted answer.
"""

from __future__ import annotations


class ChangeInputError(ValueError):
    """Base class for invalid solver input."""


class InvalidTargetError(ChangeInputError):
    """Target is negative or not an integer."""

    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(f"target must be a non-negative integer, got {target!r}")


class InvalidDenominationError(ChangeInputError):
    """A denomination is zero, negative or not an integer."""

    def __init__(self, denomination: object) -> None:
        self.denomination = denomination
        super().__init__(f"denominations must be positive integers, got {denomination!r}")


class TargetTooLargeError(ChangeInputError):
    """Target exceeds the configured work bound."""

    def __init__(self, target: int, max_target: int) -> None:
        self.target = target
        self.max_target = max_target
        super().__init__(f"target {target} exceeds the configured maximum of {max_target}")
