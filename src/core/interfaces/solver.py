"""Change solver contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Lets alternative solvers (memoized, bounded) be swapped and tested
  without coupling callers to one implementation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ChangeRequest, ChangeResult


@runtime_checkable
class ChangeSolver(Protocol):
    """Minimal contract for a change solver.

    Design rules:
    - `solve` is synchronous: the table fill does no I/O.
    - Unreachable targets come back as a result with `count=None`, never
      as an exception.
    """

    def solve(self, request: ChangeRequest) -> ChangeResult:
        """Solve `request` and return the normalized result."""

        ...
