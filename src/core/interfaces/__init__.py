"""Core interfaces.

Why:
- Defines structural contracts (Protocol) that concrete solvers implement.
- Callers depend on the abstraction, not on a particular solver.
"""

from core.interfaces.solver import ChangeSolver

__all__ = ["ChangeSolver"]
