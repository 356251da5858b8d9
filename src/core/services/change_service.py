"""Change solving service.

This module is the entry point for callers that work with domain models
and configuration rather than raw integers. It delegates the computation
to `core.services.change_solver` and adds the configured work bound and
logging, keeping the algorithm itself free of both.
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.config import SolverSettings
from core.domain.models import ChangeRequest, ChangeResult, CoinSet
from core.logging_setup import setup_logging
from core.services.change_solver import min_coins

logger = logging.getLogger(__name__)


class ChangeService:
    """Solves `ChangeRequest`s under `SolverSettings`.

    Implements `core.interfaces.solver.ChangeSolver`.
    """

    def __init__(self, settings: SolverSettings | None = None) -> None:
        self.settings = settings or SolverSettings()

    @classmethod
    def from_env(cls) -> "ChangeService":
        """Load settings from the environment and configure logging with them."""

        settings = SolverSettings()
        setup_logging(settings.log_level)
        return cls(settings)

    def solve(self, request: ChangeRequest) -> ChangeResult:
        logger.info(
            "Solving target=%d with %d denominations",
            request.target,
            len(request.coins),
        )
        count = min_coins(
            request.target,
            request.coins.distinct(),
            max_target=self.settings.max_target,
        )
        result = ChangeResult(target=request.target, count=count)
        if not result.reachable:
            logger.info("Target %d is unreachable", request.target)
        return result

    def solve_values(self, target: int, denominations: Iterable[int]) -> ChangeResult:
        """Validate raw values into a `ChangeRequest` and solve it.

        Invalid values raise pydantic's `ValidationError`.
        """

        request = ChangeRequest(target=target, coins=CoinSet(denominations=tuple(denominations)))
        return self.solve(request)
