"""Domain models for change problems.

The models validate at the boundary (positive denominations, non-negative
targets) and are frozen, so a request is a hashable value that cannot
change while it is being solved. They describe what a problem is; solving
it lives in `core.services`.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, NonNegativeInt, StrictInt, computed_field
from pydantic.config import ConfigDict

# Strict ints: bools, floats and numeric strings are rejected, not coerced.
Denomination = Annotated[StrictInt, Field(gt=0)]
Target = Annotated[StrictInt, Field(ge=0)]


class CoinSet(BaseModel):
    """Denominations available to a solve, each reusable without limit.

    Duplicates are accepted; non-positive values are not.
    """

    model_config = ConfigDict(frozen=True)

    denominations: tuple[Denomination, ...] = Field(
        default=(),
        description="Available denominations (positive integers, may repeat).",
    )

    def distinct(self) -> tuple[int, ...]:
        """Sorted, de-duplicated denominations."""

        return tuple(sorted(set(self.denominations)))

    def __len__(self) -> int:
        return len(self.denominations)


class ChangeRequest(BaseModel):
    """A single solve: reach `target` exactly using `coins`."""

    model_config = ConfigDict(frozen=True)

    target: Target = Field(
        ...,
        description="Value to reach exactly.",
    )
    coins: CoinSet = Field(
        default_factory=CoinSet,
        description="Denominations available for this solve.",
    )


class ChangeResult(BaseModel):
    """Outcome of a solve.

    `count` is `None` when no multiset of the denominations sums to
    `target`; it is never a magic number that could pass for a real count.
    """

    model_config = ConfigDict(frozen=True)

    target: NonNegativeInt = Field(
        ...,
        description="Target that was solved.",
    )
    count: NonNegativeInt | None = Field(
        default=None,
        description="Minimum number of denominations, or None when unreachable.",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def reachable(self) -> bool:
        return self.count is not None
