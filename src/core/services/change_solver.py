"""Minimum coin count by bottom-up dynamic programming.

This module is the whole algorithm. Everything in it is a pure function of
its arguments: each call allocates its own cost table, fills it left to
right and discards it, so concurrent callers never share state and results
are safe to memoize (see `core.services.precompute`).

Slots of the cost table hold either a finite count or `None` for
"unreachable". `None` is never added to, so no sentinel arithmetic can
produce a plausible-looking wrong count.
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.domain.errors import (
    InvalidDenominationError,
    InvalidTargetError,
    TargetTooLargeError,
)

logger = logging.getLogger(__name__)

CostTable = tuple[int | None, ...]


def _is_int(value: object) -> bool:
    # bool is an int subclass, but True is not a coin.
    return isinstance(value, int) and not isinstance(value, bool)


def validate_target(target: int, max_target: int | None = None) -> int:
    """Check the target precondition and return it."""

    if not _is_int(target) or target < 0:
        raise InvalidTargetError(target)
    if max_target is not None and target > max_target:
        raise TargetTooLargeError(target, max_target)
    return target


def validate_denominations(denominations: Iterable[int]) -> tuple[int, ...]:
    """Return the distinct denominations, sorted ascending.

    Raises `InvalidDenominationError` for the first non-positive or
    non-integer value. Duplicates are dropped since they never change a
    result.
    """

    seen: set[int] = set()
    for d in denominations:
        if not _is_int(d) or d <= 0:
            raise InvalidDenominationError(d)
        seen.add(d)
    return tuple(sorted(seen))


def build_cost_table(
    target: int,
    denominations: Iterable[int],
    *,
    max_target: int | None = None,
) -> CostTable:
    """Fill the cost table for every sub-target `0..target`.

    Slot `i` is `1 + min(slot[i - d])` over denominations `d <= i` with a
    finite predecessor, or `None` when there is none. Slot `0` is `0`.
    Sub-targets are finalized in increasing order since each one only
    reads strictly smaller slots.
    """

    target = validate_target(target, max_target)
    if target == 0:
        return (0,)
    coins = validate_denominations(denominations)
    if not coins:
        return (0,) + (None,) * target

    logger.debug("Filling cost table: target=%d denominations=%s", target, coins)

    table: list[int | None] = [None] * (target + 1)
    table[0] = 0
    for i in range(1, target + 1):
        best: int | None = None
        for d in coins:
            if d > i:
                # Ascending order: every remaining coin is larger too.
                break
            prev = table[i - d]
            if prev is None:
                continue
            if best is None or prev + 1 < best:
                best = prev + 1
        table[i] = best
    return tuple(table)


def min_coins(
    target: int,
    denominations: Iterable[int],
    *,
    max_target: int | None = None,
) -> int | None:
    """Minimum number of denominations summing exactly to `target`.

    Returns `None` when no combination reaches `target`. A target of `0`
    returns `0` without looking at `denominations`.

    Raises:
        InvalidTargetError: `target` is negative or not an integer.
        InvalidDenominationError: a denomination is zero, negative or not
            an integer.
        TargetTooLargeError: `target` exceeds `max_target`.
    """

    return build_cost_table(target, denominations, max_target=max_target)[-1]


def solve_many(
    targets: Iterable[int],
    denominations: Iterable[int],
    *,
    max_target: int | None = None,
) -> dict[int, int | None]:
    """Answer several targets against one denomination set.

    One table is built up to the largest target and every query is read
    from it.
    """

    wanted = [validate_target(t, max_target) for t in targets]
    if not wanted:
        return {}
    table = build_cost_table(max(wanted), denominations, max_target=max_target)
    return {t: table[t] for t in wanted}
