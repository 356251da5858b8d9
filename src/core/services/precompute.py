"""Ahead-of-time evaluation of fixed change problems.

Python has no compile step that folds pure functions, so the closest
equivalent is evaluating the same `min_coins` once, at import time, and
memoizing it:

    QUARTER_CHANGE = precomputed(239, (1, 5, 10, 25))

Later lookups with the same arguments are free. There is no recursion
depth limit: the table fill is iterative, so the only ceiling is the
optional `max_target` work bound.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

from core.services.change_solver import (
    min_coins,
    validate_denominations,
    validate_target,
)


@lru_cache(maxsize=256, typed=True)
def _cached_min_coins(target: int, coins: tuple[int, ...]) -> int | None:
    return min_coins(target, coins)


def precomputed(target: int, denominations: Iterable[int]) -> int | None:
    """Memoized `min_coins`.

    Inputs are validated on every call, before the memo is consulted:
    `239.0 == 239` and `True == 1` in Python, so a raw-argument key would
    let invalid values hit a cached count.
    """

    target = validate_target(target)
    if target == 0:
        return 0
    return _cached_min_coins(target, validate_denominations(denominations))


def precomputed_cache_info():
    return _cached_min_coins.cache_info()


def clear_precomputed() -> None:
    _cached_min_coins.cache_clear()
