"""
Tests for the pydantic domain models.
"""

import pytest
from pydantic import ValidationError

from core.domain.models import ChangeRequest, ChangeResult, CoinSet


class TestCoinSet:
    """Validation and helpers of CoinSet."""

    def test_accepts_list_and_keeps_duplicates(self):
        coins = CoinSet(denominations=[5, 1, 5])
        assert coins.denominations == (5, 1, 5)
        assert len(coins) == 3

    def test_distinct(self):
        assert CoinSet(denominations=(25, 1, 10, 1)).distinct() == (1, 10, 25)

    def test_empty_by_default(self):
        assert CoinSet().denominations == ()

    @pytest.mark.parametrize("bad", [0, -1, 2.5, "5", True])
    def test_rejects_invalid_denominations(self, bad):
        with pytest.raises(ValidationError):
            CoinSet(denominations=(1, bad))

    def test_frozen_and_hashable(self):
        coins = CoinSet(denominations=(1, 2))
        with pytest.raises(ValidationError):
            coins.denominations = (3,)
        assert hash(coins) == hash(CoinSet(denominations=(1, 2)))


class TestChangeRequest:
    """Target validation."""

    def test_valid(self):
        request = ChangeRequest(target=239, coins={"denominations": [1, 5, 10, 25]})
        assert request.coins.distinct() == (1, 5, 10, 25)

    @pytest.mark.parametrize("bad", [-1, 1.5, "10", False])
    def test_rejects_invalid_target(self, bad):
        with pytest.raises(ValidationError):
            ChangeRequest(target=bad)


class TestChangeResult:
    """Reachable versus unreachable results."""

    def test_reachable(self):
        result = ChangeResult(target=4, count=2)
        assert result.reachable is True

    def test_unreachable_is_not_a_count(self):
        result = ChangeResult(target=3, count=None)
        assert result.reachable is False
        assert result.model_dump() == {"target": 3, "count": None, "reachable": False}

    def test_rejects_negative_count(self):
        with pytest.raises(ValidationError):
            ChangeResult(target=3, count=-1)
