"""Domain models and errors; nothing here knows about configuration or logging."""

from core.domain.errors import (
    ChangeInputError,
    InvalidDenominationError,
    InvalidTargetError,
    TargetTooLargeError,
)
from core.domain.models import ChangeRequest, ChangeResult, CoinSet

__all__ = [
    "ChangeInputError",
    "ChangeRequest",
    "ChangeResult",
    "CoinSet",
    "InvalidDenominationError",
    "InvalidTargetError",
    "TargetTooLargeError",
]
