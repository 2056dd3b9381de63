"""Outcome values returned by the bankomat services.

Services never raise for expected business failures (unknown account,
insufficient funds, bad notes). They return one of these values and the
caller branches on ``success``/``valid``.
"""

from dataclasses import dataclass
from decimal import Decimal

from bankomat.models.enums import ErrorCode


@dataclass(frozen=True)
class OperationResult:
    """Success or coded failure of a check or lookup."""

    success: bool
    message: str
    error_code: ErrorCode | None = None

    @classmethod
    def ok(cls, message: str = "Operation successful") -> "OperationResult":
        return cls(True, message)

    @classmethod
    def failure(cls, message: str, error_code: ErrorCode) -> "OperationResult":
        return cls(False, message, error_code)


@dataclass(frozen=True)
class TransactionResult:
    """Outcome of a deposit or withdrawal."""

    success: bool
    message: str | None = None
    error_code: ErrorCode | None = None
    new_balance: Decimal | None = None

    @classmethod
    def ok(cls, new_balance: Decimal | None = None) -> "TransactionResult":
        if new_balance is None:
            return cls(True)
        return cls(True, "Operation successful", None, new_balance)

    @classmethod
    def failure(cls, message: str, error_code: ErrorCode) -> "TransactionResult":
        return cls(False, message, error_code)


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def failure(cls, error_message: str) -> "ValidationResult":
        return cls(False, error_message)
