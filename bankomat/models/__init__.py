"""Domain models for bankomat."""

from bankomat.models.account import Account, format_amount, is_valid_amount, to_decimal
from bankomat.models.card import MAX_FAILED_PIN_ATTEMPTS, Card
from bankomat.models.enums import (
    AuthenticationResult,
    CardStatus,
    ErrorCode,
    TransactionType,
)
from bankomat.models.result import OperationResult, TransactionResult, ValidationResult
from bankomat.models.transaction import TransactionRecord

__all__ = [
    "Account",
    "AuthenticationResult",
    "Card",
    "CardStatus",
    "ErrorCode",
    "MAX_FAILED_PIN_ATTEMPTS",
    "OperationResult",
    "TransactionRecord",
    "TransactionResult",
    "TransactionType",
    "ValidationResult",
    "format_amount",
    "is_valid_amount",
    "to_decimal",
]
