"""Enumeration types for bankomat entities and outcomes."""

from enum import Enum


class CardStatus(str, Enum):
    ACTIVE = "ACTIVE"
    BLOCKED = "BLOCKED"


class TransactionType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


class ErrorCode(str, Enum):
    # Account errors
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    ACCOUNT_EXISTS = "ACCOUNT_EXISTS"

    # Transaction errors
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    DEPOSIT_FAILED = "DEPOSIT_FAILED"
    WITHDRAWAL_FAILED = "WITHDRAWAL_FAILED"

    # Authentication errors
    INVALID_CARD = "INVALID_CARD"
    WRONG_PIN = "WRONG_PIN"
    CARD_BLOCKED = "CARD_BLOCKED"

    # System errors
    REPOSITORY_ERROR = "REPOSITORY_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class AuthenticationResult(str, Enum):
    """Outcome of a card + PIN check, with a user-facing message."""

    SUCCESS = "SUCCESS"
    INVALID_CARD = "INVALID_CARD"
    WRONG_PIN = "WRONG_PIN"
    CARD_BLOCKED = "CARD_BLOCKED"

    @property
    def message(self) -> str:
        return _AUTH_MESSAGES[self]

    @property
    def error_code(self) -> ErrorCode | None:
        if self is AuthenticationResult.SUCCESS:
            return None
        return ErrorCode(self.value)


_AUTH_MESSAGES = {
    AuthenticationResult.SUCCESS: "Authentication successful",
    AuthenticationResult.INVALID_CARD: "Invalid card",
    AuthenticationResult.WRONG_PIN: "Wrong PIN",
    AuthenticationResult.CARD_BLOCKED: "The card is blocked",
}
