"""Withdrawal validation and error reporting helpers."""

from decimal import Decimal

from bankomat.exceptions import InvalidEntityStateError
from bankomat.logging import get_logger
from bankomat.models import ValidationResult, is_valid_amount, to_decimal
from bankomat.services.account import AccountService

logger = get_logger(__name__)


class ErrorHandler:
    """Pre-flight checks and user-facing error messages for transactions."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    def validate_withdrawal(self, account_number: str, amount: Decimal | int | float) -> ValidationResult:
        """Check that a withdrawal could go through, without performing it."""
        if not self.account_service.account_exists(account_number).success:
            return ValidationResult.failure("Account does not exist")

        try:
            requested = to_decimal(amount)
        except InvalidEntityStateError:
            requested = None
        if requested is None or not is_valid_amount(requested):
            return ValidationResult.failure("Please enter a valid amount")

        if not self.account_service.has_enough_balance(account_number, requested).success:
            balance = self.account_service.get_account(account_number).balance
            return ValidationResult.failure(
                f"Insufficient balance. Available: {balance:.2f}, Requested: {requested:.2f}"
            )

        return ValidationResult.ok()

    def network_error_message(self) -> str:
        return "Network issue detected. Please try again later or contact support."

    def transaction_cancelled_message(self) -> str:
        return "Transaction cancelled. Your account has not been charged."

    def log_error(self, error_code: str, error_message: str) -> bool:
        logger.error("ERROR [%s]: %s", error_code, error_message)
        return True
