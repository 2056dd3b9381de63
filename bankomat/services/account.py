"""Account service: balance queries, deposits and withdrawals."""

from collections.abc import Mapping
from decimal import Decimal

from bankomat.config import CurrencyConfig
from bankomat.exceptions import InvalidAmountError, InvalidEntityStateError
from bankomat.logging import get_logger
from bankomat.models import (
    Account,
    ErrorCode,
    OperationResult,
    TransactionResult,
    format_amount,
    is_valid_amount,
    to_decimal,
)
from bankomat.services.note_counter import NoteCounter
from bankomat.services.transaction_log import TransactionLog
from bankomat.store import AccountRepository

logger = get_logger(__name__)

ACCOUNT_NOT_FOUND_MESSAGE = "Account not found"
INVALID_AMOUNT_MESSAGE = "Amount must be greater than zero and in whole cents"


class AccountService:
    """Business rules for bank accounts.

    Every balance change goes through ``update_balance``, which swaps the
    stored immutable ``Account`` for a new value with the same number.
    Expected failures come back as ``OperationResult``/``TransactionResult``
    values carrying an ``ErrorCode``.

    Parameters
    ----------
    account_repository : AccountRepository
        Where accounts and card links live.
    currency : CurrencyConfig | None
        Display format and accepted note denominations.
    transaction_log : TransactionLog | None
        Journal for completed deposits and withdrawals.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        currency: CurrencyConfig | None = None,
        transaction_log: TransactionLog | None = None,
    ) -> None:
        self.account_repository = account_repository
        self.currency = currency or CurrencyConfig()
        self.note_counter = NoteCounter(self.currency.denominations)
        self.transaction_log = transaction_log if transaction_log is not None else TransactionLog()

    def get_account(self, account_number: str) -> Account | None:
        return self.account_repository.find_by_number(account_number)

    def find_accounts_for_card(self, card_number: str) -> list[Account]:
        """Accounts reachable with a card, in link order."""
        return self.account_repository.find_by_card_number(card_number)

    def update_balance(self, account_number: str, new_balance: Decimal | int | float) -> Account | None:
        """Replace the stored account with one carrying ``new_balance``.

        Returns the new account value, or None if the account does not exist.
        """
        account = self.get_account(account_number)
        if account is None:
            return None

        updated = account.with_balance(new_balance)
        self.account_repository.save(updated)
        logger.debug(
            "Account %s balance %s -> %s", account_number, account.balance, updated.balance
        )
        return updated

    def account_exists(self, account_number: str) -> OperationResult:
        if self.get_account(account_number) is not None:
            return OperationResult.ok("Account exists")
        return OperationResult.failure(ACCOUNT_NOT_FOUND_MESSAGE, ErrorCode.ACCOUNT_NOT_FOUND)

    def has_enough_balance(self, account_number: str, amount: Decimal | int | float) -> OperationResult:
        """Check that an account can cover ``amount``."""
        account = self.get_account(account_number)
        if account is None:
            return OperationResult.failure(ACCOUNT_NOT_FOUND_MESSAGE, ErrorCode.ACCOUNT_NOT_FOUND)

        try:
            requested = to_decimal(amount)
        except InvalidEntityStateError:
            requested = None
        if requested is None or not is_valid_amount(requested):
            return OperationResult.failure(INVALID_AMOUNT_MESSAGE, ErrorCode.INVALID_AMOUNT)

        if account.balance >= requested:
            return OperationResult.ok("Sufficient balance available")
        return OperationResult.failure(
            f"Insufficient funds. Available: {self._format(account.balance)}, "
            f"Requested: {self._format(requested)}",
            ErrorCode.INSUFFICIENT_FUNDS,
        )

    def withdraw(self, account_number: str, amount: Decimal | int | float) -> TransactionResult:
        """Withdraw ``amount`` if it is a positive whole-cent sum covered by the balance."""
        try:
            requested = to_decimal(amount)
        except InvalidEntityStateError:
            requested = None
        if requested is None or not is_valid_amount(requested):
            return TransactionResult.failure(INVALID_AMOUNT_MESSAGE, ErrorCode.INVALID_AMOUNT)

        account = self.get_account(account_number)
        if account is None:
            return TransactionResult.failure(ACCOUNT_NOT_FOUND_MESSAGE, ErrorCode.ACCOUNT_NOT_FOUND)

        if account.balance < requested:
            logger.info("Withdrawal of %s from account %s refused: insufficient funds",
                        requested, account_number)
            return TransactionResult.failure(
                f"Insufficient funds. Available: {self._format(account.balance)}",
                ErrorCode.INSUFFICIENT_FUNDS,
            )

        updated = self.update_balance(account_number, account.balance - requested)
        self.transaction_log.log_withdrawal(account_number, requested, updated.balance)
        return TransactionResult.ok(updated.balance)

    def deposit(
        self,
        account_number: str,
        notes: Mapping[int, int],
        confirmed: bool,
    ) -> TransactionResult:
        """Deposit notes (denomination -> count) once the user has confirmed.

        Any unaccepted denomination rejects the whole deposit.
        """
        account = self.get_account(account_number)
        if account is None:
            return TransactionResult.failure(ACCOUNT_NOT_FOUND_MESSAGE, ErrorCode.ACCOUNT_NOT_FOUND)

        if not confirmed:
            return TransactionResult.failure(
                "Deposit cancelled - not confirmed", ErrorCode.VALIDATION_ERROR
            )

        try:
            amount = self.note_counter.count_and_verify(notes)
        except InvalidAmountError as e:
            logger.info("Deposit to account %s rejected: %s", account_number, e)
            return TransactionResult.failure(str(e), ErrorCode.INVALID_AMOUNT)

        try:
            updated = self.update_balance(account_number, account.balance + amount)
        except InvalidEntityStateError as e:
            logger.info("Deposit to account %s rejected: %s", account_number, e)
            return TransactionResult.failure(str(e), ErrorCode.INVALID_AMOUNT)
        self.transaction_log.log_deposit(account_number, Decimal(amount), updated.balance)
        return TransactionResult.ok(updated.balance)

    def get_formatted_balance(self, account_number: str) -> str | None:
        account = self.get_account(account_number)
        return account.formatted_balance(self.currency) if account is not None else None

    def _format(self, amount: Decimal) -> str:
        return format_amount(
            amount,
            self.currency.symbol,
            self.currency.decimal_separator,
            self.currency.thousands_separator,
        )
