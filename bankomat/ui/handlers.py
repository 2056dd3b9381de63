"""Interactive flows: login, account selection, deposit and withdrawal."""

import re
from decimal import Decimal

from bankomat.config import AuthConfig
from bankomat.logging import get_logger
from bankomat.models import Account, AuthenticationResult, format_amount
from bankomat.services import AccountService, AuthenticationService, ErrorHandler
from bankomat.ui.interface import UserInterface

logger = get_logger(__name__)

INVALID_AMOUNT_MESSAGE = "Invalid amount. Please try again."
NO_NOTES_MESSAGE = "No notes entered. Deposit cancelled."

# Plain ASCII digits; withdrawal amounts stay below 10**13.
AMOUNT_PATTERN = re.compile(r"[0-9]{1,13}(?:[.,][0-9]{1,2})?")
COUNT_PATTERN = re.compile(r"[0-9]{1,6}")


def parse_count(raw: str) -> int | None:
    """Parse a menu choice or note count; None unless plain ASCII digits."""
    if COUNT_PATTERN.fullmatch(raw) is None:
        return None
    return int(raw)


class AuthenticationHandler:
    """Collect card number and PIN, allowing a limited number of attempts.

    Whether a bad card number uses up an attempt is controlled by
    ``AuthConfig.invalid_card_consumes_attempt``. When it does not, the
    flow still gives up after ``max_login_attempts`` bad card numbers in a
    row so scripted input cannot loop forever.
    """

    def __init__(
        self,
        ui: UserInterface,
        auth_service: AuthenticationService,
        config: AuthConfig | None = None,
    ) -> None:
        self.ui = ui
        self.auth_service = auth_service
        self.config = config or auth_service.config
        self.authenticated_card_number: str | None = None

    def authenticate(self) -> bool:
        """Run the login flow. Returns True once a card is authenticated."""
        max_attempts = self.config.max_login_attempts
        attempts = 0
        invalid_streak = 0

        while attempts < max_attempts:
            card_number = self.ui.get_input("Enter your card number (12 digits): ")
            pin = self.ui.get_input("Enter your PIN: ")
            self.ui.show_message(f"PIN entered: {self.ui.mask_sensitive_input(pin)}")

            if self.auth_service.validate_card_number(card_number):
                result = self.auth_service.authenticate(card_number, pin)
            else:
                result = AuthenticationResult.INVALID_CARD

            if result is AuthenticationResult.SUCCESS:
                self.ui.show_message("Login successful!")
                self.authenticated_card_number = card_number
                return True

            if result is AuthenticationResult.CARD_BLOCKED:
                self.ui.show_error("The card is blocked. Please contact customer service.")
                return False

            if result is AuthenticationResult.INVALID_CARD:
                self.ui.show_error("Invalid card number. Please try again.")
                if self.config.invalid_card_consumes_attempt:
                    attempts += 1
                else:
                    invalid_streak += 1
                    if invalid_streak >= max_attempts:
                        break
                continue

            attempts += 1
            invalid_streak = 0
            self.ui.show_error(
                f"Wrong PIN. Please try again. Attempts left: {max_attempts - attempts}"
            )

        logger.info("Login flow gave up after %d attempts", attempts)
        self.ui.show_error("Too many failed attempts. The card is now blocked.")
        return False


class AccountHandler:
    """Let the logged-in user pick one of the card's accounts."""

    def __init__(self, ui: UserInterface, account_service: AccountService) -> None:
        self.ui = ui
        self.account_service = account_service
        self.authenticated_card_number: str | None = None

    def available_accounts(self) -> list[Account]:
        if self.authenticated_card_number is None:
            return []
        return self.account_service.find_accounts_for_card(self.authenticated_card_number)

    def select_account(self) -> Account | None:
        """Show the card's accounts and return the chosen one, or None."""
        accounts = self.available_accounts()
        if not accounts:
            self.ui.show_message("No accounts available.")
            return None

        self.ui.show_message("Choose account:")
        for i, account in enumerate(accounts, start=1):
            self.ui.show_message(f"{i}. Account {account.account_number} ({account.account_name})")

        choice = self.ui.get_input("Your choice: ")
        index = parse_count(choice)
        if index is not None and 1 <= index <= len(accounts):
            return accounts[index - 1]

        self.ui.show_error("Invalid choice.")
        return None

    def show_balance(self) -> None:
        account = self.select_account()
        if account is not None:
            balance = self.account_service.get_formatted_balance(account.account_number)
            self.ui.show_message(f"Balance on account {account.account_number}: {balance}")


class TransactionHandler:
    """Deposit and withdrawal dialogues on top of ``AccountService``."""

    def __init__(
        self,
        ui: UserInterface,
        account_handler: AccountHandler,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        self.ui = ui
        self.account_handler = account_handler
        self.account_service = account_handler.account_service
        self.error_handler = error_handler or ErrorHandler(self.account_service)

    def handle_withdrawal(self) -> None:
        account = self.account_handler.select_account()
        if account is None:
            return

        self.ui.show_message(f"Current balance: {self._format(account.balance)}")

        amount = self._parse_amount(self.ui.get_input("Enter amount to withdraw: "))
        if amount is None:
            self.ui.show_error(INVALID_AMOUNT_MESSAGE)
            return

        validation = self.error_handler.validate_withdrawal(account.account_number, amount)
        if not validation.valid:
            self.ui.show_error(validation.error_message)
            return

        if not self.ui.confirm_action(f"Confirm withdrawal of {self._format(amount)}?"):
            self.ui.show_message("Withdrawal cancelled.")
            return

        result = self.account_service.withdraw(account.account_number, amount)
        if not result.success:
            self.error_handler.log_error(result.error_code.value, result.message)
            self.ui.show_error(f"Withdrawal failed: {result.message}")
            return

        self.ui.show_message("Withdrawal complete. Please take your cash.")
        if self.ui.confirm_action("Do you want a receipt?"):
            self.ui.show_message(
                f"Receipt: You withdrew {self._format(amount)} from account {account.account_number}"
            )
            self.ui.show_message(f"New balance: {self._format(result.new_balance)}")

    def handle_deposit(self) -> None:
        account = self.account_handler.select_account()
        if account is None:
            return

        notes: dict[int, int] = {}
        self.ui.show_message("Enter the number of notes for each denomination (0 if none):")
        for denomination in self.account_service.currency.denominations:
            raw = self.ui.get_input(f"{denomination} {self.account_service.currency.symbol}: ")
            count = parse_count(raw)
            if count is None:
                self.ui.show_error(INVALID_AMOUNT_MESSAGE)
                return
            if count > 0:
                notes[denomination] = count

        if not notes:
            self.ui.show_error(NO_NOTES_MESSAGE)
            return

        total = self.account_service.note_counter.count_and_verify(notes)
        self.ui.show_message(f"Total to deposit: {total} {self.account_service.currency.symbol}")

        confirmed = self.ui.confirm_action("Confirm deposit?")
        result = self.account_service.deposit(account.account_number, notes, confirmed)
        if not result.success:
            self.ui.show_error(f"Deposit failed: {result.message}")
            return

        self.ui.show_message("Deposit complete.")
        if self.ui.confirm_action("Do you want a receipt?"):
            self.ui.show_message(
                f"Receipt: You deposited {total} {self.account_service.currency.symbol} "
                f"to account {account.account_number}"
            )
            self.ui.show_message(f"New balance: {self._format(result.new_balance)}")

    @staticmethod
    def _parse_amount(raw: str) -> Decimal | None:
        """Accept "250", "99.50" or "99,50"; anything else is None."""
        if AMOUNT_PATTERN.fullmatch(raw) is None:
            return None
        return Decimal(raw.replace(",", "."))

    def _format(self, amount: Decimal) -> str:
        currency = self.account_service.currency
        return format_amount(
            amount, currency.symbol, currency.decimal_separator, currency.thousands_separator
        )
