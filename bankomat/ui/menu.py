"""Main ATM menu loop."""

from bankomat.config import AuthConfig
from bankomat.logging import get_logger
from bankomat.services import AccountService, AuthenticationService
from bankomat.ui.handlers import AccountHandler, AuthenticationHandler, TransactionHandler
from bankomat.ui.interface import UserInterface

logger = get_logger(__name__)

MENU_LINES = [
    "",
    "--- ATM Main Menu ---",
    "1. Deposit",
    "2. Withdraw",
    "3. Show balance",
    "0. Exit",
]


class ConsoleMenu:
    """Wire the handlers together and run one customer session."""

    def __init__(
        self,
        ui: UserInterface,
        auth_service: AuthenticationService,
        account_service: AccountService,
        auth_config: AuthConfig | None = None,
    ) -> None:
        self.ui = ui
        self.auth_service = auth_service
        self.auth_handler = AuthenticationHandler(ui, auth_service, auth_config)
        self.account_handler = AccountHandler(ui, account_service)
        self.transaction_handler = TransactionHandler(ui, self.account_handler)

    def start(self) -> bool:
        """Log in and show the main menu. Returns False if login failed."""
        self.ui.show_message("Welcome to the ATM!")

        if not self.auth_handler.authenticate():
            self.ui.show_message("Exiting after failed login.")
            return False

        card_number = self.auth_handler.authenticated_card_number
        self.account_handler.authenticated_card_number = card_number
        try:
            self._main_menu()
        finally:
            self.auth_service.revoke_access(card_number)
            logger.info("Session ended")
        return True

    def _main_menu(self) -> None:
        actions = {
            "1": self.transaction_handler.handle_deposit,
            "2": self.transaction_handler.handle_withdrawal,
            "3": self.account_handler.show_balance,
        }
        while True:
            for line in MENU_LINES:
                self.ui.show_message(line)
            choice = self.ui.get_input("Choose an option: ")

            if choice == "0":
                self.ui.show_message("Exiting. Goodbye!")
                return

            action = actions.get(choice)
            if action is None:
                self.ui.show_error("Invalid choice.")
                continue
            action()
