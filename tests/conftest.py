"""Pytest configuration and fixtures."""

from collections import deque
from decimal import Decimal

import pytest

from bankomat.models import Account, Card
from bankomat.services import AccountService, AuthenticationService
from bankomat.store import AccountRepository, CardRepository
from bankomat.ui.interface import UserInterface


class FakeUserInterface(UserInterface):
    """Scripted user interface that records everything shown to the user.

    Running out of scripted input raises, so a flow that asks for more
    input than expected fails the test instead of hanging.
    """

    def __init__(self) -> None:
        self.inputs: deque[str] = deque()
        self.confirmations: deque[bool] = deque()
        self.prompts: list[str] = []
        self.messages: list[str] = []
        self.errors: list[str] = []

    def set_inputs(self, *inputs: str) -> None:
        self.inputs = deque(inputs)

    def set_confirmations(self, *answers: bool) -> None:
        self.confirmations = deque(answers)

    def get_input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.inputs:
            raise RuntimeError(f"Ran out of scripted input at prompt {prompt!r}")
        return self.inputs.popleft()

    def show_message(self, message: str) -> None:
        self.messages.append(message)

    def show_error(self, error_message: str) -> None:
        self.errors.append(error_message)

    def confirm_action(self, message: str) -> bool:
        self.prompts.append(message)
        if not self.confirmations:
            raise RuntimeError(f"Ran out of scripted confirmations at {message!r}")
        return self.confirmations.popleft()


@pytest.fixture
def card_number() -> str:
    """Sample 12 digit card number."""
    return "123456789012"


@pytest.fixture
def card(card_number: str) -> Card:
    """Active card with PIN 1234."""
    return Card(card_number=card_number, expiry_date="12/25", pin="1234")


@pytest.fixture
def account_repository() -> AccountRepository:
    return AccountRepository()


@pytest.fixture
def card_repository() -> CardRepository:
    return CardRepository()


@pytest.fixture
def account_service(account_repository: AccountRepository) -> AccountService:
    """Service over one account "1234" holding 1000."""
    account_repository.save(Account("1234", "Test account", Decimal("1000.0")))
    return AccountService(account_repository)


@pytest.fixture
def auth_service(card_repository: CardRepository, card: Card) -> AuthenticationService:
    """Service with the sample card registered."""
    service = AuthenticationService(card_repository)
    service.register_card(card)
    return service


@pytest.fixture
def fake_ui() -> FakeUserInterface:
    return FakeUserInterface()
