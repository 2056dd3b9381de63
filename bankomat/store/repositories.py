"""In-memory card and account repositories with link tracking."""

from dataclasses import dataclass, field

from bankomat.exceptions import ReferentialIntegrityError
from bankomat.models import Account, Card


@dataclass
class AccountRepository:
    """In-memory store for accounts and their card links.

    A card may reach several accounts (salary, savings) and an account may
    be reached by several cards (joint account), so links are kept in both
    directions.
    """

    accounts: dict[str, Account] = field(default_factory=dict)

    # Relationship indexes
    _card_accounts: dict[str, list[str]] = field(default_factory=dict)
    _account_cards: dict[str, list[str]] = field(default_factory=dict)

    def save(self, account: Account) -> None:
        """Insert or replace an account, keyed by account number."""
        self.accounts[account.account_number] = account

    def find_by_number(self, account_number: str) -> Account | None:
        return self.accounts.get(account_number)

    def link_account_to_card(self, account_number: str, card_number: str) -> None:
        """Link an existing account to a card.

        Raises
        ------
        ReferentialIntegrityError
            If the account does not exist. No link is recorded.
        """
        if account_number not in self.accounts:
            raise ReferentialIntegrityError(f"Account {account_number} not found")

        card_accounts = self._card_accounts.setdefault(card_number, [])
        if account_number not in card_accounts:
            card_accounts.append(account_number)

        account_cards = self._account_cards.setdefault(account_number, [])
        if card_number not in account_cards:
            account_cards.append(card_number)

    # Query methods
    def find_by_card_number(self, card_number: str) -> list[Account]:
        """Get all accounts linked to a card, in link order."""
        account_numbers = self._card_accounts.get(card_number, [])
        return [self.accounts[number] for number in account_numbers]

    def find_card_numbers_by_account(self, account_number: str) -> list[str]:
        """Get the numbers of all cards linked to an account."""
        return list(self._account_cards.get(account_number, []))

    def is_account_linked_to_card(self, account_number: str, card_number: str) -> bool:
        return card_number in self._account_cards.get(account_number, [])

    def number_of_linked_cards(self, account_number: str) -> int:
        return len(self._account_cards.get(account_number, []))

    def summary(self) -> dict[str, int]:
        """Return summary counts."""
        return {
            "accounts": len(self.accounts),
            "links": sum(len(numbers) for numbers in self._card_accounts.values()),
        }


@dataclass
class CardRepository:
    """In-memory store for cards, keyed by card number."""

    cards: dict[str, Card] = field(default_factory=dict)

    def save(self, card: Card) -> None:
        """Insert or replace a card."""
        self.cards[card.card_number] = card

    def find_by_number(self, card_number: str) -> Card | None:
        return self.cards.get(card_number)

    def summary(self) -> dict[str, int]:
        """Return summary counts."""
        return {
            "cards": len(self.cards),
            "blocked_cards": sum(1 for card in self.cards.values() if card.blocked),
        }
