"""Demo cards and accounts for running the ATM locally."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator

from bankomat.config import AuthConfig
from bankomat.generators.base import BaseGenerator
from bankomat.logging import get_logger
from bankomat.models import Account, Card
from bankomat.store import AccountRepository, CardRepository

logger = get_logger(__name__)


@dataclass
class DemoCustomer:
    """One card together with the accounts it can reach."""

    card: Card
    accounts: list[Account] = field(default_factory=list)


class DemoDataGenerator(BaseGenerator):
    """Generate demo cards and accounts.

    ``fixed_customers`` always returns the same two cards so the ATM can be
    tried with known PINs. ``generate`` adds random customers built with
    Faker for larger demos.
    """

    ACCOUNT_KINDS = ["Salary account", "Savings account", "Travel account", "Buffer account"]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "sv_SE",
        auth: AuthConfig | None = None,
    ) -> None:
        super().__init__(seed, locale)
        self.auth = auth or AuthConfig()
        self._next_account_number = 3001

    def fixed_customers(self) -> list[DemoCustomer]:
        """The well-known demo cards (PINs 1234 and 4321)."""
        return [
            DemoCustomer(
                card=self._card("123456789012", "12/25", "1234"),
                accounts=[
                    Account("1001", "Salary account", Decimal("500.00")),
                    Account("1002", "Savings account", Decimal("1200.00")),
                ],
            ),
            DemoCustomer(
                card=self._card("098765432109", "06/26", "4321"),
                accounts=[Account("2001", "Travel account", Decimal("3000.00"))],
            ),
        ]

    def generate(self) -> DemoCustomer:
        """Generate a single random customer.

        Returns
        -------
        DemoCustomer
            A card with one to three linked accounts.
        """
        card = self._card(
            card_number=self.fake.numerify("#" * 12),
            expiry_date=self.fake.credit_card_expire(),
            pin=self.fake.numerify("####"),
        )
        num_accounts = self.random.choices([1, 2, 3], weights=[0.6, 0.3, 0.1], k=1)[0]
        kinds = self.random.sample(self.ACCOUNT_KINDS, num_accounts)
        owner = self.fake.first_name()

        accounts = []
        for kind in kinds:
            balance = Decimal(self.random.randrange(0, 5_000_000)) / 100
            accounts.append(
                Account(str(self._next_account_number), f"{kind} ({owner})", balance)
            )
            self._next_account_number += 1
        return DemoCustomer(card=card, accounts=accounts)

    def generate_batch(self, count: int) -> Iterator[DemoCustomer]:
        """Generate ``count`` random customers."""
        for _ in range(count):
            yield self.generate()

    def _card(self, card_number: str, expiry_date: str, pin: str) -> Card:
        return Card(
            card_number=card_number,
            expiry_date=expiry_date,
            pin=pin,
            max_failed_attempts=self.auth.max_failed_pin_attempts,
        )


def seed_repositories(
    account_repository: AccountRepository,
    card_repository: CardRepository,
    generator: DemoDataGenerator,
    extra_cards: int = 0,
) -> list[DemoCustomer]:
    """Fill the repositories with the fixed demo set plus ``extra_cards`` random ones.

    Returns the seeded customers so the caller can print their card numbers.
    """
    customers = generator.fixed_customers()
    customers.extend(generator.generate_batch(extra_cards))

    for customer in customers:
        card_repository.save(customer.card)
        for account in customer.accounts:
            account_repository.save(account)
            account_repository.link_account_to_card(
                account.account_number, customer.card.card_number
            )

    logger.info(
        "Seeded %d cards and %d accounts",
        len(card_repository.cards),
        len(account_repository.accounts),
    )
    return customers
