#!/usr/bin/env python3
"""Print the demo cards and accounts the ATM is seeded with.

Handy when trying the console ATM with ``--extra-cards``: run this with the
same ``--seed`` to see the generated card numbers and PINs.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bankomat.generators import DemoDataGenerator, seed_repositories
from bankomat.store import AccountRepository, CardRepository


def main() -> None:
    """Seed fresh repositories and print what went in."""
    parser = argparse.ArgumentParser(description="Show bankomat demo cards")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--extra-cards",
        type=int,
        default=0,
        help="Number of random demo cards besides the fixed ones",
    )
    args = parser.parse_args()

    accounts = AccountRepository()
    cards = CardRepository()
    customers = seed_repositories(
        accounts, cards, DemoDataGenerator(seed=args.seed), args.extra_cards
    )

    print("=" * 60)
    print("Demo cards")
    print("=" * 60)
    for customer in customers:
        card = customer.card
        print(f"\nCard {card.card_number}  expires {card.expiry_date}  PIN {card.pin}")
        for account in customer.accounts:
            print(
                f"  {account.account_number:>6}  {account.account_name:<40}"
                f"{account.formatted_balance():>16}"
            )

    print("\n" + "=" * 60)
    for name, count in {**cards.summary(), **accounts.summary()}.items():
        print(f"{name + ':':18}{count}")


if __name__ == "__main__":
    main()
