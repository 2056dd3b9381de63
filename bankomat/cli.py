"""Command line entry point for the ATM simulator."""

import argparse
import dataclasses

from bankomat.config import BankomatConfig
from bankomat.generators import DemoDataGenerator, seed_repositories
from bankomat.logging import get_logger, setup_logging
from bankomat.services import AccountService, AuthenticationService, TransactionLog
from bankomat.store import AccountRepository, CardRepository
from bankomat.ui import ConsoleMenu, ConsoleUI

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bankomat",
        description="Simulated ATM with in-memory cards and accounts",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for generated demo customers",
    )
    parser.add_argument(
        "--extra-cards",
        type=int,
        default=None,
        help="Number of random demo cards to create besides the fixed ones",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["standard", "json"],
        default=None,
        help="Log output format",
    )
    parser.add_argument(
        "--invalid-card-free",
        action="store_true",
        help="Do not count unknown card numbers against the login attempts",
    )
    return parser


def apply_args(config: BankomatConfig, args: argparse.Namespace) -> BankomatConfig:
    """Overlay command line flags on a config loaded from the environment."""
    seed = config.seed
    if args.seed is not None:
        seed = dataclasses.replace(seed, seed=args.seed)
    if args.extra_cards is not None:
        seed = dataclasses.replace(seed, extra_cards=args.extra_cards)

    auth = config.auth
    if args.invalid_card_free:
        auth = dataclasses.replace(auth, invalid_card_consumes_attempt=False)

    return dataclasses.replace(
        config,
        seed=seed,
        auth=auth,
        log_level=args.log_level or config.log_level,
        log_format=args.log_format or config.log_format,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = apply_args(BankomatConfig.from_env(), args)
    setup_logging(config.log_level, config.log_format)

    account_repository = AccountRepository()
    card_repository = CardRepository()
    generator = DemoDataGenerator(
        seed=config.seed.seed, locale=config.seed.locale, auth=config.auth
    )
    customers = seed_repositories(
        account_repository, card_repository, generator, config.seed.extra_cards
    )
    logger.debug("Demo cards: %s", ", ".join(c.card.masked_number() for c in customers))

    auth_service = AuthenticationService(card_repository, config.auth)
    account_service = AccountService(account_repository, config.currency, TransactionLog())
    menu = ConsoleMenu(ConsoleUI(), auth_service, account_service, config.auth)

    try:
        logged_in = menu.start()
    except (EOFError, KeyboardInterrupt):
        print()
        logger.info("Input closed, shutting down")
        return 0
    return 0 if logged_in else 1


if __name__ == "__main__":
    raise SystemExit(main())
