"""Card authentication service."""

import re

from bankomat.config import AuthConfig
from bankomat.logging import get_logger
from bankomat.models import AuthenticationResult, Card
from bankomat.store import CardRepository

logger = get_logger(__name__)


class AuthenticationService:
    """Validate card numbers, check PINs and track which cards are logged in.

    ``authenticate`` never raises for an unknown card or a wrong PIN; it
    returns an ``AuthenticationResult`` for the caller to act on.
    """

    def __init__(self, card_repository: CardRepository, config: AuthConfig | None = None) -> None:
        self.card_repository = card_repository
        self.config = config or AuthConfig()
        self._card_number_re = re.compile(self.config.card_number_pattern)
        self._authenticated_cards: dict[str, bool] = {}

    def validate_card_number(self, card_number: str | None) -> bool:
        """Format check only; does not look the card up."""
        if not isinstance(card_number, str):
            return False
        # re \d also matches non-ASCII digits
        return card_number.isascii() and self._card_number_re.fullmatch(card_number) is not None

    def register_card(self, card: Card) -> None:
        self.card_repository.save(card)

    def authenticate(self, card_number: str, pin: str) -> AuthenticationResult:
        card = self.card_repository.find_by_number(card_number)

        if card is None:
            logger.info("Authentication failed: unknown card")
            return AuthenticationResult.INVALID_CARD

        if card.blocked:
            logger.info("Authentication refused: card %s is blocked", card.masked_number())
            return AuthenticationResult.CARD_BLOCKED

        if card.verify_pin(pin):
            self._authenticated_cards[card_number] = True
            logger.info("Card %s authenticated", card.masked_number())
            return AuthenticationResult.SUCCESS

        if card.blocked:
            logger.warning(
                "Card %s blocked after %d failed PIN attempts",
                card.masked_number(),
                card.failed_attempts,
            )
        else:
            logger.info(
                "Wrong PIN for card %s (%d failed attempts)",
                card.masked_number(),
                card.failed_attempts,
            )
        return AuthenticationResult.WRONG_PIN

    def has_access_to_bank_services(self, card_number: str) -> bool:
        return self._authenticated_cards.get(card_number, False)

    def revoke_access(self, card_number: str) -> None:
        """End the card's session; it must authenticate again."""
        self._authenticated_cards.pop(card_number, None)
