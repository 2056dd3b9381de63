"""Card model for bankomat."""

from dataclasses import dataclass, field

from bankomat.models.enums import CardStatus

MAX_FAILED_PIN_ATTEMPTS = 3


@dataclass
class Card:
    """Bank card with PIN verification and lockout.

    The card is a two-state machine: ``ACTIVE`` (with 0 to
    ``max_failed_attempts - 1`` failed attempts) and ``BLOCKED``.
    ``BLOCKED`` is terminal; nothing in this package moves a card out of it.
    """

    card_number: str  # 12 digits
    expiry_date: str  # MM/YY
    pin: str = field(repr=False)
    status: CardStatus = CardStatus.ACTIVE
    failed_attempts: int = 0
    max_failed_attempts: int = MAX_FAILED_PIN_ATTEMPTS

    @property
    def blocked(self) -> bool:
        return self.status is CardStatus.BLOCKED

    def verify_pin(self, entered_pin: str) -> bool:
        """Check ``entered_pin`` against the stored PIN.

        A correct PIN resets the failed-attempt counter. A wrong PIN
        increments it and blocks the card once the maximum is reached.
        Blocked cards always fail without changing state.
        """
        if self.blocked:
            return False

        if entered_pin == self.pin:
            self.failed_attempts = 0
            return True

        self.failed_attempts += 1
        if self.failed_attempts >= self.max_failed_attempts:
            self.status = CardStatus.BLOCKED
        return False

    def masked_number(self) -> str:
        """Card number with all but the last four digits hidden."""
        return "*" * max(len(self.card_number) - 4, 0) + self.card_number[-4:]
