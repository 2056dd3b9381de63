"""Custom exception hierarchy for bankomat."""


class BankomatError(Exception):
    """Base exception for all bankomat errors."""


class EntityNotFoundError(BankomatError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a card/account link points at a missing account."""


class InvalidEntityStateError(BankomatError):
    """Raised when an entity would be constructed in an invalid state."""


class InvalidAmountError(BankomatError):
    """Raised when a monetary amount or note count is not acceptable."""


class InvalidDenominationError(InvalidAmountError):
    """Raised when a note denomination is not accepted by the machine."""

    def __init__(self, denomination: int) -> None:
        self.denomination = denomination
        super().__init__(f"Invalid note denomination: {denomination}")


class ConfigurationError(BankomatError):
    """Raised when configuration is invalid or missing."""
