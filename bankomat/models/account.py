"""Account model for bankomat."""

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from bankomat.config import CurrencyConfig
from bankomat.exceptions import InvalidEntityStateError

CENT = Decimal("0.01")

# Amounts of 10**15 or more are refused outright.
MAX_AMOUNT_DIGITS = 15


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a user or config supplied amount to ``Decimal``.

    Floats go through ``str`` so ``1000.1`` stays ``Decimal("1000.1")``.
    """
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidEntityStateError(f"Not a valid amount: {value!r}") from e


def is_valid_amount(value: Decimal) -> bool:
    """True for a finite, positive amount with at most two decimals.

    Trailing zeros do not count as decimals, so ``Decimal("10.000")`` is
    accepted. Nothing here rounds, so huge exponents are cheap to reject.
    """
    if not value.is_finite() or value <= 0:
        return False
    if value.adjusted() >= MAX_AMOUNT_DIGITS:
        return False
    _, digits, exponent = value.as_tuple()
    digit_text = "".join(map(str, digits))
    trailing_zeros = len(digit_text) - len(digit_text.rstrip("0"))
    return exponent + trailing_zeros >= -2


def format_amount(
    amount: Decimal | int | float,
    symbol: str = "kr",
    decimal_separator: str = ",",
    thousands_separator: str = " ",
) -> str:
    """Format an amount for display, e.g. ``5000`` -> ``"5 000,00 kr"``."""
    text = f"{to_decimal(amount):,.2f}"
    integer, _, fraction = text.partition(".")
    integer = integer.replace(",", thousands_separator)
    return f"{integer}{decimal_separator}{fraction} {symbol}"


@dataclass(frozen=True)
class Account:
    """Bank account value.

    Accounts are immutable: a balance change is stored as a new ``Account``
    under the same account number (see ``with_balance``). Balances are
    rounded half up to whole cents.
    """

    account_number: str
    account_name: str
    balance: Decimal

    def __post_init__(self) -> None:
        if not self.account_number or not self.account_number.strip():
            raise InvalidEntityStateError("Account number cannot be empty")
        if not self.account_name or not self.account_name.strip():
            raise InvalidEntityStateError("Account name cannot be empty")

        balance = to_decimal(self.balance)
        if not balance.is_finite():
            raise InvalidEntityStateError(f"Balance must be a finite amount, got {balance}")
        if balance < 0:
            raise InvalidEntityStateError("Balance cannot be negative")
        if balance.adjusted() >= MAX_AMOUNT_DIGITS:
            raise InvalidEntityStateError(f"Balance is out of range: {balance}")
        object.__setattr__(self, "balance", balance.quantize(CENT, rounding=ROUND_HALF_UP))

    def with_balance(self, new_balance: Decimal | int | float) -> "Account":
        """Return a copy of this account carrying ``new_balance``."""
        return replace(self, balance=new_balance)

    def formatted_balance(self, currency: CurrencyConfig | None = None) -> str:
        """Balance formatted for display, e.g. ``"1 000,00 kr"``."""
        currency = currency or CurrencyConfig()
        return format_amount(
            self.balance,
            currency.symbol,
            currency.decimal_separator,
            currency.thousands_separator,
        )
