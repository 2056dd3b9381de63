"""Configuration management for bankomat."""

from dataclasses import dataclass, field

from bankomat.exceptions import ConfigurationError


@dataclass
class AuthConfig:
    """Card authentication rules."""

    card_number_pattern: str = r"\d{12}"
    max_failed_pin_attempts: int = 3
    max_login_attempts: int = 3
    # Whether an unknown or malformed card number uses up a login attempt
    invalid_card_consumes_attempt: bool = True


@dataclass
class CurrencyConfig:
    """Currency display and accepted notes."""

    symbol: str = "kr"
    decimal_separator: str = ","
    thousands_separator: str = " "
    denominations: tuple[int, ...] = (100, 200, 500)


@dataclass
class SeedConfig:
    """Demo data seeding."""

    seed: int | None = None
    extra_cards: int = 0
    locale: str = "sv_SE"


@dataclass
class BankomatConfig:
    """Main configuration for bankomat."""

    auth: AuthConfig = field(default_factory=AuthConfig)
    currency: CurrencyConfig = field(default_factory=CurrencyConfig)
    seed: SeedConfig = field(default_factory=SeedConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "BankomatConfig":
        """Create config from environment variables."""
        import os

        auth = AuthConfig(
            max_failed_pin_attempts=_env_int("BANKOMAT_MAX_PIN_ATTEMPTS", 3),
            max_login_attempts=_env_int("BANKOMAT_MAX_LOGIN_ATTEMPTS", 3),
            invalid_card_consumes_attempt=os.getenv(
                "BANKOMAT_INVALID_CARD_CONSUMES_ATTEMPT", "true"
            ).lower() == "true",
        )

        denominations_str = os.getenv("BANKOMAT_DENOMINATIONS")
        currency = CurrencyConfig(
            denominations=(
                _parse_denominations(denominations_str)
                if denominations_str
                else CurrencyConfig().denominations
            ),
        )

        seed_str = os.getenv("BANKOMAT_SEED")
        seed = SeedConfig(
            seed=_parse_int("BANKOMAT_SEED", seed_str) if seed_str else None,
            extra_cards=_env_int("BANKOMAT_EXTRA_CARDS", 0),
            locale=os.getenv("BANKOMAT_LOCALE", "sv_SE"),
        )

        return cls(
            auth=auth,
            currency=currency,
            seed=seed,
            log_level=os.getenv("BANKOMAT_LOG_LEVEL", "INFO"),
            log_format=os.getenv("BANKOMAT_LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int) -> int:
    import os

    value = os.getenv(name)
    if value is None:
        return default
    parsed = _parse_int(name, value)
    if parsed < 0:
        raise ConfigurationError(f"{name} must not be negative, got {parsed}")
    return parsed


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from e


def _parse_denominations(value: str) -> tuple[int, ...]:
    """Parse a comma separated list such as ``"100,200,500"``."""
    parts = [p.strip() for p in value.split(",") if p.strip()]
    if not parts:
        raise ConfigurationError("BANKOMAT_DENOMINATIONS must list at least one note")
    denominations = tuple(_parse_int("BANKOMAT_DENOMINATIONS", p) for p in parts)
    if any(d <= 0 for d in denominations):
        raise ConfigurationError("BANKOMAT_DENOMINATIONS must be positive")
    return denominations
