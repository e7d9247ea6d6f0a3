"""Currency codes and monetary values expressed in minor units."""

from __future__ import annotations

from dataclasses import dataclass

EUR = "EUR"
RON = "RON"
USD = "USD"
BTC = "BTC"
GBP = "GBP"

VALID_CURRENCIES: tuple[str, ...] = (EUR, RON, USD, BTC, GBP)

_VALID_CURRENCIES_TEXT = "[EUR, RON, USD, BTC, GBP]"

DEFAULT_MINOR_EXPONENT = -2


class InvalidCurrencyError(ValueError):
    """Raised when a currency code is not one of the supported codes."""

    def __init__(self, attempted_currency: str) -> None:
        self.attempted_currency = attempted_currency
        super().__init__(
            f"currency {attempted_currency} does not exist, "
            f"must be one of {_VALID_CURRENCIES_TEXT}"
        )


@dataclass(frozen=True)
class Value:
    """An amount in a currency; multiply by 10**exponent for base units.

    A value of 100 with exponent -2 in USD is one dollar.
    """

    currency: str
    amount: int
    exponent: int


def validate_currency(currency: str) -> None:
    """Raise InvalidCurrencyError unless the code is a supported currency."""
    if currency not in VALID_CURRENCIES:
        raise InvalidCurrencyError(currency)


def new_value(amount: int, currency: str, exp: int) -> Value:
    """Create a value after checking the currency code."""
    validate_currency(currency)
    return Value(currency=currency, amount=amount, exponent=exp)


def new_value_based_on_minor_currency(
    amount: int, currency: str, exponent: int | None = None
) -> Value:
    """Create a value whose exponent defaults to the minor unit (-2)."""
    validate_currency(currency)
    actual = DEFAULT_MINOR_EXPONENT if exponent is None else exponent
    return Value(currency=currency, amount=amount, exponent=actual)


def usd_value(amount: int) -> Value:
    """A USD value in cents."""
    return Value(currency=USD, amount=amount, exponent=DEFAULT_MINOR_EXPONENT)


def eur_value(amount: int) -> Value:
    """A EUR value in cents."""
    return Value(currency=EUR, amount=amount, exponent=DEFAULT_MINOR_EXPONENT)


def ron_value(amount: int) -> Value:
    """A RON value in bani."""
    return Value(currency=RON, amount=amount, exponent=DEFAULT_MINOR_EXPONENT)