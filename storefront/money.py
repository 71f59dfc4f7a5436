"""
Money Utilities - Decimal handling and display formatting for amounts.

Prices arrive from the backend as JSON numbers; they are converted through
str() so 10.1 stays 10.1 and never becomes 10.0999...
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

MONEY_PRECISION = Decimal("0.01")

# Currency code -> symbol. Unknown codes are shown as the code itself.
CURRENCY_SYMBOLS = {
    "USD": "$",
    "BDT": "৳",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "RUB": "₽",
}

Number = Union[str, int, float, Decimal, None]


def to_decimal(value: Number) -> Decimal:
    """
    Convert any value to Decimal safely.

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number) -> Decimal:
    """Round monetary value to two decimal places, half up."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format an amount with its currency symbol, e.g. "$1,250.00" or "৳30.00".

    The currency is a label: the amount is never converted.

    Args:
        value: Amount to format
        currency: ISO currency code

    Returns:
        Formatted string
    """
    code = (currency or "USD").upper()
    formatted = f"{round_money(value):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{code} {formatted}"
    if formatted.startswith("-"):
        return f"-{symbol}{formatted[1:]}"
    return f"{symbol}{formatted}"
