"""Price strings as written on the menu board.

Prices are free text such as ``"5,50 €"``. The one structured convention is a
size range ``"5,50 € - 6,50 €"``. Parsing never raises: text that does not
look like a price parses to ``None`` and counts as zero in totals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

RANGE_SEPARATOR: str = " - "
CURRENCY_SUFFIX: str = " €"
_NON_PRICE_CHARS = re.compile(r"[^\d,]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d+)?|\.\d+")
CENTS = Decimal("0.01")


@dataclass(frozen=True)
class FixedPrice:
    amount: Decimal

    @property
    def base_amount(self) -> Decimal:
        return self.amount


@dataclass(frozen=True)
class RangePrice:
    """Two selectable sizes; the first one is the default."""

    low: Decimal
    high: Decimal

    @property
    def base_amount(self) -> Decimal:
        return self.low


Price = FixedPrice | RangePrice


def _parse_amount(text: str) -> Decimal | None:
    numeric = _NON_PRICE_CHARS.sub("", text).replace(",", ".", 1)
    match = _LEADING_NUMBER.match(numeric)
    if match is None:
        return None
    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return None


def parse_price(text: str | None) -> Price | None:
    """Parse menu price text into a fixed price or a size range."""
    if not text:
        return None
    parts = text.split(RANGE_SEPARATOR)
    first = _parse_amount(parts[0])
    if first is None:
        return None
    if len(parts) == 2:
        second = _parse_amount(parts[1])
        if second is not None:
            return RangePrice(low=first, high=second)
    return FixedPrice(amount=first)


def lead_amount(text: str | None) -> Decimal:
    """Amount used for cart totals: the first option, or zero when unparsable."""
    price = parse_price(text)
    return price.base_amount if price is not None else Decimal("0")


def format_amount(amount: Decimal) -> str:
    """Render ``Decimal("14")`` as ``"14,00 €"``."""
    rounded = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{rounded}".replace(".", ",") + CURRENCY_SUFFIX


def format_price(price: Price) -> str:
    if isinstance(price, RangePrice):
        return f"{format_amount(price.low)}{RANGE_SEPARATOR}{format_amount(price.high)}"
    return format_amount(price.amount)
