"""Storefront cart: quantities, totals and the WhatsApp order message."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any
from urllib.parse import quote

from friterie.services.pricing import format_amount, lead_amount

WHATSAPP_GREETING: str = "Bonjour, je souhaite passer une commande :\n\n"
WHATSAPP_CLOSING: str = "\n\nMerci !"


def _field(item: Any, name: str, default: Any = None) -> Any:
    if isinstance(item, dict):
        return item.get(name, default)
    return getattr(item, name, default)


@dataclass(frozen=True)
class CartLine:
    name: str
    category_id: str
    price: str
    quantity: int = 1
    description: str = ""
    image: str | None = None
    highlight: bool = False

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.category_id)


class Cart:
    """Ordered cart lines keyed by ``(item name, category id)``.

    The same dish name in two categories gives two lines; adding a dish that
    is already in the cart bumps its quantity.
    """

    def __init__(self, lines: list[CartLine] | None = None) -> None:
        self.lines: list[CartLine] = list(lines or [])

    def _index(self, name: str, category_id: str) -> int | None:
        for index, line in enumerate(self.lines):
            if line.key == (name, category_id):
                return index
        return None

    def add(self, item: Any, category_id: str) -> None:
        """Add one unit of a menu item (ORM row, mapping or ``CartLine``)."""
        name = _field(item, "name")
        index = self._index(name, category_id)
        if index is not None:
            line = self.lines[index]
            self.lines[index] = replace(line, quantity=line.quantity + 1)
            return
        self.lines.append(
            CartLine(
                name=name,
                category_id=category_id,
                price=_field(item, "price") or "",
                quantity=1,
                description=_field(item, "description") or "",
                image=_field(item, "image"),
                highlight=bool(_field(item, "highlight", False)),
            )
        )

    def remove(self, name: str, category_id: str) -> None:
        self.lines = [line for line in self.lines if line.key != (name, category_id)]

    def update_quantity(self, name: str, category_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove(name, category_id)
            return
        index = self._index(name, category_id)
        if index is not None:
            self.lines[index] = replace(self.lines[index], quantity=quantity)

    def clear(self) -> None:
        self.lines = []

    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    def total_amount(self) -> Decimal:
        """Sum of lines, pricing size ranges at their first option."""
        return sum((lead_amount(line.price) * line.quantity for line in self.lines), Decimal("0"))

    def total_price(self) -> str:
        return format_amount(self.total_amount())

    def whatsapp_message(self) -> str:
        if not self.lines:
            return ""
        message = WHATSAPP_GREETING
        for line in self.lines:
            message += f"• {line.name}"
            if line.quantity > 1:
                message += f" (x{line.quantity})"
            message += f" - {line.price}\n"
        message += f"\nTotal : {self.total_price()}"
        message += WHATSAPP_CLOSING
        return message

    def whatsapp_url(self, phone: str) -> str:
        digits = "".join(ch for ch in phone if ch.isdigit())
        return f"https://wa.me/{digits}?text={quote(self.whatsapp_message())}"
