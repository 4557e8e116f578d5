from decimal import Decimal
from urllib.parse import unquote

import pytest

from friterie.services import menu_service
from friterie.services.cart import Cart, CartLine
from friterie.services.pricing import FixedPrice, RangePrice, format_amount, format_price, lead_amount, parse_price


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("5,50 €", FixedPrice(Decimal("5.50"))),
        ("12 €", FixedPrice(Decimal("12"))),
        ("4,00 € - 5,00 €", RangePrice(Decimal("4.00"), Decimal("5.00"))),
        ("€3,5", FixedPrice(Decimal("3.5"))),
        ("Prix du marché", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_price(text, expected) -> None:
    assert parse_price(text) == expected


def test_range_with_unreadable_second_part_is_fixed() -> None:
    assert parse_price("4,00 € - sur demande") == FixedPrice(Decimal("4.00"))


def test_lead_amount_uses_first_size_and_zero_fallback() -> None:
    assert lead_amount("4,00 € - 5,00 €") == Decimal("4.00")
    assert lead_amount("gratuit") == Decimal("0")


def test_format_price() -> None:
    assert format_amount(Decimal("14")) == "14,00 €"
    assert format_amount(Decimal("2.005")) == "2,01 €"
    assert format_price(RangePrice(Decimal("4"), Decimal("5.5"))) == "4,00 € - 5,50 €"


def test_same_name_in_two_categories_gives_two_lines() -> None:
    cart = Cart()
    cart.add({"name": "Grande", "price": "4,00 €"}, "frites")
    cart.add({"name": "Grande", "price": "6,00 €"}, "boissons")
    cart.add({"name": "Grande", "price": "4,00 €"}, "frites")

    assert [(line.category_id, line.quantity) for line in cart.lines] == [("frites", 2), ("boissons", 1)]
    assert cart.total_items() == 3
    assert cart.total_amount() == Decimal("14.00")


def test_update_quantity_to_zero_removes_line() -> None:
    cart = Cart([CartLine(name="Frite", category_id="frites", price="3 €", quantity=2)])

    cart.update_quantity("Frite", "frites", 5)
    assert cart.lines[0].quantity == 5

    cart.update_quantity("Frite", "frites", 0)
    assert cart.lines == []


def test_unparsable_prices_count_as_zero() -> None:
    cart = Cart()
    cart.add({"name": "Sauce", "price": "offerte"}, "sauces")
    cart.add({"name": "Frite", "price": "3,50 €"}, "frites")

    assert cart.total_price() == "3,50 €"


def test_whatsapp_message_golden_output() -> None:
    cart = Cart()
    cart.add({"name": "Grande frite", "price": "4,00 € - 5,00 €"}, "frites")
    cart.add({"name": "Grande frite", "price": "4,00 € - 5,00 €"}, "frites")
    cart.add({"name": "Fricadelle", "price": "3,50 €"}, "snacks")

    assert cart.whatsapp_message() == (
        "Bonjour, je souhaite passer une commande :\n\n"
        "• Grande frite (x2) - 4,00 € - 5,00 €\n"
        "• Fricadelle - 3,50 €\n"
        "\nTotal : 11,50 €"
        "\n\nMerci !"
    )


def test_whatsapp_url_encodes_message_and_strips_phone() -> None:
    cart = Cart()
    cart.add({"name": "Frite", "price": "3 €"}, "frites")

    url = cart.whatsapp_url("+32 470 00 00 00")

    assert url.startswith("https://wa.me/32470000000?text=")
    assert unquote(url.split("text=", 1)[1]) == cart.whatsapp_message()


def test_empty_cart_has_no_message() -> None:
    assert Cart().whatsapp_message() == ""
    assert Cart().total_price() == "0,00 €"


def test_cart_accepts_orm_items(db) -> None:
    category = menu_service.create_category(db, "Frites")
    item = menu_service.create_item(db, category.id, name="Frite", description="d", price="3 €", highlight=True)

    cart = Cart()
    cart.add(item, category.id)

    assert cart.lines == [
        CartLine(name="Frite", category_id="frites", price="3 €", description="d", highlight=True),
    ]
