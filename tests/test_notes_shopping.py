"""Tests for the shopping list note."""

from decimal import Decimal

import pytest

from pennypad.notes.models import ShoppingItem
from pennypad.notes.price import PriceExtractor
from pennypad.notes.shopping import ShoppingList


@pytest.fixture
def shopping():
    sl = ShoppingList()
    sl.add_item("Milk 3.99")
    sl.add_item("Bread")
    sl.add_item("2 x $3.50 yogurt")
    return sl


class TestShoppingItem:
    def test_display_price(self):
        item = ShoppingItem(text="Milk", recognized_price=Decimal("3.5"))
        assert item.display_price == "$3.50"

    def test_display_price_unknown(self):
        assert ShoppingItem(text="Bread").display_price == ""

    def test_ids_unique(self):
        assert ShoppingItem(text="a").id != ShoppingItem(text="a").id


class TestAddItem:
    def test_recognizes_price(self):
        sl = ShoppingList()
        item = sl.add_item("Coffee $8.49")
        assert item is not None
        assert item.recognized_price == Decimal("8.49")
        assert sl.total_items == 1

    def test_blank_ignored(self):
        sl = ShoppingList()
        assert sl.add_item("   ") is None
        assert sl.add_item("") is None
        assert sl.total_items == 0

    def test_unknown_price_kept_as_none(self):
        sl = ShoppingList()
        item = sl.add_item("Bread")
        assert item.recognized_price is None


class TestTotals:
    def test_total_skips_unknown(self, shopping):
        assert shopping.total_price == Decimal("10.99")
        assert shopping.formatted_total_price == "$10.99"

    def test_priced_items(self, shopping):
        assert [i.text for i in shopping.priced_items] == [
            "Milk 3.99",
            "2 x $3.50 yogurt",
        ]

    def test_empty_total(self):
        sl = ShoppingList()
        assert sl.total_price == Decimal("0")
        assert sl.formatted_total_price == "$0.00"

    def test_checked_items(self, shopping):
        shopping.toggle_check(shopping.items[0].id)
        assert shopping.checked_items == 1
        shopping.toggle_check(shopping.items[0].id)
        assert shopping.checked_items == 0

    def test_currency_symbol_from_extractor(self):
        sl = ShoppingList(extractor=PriceExtractor("€"))
        sl.add_item("Cheese €4.20")
        assert sl.formatted_total_price == "€4.20"


class TestEditing:
    def test_update_item_rerecognizes(self, shopping):
        shopping.update_item(1, "Bread $2.25")
        assert shopping.items[1].text == "Bread $2.25"
        assert shopping.items[1].recognized_price == Decimal("2.25")

    def test_update_item_out_of_range(self, shopping):
        shopping.update_item(10, "Ghost $1")
        shopping.update_item(-1, "Ghost $1")
        assert [i.text for i in shopping.items][-1] == "2 x $3.50 yogurt"

    def test_update_price_only(self, shopping):
        item = shopping.items[1]
        shopping.update_price(item.id, "costs 4")
        assert item.text == "Bread"
        assert item.recognized_price == Decimal("4")

    def test_update_price_clears_when_unrecognized(self, shopping):
        item = shopping.items[0]
        shopping.update_price(item.id, "no idea")
        assert item.recognized_price is None

    def test_delete_item(self, shopping):
        shopping.delete_item(shopping.items[0].id)
        assert shopping.total_items == 2
        assert shopping.items[0].text == "Bread"

    def test_delete_items(self, shopping):
        shopping.delete_items([0, 2])
        assert [i.text for i in shopping.items] == ["Bread"]


def test_from_lines():
    sl = ShoppingList.from_lines(["Milk 3.99\n", "\n", "Eggs $2\n"], title="Weekly")
    assert sl.title == "Weekly"
    assert sl.total_items == 2
    assert sl.items[0].text == "Milk 3.99"
    assert sl.total_price == Decimal("5.99")
