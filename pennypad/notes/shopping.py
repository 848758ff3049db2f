"""Shopping list with per-line price recognition and running totals."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from .models import ShoppingItem
from .price import PriceExtractor, format_price

logger = logging.getLogger(__name__)


class ShoppingList:
    """An ordered shopping note whose lines carry recognized prices."""

    def __init__(
        self,
        title: str = "Shopping List",
        extractor: PriceExtractor | None = None,
    ) -> None:
        self.title = title
        self.items: list[ShoppingItem] = []
        self._extractor = extractor or PriceExtractor()

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        title: str = "Shopping List",
        extractor: PriceExtractor | None = None,
    ) -> ShoppingList:
        """Build a list from text lines, skipping blank ones."""
        shopping = cls(title=title, extractor=extractor)
        for line in lines:
            shopping.add_item(line.rstrip("\r\n"))
        return shopping

    # -- totals -----------------------------------------------------------

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def checked_items(self) -> int:
        return sum(1 for item in self.items if item.is_checked)

    @property
    def priced_items(self) -> list[ShoppingItem]:
        """Items whose price was recognized."""
        return [item for item in self.items if item.recognized_price is not None]

    @property
    def total_price(self) -> Decimal:
        """Sum of recognized prices; items with an unknown price are skipped."""
        return sum(
            (item.recognized_price for item in self.priced_items),
            Decimal("0"),
        )

    @property
    def formatted_total_price(self) -> str:
        return format_price(self.total_price, self._extractor.currency_symbol)

    # -- editing ----------------------------------------------------------

    def add_item(self, text: str) -> ShoppingItem | None:
        """Append a line and recognize its price.

        Returns:
            The new item, or None if ``text`` is blank.
        """
        if not text.strip():
            return None

        item = ShoppingItem(text=text, recognized_price=self._extractor.extract(text))
        self.items.append(item)
        logger.info("Added %r (price: %s)", text, item.recognized_price)
        return item

    def update_item(self, index: int, text: str) -> None:
        """Replace the text of the item at ``index`` and re-recognize its price."""
        if not 0 <= index < len(self.items):
            return
        item = self.items[index]
        item.text = text
        item.recognized_price = self._extractor.extract(text)
        logger.debug("Updated item %d: %r -> %s", index, text, item.recognized_price)

    def update_price(self, item_id: str, text: str) -> None:
        """Re-recognize only the price of ``item_id`` from ``text``."""
        item = self._find(item_id)
        if item is not None:
            item.recognized_price = self._extractor.extract(text)

    def toggle_check(self, item_id: str) -> None:
        item = self._find(item_id)
        if item is not None:
            item.is_checked = not item.is_checked

    def delete_item(self, item_id: str) -> None:
        self.items = [item for item in self.items if item.id != item_id]

    def delete_items(self, indices: Iterable[int]) -> None:
        """Delete the items at the given positions."""
        doomed = set(indices)
        self.items = [item for i, item in enumerate(self.items) if i not in doomed]

    def _find(self, item_id: str) -> ShoppingItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None
