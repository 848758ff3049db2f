"""Data models for shopping list notes."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from decimal import Decimal

from .price import format_price


@dataclass
class ShoppingItem:
    """A single line of a shopping note."""

    text: str
    recognized_price: Decimal | None = None  # None = unknown, not free
    is_checked: bool = False
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def display_price(self) -> str:
        return format_price(self.recognized_price)
