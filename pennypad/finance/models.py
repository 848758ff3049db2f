"""Data models for expense tracking."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ExpenseCategory(str, Enum):
    COFFEE = "Coffee"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    GROCERIES = "Groceries"
    TRANSPORTATION = "Transportation"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    UTILITIES = "Utilities"
    HEALTHCARE = "Healthcare"
    SUBSCRIPTIONS = "Subscriptions"
    SNACKS = "Snacks"
    DRINKS = "Drinks"
    FAST_FOOD = "Fast Food"
    GAS = "Gas"
    PARKING = "Parking"
    OTHER = "Other"

    @property
    def icon(self) -> str:
        return _ICONS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    @classmethod
    def parse(cls, name: str) -> ExpenseCategory:
        """Look up a category by display name or member name, ignoring case."""
        key = name.strip().lower()
        for category in cls:
            if key in (category.value.lower(), category.name.lower()):
                return category
        raise ValueError(f"Unknown expense category: {name!r}")


_ICONS: dict[ExpenseCategory, str] = {
    ExpenseCategory.COFFEE: "cup.and.saucer.fill",
    ExpenseCategory.LUNCH: "fork.knife",
    ExpenseCategory.DINNER: "fork.knife.circle.fill",
    ExpenseCategory.GROCERIES: "cart.fill",
    ExpenseCategory.TRANSPORTATION: "bus.fill",
    ExpenseCategory.ENTERTAINMENT: "film.fill",
    ExpenseCategory.SHOPPING: "bag.fill",
    ExpenseCategory.UTILITIES: "bolt.fill",
    ExpenseCategory.HEALTHCARE: "cross.fill",
    ExpenseCategory.SUBSCRIPTIONS: "repeat.circle.fill",
    ExpenseCategory.SNACKS: "birthday.cake.fill",
    ExpenseCategory.DRINKS: "wineglass.fill",
    ExpenseCategory.FAST_FOOD: "takeoutbag.and.cup.and.straw.fill",
    ExpenseCategory.GAS: "fuelpump.fill",
    ExpenseCategory.PARKING: "parkingsign.circle.fill",
    ExpenseCategory.OTHER: "ellipsis.circle.fill",
}

_COLORS: dict[ExpenseCategory, str] = {
    ExpenseCategory.COFFEE: "brown",
    ExpenseCategory.LUNCH: "orange",
    ExpenseCategory.DINNER: "red",
    ExpenseCategory.GROCERIES: "green",
    ExpenseCategory.TRANSPORTATION: "blue",
    ExpenseCategory.ENTERTAINMENT: "purple",
    ExpenseCategory.SHOPPING: "pink",
    ExpenseCategory.UTILITIES: "yellow",
    ExpenseCategory.HEALTHCARE: "teal",
    ExpenseCategory.SUBSCRIPTIONS: "indigo",
    ExpenseCategory.SNACKS: "mint",
    ExpenseCategory.DRINKS: "grape",
    ExpenseCategory.FAST_FOOD: "coral",
    ExpenseCategory.GAS: "slate",
    ExpenseCategory.PARKING: "navy",
    ExpenseCategory.OTHER: "gray",
}


@dataclass
class Transaction:
    """A single recorded expense."""

    amount: float
    category: ExpenseCategory
    note: str = ""
    date: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
