"""Shopping list notes with naive price recognition."""

from .models import ShoppingItem
from .price import PriceExtractor, extract_price, format_price
from .shopping import ShoppingList

__all__ = [
    "PriceExtractor",
    "extract_price",
    "format_price",
    "ShoppingItem",
    "ShoppingList",
]
