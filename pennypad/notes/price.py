"""Price recognition for free-form shopping list lines."""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation

logger = logging.getLogger(__name__)

# Digits with up to two decimals, e.g. "5", "5.9", "5.99"
_AMOUNT = r"(\d+(?:\.\d{1,2})?)"

_CURRENCY_WORDS = r"(?:dollars?|bucks?)"
_COST_KEYWORDS = r"(?:costs?|priced?|@|at)"
_TIMES = r"[xX×]"


def _to_decimal(numeral: str) -> Decimal | None:
    try:
        return Decimal(numeral)
    except (InvalidOperation, ValueError):
        return None


class PriceExtractor:
    """Recognizes a single price in a line of text.

    Matchers are tried in a fixed order and the first one that yields an
    amount wins; later matchers are never consulted:

    1. currency symbol then number (``$5.99``, ``$ 5``)
    2. number then currency word (``5 dollars``, ``3 bucks``)
    3. cost keyword then number (``costs $3``, ``@ 2.50``, ``at 4``)
    4. two-decimal number ending the line (``Milk 3.99``)
    5. quantity times unit price (``2 x $3.50`` -> 7.00)
    6. ``for`` then number (``for $10``)

    An amount that is the unit price of a quantity expression is left to
    matcher 5, so ``2 x $3.50`` is not read as 3.50 by matcher 1 or 4.
    """

    def __init__(self, currency_symbol: str = "$") -> None:
        if not currency_symbol:
            raise ValueError("currency_symbol must not be empty")
        self.currency_symbol = currency_symbol

        sym = f"(?:{re.escape(currency_symbol)})"
        self._symbol_re = re.compile(sym + r"\s*" + _AMOUNT)
        self._word_re = re.compile(_AMOUNT + r"\s*" + _CURRENCY_WORDS, re.IGNORECASE)
        self._cost_re = re.compile(
            _COST_KEYWORDS + r"\s*" + sym + r"?\s*" + _AMOUNT, re.IGNORECASE
        )
        self._trailing_re = re.compile(r"(\d+\.\d{2})\s*$")
        self._quantity_re = re.compile(
            r"(\d+)\s*" + _TIMES + r"\s*" + sym + r"?\s*" + _AMOUNT
        )
        self._for_re = re.compile(r"for\s+" + sym + r"?\s*" + _AMOUNT, re.IGNORECASE)
        # Lookahead so overlapping chains like "1x2x3" report every operand;
        # anchored to the start of a digit run to stay linear.
        self._unit_price_re = re.compile(
            r"(?<!\d)(?=\d+\s*" + _TIMES + r"\s*" + sym + r"?\s*(\d))"
        )

        self._matchers = (
            self._match_symbol,
            self._match_currency_word,
            self._match_cost_keyword,
            self._match_trailing_decimal,
            self._match_quantity,
            self._match_for,
        )

    def extract(self, text: str | None) -> Decimal | None:
        """Return the recognized price in ``text``, or None.

        Never raises: text without a recognizable price is a normal outcome.
        """
        if not text or not text.strip():
            return None

        for matcher in self._matchers:
            amount = matcher(text)
            if amount is not None:
                logger.debug("%s: %r -> %s", matcher.__name__, text, amount)
                return amount
        return None

    __call__ = extract

    # -- matchers ---------------------------------------------------------

    def _match_symbol(self, text: str) -> Decimal | None:
        return self._first_amount(self._symbol_re, text)

    def _match_currency_word(self, text: str) -> Decimal | None:
        return self._first_amount(self._word_re, text)

    def _match_cost_keyword(self, text: str) -> Decimal | None:
        return self._first_amount(self._cost_re, text)

    def _match_trailing_decimal(self, text: str) -> Decimal | None:
        return self._first_amount(self._trailing_re, text)

    def _match_quantity(self, text: str) -> Decimal | None:
        m = self._quantity_re.search(text)
        if not m:
            return None
        quantity = _to_decimal(m.group(1))
        unit_price = _to_decimal(m.group(2))
        if quantity is None or unit_price is None:
            return None
        return quantity * unit_price

    def _match_for(self, text: str) -> Decimal | None:
        return self._first_amount(self._for_re, text)

    def _first_amount(self, pattern: re.Pattern[str], text: str) -> Decimal | None:
        """First match of ``pattern`` that is not a quantity's unit price."""
        unit_prices = self._unit_price_starts(text)
        for m in pattern.finditer(text):
            if m.start(1) in unit_prices:
                continue
            return _to_decimal(m.group(1))
        return None

    def _unit_price_starts(self, text: str) -> set[int]:
        """Offsets where the unit price of a ``<n> x <price>`` expression begins."""
        return {m.start(1) for m in self._unit_price_re.finditer(text)}


_default_extractor = PriceExtractor()


def extract_price(text: str | None) -> Decimal | None:
    """Recognize a dollar price in ``text`` with the default extractor."""
    return _default_extractor.extract(text)


def format_price(amount: Decimal | None, symbol: str = "$") -> str:
    """Render ``amount`` as ``$5.99``; an unknown price renders as ``""``."""
    if amount is None:
        return ""
    return f"{symbol}{amount:.2f}"
