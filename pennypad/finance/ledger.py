"""In-memory expense ledger with spending statistics."""

from __future__ import annotations

import calendar
import logging
from collections import Counter, defaultdict
from collections.abc import Callable, Iterable
from datetime import date, datetime, timedelta

from .models import ExpenseCategory, Transaction

logger = logging.getLogger(__name__)


def _one_month_before(moment: datetime) -> datetime:
    """Same day and time one calendar month earlier, clamped to month length."""
    year, month = (moment.year, moment.month - 1) if moment.month > 1 else (moment.year - 1, 12)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class FinanceLedger:
    """Recorded expenses, newest first."""

    def __init__(
        self,
        transactions: Iterable[Transaction] = (),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.transactions: list[Transaction] = list(transactions)
        self._clock = clock

    # -- editing ----------------------------------------------------------

    def add(self, transaction: Transaction) -> None:
        self.transactions.insert(0, transaction)
        logger.info(
            "Recorded %.2f for %s", transaction.amount, transaction.category.value
        )

    def delete(self, transaction_id: str) -> None:
        self.transactions = [t for t in self.transactions if t.id != transaction_id]

    def delete_at(self, indices: Iterable[int]) -> None:
        doomed = set(indices)
        self.transactions = [
            t for i, t in enumerate(self.transactions) if i not in doomed
        ]

    def clear(self) -> None:
        self.transactions = []

    # -- statistics -------------------------------------------------------

    @property
    def today_total(self) -> float:
        today = self._clock().date()
        return sum(t.amount for t in self.transactions if t.date.date() == today)

    @property
    def week_total(self) -> float:
        since = self._clock() - timedelta(days=7)
        return sum(t.amount for t in self.transactions if t.date >= since)

    @property
    def month_total(self) -> float:
        since = _one_month_before(self._clock())
        return sum(t.amount for t in self.transactions if t.date >= since)

    @property
    def total_spent(self) -> float:
        return sum(t.amount for t in self.transactions)

    @property
    def average_transaction(self) -> float:
        if not self.transactions:
            return 0.0
        return self.total_spent / len(self.transactions)

    @property
    def most_common_category(self) -> ExpenseCategory | None:
        if not self.transactions:
            return None
        counts = Counter(t.category for t in self.transactions)
        return counts.most_common(1)[0][0]

    def total_for_category(self, category: ExpenseCategory) -> float:
        return sum(t.amount for t in self.transactions if t.category == category)

    def category_breakdown(self) -> list[tuple[ExpenseCategory, float]]:
        """Per-category totals, largest first."""
        totals: dict[ExpenseCategory, float] = defaultdict(float)
        for t in self.transactions:
            totals[t.category] += t.amount
        return sorted(totals.items(), key=lambda kv: kv[1], reverse=True)

    def recent(self, limit: int = 10) -> list[Transaction]:
        return self.transactions[:limit]

    # -- history ----------------------------------------------------------

    def search(
        self, text: str = "", category: ExpenseCategory | None = None
    ) -> list[Transaction]:
        """Filter by text in the category name or note, then by category."""
        result = self.transactions
        needle = text.casefold()
        if needle:
            result = [
                t
                for t in result
                if needle in t.category.value.casefold() or needle in t.note.casefold()
            ]
        if category is not None:
            result = [t for t in result if t.category == category]
        return result

    def group_by_day(
        self, transactions: Iterable[Transaction] | None = None
    ) -> list[tuple[date, list[Transaction]]]:
        """Group transactions by calendar day, newest day first."""
        groups: dict[date, list[Transaction]] = defaultdict(list)
        for t in self.transactions if transactions is None else transactions:
            groups[t.date.date()].append(t)
        return sorted(groups.items(), key=lambda kv: kv[0], reverse=True)
