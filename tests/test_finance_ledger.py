"""Tests for the expense ledger and interval amount entry."""

from datetime import date, datetime

import pytest

from pennypad.finance.interval import IntervalInput
from pennypad.finance.ledger import FinanceLedger, _one_month_before
from pennypad.finance.models import ExpenseCategory, Transaction

NOW = datetime(2025, 3, 31, 18, 0)


@pytest.fixture
def ledger():
    ledger = FinanceLedger(clock=lambda: NOW)
    entries = [
        Transaction(50.0, ExpenseCategory.GROCERIES, "", datetime(2025, 2, 10, 9, 0)),
        Transaction(20.0, ExpenseCategory.DINNER, "sushi", datetime(2025, 3, 1, 20, 0)),
        Transaction(12.0, ExpenseCategory.LUNCH, "", datetime(2025, 3, 27, 12, 30)),
        Transaction(4.5, ExpenseCategory.COFFEE, "latte", datetime(2025, 3, 31, 8, 0)),
        Transaction(3.5, ExpenseCategory.COFFEE, "", datetime(2025, 3, 31, 15, 0)),
    ]
    for t in entries:
        ledger.add(t)
    return ledger


class TestEditing:
    def test_newest_first(self, ledger):
        assert ledger.transactions[0].amount == 3.5
        assert ledger.transactions[-1].amount == 50.0

    def test_delete(self, ledger):
        target = ledger.transactions[0]
        ledger.delete(target.id)
        assert target not in ledger.transactions
        assert len(ledger.transactions) == 4

    def test_delete_at(self, ledger):
        ledger.delete_at([0, 1])
        assert [t.amount for t in ledger.transactions] == [12.0, 20.0, 50.0]

    def test_clear(self, ledger):
        ledger.clear()
        assert ledger.transactions == []
        assert ledger.most_common_category is None
        assert ledger.average_transaction == 0.0


class TestStatistics:
    def test_today_total(self, ledger):
        assert ledger.today_total == pytest.approx(8.0)

    def test_week_total(self, ledger):
        assert ledger.week_total == pytest.approx(20.0)

    def test_month_total(self, ledger):
        # One month before 31 March is 28 February
        assert ledger.month_total == pytest.approx(40.0)

    def test_total_for_category(self, ledger):
        assert ledger.total_for_category(ExpenseCategory.COFFEE) == pytest.approx(8.0)
        assert ledger.total_for_category(ExpenseCategory.GAS) == 0

    def test_category_breakdown_sorted(self, ledger):
        breakdown = ledger.category_breakdown()
        assert [c for c, _ in breakdown] == [
            ExpenseCategory.GROCERIES,
            ExpenseCategory.DINNER,
            ExpenseCategory.LUNCH,
            ExpenseCategory.COFFEE,
        ]

    def test_recent(self, ledger):
        assert len(ledger.recent(2)) == 2
        assert len(ledger.recent()) == 5

    def test_average_and_most_common(self, ledger):
        assert ledger.average_transaction == pytest.approx(90.0 / 5)
        assert ledger.most_common_category is ExpenseCategory.COFFEE


class TestHistory:
    def test_search_note(self, ledger):
        assert [t.note for t in ledger.search("SUSHI")] == ["sushi"]

    def test_search_category_name(self, ledger):
        assert len(ledger.search("coff")) == 2

    def test_search_with_category_filter(self, ledger):
        result = ledger.search("", category=ExpenseCategory.LUNCH)
        assert [t.amount for t in result] == [12.0]

    def test_group_by_day(self, ledger):
        groups = ledger.group_by_day()
        assert groups[0][0] == date(2025, 3, 31)
        assert len(groups[0][1]) == 2
        assert [d for d, _ in groups] == sorted((d for d, _ in groups), reverse=True)


def test_one_month_before_wraps_year():
    assert _one_month_before(datetime(2025, 1, 15)) == datetime(2024, 12, 15)


class TestExpenseCategory:
    def test_parse(self):
        assert ExpenseCategory.parse("fast food") is ExpenseCategory.FAST_FOOD
        assert ExpenseCategory.parse("FAST_FOOD") is ExpenseCategory.FAST_FOOD

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            ExpenseCategory.parse("yachts")

    def test_icon_and_color(self):
        assert ExpenseCategory.COFFEE.icon == "cup.and.saucer.fill"
        assert ExpenseCategory.OTHER.color == "gray"


class TestIntervalInput:
    def test_add_and_subtract(self):
        entry = IntervalInput()
        entry.add(20)
        entry.add(5)
        assert entry.subtract(10) == 15

    def test_subtract_floors_at_zero(self):
        entry = IntervalInput(amount=3)
        assert entry.subtract(5) == 0

    def test_clear(self):
        entry = IntervalInput(amount=42)
        assert entry.clear() == 0

    def test_round(self):
        entry = IntervalInput(amount=12.345)
        assert entry.round() == pytest.approx(12.3)
        entry.amount = 12.25
        assert entry.round() == pytest.approx(12.3)

    def test_formatted(self):
        assert IntervalInput(amount=25).formatted == "$25"
        assert IntervalInput(amount=25.5).formatted == "$25.50"

    def test_default_intervals(self):
        assert IntervalInput().intervals == (1, 5, 10, 20, 50, 100)
