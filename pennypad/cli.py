"""CLI entry point for pennypad."""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from .config import load_config
from .finance.interval import IntervalInput
from .finance.ledger import FinanceLedger
from .finance.models import ExpenseCategory, Transaction
from .finance.profile import QUESTIONNAIRE, UserProfile, rounded_estimate
from .gestures.slider import NumberSlider
from .gestures.tilt import TiltButton
from .notes.price import PriceExtractor, format_price
from .notes.shopping import ShoppingList

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pennypad",
        description="Shopping-note prices, stepped slider and expense estimates",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML configuration file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # price
    price_parser = sub.add_parser("price", help="Recognize the price in each text")
    price_parser.add_argument("text", nargs="+", help="Item text, e.g. 'Milk 3.99'")
    price_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # list
    list_parser = sub.add_parser("list", help="Total a shopping note file")
    list_parser.add_argument("file", type=str, help="Text file, one item per line")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # slide
    slide_parser = sub.add_parser("slide", help="Replay one drag gesture")
    slide_parser.add_argument(
        "offsets", type=float, nargs="+", help="Drag offsets in points"
    )
    slide_parser.add_argument(
        "--start", type=float, default=None, help="Starting value"
    )

    # tilt
    tilt_parser = sub.add_parser("tilt", help="Show the tilt for a touch point")
    tilt_parser.add_argument("x", type=float)
    tilt_parser.add_argument("y", type=float)

    # estimate
    est_parser = sub.add_parser("estimate", help="Per-category cost estimates")
    for q in QUESTIONNAIRE:
        est_parser.add_argument(
            f"--{q.field.replace('_', '-')}",
            dest=q.field,
            type=float,
            default=q.default_value,
            help=f"{q.question} ({q.min_value:g}-{q.max_value:g})",
        )

    # amount
    amount_parser = sub.add_parser(
        "amount", help="Build an amount from the configured intervals"
    )
    amount_parser.add_argument(
        "steps",
        nargs="+",
        help="Signed interval such as +20 or -5, or 'round' / 'clear'",
    )

    # spend
    spend_parser = sub.add_parser("spend", help="Summarize an expense CSV file")
    spend_parser.add_argument(
        "file", type=str, help="CSV rows: date,amount,category[,note]"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    load_dotenv()

    try:
        config = load_config(args.config)
        logger.debug("Configuration loaded from %s", args.config or "defaults")

        match args.command:
            case "price":
                _cmd_price(config, args)
            case "list":
                _cmd_list(config, args)
            case "slide":
                _cmd_slide(config, args)
            case "tilt":
                _cmd_tilt(config, args)
            case "estimate":
                _cmd_estimate(args)
            case "amount":
                _cmd_amount(config, args)
            case "spend":
                _cmd_spend(config, args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _cmd_price(config, args) -> None:
    extractor = PriceExtractor(config.notes.currency_symbol)
    results = [(text, extractor.extract(text)) for text in args.text]

    if args.json:
        data = [
            {"text": text, "price": str(price) if price is not None else None}
            for text, price in results
        ]
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    for text, price in results:
        shown = format_price(price, config.notes.currency_symbol) or "-"
        print(f"{shown:>10}  {text}")


def _cmd_list(config, args) -> None:
    path = Path(args.file)
    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        sys.exit(1)

    extractor = PriceExtractor(config.notes.currency_symbol)
    with open(path, encoding="utf-8") as f:
        shopping = ShoppingList.from_lines(
            f, title=config.notes.title, extractor=extractor
        )

    if args.json:
        data = {
            "title": shopping.title,
            "items": [
                {
                    "text": item.text,
                    "price": str(item.recognized_price)
                    if item.recognized_price is not None
                    else None,
                }
                for item in shopping.items
            ],
            "total": str(shopping.total_price),
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    print(shopping.title)
    for item in shopping.items:
        price = format_price(item.recognized_price, config.notes.currency_symbol)
        print(f"  {item.text:<30} {price:>10}")
    print(
        f"{shopping.total_items} items, "
        f"{len(shopping.priced_items)} priced, "
        f"total {shopping.formatted_total_price}"
    )


def _cmd_slide(config, args) -> None:
    slider = NumberSlider.from_config(config.slider, value=args.start)

    start = slider.value
    steps = slider.replay(args.offsets)
    for step in steps:
        print(
            f"stop {step.triggered_index}: {step.applied_delta:+g} -> "
            f"{step.new_value:g} [{step.intensity.value}]"
        )
    print(f"{start:g} -> {slider.value:g} ({len(steps)} steps)")


def _cmd_tilt(config, args) -> None:
    tc = config.tilt
    button = TiltButton(
        width=tc.width,
        height=tc.height,
        max_tilt_deg=tc.max_tilt_deg,
        pressed_scale=tc.pressed_scale,
    )
    pose = button.begin(args.x, args.y)
    print(
        f"rotateX {pose.rotate_x:+.1f}°  rotateY {pose.rotate_y:+.1f}°  "
        f"scale {pose.scale:g}"
    )


def _cmd_estimate(args) -> None:
    profile = UserProfile.from_answers(
        {q.field: getattr(args, q.field) for q in QUESTIONNAIRE}
    )
    for category, estimate in profile.estimated_costs().items():
        print(
            f"  {category.value:<15} ${estimate:>8.2f}  "
            f"(~${rounded_estimate(estimate):g})"
        )


def _cmd_amount(config, args) -> None:
    entry = IntervalInput(intervals=config.finance.intervals)

    for step in args.steps:
        match step:
            case "round":
                entry.round()
            case "clear":
                entry.clear()
            case _:
                interval = float(step)
                if abs(interval) not in entry.intervals:
                    allowed = ", ".join(f"{i:g}" for i in entry.intervals)
                    raise ValueError(f"{step}: not one of the intervals {allowed}")
                if interval < 0:
                    entry.subtract(-interval)
                else:
                    entry.add(interval)
        print(f"{step:>8}  {entry.formatted}")


def _read_transactions(path: Path) -> list[Transaction]:
    transactions = []
    with open(path, encoding="utf-8", newline="") as f:
        for line_no, row in enumerate(csv.reader(f), start=1):
            if not row or row[0].startswith("#"):
                continue
            if len(row) < 3:
                raise ValueError(f"{path}:{line_no}: expected date,amount,category")
            when, amount, category = (v.strip() for v in row[:3])
            note = row[3].strip() if len(row) > 3 else ""
            transactions.append(
                Transaction(
                    amount=float(amount),
                    category=ExpenseCategory.parse(category),
                    note=note,
                    date=datetime.fromisoformat(when),
                )
            )
    return transactions


def _cmd_spend(config, args) -> None:
    path = Path(args.file)
    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        sys.exit(1)

    ledger = FinanceLedger()
    for t in sorted(_read_transactions(path), key=lambda t: t.date):
        ledger.add(t)

    for label, total in (
        ("Today", ledger.today_total),
        ("This week", ledger.week_total),
        ("This month", ledger.month_total),
        ("All time", ledger.total_spent),
    ):
        print(f"{label:<12}${total:.2f}")

    print("By category:")
    for category, total in ledger.category_breakdown():
        print(f"  {category.value:<15} ${total:.2f}")

    print(f"Recent ({config.finance.recent_limit}):")
    for t in ledger.recent(config.finance.recent_limit):
        print(
            f"  {t.date:%Y-%m-%d}  {t.category.value:<15} ${t.amount:>8.2f}  {t.note}"
        )
