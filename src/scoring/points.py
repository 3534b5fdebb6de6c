import math
import re
from datetime import datetime
from decimal import Decimal, InvalidOperation

from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import MalformedInput, Receipt
from src.utils.logging_config import logger

# Rules:
# A: 1 point per character in the retailer name
# B: 50 if the total has no cents
# C: 25 if the cents are a multiple of 25
# D: 5 per pair of items
# E: ceil(price * 0.2) for each item whose trimmed description length is a multiple of 3
# F: 6 if the day of purchase is odd
# G: 10 if the hour of purchase is 14, 15 or 16

_DOLLARS = re.compile(r'[+-]?\d+')
_CENTS = re.compile(r'\d+')
_DECIMAL = re.compile(r'\+?(\d+(\.\d*)?|\.\d+)')

ITEM_PRICE_MULTIPLIER = Decimal("0.2")


def parse_cents(total: str) -> int:
    # totals arrive as 999.99; the cents are whatever follows the point
    parts = total.split(".")
    if len(parts) != 2 or not _DOLLARS.fullmatch(parts[0]) or not _CENTS.fullmatch(parts[1]):
        raise MalformedInput(f"invalid total: {total!r}")
    return int(parts[1])


def parse_price(price: str) -> Decimal:
    if not _DECIMAL.fullmatch(price):
        raise MalformedInput(f"invalid price: {price!r}")
    try:
        return Decimal(price)
    except InvalidOperation:
        raise MalformedInput(f"invalid price: {price!r}")


def parse_day(purchase_date: str) -> int:
    try:
        return datetime.strptime(purchase_date, "%Y-%m-%d").day
    except ValueError:
        raise MalformedInput(f"invalid purchase date: {purchase_date!r}")


def parse_hour(purchase_time: str) -> int:
    try:
        return datetime.strptime(purchase_time, "%H:%M").hour
    except ValueError:
        raise MalformedInput(f"invalid purchase time: {purchase_time!r}")


def retailer_points(retailer: str) -> int:
    return len(retailer)


def round_total_points(cents: int) -> int:
    return 50 if cents == 0 else 0


def quarter_total_points(cents: int) -> int:
    return 25 if cents % 25 == 0 else 0


def item_pair_points(item_count: int) -> int:
    return 5 * (item_count // 2)


def item_description_points(item: ReceiptItem) -> int:
    description = item.short_description.strip()
    if len(description) % 3 != 0:
        return 0
    # only priced when the description qualifies
    return math.ceil(parse_price(item.price) * ITEM_PRICE_MULTIPLIER)


def odd_day_points(day: int) -> int:
    return 6 if day % 2 == 1 else 0


def afternoon_points(hour: int) -> int:
    # 16:xx still counts
    return 10 if 14 <= hour <= 16 else 0


def count_points(receipt: Receipt) -> int:
    """
    Score a receipt against the point rules.

    Raises MalformedInput when the total, a qualifying item price, the
    purchase date or the purchase time cannot be parsed.
    """
    cents = parse_cents(receipt.total)
    day = parse_day(receipt.purchase_date)
    hour = parse_hour(receipt.purchase_time)

    breakdown = {
        "retailer": retailer_points(receipt.retailer),
        "round_total": round_total_points(cents),
        "quarter_total": quarter_total_points(cents),
        "item_pairs": item_pair_points(len(receipt.items)),
        "descriptions": sum(item_description_points(item) for item in receipt.items),
        "odd_day": odd_day_points(day),
        "afternoon": afternoon_points(hour),
    }
    logger.debug("points breakdown: %s", breakdown)

    return sum(breakdown.values())
