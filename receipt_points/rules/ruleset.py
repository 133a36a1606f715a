# receipt_points/rules/ruleset.py
"""
The points rules. Each rule looks at an already-parsed receipt and returns
the points it contributes (0 when it does not apply). Money is in integer
cents so every check is exact.
"""
import re
from dataclasses import dataclass
from datetime import date, time
from typing import Callable, List, Tuple

ALNUM_RE = re.compile(r"[A-Za-z0-9]")

AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)


@dataclass(frozen=True)
class ParsedItem:
    description: str  # already trimmed
    price_cents: int


@dataclass(frozen=True)
class ParsedReceipt:
    retailer: str
    purchase_date: date
    purchase_time: time
    total_cents: int
    items: Tuple[ParsedItem, ...]


def retailer_name(r: ParsedReceipt) -> int:
    # ASCII letters and digits only
    return len(ALNUM_RE.findall(r.retailer))

def round_dollar_total(r: ParsedReceipt) -> int:
    return 50 if r.total_cents % 100 == 0 else 0

def quarter_multiple_total(r: ParsedReceipt) -> int:
    return 25 if r.total_cents % 25 == 0 else 0

def item_pairs(r: ParsedReceipt) -> int:
    return (len(r.items) // 2) * 5

def item_description_length(r: ParsedReceipt) -> int:
    """
    For each item whose trimmed description length, in UTF-8 bytes, is a
    multiple of 3, price * 0.2 rounded up. An empty description counts
    (0 % 3 == 0).
    """
    points = 0
    for item in r.items:
        if len(item.description.encode("utf-8")) % 3 == 0:
            # ceil(cents / 100 * 0.2) == ceil(cents / 500)
            points += -(-item.price_cents // 500)
    return points

def odd_purchase_day(r: ParsedReceipt) -> int:
    return 6 if r.purchase_date.day % 2 == 1 else 0

def afternoon_purchase(r: ParsedReceipt) -> int:
    # exclusive on both ends: 14:00 and 16:00 do not count
    return 10 if AFTERNOON_START < r.purchase_time < AFTERNOON_END else 0


Rule = Callable[[ParsedReceipt], int]

DEFAULT_RULES: List[Tuple[str, Rule]] = [
    ("retailer_name", retailer_name),
    ("round_dollar_total", round_dollar_total),
    ("quarter_multiple_total", quarter_multiple_total),
    ("item_pairs", item_pairs),
    ("item_description_length", item_description_length),
    ("odd_purchase_day", odd_purchase_day),
    ("afternoon_purchase", afternoon_purchase),
]
