# scoring.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, time
from typing import List, Tuple, Type

from ..errors import (
    InvalidDate, InvalidItemPrice, InvalidTime, InvalidTotal, PointsCalculationError,
)
from ..rules.ruleset import DEFAULT_RULES, ParsedItem, ParsedReceipt
from ..schemas import Receipt
from ..utils.logging import logger

# -----------------------------
# Field formats
# -----------------------------
AMOUNT_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?")
DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_RE = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")


@dataclass
class ScoreResult:
    points: int
    breakdown: List[Tuple[str, int]] = field(default_factory=list)

# -----------------------------
# Parsing helpers
# -----------------------------
def parse_amount(value: str, error: Type[PointsCalculationError]) -> int:
    """
    Parse a non-negative decimal string ("35.35", "9", "12.50", ".50",
    "12.") into integer cents. Anything that is not a whole number of
    cents ("1.005", "-1", "1e2", ".") raises `error`.
    """
    m = AMOUNT_RE.fullmatch(value or "")
    if not m or not (m.group(1) or m.group(2)):
        raise error()
    whole, frac = m.group(1) or "0", (m.group(2) or "").rstrip("0")
    if len(frac) > 2:
        raise error()
    try:
        return int(whole) * 100 + int(frac.ljust(2, "0"))
    except ValueError:
        # int() refuses absurdly long digit strings
        raise error() from None

def parse_date(value: str):
    if not DATE_RE.fullmatch(value or ""):
        raise InvalidDate()
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidDate() from None

def parse_time(value: str) -> time:
    m = TIME_RE.fullmatch(value or "")
    if not m:
        raise InvalidTime()
    return time(int(m.group(1)), int(m.group(2)))

def parse_receipt(receipt: Receipt) -> ParsedReceipt:
    """Validate the fields scoring depends on; the first bad field wins."""
    total_cents = parse_amount(receipt.total, InvalidTotal)
    items = tuple(
        ParsedItem(
            description=item.short_description.strip(),
            price_cents=parse_amount(item.price, InvalidItemPrice),
        )
        for item in receipt.items
    )
    return ParsedReceipt(
        retailer=receipt.retailer,
        purchase_date=parse_date(receipt.purchase_date),
        purchase_time=parse_time(receipt.purchase_time),
        total_cents=total_cents,
        items=items,
    )

# -----------------------------
# Main entry
# -----------------------------
def evaluate_receipt(receipt: Receipt) -> ScoreResult:
    """
    Returns ScoreResult(points, breakdown)
    - breakdown lists every rule by name with what it contributed, including zeros
    """
    parsed = parse_receipt(receipt)
    result = ScoreResult(points=0)
    for name, rule in DEFAULT_RULES:
        inc = rule(parsed)
        result.breakdown.append((name, inc))
        result.points += inc
    logger.debug("Scored receipt from %r: %s points %s", receipt.retailer, result.points, result.breakdown)
    return result

def score_receipt(receipt: Receipt) -> int:
    return evaluate_receipt(receipt).points
