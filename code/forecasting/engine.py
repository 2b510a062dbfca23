"""
engine.py

Balance projection, crunch-date detection and burn / runway estimate.

Two balance concepts:
- Effective (settled) balance: starting balance with every PAID transaction
  applied, whatever its date. Money that already moved.
- Crunch walk: from the effective balance, walk PENDING transactions dated
  today or later, in date order, under a conservative policy:
    * pending inflows are NOT credited (a receivable is not cash until paid)
    * pending outflows ARE debited (bills fall due regardless)
  The first outflow that takes the running balance below zero sets the crunch
  date. Later, deeper crossings never overwrite it.

Burn rate is independent of the above:
- Recurring outflows are keyed by payee; the last amount seen for a payee wins
  (a payee is never summed across occurrences).
- Monthly inflow is the sum of inflows whose description mentions "retainer".
- Runway divides the (non-negative) effective balance by net burn, and is
  unbounded when net burn <= 0.

Everything here is pure: inputs are never mutated and nothing raises for any
transaction list.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Union

import pandas as pd

from .categories import rule_for
from .models import (
    IN,
    OUT,
    PAID,
    PENDING,
    RUNWAY_UNBOUNDED,
    ChartPoint,
    ForecastResult,
    Transaction,
)

_ISO_DATE = re.compile(r"^(\d{4}-\d{2}-\d{2})")
_HAS_DIGIT = re.compile(r"\d")

DAYS_PER_MONTH = 30


# ======================================================
# DATE HELPERS
# ======================================================

def parse_day(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Read a transaction date as a calendar day; time-of-day is dropped.

    Returns None when the text is not a date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    s = str(value).strip()
    if s == "":
        return None

    m = _ISO_DATE.match(s)
    if m:
        try:
            return date.fromisoformat(m.group(1))
        except ValueError:
            return None

    # pandas reads words like "today" / "now" as dates
    if not _HAS_DIGIT.search(s):
        return None

    ts = pd.to_datetime(s, errors="coerce")
    if pd.isna(ts):
        return None
    return ts.date()


def format_long_date(day: date) -> str:
    return f"{day:%B} {day.day}, {day.year}"


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _round_tenths(x: float) -> float:
    # Half-up to one decimal: 0.25 -> 0.3
    return math.floor(x * 10 + 0.5) / 10


# ======================================================
# BALANCES
# ======================================================

def _signed(t: Transaction) -> float:
    return t.amount if t.type == IN else -t.amount


def effective_balance(transactions: Iterable[Transaction], current_balance: float) -> float:
    balance = float(current_balance)
    for t in transactions:
        if t.status == PAID:
            balance += _signed(t)
    return balance


def future_pending(transactions: Iterable[Transaction], today: date) -> List[Transaction]:
    """PENDING transactions dated today or later, in input order."""
    out = []
    for t in transactions:
        if t.status != PENDING:
            continue
        day = parse_day(t.date)
        if day is not None and day >= today:
            out.append(t)
    return out


def sort_by_day(transactions: Iterable[Transaction]) -> List[Transaction]:
    # Stable: same-day transactions keep their input order.
    return sorted(transactions, key=lambda t: parse_day(t.date) or date.max)


def projected_balance(effective: float, pending: Iterable[Transaction]) -> float:
    """Optimistic end balance: pending inflows credited, pending outflows debited."""
    balance = effective
    for t in pending:
        balance += _signed(t)
    return balance


def find_crunch_date(effective: float, pending: Sequence[Transaction]) -> Optional[date]:
    running = effective
    for t in sort_by_day(pending):
        if t.type != OUT:
            continue
        running -= t.amount
        if running < 0:
            return parse_day(t.date)
    return None


def balance_path(effective: float, pending: Sequence[Transaction], today: date) -> List[ChartPoint]:
    """Chart series: today's effective balance, then one point per pending transaction."""
    points = [ChartPoint(date=today.isoformat(), balance=effective)]
    running = effective
    for t in sort_by_day(pending):
        running += _signed(t)
        points.append(ChartPoint(date=parse_day(t.date).isoformat(), balance=running))
    return points


# ======================================================
# FORECAST
# ======================================================

def recurring_burn(transactions: Iterable[Transaction]) -> Dict[str, float]:
    recurring: Dict[str, float] = {}
    for t in transactions:
        if t.type == OUT and rule_for(t.category).is_recurring:
            recurring[t.payee] = abs(t.amount)
    return recurring


def retainer_inflow(transactions: Iterable[Transaction]) -> float:
    return sum(
        t.amount for t in transactions
        if t.type == IN and "retainer" in (t.description or "").lower()
    )


def calculate_forecast(
    transactions: Sequence[Transaction],
    current_balance: float,
    today: Optional[date] = None,
) -> ForecastResult:
    today = today or date.today()

    effective = effective_balance(transactions, current_balance)
    pending = future_pending(transactions, today)
    crunch = find_crunch_date(effective, pending)

    recurring = recurring_burn(transactions)
    monthly_burn = sum(recurring.values())
    monthly_inflow = retainer_inflow(transactions)
    net_burn = monthly_burn - monthly_inflow

    if net_burn <= 0:
        runway_months: Union[float, str] = RUNWAY_UNBOUNDED
        runway_end_date = None
    else:
        runway_months = _round_tenths(max(0.0, effective) / net_burn)
        end_day = today + timedelta(days=_round_half_up(runway_months * DAYS_PER_MONTH))
        runway_end_date = format_long_date(end_day)

    return ForecastResult(
        monthly_burn=monthly_burn,
        monthly_inflow=monthly_inflow,
        net_burn=net_burn,
        runway_months=runway_months,
        runway_end_date=runway_end_date,
        recurring_items=list(recurring),
        crunch_date=crunch.isoformat() if crunch else None,
        chart_data=balance_path(effective, pending, today),
    )
