"""
actions.py

Turns a transaction list and balance into at most three ranked recommendations:

  alert-1  URGENT  cash crunch alert       (projected shortfall or crunch date)
  in-1     HIGH    collect largest pending receivable
  out-1    NORMAL  delay largest negotiable (non-sacred) payable

Slot ids are stable: the same inputs always reproduce the same ids, which is
what lets a caller remember dismissed cards across recomputation.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Sequence

from .categories import rule_for
from .engine import effective_balance, find_crunch_date, future_pending, projected_balance
from .models import HIGH, IN, NORMAL, OUT, URGENT, CashFlowAction, Transaction
from .regions import format_money, get_region

ALERT_ID = "alert-1"
COLLECT_ID = "in-1"
DELAY_ID = "out-1"

ALERT_CONTACT = "Investors/Lenders"


def format_short_date(day: date) -> str:
    return f"{day:%b} {day.day}, {day.year}"


def _largest(candidates: Iterable[Transaction]) -> Optional[Transaction]:
    # Stable descending sort: on equal amounts the earliest entry wins.
    ranked = sorted(candidates, key=lambda t: t.amount, reverse=True)
    return ranked[0] if ranked else None


def generate_actions(
    transactions: Sequence[Transaction],
    current_balance: float,
    region: str,
    today: Optional[date] = None,
) -> List[CashFlowAction]:
    profile = get_region(region)
    today = today or date.today()
    channel = profile.preferred_channel

    effective = effective_balance(transactions, current_balance)
    pending = future_pending(transactions, today)
    projected = projected_balance(effective, pending)
    crunch = find_crunch_date(effective, pending)

    actions: List[CashFlowAction] = []

    if projected < 0 or crunch is not None:
        pretty = format_short_date(crunch or today)
        if crunch is not None:
            description = f"You will hit negative cash balance on {pretty}."
        else:
            description = f"Projected negative balance (-{format_money(projected, profile)})."
        actions.append(CashFlowAction(
            id=ALERT_ID,
            title="CASH CRUNCH ALERT",
            description=description,
            amount=projected,
            priority=URGENT,
            action_type=channel,
            contact_name=ALERT_CONTACT,
            crunch_date=pretty,
        ))

    largest_in = _largest(t for t in pending if t.type == IN)
    if largest_in is not None:
        actions.append(CashFlowAction(
            id=COLLECT_ID,
            title="Collect Payment",
            description=f"Largest receipt from {largest_in.payee} ({largest_in.category})",
            amount=largest_in.amount,
            priority=HIGH,
            action_type=channel,
            contact_name=largest_in.payee,
        ))

    largest_out = _largest(
        t for t in pending
        if t.type == OUT and not rule_for(t.category).is_sacred
    )
    if largest_out is not None:
        actions.append(CashFlowAction(
            id=DELAY_ID,
            title="Delay Payment",
            description=f"Largest negotiable expense: {largest_out.payee} ({largest_out.category}).",
            amount=largest_out.amount,
            priority=NORMAL,
            action_type=channel,
            contact_name=largest_out.payee,
        ))

    return actions


def visible_actions(actions: Iterable[CashFlowAction], dismissed_ids: Iterable[str]) -> List[CashFlowAction]:
    dismissed = set(dismissed_ids)
    return [a for a in actions if a.id not in dismissed]
