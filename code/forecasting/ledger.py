"""
ledger.py

Edit operations over a transaction list. Each returns a new list and leaves
the input untouched; Transaction copies are made with dataclasses.replace().
"""

from __future__ import annotations

import random
import string
from dataclasses import replace
from typing import List, Sequence

from .categories import (
    PAYROLL,
    RENT,
    REVENUE,
    SOFTWARE,
    is_category,
)
from .models import IN, OUT, PAID, PENDING, Snapshot, Transaction

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 9


def new_transaction_id() -> str:
    return "".join(random.choices(_ID_ALPHABET, k=_ID_LENGTH))


def _check_index(transactions: Sequence[Transaction], index: int) -> None:
    if not 0 <= index < len(transactions):
        raise IndexError(f"Transaction index {index} out of range (0..{len(transactions) - 1})")


def add_transaction(transactions: Sequence[Transaction], tx: Transaction) -> List[Transaction]:
    """Prepend a manual entry, assigning an id when it has none."""
    if not tx.id:
        tx = replace(tx, id=new_transaction_id())
    return [tx, *transactions]


def replace_transaction(transactions: Sequence[Transaction], tx_id: str, tx: Transaction) -> List[Transaction]:
    """Swap in an edited copy for the entry with the given id; the id is kept."""
    return [replace(tx, id=tx_id) if t.id == tx_id else t for t in transactions]


def replace_at(transactions: Sequence[Transaction], index: int, tx: Transaction) -> List[Transaction]:
    _check_index(transactions, index)
    updated = list(transactions)
    updated[index] = tx
    return updated


def delete_at(transactions: Sequence[Transaction], index: int) -> List[Transaction]:
    _check_index(transactions, index)
    return [t for i, t in enumerate(transactions) if i != index]


def toggle_status(transactions: Sequence[Transaction], index: int) -> List[Transaction]:
    _check_index(transactions, index)
    current = transactions[index]
    flipped = PENDING if current.status == PAID else PAID
    return replace_at(transactions, index, replace(current, status=flipped))


def set_category(transactions: Sequence[Transaction], index: int, category: str) -> List[Transaction]:
    if not is_category(category):
        raise ValueError(f"Unknown category: {category!r}")
    _check_index(transactions, index)
    return replace_at(transactions, index, replace(transactions[index], category=category))


def merge_import(imported: Sequence[Transaction], existing: Sequence[Transaction]) -> List[Transaction]:
    """Freshly imported rows go in front of what was already there."""
    return [*imported, *existing]


def demo_snapshot() -> Snapshot:
    """Sample ledger: payroll and rent fall due before a large receivable arrives."""
    return Snapshot(
        transactions=[
            Transaction(id="d1", date="2026-02-01", payee="Team Payroll", description="Monthly Salaries",
                        amount=1100000, type=OUT, category=PAYROLL, status=PENDING),
            Transaction(id="d2", date="2026-02-01", payee="Indiqube Rent", description="Office Rent",
                        amount=100000, type=OUT, category=RENT, status=PENDING),
            Transaction(id="d3", date="2026-02-15", payee="Client Alpha", description="Pending Invoice",
                        amount=2500000, type=IN, category=REVENUE, status=PENDING),
            Transaction(id="d4", date="2026-02-05", payee="AWS", description="Hosting",
                        amount=25000, type=OUT, category=SOFTWARE, status=PENDING),
        ],
        balance=300000,
        region="IN",
    )
