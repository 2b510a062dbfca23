"""
models.py

Plain data shapes passed between the normalizer, the forecast engine, the
action generator and whoever stores the results.

All records are frozen dataclasses. Edits go through dataclasses.replace()
(see ledger.py) so a transaction list is never patched in place.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union


# ======================================================
# ENUM-LIKE CONSTANTS
# ======================================================

IN = "IN"
OUT = "OUT"
DIRECTIONS = (IN, OUT)

PAID = "PAID"
PENDING = "PENDING"
STATUSES = (PAID, PENDING)

URGENT = "URGENT"
HIGH = "HIGH"
NORMAL = "NORMAL"

WHATSAPP = "WHATSAPP"
EMAIL = "EMAIL"

RUNWAY_UNBOUNDED = "Infinity"


# ======================================================
# RECORDS
# ======================================================

@dataclass(frozen=True)
class Transaction:
    date: str
    payee: str
    description: str
    amount: float
    type: str
    category: str
    status: str = PENDING
    id: Optional[str] = None

    @property
    def is_inflow(self) -> bool:
        return self.type == IN

    @property
    def is_paid(self) -> bool:
        return self.status == PAID

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transaction":
        """
        Build a Transaction from a stored mapping.

        Older snapshots carry no status; they load as PENDING.
        """
        return cls(
            date=str(data.get("date", "")),
            payee=str(data.get("payee", "") or "Unknown"),
            description=str(data.get("description", "") or ""),
            amount=float(data.get("amount", 0) or 0),
            type=IN if str(data.get("type", OUT)).upper() == IN else OUT,
            category=str(data.get("category", "Uncategorized")),
            status=PAID if str(data.get("status", PENDING)).upper() == PAID else PENDING,
            id=data.get("id"),
        )


@dataclass(frozen=True)
class CashFlowAction:
    id: str
    title: str
    description: str
    amount: float
    priority: str
    action_type: str
    contact_name: str
    crunch_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ChartPoint:
    date: str
    balance: float


@dataclass(frozen=True)
class ForecastResult:
    monthly_burn: float
    monthly_inflow: float
    net_burn: float
    runway_months: Union[float, str]
    runway_end_date: Optional[str]
    recurring_items: List[str] = field(default_factory=list)
    crunch_date: Optional[str] = None
    chart_data: List[ChartPoint] = field(default_factory=list)

    @property
    def runway_unbounded(self) -> bool:
        return self.runway_months == RUNWAY_UNBOUNDED

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Snapshot:
    """The unit a caller persists between sessions."""
    transactions: List[Transaction]
    balance: float
    region: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transactions": [t.to_dict() for t in self.transactions],
            "balance": self.balance,
            "region": self.region,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Snapshot":
        return cls(
            transactions=[Transaction.from_dict(t) for t in data.get("transactions", [])],
            balance=float(data.get("balance", 0) or 0),
            region=str(data.get("region", "IN")),
        )
