"""
Cash-flow forecasting engine: ledger normalization, category inference,
balance / crunch-date projection and remediation actions.
"""

from .actions import generate_actions, visible_actions
from .categories import CATEGORY_RULES, classify
from .engine import calculate_forecast
from .errors import ForecastingError, LedgerParseError, SnapshotError, UnknownRegionError
from .models import CashFlowAction, ForecastResult, Snapshot, Transaction
from .normalize import normalize_csv, normalize_file

__all__ = [
    "generate_actions",
    "visible_actions",
    "CATEGORY_RULES",
    "classify",
    "calculate_forecast",
    "ForecastingError",
    "LedgerParseError",
    "SnapshotError",
    "UnknownRegionError",
    "CashFlowAction",
    "ForecastResult",
    "Snapshot",
    "Transaction",
    "normalize_csv",
    "normalize_file",
]
