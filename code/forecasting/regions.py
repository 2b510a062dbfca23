"""
regions.py

Region strategy table. A region only picks a currency symbol, the preferred
action channel and the accounting-export CSV layout; it never changes a
numeric threshold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .errors import UnknownRegionError
from .models import EMAIL, WHATSAPP

LAYOUT_INDIAN = "INDIAN_ACCOUNTING"
LAYOUT_WESTERN = "WESTERN_ACCOUNTING"


@dataclass(frozen=True)
class RegionProfile:
    code: str
    currency_symbol: str
    preferred_channel: str
    csv_layout: str
    dayfirst: bool


REGIONS: Dict[str, RegionProfile] = {
    "IN": RegionProfile(
        code="IN",
        currency_symbol="₹",
        preferred_channel=WHATSAPP,
        csv_layout=LAYOUT_INDIAN,
        dayfirst=True,
    ),
    "US": RegionProfile(
        code="US",
        currency_symbol="$",
        preferred_channel=EMAIL,
        csv_layout=LAYOUT_WESTERN,
        dayfirst=False,
    ),
}


def get_region(code: str) -> RegionProfile:
    profile = REGIONS.get(str(code).strip().upper())
    if profile is None:
        raise UnknownRegionError(f"Unknown region {code!r}. Expected one of: {sorted(REGIONS)}")
    return profile


def format_number(value: float) -> str:
    # Thousands-grouped with at most three fraction digits: 1234567 -> "1,234,567"
    s = f"{float(value):,.3f}"
    return s.rstrip("0").rstrip(".")


def format_money(amount: float, region: RegionProfile) -> str:
    return f"{region.currency_symbol}{format_number(abs(amount))}"
