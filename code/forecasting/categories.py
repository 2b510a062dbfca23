"""
categories.py

Fixed spending taxonomy and the keyword classifier that maps free text onto it.

Key invariants:
- Money in is always Sales / Revenue; inflows are never keyword-classified.
- Keyword order is the tie-break. The first keyword found in the text wins,
  so KEYWORD_RULES must keep its order for classification to be reproducible.
- Matching is a plain lower-case substring test ("rent" matches "Parent Co").
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .models import IN


# ======================================================
# TAXONOMY (closed set)
# ======================================================

PAYROLL = "Payroll & Team"
TAXES = "Taxes & Compliance"
RENT = "Rent & Facilities"
SOFTWARE = "Software & Subscriptions"
MARKETING = "Marketing & Ads"
TRAVEL = "Travel & Entertainment"
CONTRACTORS = "Contractors & Professional Services"
OFFICE = "Office Supplies"
REVENUE = "Sales / Revenue"
UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class CategoryRule:
    is_sacred: bool
    is_recurring: bool


# Sacred categories are never suggested for delay.
# Recurring categories count toward monthly burn.
CATEGORY_RULES: Dict[str, CategoryRule] = {
    PAYROLL: CategoryRule(is_sacred=True, is_recurring=True),
    TAXES: CategoryRule(is_sacred=False, is_recurring=False),
    RENT: CategoryRule(is_sacred=False, is_recurring=True),
    SOFTWARE: CategoryRule(is_sacred=False, is_recurring=True),
    MARKETING: CategoryRule(is_sacred=False, is_recurring=False),
    TRAVEL: CategoryRule(is_sacred=False, is_recurring=False),
    CONTRACTORS: CategoryRule(is_sacred=False, is_recurring=False),
    OFFICE: CategoryRule(is_sacred=False, is_recurring=False),
    REVENUE: CategoryRule(is_sacred=False, is_recurring=False),
    UNCATEGORIZED: CategoryRule(is_sacred=False, is_recurring=False),
}

CATEGORIES: Tuple[str, ...] = tuple(CATEGORY_RULES)


# ======================================================
# KEYWORD TABLE (ordered)
# ======================================================

KEYWORD_RULES: List[Tuple[str, str]] = [
    ("salary", PAYROLL), ("wages", PAYROLL), ("payroll", PAYROLL), ("bonus", PAYROLL),
    ("tax", TAXES), ("gst", TAXES), ("vat", TAXES), ("irs", TAXES),
    ("rent", RENT), ("lease", RENT), ("electricity", RENT), ("utility", RENT),
    ("aws", SOFTWARE), ("google", SOFTWARE), ("adobe", SOFTWARE),
    ("subscription", SOFTWARE), ("saas", SOFTWARE), ("hosting", SOFTWARE),
    ("ads", MARKETING), ("facebook", MARKETING), ("linkedin", MARKETING), ("meta", MARKETING),
    ("travel", TRAVEL), ("hotel", TRAVEL), ("flight", TRAVEL), ("uber", TRAVEL), ("food", TRAVEL),
    ("contractor", CONTRACTORS), ("consultant", CONTRACTORS),
    ("legal", CONTRACTORS), ("upwork", CONTRACTORS),
]


# ======================================================
# HELPERS
# ======================================================

def is_category(name: object) -> bool:
    return isinstance(name, str) and name in CATEGORY_RULES


def rule_for(category: str) -> CategoryRule:
    """Rule flags for a category; anything outside the taxonomy acts as Uncategorized."""
    return CATEGORY_RULES.get(category, CATEGORY_RULES[UNCATEGORIZED])


def classify(text: str, direction: str) -> str:
    if direction == IN:
        return REVENUE

    lowered = (text or "").lower()
    for keyword, category in KEYWORD_RULES:
        if keyword in lowered:
            return category
    return UNCATEGORIZED
