"""
normalize.py

Turns raw ledger CSV text into a uniform list of Transaction records.

Three layouts are auto-detected per row, in priority order:
1. App-native export        - has a Payee or Category value
2. Indian accounting export - region IN (Party Name / Particulars / Vch Type)
3. Western accounting export - region US (Name / Memo/Description, signed Amount)

Best-effort policy:
- A sparse row still yields a Transaction ("Unknown" payee, amount 0, date now).
- Non-numeric amounts parse to 0. Never raise on a dirty cell.
- Only a total parse failure (undecodable text, broken tokenizer state) raises,
  as LedgerParseError.
"""

from __future__ import annotations

import csv
import re
from collections import Counter
from datetime import datetime
from io import StringIO
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

import pandas as pd

from .categories import classify, is_category
from .errors import LedgerParseError
from .logging_setup import get_logger
from .models import IN, OUT, PAID, PENDING, Transaction
from .regions import LAYOUT_INDIAN, RegionProfile, get_region

logger = get_logger(__name__)

LAYOUT_APP = "APP_NATIVE"

# Leading numeric prefix, the way a lenient float parse reads "1200.50 Dr".
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}")
_HAS_DIGIT = re.compile(r"\d")


# ======================================================
# CELL HELPERS
# ======================================================

def _normalize_str(x: object) -> str:
    if x is None or (isinstance(x, float) and pd.isna(x)):
        return ""
    return str(x)


def parse_amount(value: object) -> float:
    """
    Parse '3,610.00' style strings into float.

    Thousands commas are stripped, then the leading numeric part is read.
    Empty or non-numeric input gives 0.0.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return 0.0 if pd.isna(value) else float(value)

    s = _normalize_str(value).replace(",", "")
    if s.strip() == "":
        return 0.0

    m = _NUMERIC_PREFIX.match(s)
    if not m:
        return 0.0
    return float(m.group(0))


def canon_date(raw: object, dayfirst: bool, now: datetime) -> str:
    """
    Canonicalize a ledger date to YYYY-MM-DD.

    - empty -> now (ISO date-time)
    - ISO-looking text is read as ISO regardless of region
    - anything else is parsed with the region's day/month order
    - unparseable text (including words like "today") is kept verbatim
    """
    s = _normalize_str(raw).strip()
    if s == "":
        return now.isoformat()

    if not _HAS_DIGIT.search(s):
        return s
    if _ISO_DATE.match(s):
        ts = pd.to_datetime(s, errors="coerce")
    else:
        ts = pd.to_datetime(s, errors="coerce", dayfirst=dayfirst)
    if pd.isna(ts):
        return s
    return ts.strftime("%Y-%m-%d")


# ======================================================
# CSV READ
# ======================================================

def _keep_bad_line(fields: List[str]) -> List[str]:
    # Rows with extra cells are kept; pandas drops the surplus with a ParserWarning.
    logger.warning("Ledger row has more cells than the header (%d); extra cells dropped", len(fields))
    return fields


def read_ledger_rows(csv_text: str) -> List[Dict[str, str]]:
    """Parse CSV text (header row first) into a list of string-valued rows."""
    if csv_text is None:
        return []
    text = csv_text.lstrip("\ufeff")
    if text.strip() == "":
        return []

    try:
        df = pd.read_csv(
            StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
            engine="python",
            on_bad_lines=_keep_bad_line,
        )
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, csv.Error, UnicodeError) as exc:
        raise LedgerParseError(f"Could not parse ledger CSV: {exc}") from exc

    df = df.fillna("")
    return df.to_dict("records")


# ======================================================
# ROW MAPPING
# ======================================================

def _map_app_native(row: Mapping[str, str]) -> Tuple[str, str, float, str, str, Optional[str], str]:
    payee = row.get("Payee", "") or "Unknown"
    description = row.get("Description", "") or ""
    amount = abs(parse_amount(row.get("Amount", "")))
    raw_type = row.get("Type", "")
    direction = IN if raw_type and raw_type.upper() == IN else OUT
    raw_category = row.get("Category", "")
    category = raw_category if raw_category and is_category(raw_category) else None
    raw_status = row.get("Status", "")
    status = PAID if raw_status and raw_status.upper() == PAID else PENDING
    return payee, description, amount, direction, LAYOUT_APP, category, status


def _map_indian(row: Mapping[str, str]) -> Tuple[str, str, float, str, str, Optional[str], str]:
    payee = row.get("Party Name", "") or row.get("Particulars", "") or "Unknown"
    vch_type = row.get("Vch Type", "") or ""
    amount = abs(parse_amount(row.get("Amount", "")))
    direction = IN if "Receipt" in vch_type else OUT
    return payee, vch_type, amount, direction, LAYOUT_INDIAN, None, PENDING


def _map_western(row: Mapping[str, str], layout: str) -> Tuple[str, str, float, str, str, Optional[str], str]:
    payee = row.get("Name", "") or "Unknown"
    description = row.get("Memo/Description", "") or ""
    signed = parse_amount(row.get("Amount", ""))
    direction = IN if signed > 0 else OUT
    return payee, description, abs(signed), direction, layout, None, PENDING


def normalize_row(
    row: Mapping[str, str],
    idx: int,
    region: RegionProfile,
    now: datetime,
    stamp: int,
) -> Tuple[Transaction, str]:
    """Map one parsed row. Returns (transaction, detected layout)."""
    if row.get("Payee", "") or row.get("Category", ""):
        mapped = _map_app_native(row)
    elif region.csv_layout == LAYOUT_INDIAN:
        mapped = _map_indian(row)
    else:
        mapped = _map_western(row, region.csv_layout)

    payee, description, amount, direction, layout, category, status = mapped
    if category is None:
        category = classify(f"{payee} {description}", direction)

    tx = Transaction(
        id=f"csv-{idx}-{stamp}",
        date=canon_date(row.get("Date", ""), region.dayfirst, now),
        payee=payee,
        description=description,
        amount=amount,
        type=direction,
        category=category,
        status=status,
    )
    return tx, layout


def normalize_csv(csv_text: str, region: str, now: Optional[datetime] = None) -> List[Transaction]:
    """
    Normalize ledger CSV text for a region ("IN" or "US").

    Row ids combine the row index with the wall-clock millisecond, so they are
    unique within one call and only best-effort unique across calls.
    """
    profile = get_region(region)
    now = now or datetime.now()
    stamp = int(now.timestamp() * 1000)

    rows = read_ledger_rows(csv_text)

    out: List[Transaction] = []
    layouts: Counter = Counter()
    for idx, row in enumerate(rows):
        tx, layout = normalize_row(row, idx, profile, now, stamp)
        out.append(tx)
        layouts[layout] += 1

    logger.debug("Detected layouts: %s", dict(layouts))
    logger.info("Normalized %d ledger rows (region=%s)", len(out), profile.code)
    return out


def normalize_file(path: Union[str, Path], region: str, now: Optional[datetime] = None) -> List[Transaction]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise LedgerParseError(f"{p.name}: not valid UTF-8 text ({exc})") from exc
    return normalize_csv(text, region, now=now)
