#!/usr/bin/env python3
"""
test_normalize.py

Unit tests for forecasting.normalize

Tests:
- App-native export (explicit Type / Category / Status)
- Indian accounting export (Party Name / Particulars / Vch Type)
- Western accounting export (signed Amount)
- Amount parsing and sparse-row defaults
- Ids, empty input, parse failures
"""

import unittest
import tempfile
import shutil
import sys
from datetime import datetime
from pathlib import Path

# Add code directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "code"))

from forecasting.categories import (
    MARKETING,
    OFFICE,
    RENT,
    REVENUE,
    SOFTWARE,
    UNCATEGORIZED,
)
from forecasting.errors import LedgerParseError, UnknownRegionError
from forecasting.normalize import normalize_csv, normalize_file, parse_amount, read_ledger_rows

NOW = datetime(2026, 1, 10, 9, 30, 0)
STAMP = int(NOW.timestamp() * 1000)


class TestParseAmount(unittest.TestCase):
    """Best-effort numeric parse."""

    def test_thousands_separators(self):
        self.assertEqual(parse_amount("1,200.50"), 1200.5)
        self.assertEqual(parse_amount("25,00,000"), 2500000.0)

    def test_non_numeric_is_zero(self):
        self.assertEqual(parse_amount("abc"), 0.0)
        self.assertEqual(parse_amount(""), 0.0)
        self.assertEqual(parse_amount(None), 0.0)
        self.assertEqual(parse_amount("-"), 0.0)

    def test_leading_numeric_prefix(self):
        self.assertEqual(parse_amount("  -12.5 Dr"), -12.5)
        self.assertEqual(parse_amount("1e3"), 1000.0)
        self.assertEqual(parse_amount(".5"), 0.5)

    def test_numbers_pass_through(self):
        self.assertEqual(parse_amount(42), 42.0)
        self.assertEqual(parse_amount(-3.5), -3.5)


class TestAppNativeLayout(unittest.TestCase):
    """Rows carrying Payee / Category columns."""

    CSV = (
        "Payee,Description,Amount,Type,Date,Category,Status\n"
        "Acme Corp,Invoice 12,\"1,200.50\",in,2026-03-01,Sales / Revenue,paid\n"
        "AWS,Hosting,-250,OUT,2026-03-05,Not A Category,pending\n"
        "Landlord,Office rent,abc,OUT,,Rent & Facilities,\n"
    )

    def setUp(self):
        self.txs = normalize_csv(self.CSV, "IN", now=NOW)

    def test_row_count_preserved(self):
        self.assertEqual(len(self.txs), 3)

    def test_explicit_fields(self):
        t = self.txs[0]
        self.assertEqual(t.payee, "Acme Corp")
        self.assertEqual(t.description, "Invoice 12")
        self.assertEqual(t.amount, 1200.5)
        self.assertEqual(t.type, "IN")
        self.assertEqual(t.category, REVENUE)
        self.assertEqual(t.status, "PAID")
        self.assertEqual(t.date, "2026-03-01")

    def test_amount_is_absolute(self):
        self.assertEqual(self.txs[1].amount, 250.0)
        self.assertEqual(self.txs[1].type, "OUT")

    def test_unknown_category_is_auto_classified(self):
        self.assertEqual(self.txs[1].category, SOFTWARE)
        self.assertEqual(self.txs[1].status, "PENDING")

    def test_sparse_cells_fall_back(self):
        t = self.txs[2]
        self.assertEqual(t.amount, 0.0)
        self.assertEqual(t.category, RENT)
        self.assertEqual(t.date, NOW.isoformat())
        self.assertEqual(t.status, "PENDING")

    def test_ids_combine_index_and_timestamp(self):
        self.assertEqual([t.id for t in self.txs], [f"csv-{i}-{STAMP}" for i in range(3)])

    def test_category_only_row_is_app_native_in_any_region(self):
        txs = normalize_csv("Payee,Category,Amount\n,Office Supplies,10\n", "US", now=NOW)
        self.assertEqual(txs[0].payee, "Unknown")
        self.assertEqual(txs[0].category, OFFICE)
        self.assertEqual(txs[0].type, "OUT")


class TestIndianLayout(unittest.TestCase):
    """Region IN accounting export."""

    def test_receipts_and_payments(self):
        csv_text = (
            "Date,Particulars,Vch Type,Amount\n"
            "05-02-2026,Sharma Traders,Receipt,\"25,000\"\n"
            "06-02-2026,Office rent Feb,Payment,\"40,000.00\"\n"
            ",,Journal,\n"
        )
        txs = normalize_csv(csv_text, "IN", now=NOW)
        self.assertEqual(len(txs), 3)

        self.assertEqual(txs[0].payee, "Sharma Traders")
        self.assertEqual(txs[0].type, "IN")
        self.assertEqual(txs[0].amount, 25000.0)
        self.assertEqual(txs[0].category, REVENUE)
        self.assertEqual(txs[0].date, "2026-02-05")

        self.assertEqual(txs[1].type, "OUT")
        self.assertEqual(txs[1].description, "Payment")
        self.assertEqual(txs[1].category, RENT)
        self.assertEqual(txs[1].date, "2026-02-06")

        self.assertEqual(txs[2].payee, "Unknown")
        self.assertEqual(txs[2].amount, 0.0)
        self.assertEqual(txs[2].category, UNCATEGORIZED)
        self.assertEqual(txs[2].date, NOW.isoformat())

        for t in txs:
            self.assertEqual(t.status, "PENDING")

    def test_party_name_wins_and_receipt_is_case_sensitive(self):
        csv_text = "Party Name,Particulars,Vch Type,Amount\nRaj Enterprises,Sales A/c,receipt,100\n"
        txs = normalize_csv(csv_text, "IN", now=NOW)
        self.assertEqual(txs[0].payee, "Raj Enterprises")
        self.assertEqual(txs[0].type, "OUT")


class TestWesternLayout(unittest.TestCase):
    """Region US accounting export: direction from the amount sign."""

    def test_signed_amounts(self):
        csv_text = (
            "Date,Name,Memo/Description,Amount\n"
            "03/04/2026,Client Beta,Retainer March,5000\n"
            "03/05/2026,Facebook,Ads campaign,\"-1,200\"\n"
            "03/06/2026,Zero Co,Nothing,0\n"
        )
        txs = normalize_csv(csv_text, "US", now=NOW)

        self.assertEqual(txs[0].type, "IN")
        self.assertEqual(txs[0].amount, 5000.0)
        self.assertEqual(txs[0].category, REVENUE)
        self.assertEqual(txs[0].date, "2026-03-04")

        self.assertEqual(txs[1].type, "OUT")
        self.assertEqual(txs[1].amount, 1200.0)
        self.assertEqual(txs[1].category, MARKETING)

        self.assertEqual(txs[2].type, "OUT")
        self.assertEqual(txs[2].amount, 0.0)

    def test_short_row_still_yields_transaction(self):
        txs = normalize_csv("Name,Memo/Description,Amount\nSolo\n", "US", now=NOW)
        self.assertEqual(len(txs), 1)
        self.assertEqual(txs[0].payee, "Solo")
        self.assertEqual(txs[0].description, "")
        self.assertEqual(txs[0].amount, 0.0)


class TestDateWords(unittest.TestCase):

    def test_word_dates_kept_verbatim(self):
        txs = normalize_csv("Payee,Amount,Date\nAcme,10,today\nBeta,5,now\n", "US", now=NOW)
        self.assertEqual([t.date for t in txs], ["today", "now"])


class TestReadFailures(unittest.TestCase):
    """Empty input, unknown regions and undecodable files."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_empty_text(self):
        self.assertEqual(normalize_csv("", "IN"), [])
        self.assertEqual(normalize_csv("\n\n", "US"), [])
        self.assertEqual(read_ledger_rows("Payee,Amount\n"), [])

    def test_unknown_region(self):
        with self.assertRaises(UnknownRegionError):
            normalize_csv("Payee,Amount\nA,1\n", "UK")

    def test_undecodable_file(self):
        path = Path(self.test_dir) / "ledger.csv"
        path.write_bytes(b"Payee,Amount\n\xff\xfe\xfa,1\n")
        with self.assertRaises(LedgerParseError):
            normalize_file(path, "IN")

    def test_file_with_bom(self):
        path = Path(self.test_dir) / "ledger.csv"
        path.write_bytes("Payee,Amount,Type\nAcme,10,IN\n".encode("utf-8-sig"))
        txs = normalize_file(path, "IN", now=NOW)
        self.assertEqual(txs[0].payee, "Acme")
        self.assertEqual(txs[0].type, "IN")


if __name__ == "__main__":
    unittest.main(verbosity=2)
