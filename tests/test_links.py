#!/usr/bin/env python3
"""
test_links.py

Unit tests for forecasting.links

Tests:
- WhatsApp deep link for IN actions
- mailto link for US actions
- Crunch alert share link
"""

import unittest
import sys
from pathlib import Path

# Add code directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "code"))

from forecasting.links import action_link, crunch_alert_link, encode_component
from forecasting.models import EMAIL, HIGH, NORMAL, WHATSAPP, CashFlowAction


class TestLinks(unittest.TestCase):

    def test_whatsapp(self):
        action = CashFlowAction(id="in-1", title="Collect Payment", description="", amount=2500000.0,
                                priority=HIGH, action_type=WHATSAPP, contact_name="Client Alpha")
        self.assertEqual(
            action_link(action),
            "https://wa.me/?text=Hi%20Client%20Alpha%2C%20regarding%20the%20payment%20of%202500000...",
        )

    def test_email(self):
        action = CashFlowAction(id="out-1", title="Delay Payment", description="", amount=25000,
                                priority=NORMAL, action_type=EMAIL, contact_name="AWS")
        self.assertEqual(
            action_link(action),
            "mailto:?subject=Payment%20Action%3A%20Delay%20Payment"
            "&body=Hi%20AWS%2C%20regarding%20the%20amount%20of%2025000...",
        )

    def test_fractional_amount(self):
        action = CashFlowAction(id="out-1", title="Delay Payment", description="", amount=12.5,
                                priority=NORMAL, action_type=WHATSAPP, contact_name="Bob")
        self.assertTrue(action_link(action).endswith("of%2012.5..."))

    def test_crunch_alert(self):
        self.assertEqual(
            crunch_alert_link("Feb 1, 2026"),
            "https://wa.me/?text=Emergency%20Cash%20Crunch%20Alert%20for%20Feb%201%2C%202026",
        )

    def test_encode_component_keeps_unreserved(self):
        self.assertEqual(encode_component("a-b_c.d!e~f*g'h(i)"), "a-b_c.d!e~f*g'h(i)")
        self.assertEqual(encode_component("a&b=c/d"), "a%26b%3Dc%2Fd")


if __name__ == "__main__":
    unittest.main(verbosity=2)
