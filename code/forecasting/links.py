"""
links.py

Prefilled WhatsApp / mail links for action cards.
"""

from __future__ import annotations

from urllib.parse import quote

from .models import WHATSAPP, CashFlowAction

# Characters encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def _format_amount(amount: float) -> str:
    # 2500000.0 -> "2500000", 12.5 -> "12.5"
    return str(int(amount)) if float(amount).is_integer() else str(amount)


def action_link(action: CashFlowAction) -> str:
    amount = _format_amount(action.amount)
    if action.action_type == WHATSAPP:
        text = encode_component(f"Hi {action.contact_name}, regarding the payment of {amount}...")
        return f"https://wa.me/?text={text}"

    subject = encode_component(f"Payment Action: {action.title}")
    body = encode_component(f"Hi {action.contact_name}, regarding the amount of {amount}...")
    return f"mailto:?subject={subject}&body={body}"


def crunch_alert_link(pretty_date: str) -> str:
    return "https://wa.me/?text=" + encode_component(f"Emergency Cash Crunch Alert for {pretty_date}")
