"""Display formatting for amounts and payment references."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

GBP_SYMBOL = "£"
PENCE_PER_POUND = Decimal(100)


def as_gbp(amount_in_pence: int) -> str:
    """Format an amount in pence as pounds, e.g. ``150`` -> ``"£1.50"``."""
    pounds = (Decimal(amount_in_pence) / PENCE_PER_POUND).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if pounds < 0 else ""
    return f"{sign}{GBP_SYMBOL}{abs(pounds)}"


def beautify(reference: str) -> str:
    """Split a payment reference into groups of 3, 4 and the rest."""
    return f"{reference[:3]} {reference[3:7]} {reference[7:]}"
