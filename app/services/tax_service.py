"""
Rental Income Tax Estimate
Flat-rate estimate on net rental income, as shown on the tax officer dashboard.

The rate lives in settings (TAX_RATE); change it there when the rate changes.
Losses carry no tax and no credit.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from app.core.config import settings


# ═══════════════════════════════════════════════════════════════════════════════
# TAX CONSTANTS
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_TAX_RATE = 0.10   # 10% of net rental income
CURRENCY = "KES"


def format_currency(amount: float) -> str:
    """KES 123,456.00"""
    return f"{CURRENCY} {amount:,.2f}"


def estimate_rental_tax(
    gross_income: float,
    total_expenses: float,
    rate: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Estimate tax on a period's rental income.

    Parameters
    ----------
    gross_income   : rent actually received (Paid payments) in the period
    total_expenses : expenses recorded against the landlord's properties
    rate           : override for settings.TAX_RATE
    """
    if rate is None:
        rate = settings.TAX_RATE if settings.TAX_RATE is not None else DEFAULT_TAX_RATE

    net = gross_income - total_expenses
    tax = net * rate if net > 0 else 0.0

    return {
        "gross_rental_income": round(gross_income, 2),
        "total_expenses": round(total_expenses, 2),
        "net_taxable_income": round(net, 2),
        "tax_rate": rate,
        "estimated_tax": round(tax, 2),
        "calculation_method": (
            f"{rate * 100:.0f}% of net taxable income"
            if net > 0 else "No tax: expenses meet or exceed income"
        ),
        "breakdown": {
            "gross_rent": format_currency(gross_income),
            "expenses": format_currency(total_expenses),
            "net_income": format_currency(net),
            "tax": format_currency(tax),
        },
    }
