"""Chooses and renders the page shown once a payment has finished."""

from __future__ import annotations

from fastapi import Request

from src.formatting import as_gbp, beautify
from src.models.charge import Charge
from src.models.product import Product
from src.paths import pay_product
from src.views import render

SUCCESS_STATUS = "success"

CONFIRMATION_VIEW = "pay/confirmation"
FAILED_VIEW = "pay/failed"


def select_payment_status_view(product: Product, payment: Charge) -> tuple[str, dict]:
    """Return the view name and its data for a finished payment."""
    data = {"currentServiceName": product.service_name}

    status = (payment.govuk_status or "").lower()
    if status == SUCCESS_STATUS:
        data["payment"] = {
            "reference": beautify(payment.reference_number),
            "amount": as_gbp(payment.amount),
        }
        return CONFIRMATION_VIEW, data

    data["backToStartPage"] = pay_product(product.external_id)
    return FAILED_VIEW, data


def render_payment_status(request: Request):
    """Render the status page for the product and payment on ``request.state``."""
    view, data = select_payment_status_view(request.state.product, request.state.payment)
    return render(request, view, data)
