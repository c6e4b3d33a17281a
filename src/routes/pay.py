"""Pay routes: start a payment for a product and show its outcome."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from src.clients.products import ProductsClient
from src.controllers.payment_status import SUCCESS_STATUS, render_payment_status
from src.dependencies import get_products_client
from src.errors import MalformedResponseError
from src.paths import PAY_COMPLETE, PAY_PRODUCT

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pay"])


@router.get(PAY_PRODUCT)
async def make_payment(
    product_external_id: str,
    products: ProductsClient = Depends(get_products_client),
):
    """Create a payment for the product and send the user on to pay it."""
    charge = await products.create_payment(product_external_id)
    if charge.next_link is None:
        raise MalformedResponseError("create a payment for a product", "payment has no next link")

    logger.info("Created payment %s for product %s", charge.external_charge_id, product_external_id)
    return RedirectResponse(charge.next_link.href, status_code=303)


@router.get(PAY_COMPLETE)
async def payment_complete(
    payment_external_id: str,
    request: Request,
    products: ProductsClient = Depends(get_products_client),
):
    """Show the confirmation or failure page for a finished payment."""
    payment = await products.get_payment_by_payment_external_id(payment_external_id)
    if payment.product_external_id is None:
        raise MalformedResponseError("find a payment by its external id", "payment has no product external id")
    if payment.govuk_status and payment.govuk_status.lower() == SUCCESS_STATUS and not payment.reference_number:
        raise MalformedResponseError("find a payment by its external id", "successful payment has no reference number")

    request.state.payment = payment
    request.state.product = await products.get_product_by_external_id(payment.product_external_id)
    return render_payment_status(request)
