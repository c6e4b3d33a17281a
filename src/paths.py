"""URL templates for the pages served by the Products UI."""

PAY_PRODUCT = "/pay/{product_external_id}"
PAY_COMPLETE = "/pay/complete/{payment_external_id}"


def pay_product(product_external_id: str) -> str:
    return PAY_PRODUCT.format(product_external_id=product_external_id)
