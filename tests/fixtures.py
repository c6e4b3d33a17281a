"""Products service response bodies used across the tests."""

PRODUCT_EXTERNAL_ID = "product-externalId"
PAYMENT_EXTERNAL_ID = "payment-externalId"


def product_response(**overrides) -> dict:
    data = {
        "external_id": PRODUCT_EXTERNAL_ID,
        "gateway_account_id": 1234,
        "service_name": "Example service",
        "name": "Example product",
        "description": "Pay for an example product",
        "price": 1050,
        "return_url": "http://some.return.url/",
        "_links": [
            {
                "rel": "self",
                "method": "GET",
                "href": f"http://products.url/v1/api/products/{PRODUCT_EXTERNAL_ID}",
            },
            {
                "rel": "pay",
                "method": "GET",
                "href": f"http://products-ui.url/pay/{PRODUCT_EXTERNAL_ID}",
            },
        ],
    }
    data.update(overrides)
    return data


def payment_response(**overrides) -> dict:
    data = {
        "external_id": PAYMENT_EXTERNAL_ID,
        "product_external_id": PRODUCT_EXTERNAL_ID,
        "amount": 150,
        "status": "SUCCESS",
        "govuk_status": "success",
        "reference_number": "ABC1234DEF",
        "_links": [
            {
                "rel": "next",
                "method": "GET",
                "href": "http://frontend.url/charge/charge-externalId",
            },
        ],
    }
    data.update(overrides)
    return data
