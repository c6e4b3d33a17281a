"""HTTP client for the products microservice."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from src.clients.base import DEFAULT_TIMEOUT, BaseClient
from src.errors import MalformedResponseError
from src.models.charge import Charge
from src.models.product import Product
from src.schemas import CreatePaymentRequest, CreateProductRequest

SERVICE_NAME = "products"
API_PREFIX = "/v1/api"


class ProductsClient:
    """Creates and fetches products and their payments.

    The base URL and API token are fixed for the lifetime of the client;
    the token is sent as a bearer token on every call.
    """

    def __init__(
        self,
        base_url: str,
        api_token: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.client = BaseClient(
            f"{base_url.rstrip('/')}{API_PREFIX}",
            SERVICE_NAME,
            headers={"Authorization": f"Bearer {api_token}"},
            transport=transport,
            timeout=timeout,
        )

    # Products

    async def create_product(self, request: CreateProductRequest | dict) -> Product:
        """Create a product for a service.

        ``price`` is in pence. ``description`` and ``return_url`` are left
        out of the request body when not given.
        """
        if not isinstance(request, CreateProductRequest):
            request = CreateProductRequest.model_validate(request)
        description = "create a product for a service"
        data = await self.client.post(
            "/products", description, body=request.model_dump(exclude_none=True)
        )
        return Product.from_response(data, description)

    async def get_product_by_external_id(self, product_external_id: str) -> Product:
        description = "find a product by its external id"
        data = await self.client.get(f"/products/{_segment(product_external_id)}", description)
        return Product.from_response(data, description)

    async def get_products_by_gateway_account_id(self, gateway_account_id: str) -> list[Product]:
        description = "find a list of products associated with a gateway account"
        data = await self.client.get(
            "/products", description, params={"gatewayAccountId": gateway_account_id}
        )
        return [Product.from_response(p, description) for p in _as_list(data, description)]

    # Payments

    async def create_payment(self, product_external_id: str, price_override: int | None = None) -> Charge:
        """Create a payment for a product.

        ``price_override`` replaces the product's price for this payment only.
        """
        request = CreatePaymentRequest(external_product_id=product_external_id, amount=price_override)
        description = "create a payment for a product"
        data = await self.client.post(
            "/payments", description, body=request.model_dump(exclude_none=True)
        )
        return Charge.from_response(data, description)

    async def get_payment_by_payment_external_id(self, payment_external_id: str) -> Charge:
        description = "find a payment by its external id"
        data = await self.client.get(f"/payments/{_segment(payment_external_id)}", description)
        return Charge.from_response(data, description)

    async def get_payments_by_product_external_id(self, product_external_id: str) -> list[Charge]:
        description = "find the payments associated with a particular product"
        data = await self.client.get(f"/products/{_segment(product_external_id)}/payments", description)
        return [Charge.from_response(c, description) for c in _as_list(data, description)]


def _segment(external_id: str) -> str:
    return quote(external_id, safe="")


def _as_list(data: Any, description: str) -> list:
    if not isinstance(data, list):
        raise MalformedResponseError(description, f"expected a JSON array, got {type(data).__name__}")
    return data
