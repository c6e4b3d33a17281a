"""FastAPI dependencies for the Products UI."""

from __future__ import annotations

from src.clients.products import ProductsClient
from src.config import settings


def get_products_client() -> ProductsClient:
    return ProductsClient(
        settings.products_url,
        settings.products_api_token,
        timeout=settings.products_http_timeout,
    )
