"""Products UI configuration."""

from __future__ import annotations

import os


class Settings:
    products_url: str = os.getenv("PRODUCTS_URL", "http://localhost:18000")
    products_api_token: str = os.getenv("PRODUCTS_API_TOKEN", "")
    products_http_timeout: float = float(os.getenv("PRODUCTS_HTTP_TIMEOUT", "10"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    service_name: str = "products-ui"
    version: str = "1.0.0"


settings = Settings()
