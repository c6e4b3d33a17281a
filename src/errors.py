"""Errors raised while talking to the products service."""

from __future__ import annotations


class ProductsUIError(Exception):
    pass


class UpstreamError(ProductsUIError):
    """A call to a remote service failed or answered with a non-2xx status.

    ``status_code`` is ``None`` when no response was received at all.
    """

    def __init__(self, status_code: int | None, description: str, service: str = "products"):
        self.status_code = status_code
        self.description = description
        self.service = service
        super().__init__(f"{service} returned {status_code} while trying to {description}")

    @property
    def error_code(self) -> int | None:
        return self.status_code


class NotFoundError(UpstreamError):
    pass


class MalformedResponseError(ProductsUIError):
    """The response body could not be turned into a model."""

    def __init__(self, description: str, detail: str):
        self.description = description
        self.detail = detail
        super().__init__(f"Unexpected response while trying to {description}: {detail}")
