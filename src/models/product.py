"""Product model for the Products UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from src.errors import MalformedResponseError
from src.models.link import Link, links_by_rel
from src.schemas import ProductSchema


@dataclass(frozen=True)
class Product:
    external_product_id: str
    name: str
    price: int
    gateway_account_id: Optional[str] = None
    service_name: Optional[str] = None
    description: Optional[str] = None
    return_url: Optional[str] = None
    self_link: Optional[Link] = None
    pay_link: Optional[Link] = None

    @property
    def external_id(self) -> str:
        return self.external_product_id

    @classmethod
    def from_response(cls, data: Any, description: str = "read a product") -> Product:
        """Create a product from a products service response body."""
        try:
            schema = ProductSchema.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(description, str(e)) from e

        links = links_by_rel(schema.links)
        return cls(
            external_product_id=schema.external_id,
            name=schema.name,
            price=schema.price,
            gateway_account_id=schema.gateway_account_id,
            service_name=schema.service_name,
            description=schema.description,
            return_url=schema.return_url,
            self_link=links.get("self"),
            pay_link=links.get("pay"),
        )
