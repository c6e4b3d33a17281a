"""Charge (payment) model for the Products UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from src.errors import MalformedResponseError
from src.models.link import Link, links_by_rel
from src.schemas import ChargeSchema


@dataclass(frozen=True)
class Charge:
    external_charge_id: str
    amount: int
    product_external_id: Optional[str] = None
    status: Optional[str] = None
    govuk_status: Optional[str] = None
    reference_number: Optional[str] = None
    links: dict[str, Link] = field(default_factory=dict)

    @property
    def next_link(self) -> Optional[Link]:
        return self.links.get("next")

    @classmethod
    def from_response(cls, data: Any, description: str = "read a payment") -> Charge:
        """Create a charge from a products service response body."""
        try:
            schema = ChargeSchema.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(description, str(e)) from e

        return cls(
            external_charge_id=schema.external_id,
            amount=schema.amount,
            product_external_id=schema.product_external_id,
            status=schema.status,
            govuk_status=schema.govuk_status,
            reference_number=schema.reference_number,
            links=links_by_rel(schema.links),
        )
