"""Pydantic schemas for products service payloads."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field, field_validator


def _account_id_as_str(value):
    # connector account ids arrive as numbers from some endpoints
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class LinkSchema(BaseModel):
    rel: str
    href: str
    method: str = "GET"


class ProductSchema(BaseModel):
    external_id: str = Field(validation_alias=AliasChoices("external_id", "external_service_id"))
    gateway_account_id: str | None = None
    service_name: str | None = None
    name: str
    description: str | None = None
    price: int = Field(ge=0)
    return_url: str | None = None
    links: list[LinkSchema] = Field(default_factory=list, alias="_links")

    @field_validator("gateway_account_id", mode="before")
    @classmethod
    def coerce_account_id(cls, value):
        return _account_id_as_str(value)


class ChargeSchema(BaseModel):
    external_id: str
    product_external_id: str | None = None
    amount: int = Field(ge=0)
    status: str | None = None
    govuk_status: str | None = None
    reference_number: str | None = None
    links: list[LinkSchema] = Field(default_factory=list, alias="_links")


class CreateProductRequest(BaseModel):
    gateway_account_id: str = Field(min_length=1)
    pay_api_token: str
    name: str
    price: int = Field(ge=0)
    description: str | None = None
    return_url: str | None = None

    @field_validator("gateway_account_id", mode="before")
    @classmethod
    def coerce_account_id(cls, value):
        return _account_id_as_str(value)


class CreatePaymentRequest(BaseModel):
    external_product_id: str
    amount: int | None = Field(default=None, ge=0)


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
