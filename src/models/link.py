"""Hypermedia links attached to products service resources."""

from __future__ import annotations

from dataclasses import dataclass

from src.schemas import LinkSchema


@dataclass(frozen=True)
class Link:
    href: str
    method: str = "GET"

    @classmethod
    def from_schema(cls, schema: LinkSchema) -> Link:
        return cls(href=schema.href, method=schema.method)


def links_by_rel(schemas: list[LinkSchema]) -> dict[str, Link]:
    """Index links by their ``rel``; the first link wins on duplicates."""
    links: dict[str, Link] = {}
    for schema in schemas:
        links.setdefault(schema.rel, Link.from_schema(schema))
    return links
