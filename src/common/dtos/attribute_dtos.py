"""Data Transfer Objects for Google Base attribute data."""

from dataclasses import dataclass

from src.gbase_domain.domain.entities.attribute import GBaseAttribute


@dataclass
class AttributeRowDTO:
    """Flat, display-ready view of one attribute."""

    name: str
    type_name: str | None = None
    content: str = ""
    access: str = "public"

    @classmethod
    def from_attribute(cls, attribute: GBaseAttribute) -> "AttributeRowDTO":
        return cls(
            name=attribute.name,
            type_name=attribute.type.name if attribute.type is not None else None,
            content=attribute.content,
            access="private" if attribute.is_private else "public",
        )
