"""The Google Base attributes of a single feed entry."""

import logging
from datetime import date, datetime
from typing import Any, Callable, Iterator, TypeVar

from lxml import etree

from src.common.exceptions.custom_exceptions import AttributeConversionError
from src.common.utils.date_utils import format_gbase_date, format_gbase_datetime, parse_gbase_date
from src.gbase_domain.domain.entities import attribute_type as attribute_types
from src.gbase_domain.domain.entities.attribute import GBASE_NAMESPACE, GBaseAttribute
from src.gbase_domain.domain.entities.attribute_type import GBaseAttributeType
from src.gbase_domain.domain.entities.value_types import DateTimeRange, NumberUnit

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _parse_boolean(content: str) -> bool:
    value = content.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"Expected 'true' or 'false', got {content!r}")


class GBaseAttributeCollection:
    """Ordered list of attributes with name and type based lookups."""

    def __init__(self, attributes: list[GBaseAttribute] | None = None) -> None:
        self._attributes: list[GBaseAttribute] = list(attributes or [])

    @classmethod
    def from_entry(cls, entry: Any) -> "GBaseAttributeCollection":
        """Collects the Google Base attributes among the direct children of an entry element."""
        collection = cls()
        for child in entry:
            if not isinstance(child.tag, str):
                continue  # comments and processing instructions
            if etree.QName(child).namespace != GBASE_NAMESPACE:
                continue
            collection.add(GBaseAttribute.parse(child))
        logger.debug(f"Parsed {len(collection)} Google Base attributes from entry")
        return collection

    def __iter__(self) -> Iterator[GBaseAttribute]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def contains(self, name: str) -> bool:
        return any(attribute.name == name for attribute in self._attributes)

    # --- Adding ---

    def add(self, attribute: GBaseAttribute) -> GBaseAttribute:
        self._attributes.append(attribute)
        return attribute

    def add_attribute(
        self, name: str, attribute_type: GBaseAttributeType | None, content: str, is_private: bool = False
    ) -> GBaseAttribute:
        return self.add(GBaseAttribute(name=name, type=attribute_type, content=content, is_private=is_private))

    def add_text_attribute(self, name: str, value: str) -> GBaseAttribute:
        return self.add_attribute(name, attribute_types.TEXT, value)

    def add_boolean_attribute(self, name: str, value: bool) -> GBaseAttribute:
        return self.add_attribute(name, attribute_types.BOOLEAN, "true" if value else "false")

    def add_int_attribute(self, name: str, value: int) -> GBaseAttribute:
        return self.add_attribute(name, attribute_types.INT, str(value))

    def add_float_attribute(self, name: str, value: float) -> GBaseAttribute:
        return self.add_attribute(name, attribute_types.FLOAT, str(float(value)))

    def add_number_attribute(self, name: str, value: int | float) -> GBaseAttribute:
        return self.add_attribute(name, attribute_types.NUMBER, str(value))

    def add_number_unit_attribute(self, name: str, value: NumberUnit) -> GBaseAttribute:
        if isinstance(value.value, int):
            attribute_type = attribute_types.INT_UNIT
        else:
            attribute_type = attribute_types.FLOAT_UNIT
        return self.add_attribute(name, attribute_type, str(value))

    def add_date_attribute(self, name: str, value: date) -> GBaseAttribute:
        return self.add_attribute(name, attribute_types.DATE, format_gbase_date(value))

    def add_date_time_attribute(self, name: str, value: datetime) -> GBaseAttribute:
        """Adds a dateTime attribute; the value is written in UTC to whole seconds."""
        return self.add_attribute(name, attribute_types.DATE_TIME, format_gbase_datetime(value))

    def add_date_time_range_attribute(self, name: str, value: DateTimeRange) -> GBaseAttribute:
        return self.add_attribute(name, attribute_types.DATE_TIME_RANGE, str(value))

    def add_url_attribute(self, name: str, value: str) -> GBaseAttribute:
        return self.add_attribute(name, attribute_types.URL, value)

    def add_location_attribute(self, name: str, value: str) -> GBaseAttribute:
        return self.add_attribute(name, attribute_types.LOCATION, value)

    # --- Lookup ---

    def get_attributes(self, name: str, attribute_type: GBaseAttributeType | None = None) -> list[GBaseAttribute]:
        """
        Returns all attributes called name, in insertion order.

        When attribute_type is given, only attributes whose type is that type
        or one of its subtypes match, so NUMBER finds int and float attributes.
        """
        return [
            attribute
            for attribute in self._attributes
            if attribute.name == name and (attribute_type is None or attribute_type.is_supertype_of(attribute.type))
        ]

    def get_attribute(self, name: str, attribute_type: GBaseAttributeType | None = None) -> GBaseAttribute | None:
        matches = self.get_attributes(name, attribute_type)
        return matches[0] if matches else None

    def _get_converted(
        self, name: str, attribute_type: GBaseAttributeType, converter: Callable[[GBaseAttribute], T]
    ) -> T | None:
        attribute = self.get_attribute(name, attribute_type)
        if attribute is None:
            return None
        try:
            return converter(attribute)
        except (AttributeConversionError, ValueError) as e:
            raise AttributeConversionError(
                f"Cannot read {attribute.content!r} as {attribute_type.name}", e, attribute_name=name
            )

    def get_text_attribute(self, name: str) -> str | None:
        return self._get_converted(name, attribute_types.TEXT, lambda attribute: attribute.content)

    def get_boolean_attribute(self, name: str) -> bool | None:
        return self._get_converted(name, attribute_types.BOOLEAN, lambda attribute: _parse_boolean(attribute.content))

    def get_int_attribute(self, name: str) -> int | None:
        return self._get_converted(name, attribute_types.INT, lambda attribute: int(attribute.content.strip()))

    def get_float_attribute(self, name: str) -> float | None:
        return self._get_converted(name, attribute_types.FLOAT, lambda attribute: float(attribute.content.strip()))

    def get_number_attribute(self, name: str) -> int | float | None:
        """Reads a number, int or float attribute; int attributes come back as int."""

        def convert(attribute: GBaseAttribute) -> int | float:
            if attribute.type == attribute_types.INT:
                return int(attribute.content.strip())
            return float(attribute.content.strip())

        return self._get_converted(name, attribute_types.NUMBER, convert)

    def get_number_unit_attribute(self, name: str) -> NumberUnit | None:
        return self._get_converted(
            name,
            attribute_types.NUMBER_UNIT,
            lambda attribute: NumberUnit.parse(attribute.content, integral=attribute.type == attribute_types.INT_UNIT),
        )

    def get_date_attribute(self, name: str) -> date | None:
        return self._get_converted(name, attribute_types.DATE, lambda attribute: parse_gbase_date(attribute.content))

    def get_date_time_attribute(self, name: str) -> datetime | None:
        """Reads a dateTime or date attribute; dates come back as midnight UTC."""
        return self._get_converted(
            name, attribute_types.DATE_TIME, lambda attribute: DateTimeRange.parse(attribute.content).start
        )

    def get_date_time_range_attribute(self, name: str) -> DateTimeRange | None:
        return self._get_converted(
            name, attribute_types.DATE_TIME_RANGE, lambda attribute: DateTimeRange.parse(attribute.content)
        )

    def get_url_attribute(self, name: str) -> str | None:
        return self._get_converted(name, attribute_types.URL, lambda attribute: attribute.content)

    def get_location_attribute(self, name: str) -> str | None:
        return self._get_converted(name, attribute_types.LOCATION, lambda attribute: attribute.content)

    # --- Removal ---

    def remove(self, attribute: GBaseAttribute) -> None:
        self._attributes.remove(attribute)

    def remove_all(self, name: str) -> int:
        """Removes every attribute called name and returns how many were removed."""
        kept = [attribute for attribute in self._attributes if attribute.name != name]
        removed = len(self._attributes) - len(kept)
        self._attributes = kept
        return removed

    def save(self, writer: Any) -> None:
        for attribute in self._attributes:
            attribute.save(writer)
