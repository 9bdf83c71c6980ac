# gbase_domain/application/attribute_service.py
"""Application services for Google Base entry attributes."""

import logging

from src.common.config.settings import settings
from src.common.dtos.attribute_dtos import AttributeRowDTO
from src.gbase_domain.domain.entities.attribute_collection import GBaseAttributeCollection
from src.gbase_domain.infrastructure.xml.entry_xml import load_element, write_entry

logger = logging.getLogger(__name__)


class GBaseAttributeApplicationService:

    def __init__(self, encoding: str | None = None, pretty_print: bool | None = None) -> None:
        self.encoding = encoding or settings.XML_ENCODING
        self.pretty_print = settings.XML_PRETTY_PRINT if pretty_print is None else pretty_print

    def read_entry_attributes(self, xml: str | bytes) -> GBaseAttributeCollection:
        """Parses an Atom entry document and returns its Google Base attributes."""
        entry = load_element(xml)
        collection = GBaseAttributeCollection.from_entry(entry)
        private_count = sum(1 for attribute in collection if attribute.is_private)
        logger.info(f"Read {len(collection)} attributes from entry ({private_count} private)")
        return collection

    def render_entry(self, collection: GBaseAttributeCollection) -> bytes:
        """Serializes the attributes into an Atom entry document."""
        logger.info(f"Rendering entry with {len(collection)} attributes")
        return write_entry(collection, encoding=self.encoding, pretty_print=self.pretty_print)

    def describe(self, collection: GBaseAttributeCollection) -> list[AttributeRowDTO]:
        return [AttributeRowDTO.from_attribute(attribute) for attribute in collection]
