# gbase_domain/infrastructure/xml/entry_xml.py
"""Loading and writing Atom entry documents that carry Google Base attributes."""

import io
import logging
from typing import Any

from lxml import etree

from src.common.exceptions.custom_exceptions import XmlParseError
from src.gbase_domain.domain.entities.attribute import GBASE_NAMESPACE, GBASE_PREFIX
from src.gbase_domain.domain.entities.attribute_collection import GBaseAttributeCollection

logger = logging.getLogger(__name__)

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"
ENTRY_TAG = f"{{{ATOM_NAMESPACE}}}entry"


def _make_parser(remove_blank_text: bool = False) -> etree.XMLParser:
    # Documents come from remote feeds: no entity expansion, no network lookups
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=remove_blank_text)


def load_element(xml: str | bytes) -> Any:
    """Parses an XML document and returns its root element."""
    if not xml:
        raise XmlParseError("Empty XML document")
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    try:
        return etree.fromstring(xml, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        logger.error(f"Failed to parse XML document: {e}")
        raise XmlParseError("Failed to parse XML document", e)


def write_entry(collection: GBaseAttributeCollection, encoding: str = "utf-8", pretty_print: bool = True) -> bytes:
    """Renders the attributes as the children of an Atom <entry> element."""
    buffer = io.BytesIO()
    with etree.xmlfile(buffer, encoding=encoding) as writer:
        writer.write_declaration()
        with writer.element(ENTRY_TAG, nsmap={None: ATOM_NAMESPACE, GBASE_PREFIX: GBASE_NAMESPACE}):
            collection.save(writer)
    data = buffer.getvalue()

    if not pretty_print:
        return data
    root = etree.fromstring(data, parser=_make_parser(remove_blank_text=True))
    return etree.tostring(root, encoding=encoding, xml_declaration=True, pretty_print=True)
