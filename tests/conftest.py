# tests/conftest.py
import io

import pytest
from lxml import etree

from src.common.config.settings import settings


SAMPLE_ENTRY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<entry xmlns="http://www.w3.org/2005/Atom" xmlns:g="http://base.google.com/ns/1.0">
  <title type="text">Leather hiking boots</title>
  <g:item_type type="text">Products</g:item_type>
  <g:price type="float">129.99</g:price>
  <g:quantity type="int">5</g:quantity>
  <g:weight type="floatUnit">1.2 kg</g:weight>
  <g:pickup type="boolean">true</g:pickup>
  <g:expiration_date type="dateTime">2006-12-20T10:00:00Z</g:expiration_date>
  <g:release_date type="date">2006-11-01</g:release_date>
  <g:sale_period type="dateTimeRange">2006-12-01T10:00:00Z 2006-12-05T18:00:00Z</g:sale_period>
  <g:label type="text">outdoor</g:label>
  <g:label type="text">leather</g:label>
  <g:supplier_id access="private" type="supplierCode">SUP-42</g:supplier_id>
  <g:condition>new</g:condition>
  <!-- not an attribute -->
  <other:rating xmlns:other="http://example.com/ns/other">5</other:rating>
</entry>
"""


@pytest.fixture(autouse=True)
def mock_settings_xml_output(mocker) -> None:
    """Mocks the XML output settings for consistent testing."""
    mocker.patch.object(settings, "XML_ENCODING", "utf-8")
    mocker.patch.object(settings, "XML_PRETTY_PRINT", True)


@pytest.fixture
def sample_entry_xml() -> str:
    """Sample Atom entry with Google Base attributes."""
    return SAMPLE_ENTRY_XML


@pytest.fixture
def sample_entry_element(sample_entry_xml):
    """Parsed root <entry> element of the sample entry."""
    return etree.fromstring(sample_entry_xml.encode("utf-8"))


@pytest.fixture
def parse_xml():
    """Parses a standalone XML snippet and returns its root element."""

    def _parse(xml: str | bytes):
        if isinstance(xml, str):
            xml = xml.encode("utf-8")
        return etree.fromstring(xml)

    return _parse


@pytest.fixture
def save_to_xml():
    """Writes an attribute through an lxml incremental writer and returns the bytes."""

    def _save(attribute) -> bytes:
        buffer = io.BytesIO()
        with etree.xmlfile(buffer, encoding="utf-8") as writer:
            attribute.save(writer)
        return buffer.getvalue()

    return _save
