"""Google Base attribute entity and its XML mapping."""

from dataclasses import dataclass
from typing import Any

from lxml import etree

from src.gbase_domain.domain.entities.attribute_type import GBaseAttributeType, for_name

GBASE_NAMESPACE = "http://base.google.com/ns/1.0"
GBASE_PREFIX = "g"

TYPE_XML_ATTRIBUTE = "type"
ACCESS_XML_ATTRIBUTE = "access"
PRIVATE_ACCESS = "private"


def tag_to_attribute_name(tag: str) -> str:
    """Converts an element's local tag name to an attribute name ('item_type' -> 'item type')."""
    return tag.replace("_", " ")


def attribute_name_to_tag(name: str) -> str:
    """Converts an attribute name to an element's local tag name ('item type' -> 'item_type')."""
    return name.replace(" ", "_")


@dataclass
class GBaseAttribute:
    """
    A single Google Base attribute: a named, optionally typed string value.

    The XML form is one element in the Google Base namespace, e.g.
    <g:item_type type="text">Product</g:item_type>, with access="private"
    marking attributes hidden from public search results.
    """

    name: str
    type: GBaseAttributeType | None = None
    content: str = ""
    is_private: bool = False

    @classmethod
    def parse(cls, element: Any) -> "GBaseAttribute":
        """Creates a GBaseAttribute from a parsed XML element. Only 'type' and 'access' are read."""
        name = tag_to_attribute_name(etree.QName(element).localname)

        type_name = element.get(TYPE_XML_ATTRIBUTE)
        attribute_type = for_name(type_name) if type_name is not None else None

        content = "".join(element.itertext())
        is_private = element.get(ACCESS_XML_ATTRIBUTE) == PRIVATE_ACCESS

        return cls(name=name, type=attribute_type, content=content, is_private=is_private)

    def save(self, writer: Any) -> None:
        """
        Writes this attribute as one element through an lxml incremental writer.

        writer is the context returned by ``lxml.etree.xmlfile(...)`` (or any
        object with the same ``element()``/``write()`` interface).
        """
        attrib = {}
        if self.type is not None:
            attrib[TYPE_XML_ATTRIBUTE] = self.type.name
        if self.is_private:
            attrib[ACCESS_XML_ATTRIBUTE] = PRIVATE_ACCESS

        tag = etree.QName(GBASE_NAMESPACE, attribute_name_to_tag(self.name)).text
        with writer.element(tag, attrib, nsmap={GBASE_PREFIX: GBASE_NAMESPACE}):
            if self.content:
                writer.write(self.content)
