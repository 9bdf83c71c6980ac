"""Google Base attribute types and the standard type registry."""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Iterable

logger = logging.getLogger(__name__)


class StandardAttributeTypeId(Enum):
    """Identifies the kind of an attribute type. OTHER covers every non-standard name."""

    TEXT = "text"
    BOOLEAN = "boolean"
    LOCATION = "location"
    URL = "url"
    INT = "int"
    FLOAT = "float"
    NUMBER = "number"
    INT_UNIT = "intUnit"
    FLOAT_UNIT = "floatUnit"
    NUMBER_UNIT = "numberUnit"
    DATE = "date"
    DATE_TIME = "dateTime"
    DATE_TIME_RANGE = "dateTimeRange"
    OTHER = "other"


class GBaseAttributeType:
    """
    The type of a Google Base attribute.

    Standard types are singletons, obtained through the module constants or
    for_name(). Any other name yields a fresh OTHER type, compared by name.
    Instances are immutable.
    """

    __slots__ = ("_type_id", "_name", "_subtypes")

    def __init__(
        self,
        type_id: StandardAttributeTypeId,
        name: str,
        subtypes: Iterable["GBaseAttributeType"] = (),
    ) -> None:
        object.__setattr__(self, "_type_id", type_id)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_subtypes", tuple(subtypes))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def id(self) -> StandardAttributeTypeId:
        return self._type_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_standard(self) -> bool:
        return self._type_id is not StandardAttributeTypeId.OTHER

    def is_supertype_of(self, other: object) -> bool:
        """Checks whether other is this type or one of its direct or indirect subtypes."""
        if not isinstance(other, GBaseAttributeType):
            return False
        if self == other:
            return True
        return any(subtype.is_supertype_of(other) for subtype in self._subtypes)

    @classmethod
    def for_name(cls, name: str) -> "GBaseAttributeType":
        return for_name(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GBaseAttributeType):
            return NotImplemented
        if self._type_id is not other._type_id:
            return False
        if self.is_standard:
            return True
        return self._name == other._name

    def __hash__(self) -> int:
        if self.is_standard:
            return hash(self._type_id)
        return hash((self._type_id, self._name))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._type_id.name}, {self._name!r})"

    def __str__(self) -> str:
        return self._name


def _standard(type_id: StandardAttributeTypeId, *subtypes: GBaseAttributeType) -> GBaseAttributeType:
    return GBaseAttributeType(type_id, type_id.value, subtypes)


TEXT = _standard(StandardAttributeTypeId.TEXT)
BOOLEAN = _standard(StandardAttributeTypeId.BOOLEAN)
LOCATION = _standard(StandardAttributeTypeId.LOCATION)
URL = _standard(StandardAttributeTypeId.URL)
INT = _standard(StandardAttributeTypeId.INT)
FLOAT = _standard(StandardAttributeTypeId.FLOAT)
NUMBER = _standard(StandardAttributeTypeId.NUMBER, INT, FLOAT)
INT_UNIT = _standard(StandardAttributeTypeId.INT_UNIT)
FLOAT_UNIT = _standard(StandardAttributeTypeId.FLOAT_UNIT)
NUMBER_UNIT = _standard(StandardAttributeTypeId.NUMBER_UNIT, INT_UNIT, FLOAT_UNIT)
DATE = _standard(StandardAttributeTypeId.DATE)
DATE_TIME = _standard(StandardAttributeTypeId.DATE_TIME, DATE)
DATE_TIME_RANGE = _standard(StandardAttributeTypeId.DATE_TIME_RANGE, DATE_TIME)

ALL_STANDARD_TYPES: tuple[GBaseAttributeType, ...] = (
    TEXT,
    BOOLEAN,
    LOCATION,
    URL,
    INT,
    FLOAT,
    NUMBER,
    INT_UNIT,
    FLOAT_UNIT,
    NUMBER_UNIT,
    DATE,
    DATE_TIME,
    DATE_TIME_RANGE,
)

_STANDARD_TYPES_BY_NAME = MappingProxyType({standard.name: standard for standard in ALL_STANDARD_TYPES})


def for_name(name: str) -> GBaseAttributeType:
    """Returns the standard type called name, or a new OTHER type carrying it verbatim."""
    standard_type = _STANDARD_TYPES_BY_NAME.get(name)
    if standard_type is not None:
        return standard_type
    logger.debug(f"Non-standard attribute type: {name!r}")
    return GBaseAttributeType(StandardAttributeTypeId.OTHER, name)
