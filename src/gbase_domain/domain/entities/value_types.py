"""Structured values carried in the content of Google Base attributes."""

import re
from dataclasses import dataclass
from datetime import datetime

from src.common.exceptions.custom_exceptions import AttributeConversionError
from src.common.utils.date_utils import format_gbase_datetime, parse_gbase_datetime

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)  # Value objects are immutable
class NumberUnit:
    """A number followed by its unit, e.g. '12.5 km' (numberUnit, intUnit, floatUnit)."""

    value: int | float
    unit: str

    @classmethod
    def parse(cls, content: str, integral: bool = False) -> "NumberUnit":
        parts = _WHITESPACE.split(content.strip(), maxsplit=1)
        if len(parts) != 2 or not parts[1]:
            raise AttributeConversionError(f"Expected '<number> <unit>', got {content!r}")
        try:
            value = int(parts[0]) if integral else float(parts[0])
        except ValueError as e:
            raise AttributeConversionError(f"Invalid number in {content!r}", e)
        return cls(value=value, unit=parts[1])

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"


@dataclass(frozen=True)  # Value objects are immutable
class DateTimeRange:
    """
    A time interval, written as '<start> <end>'.

    A single date or dateTime is a range whose start and end coincide, which
    is how dateTime and date values read as dateTimeRange values.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if self.end < self.start:
            raise ValueError("Range end cannot precede its start.")

    @property
    def is_date_time(self) -> bool:
        return self.start == self.end

    @classmethod
    def parse(cls, content: str) -> "DateTimeRange":
        parts = _WHITESPACE.split(content.strip())
        try:
            if len(parts) == 1:
                start = end = parse_gbase_datetime(parts[0])
            elif len(parts) == 2:
                start, end = parse_gbase_datetime(parts[0]), parse_gbase_datetime(parts[1])
            else:
                raise ValueError(f"Expected one or two values, got {len(parts)}")
            return cls(start=start, end=end)
        except ValueError as e:
            raise AttributeConversionError(f"Invalid dateTimeRange {content!r}", e)

    def __str__(self) -> str:
        if self.is_date_time:
            return format_gbase_datetime(self.start)
        return f"{format_gbase_datetime(self.start)} {format_gbase_datetime(self.end)}"
