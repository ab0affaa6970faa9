"""Scalar input types that tell an explicit null from an omitted value."""

from __future__ import annotations

import calendar
import json
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

RFC3339 = "2006-01-02T15:04:05Z07:00"
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_LAYOUT = (
    ("2006", re.compile(r"\d{4}"), "year"),
    ("-", re.compile(r"-"), None),
    ("01", re.compile(r"\d{2}"), "month"),
    ("-", re.compile(r"-"), None),
    ("02", re.compile(r"\d{2}"), "day"),
    ("T", re.compile(r"T"), None),
    ("15", re.compile(r"\d{2}"), "hour"),
    (":", re.compile(r":"), None),
    ("04", re.compile(r"\d{2}"), "minute"),
    (":", re.compile(r":"), None),
    ("05", re.compile(r"\d{2}"), "second"),
    ("Z07:00", re.compile(r"Z|[+-]\d{2}:\d{2}"), "zone"),
)
_FRACTION = re.compile(r"\.(\d+)")


def _type_name(value: Any) -> str:
    return type(value).__name__


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, reporting errors the way the layout is read."""
    rest = text
    parts: dict[str, str] = {}
    fraction = ""
    for element, pattern, key in _LAYOUT:
        match = pattern.match(rest)
        if match is None:
            raise ValueError(
                f"parsing time {_quote(text)} as {_quote(RFC3339)}: "
                f"cannot parse {_quote(rest)} as {_quote(element)}"
            )
        if key is not None:
            parts[key] = match.group(0)
        rest = rest[match.end():]
        if key == "second":
            frac = _FRACTION.match(rest)
            if frac is not None:
                fraction = frac.group(1)
                rest = rest[frac.end():]
    if rest:
        raise ValueError(f"parsing time {_quote(text)}: extra text: {rest}")

    year, month, day = int(parts["year"]), int(parts["month"]), int(parts["day"])
    hour, minute, second = int(parts["hour"]), int(parts["minute"]), int(parts["second"])
    checks = (
        ("year", year >= 1),
        ("month", 1 <= month <= 12),
        ("hour", hour < 24),
        ("minute", minute < 60),
        ("second", second < 60),
    )
    for name, ok in checks:
        if not ok:
            raise ValueError(f"parsing time {_quote(text)}: {name} out of range")
    days_in_month = calendar.mdays[month] + (1 if month == 2 and calendar.isleap(year) else 0)
    if not 1 <= day <= days_in_month:
        raise ValueError(f"parsing time {_quote(text)}: day out of range")

    zone = parts["zone"]
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        offset = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        try:
            tz = timezone(sign * offset)
        except ValueError:
            raise ValueError(f"parsing time {_quote(text)}: time zone offset out of range") from None
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)


def _from_unix(seconds: int) -> datetime:
    return _EPOCH + timedelta(seconds=seconds)


@dataclass
class Time:
    """An instant in time, exposed to schemas as ``scalar Time``."""

    value: datetime = ZERO_TIME

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Time"

    def unmarshal_graphql(self, value: Any) -> None:
        """Set the instant from a datetime, RFC 3339 text or Unix seconds."""
        if isinstance(value, bool):
            raise TypeError(f"wrong type for Time: {_type_name(value)}")
        if isinstance(value, datetime):
            self.value = value
        elif isinstance(value, (str, bytes, bytearray)):
            text = value if isinstance(value, str) else bytes(value).decode("utf-8", errors="replace")
            try:
                self.value = _parse_rfc3339(text)
            except ValueError:
                self.value = ZERO_TIME
                raise
        elif isinstance(value, int):
            self.value = _from_unix(value)
        elif isinstance(value, float):
            self.value = _from_unix(int(value))
        else:
            raise TypeError(f"wrong type for Time: {_type_name(value)}")

    def to_json(self) -> str:
        """Encode the instant as a JSON string in RFC 3339 form."""
        moment = self.value if self.value.tzinfo is not None else self.value.replace(tzinfo=timezone.utc)
        text = (
            f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
            f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        )
        if moment.microsecond:
            text += "." + f"{moment.microsecond:06d}".rstrip("0")
        offset = moment.utcoffset() or timedelta(0)
        if not offset:
            text += "Z"
        else:
            sign = "-" if offset < timedelta(0) else "+"
            minutes = abs(int(offset.total_seconds())) // 60
            text += f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"
        return '"' + text + '"'


@dataclass
class NullString:
    """A String input that may be explicitly null; ``set`` is True once given."""

    value: Optional[str] = None
    set: bool = False

    def implements_graphql_type(self, name: str) -> bool:
        return name == "String"

    def unmarshal_graphql(self, value: Any) -> None:
        self.set = True
        if value is None:
            return
        if not isinstance(value, str):
            raise TypeError(f"wrong type for String: {_type_name(value)}")
        self.value = value


@dataclass
class NullBool:
    """A Boolean input that may be explicitly null; ``set`` is True once given."""

    value: Optional[bool] = None
    set: bool = False

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Boolean"

    def unmarshal_graphql(self, value: Any) -> None:
        self.set = True
        if value is None:
            return
        if not isinstance(value, bool):
            raise TypeError(f"wrong type for Boolean: {_type_name(value)}")
        self.value = value


@dataclass
class NullInt:
    """An Int input that may be explicitly null; ``set`` is True once given."""

    value: Optional[int] = None
    set: bool = False

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Int"

    def unmarshal_graphql(self, value: Any) -> None:
        self.set = True
        if value is None:
            return
        if isinstance(value, bool):
            raise TypeError(f"wrong type for Int: {_type_name(value)}")
        if isinstance(value, int):
            if not _INT32_MIN <= value <= _INT32_MAX:
                raise ValueError("not a 32-bit integer")
            self.value = value
        elif isinstance(value, float):
            if not value.is_integer() or not _INT32_MIN <= value <= _INT32_MAX:
                raise ValueError("not a 32-bit integer")
            self.value = int(value)
        else:
            raise TypeError(f"wrong type for Int: {_type_name(value)}")


@dataclass
class NullFloat:
    """A Float input that may be explicitly null; ``set`` is True once given."""

    value: Optional[float] = None
    set: bool = False

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Float"

    def unmarshal_graphql(self, value: Any) -> None:
        self.set = True
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"wrong type for Float: {_type_name(value)}")
        self.value = float(value)


@dataclass
class NullTime:
    """A Time input that may be explicitly null; ``set`` is True once given."""

    value: Optional[Time] = None
    set: bool = False

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Time"

    def unmarshal_graphql(self, value: Any) -> None:
        self.set = True
        if value is None:
            return
        self.value = Time()
        self.value.unmarshal_graphql(value)