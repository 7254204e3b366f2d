"""Wire-format transcoding for Google API JSON messages.

Google's JSON mapping for protocol buffers does not carry every value as a
native JSON type:

- 64-bit integers travel as decimal strings, since JSON numbers are IEEE
  doubles and lose precision above 2**53.
- ``google.protobuf.Timestamp`` travels as an RFC 3339 string.
- ``google.protobuf.Duration`` travels as seconds with an ``s`` suffix,
  e.g. ``"3.5s"``.

This module provides explicit parse/format functions for each of these and
the annotated types (:data:`Int64`, :data:`UInt64`, :data:`Timestamp`,
:data:`Duration`) that attach them to Pydantic model fields. Parsing never
guesses: a value that is not a valid encoding raises :class:`ValueError`,
which Pydantic surfaces as a ``ValidationError``.
"""

import re
from datetime import datetime, timedelta, timezone
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Annotated, Any, Callable, List, Mapping, Tuple, Union

from pydantic import BeforeValidator, PlainSerializer

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_INTEGER_RE = re.compile(r"-?[0-9]+")
_TIMESTAMP_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt ](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)
_DURATION_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)s$")
_MICROS = Decimal(1_000_000)


def format_int64(value: int) -> str:
    """Encode a 64-bit integer as its decimal wire string.

    :param value: Integer to encode
    :type value: int
    :return: Decimal representation
    :rtype: str
    """
    return str(int(value))


def parse_int64(value: Any) -> int:
    """Decode a 64-bit integer from its wire form.

    Accepts plain integers and decimal strings with an optional leading
    minus. Whitespace, a leading plus, booleans and floats are rejected
    rather than coerced.

    :param value: Wire value
    :return: Decoded integer
    :rtype: int
    :raises ValueError: If ``value`` is not a valid integer encoding
    """
    if isinstance(value, bool):
        raise ValueError(f"expected a 64-bit integer, got boolean {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value):
        return int(value)
    raise ValueError(f"invalid 64-bit integer: {value!r}")


def _ranged(low: int, high: int, kind: str) -> Callable[[Any], int]:
    def check(value: Any) -> int:
        number = parse_int64(value)
        if not low <= number <= high:
            raise ValueError(f"{number} is out of range for {kind}")
        return number

    return check


def format_timestamp(value: datetime) -> str:
    """Encode a datetime as an RFC 3339 UTC string.

    Naive datetimes are taken to be UTC. Whole milliseconds are written with
    three fractional digits; finer values keep all six.

    :param value: Datetime to encode
    :type value: datetime
    :return: String such as ``2023-05-01T12:00:00.000Z``
    :rtype: str
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    timespec = "milliseconds" if value.microsecond % 1000 == 0 else "microseconds"
    return value.isoformat(timespec=timespec).replace("+00:00", "Z")


def parse_timestamp(value: Any) -> datetime:
    """Decode an RFC 3339 string into a timezone-aware datetime.

    Fractional seconds beyond microsecond precision are truncated.

    :param value: Wire string, or a datetime to normalize
    :return: Timezone-aware datetime
    :rtype: datetime
    :raises ValueError: If ``value`` is not an RFC 3339 timestamp
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if not isinstance(value, str):
        raise ValueError(f"invalid timestamp: {value!r}")
    match = _TIMESTAMP_RE.match(value.strip())
    if not match:
        raise ValueError(f"invalid timestamp: {value!r}")
    fraction = (match.group("fraction") or "")[:6].ljust(6, "0")
    offset = match.group("offset")
    if offset in ("Z", "z"):
        offset = "+00:00"
    return datetime.fromisoformat(
        f"{match.group('date')}T{match.group('time')}.{fraction}{offset}"
    )


def format_duration(value: timedelta) -> str:
    """Encode a timedelta as a protobuf JSON duration string.

    :param value: Duration to encode
    :type value: timedelta
    :return: String such as ``"3.5s"`` or ``"-0.000001s"``
    :rtype: str
    """
    micros = value // timedelta(microseconds=1)
    sign = "-" if micros < 0 else ""
    seconds, remainder = divmod(abs(micros), 1_000_000)
    if not remainder:
        return f"{sign}{seconds}s"
    if remainder % 1000 == 0:
        return f"{sign}{seconds}.{remainder // 1000:03d}s"
    return f"{sign}{seconds}.{remainder:06d}s"


def parse_duration(value: Any) -> timedelta:
    """Decode a protobuf JSON duration string into a timedelta.

    Plain numbers are read as seconds.

    :param value: Wire value such as ``"1.5s"``
    :return: Decoded duration, truncated to microseconds
    :rtype: timedelta
    :raises ValueError: If ``value`` is not a duration encoding
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)
    if not isinstance(value, str) or not _DURATION_RE.match(value.strip()):
        raise ValueError(f"invalid duration: {value!r}")
    try:
        seconds = Decimal(value.strip()[:-1])
    except InvalidOperation as exc:
        raise ValueError(f"invalid duration: {value!r}") from exc
    micros = (seconds * _MICROS).to_integral_value(rounding=ROUND_DOWN)
    return timedelta(microseconds=int(micros))


def _json_serializer(func: Callable[[Any], str]) -> PlainSerializer:
    return PlainSerializer(func, return_type=str, when_used="json")


Int64 = Annotated[
    int,
    BeforeValidator(_ranged(INT64_MIN, INT64_MAX, "int64")),
    _json_serializer(format_int64),
]
"""Signed 64-bit integer carried as a decimal string on the wire."""

UInt64 = Annotated[
    int,
    BeforeValidator(_ranged(0, UINT64_MAX, "uint64")),
    _json_serializer(format_int64),
]
"""Unsigned 64-bit integer carried as a decimal string on the wire."""

Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    _json_serializer(format_timestamp),
]
"""Point in time carried as an RFC 3339 string on the wire."""

Duration = Annotated[
    timedelta,
    BeforeValidator(parse_duration),
    _json_serializer(format_duration),
]
"""Span of time carried as ``"<seconds>s"`` on the wire."""


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_query_params(
    options: Union[Mapping[str, Any], Any, None],
) -> List[Tuple[str, str]]:
    """Flatten an options bag into URL query parameters.

    Options models are serialized to their wire form first, so 64-bit
    integers and timestamps use their wire encodings and names are
    camelCase. Unset and ``None`` values produce no parameter; lists
    produce one parameter per element.

    :param options: Options model, plain mapping of wire names, or None
    :return: Ordered ``(name, value)`` pairs
    :rtype: List[Tuple[str, str]]
    """
    if options is None:
        return []
    if hasattr(options, "to_wire"):
        wire = options.to_wire()
    else:
        wire = dict(options)

    params: List[Tuple[str, str]] = []
    for name, value in wire.items():
        if value is None:
            continue
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            if item is not None:
                params.append((name, _query_value(item)))
    return params
