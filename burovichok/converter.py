"""Parsing of timestamps given as Excel serial numbers or text."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone

_EPOCH_1900 = datetime(1899, 12, 30, tzinfo=timezone.utc)
_EPOCH_1904 = datetime(1904, 1, 1, tzinfo=timezone.utc)
_MICROSECONDS_PER_DAY = 86_400_000_000

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL = {
    "inf": math.inf,
    "+inf": math.inf,
    "-inf": -math.inf,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
    "nan": math.nan,
}

_FRACTION = r"(?:\.(?P<frac>[0-9]+))?"
_CLOCK = r"(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})" + _FRACTION
_STRICT_CLOCK = r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})" + _FRACTION
_ISO_DATE = r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
_SLASH_DATE = r"(?P<day>[0-9]{2})/(?P<month>[0-9]{2})/(?P<year>[0-9]{4})"
_DOT_DATE = r"(?P<day>[0-9]{2})\.(?P<month>[0-9]{2})\.(?P<year>[0-9]{4})"
_ZONE = r"(?P<zone>Z|[+-][0-9]{2}:[0-9]{2})"

_LAYOUTS = tuple(
    re.compile(pattern, re.ASCII)
    for pattern in (
        _ISO_DATE + "T" + _STRICT_CLOCK + _ZONE,  # 2024-11-09T17:21:21Z
        _ISO_DATE + "T" + _CLOCK,  # 2024-11-09T17:21:21
        _ISO_DATE + " " + _CLOCK,  # 2024-11-09 17:21:21
        _ISO_DATE,  # 2024-11-10
        _SLASH_DATE + " " + _CLOCK,  # 09/11/2024 17:21:21
        _SLASH_DATE,  # 09/11/2024
        _DOT_DATE + " " + _CLOCK,  # 09.11.2024 17:21:21
        _DOT_DATE,  # 09.11.2024
    )
)


def _parse_float(raw: str) -> float:
    """Parse a number the strict way: no surrounding spaces, no underscores."""
    if _DECIMAL.fullmatch(raw):
        value = float(raw)
        if math.isinf(value):
            raise ValueError(f"parsing {raw!r}: value out of range")
        return value
    if _HEX.fullmatch(raw):
        try:
            return float.fromhex(raw)
        except OverflowError as exc:
            raise ValueError(f"parsing {raw!r}: value out of range") from exc
    special = _SPECIAL.get(raw.lower())
    if special is not None:
        return special
    raise ValueError(f"parsing {raw!r}: invalid syntax")


def _zone(text: str | None) -> timezone:
    if text is None or text == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    hours, minutes = int(text[1:3]), int(text[4:6])
    if hours >= 24 or minutes >= 60:
        raise ValueError(f"time zone offset out of range: {text}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _build(match: re.Match[str]) -> datetime:
    parts = match.groupdict()
    frac = parts.get("frac")
    microsecond = int(frac[:6].ljust(6, "0")) if frac else 0
    return datetime(
        int(parts["year"]),
        int(parts["month"]),
        int(parts["day"]),
        int(parts.get("hour") or 0),
        int(parts.get("minute") or 0),
        int(parts.get("second") or 0),
        microsecond,
        tzinfo=_zone(parts.get("zone")),
    )


def excel_date_to_time(serial: float, date1904: bool = False) -> datetime:
    """Convert an Excel serial date to a UTC datetime."""
    if not math.isfinite(serial):
        raise ValueError(f"invalid excel serial date {serial!r}")
    epoch = _EPOCH_1904 if date1904 else _EPOCH_1900
    days = math.floor(serial)
    if not date1904 and days >= 61:
        days -= 1
    frac = serial - math.floor(serial)
    try:
        return (
            epoch
            + timedelta(days=days)
            + timedelta(microseconds=int(frac * _MICROSECONDS_PER_DAY))
        )
    except OverflowError as exc:
        raise ValueError(f"excel serial date {serial!r} out of range") from exc


def parse_flexible_time(raw: str) -> datetime:
    """Parse *raw* as an Excel serial number or one of the supported text layouts."""
    try:
        serial = _parse_float(raw)
    except ValueError:
        pass
    else:
        return excel_date_to_time(serial, False)

    for layout in _LAYOUTS:
        match = layout.fullmatch(raw)
        if match is None:
            continue
        try:
            return _build(match)
        except ValueError:
            continue
    raise ValueError(f"unsupported time format {raw!r}")