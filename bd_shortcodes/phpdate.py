"""PHP-style date formatting.

The ``date`` shortcode takes format strings written for PHP's ``date()``
(``m/d/Y``, ``Y-m-d``, ``F j, Y``), so this module implements those format
characters on top of :mod:`datetime`. Names are always English, independent
of the process locale.

Unknown format characters are copied to the output unchanged and a
backslash escapes the character that follows it.
"""

from __future__ import annotations

import calendar
from collections.abc import Callable
from datetime import datetime

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _hour12(when: datetime) -> int:
    return when.hour % 12 or 12


def _offset_seconds(when: datetime) -> int:
    offset = when.utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


def _offset(when: datetime, colon: bool) -> str:
    seconds = _offset_seconds(when)
    sign = "-" if seconds < 0 else "+"
    hours, remainder = divmod(abs(seconds), 3600)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{remainder // 60:02d}"


def _timezone_id(when: datetime) -> str:
    key = getattr(when.tzinfo, "key", None)
    if key:
        return key
    return when.tzname() or "UTC"


def _iso_8601(when: datetime) -> str:
    return when.strftime("%Y-%m-%dT%H:%M:%S") + _offset(when, colon=True)


def _rfc_2822(when: datetime) -> str:
    return (
        f"{DAY_NAMES[when.weekday()][:3]}, {when.day:02d} "
        f"{MONTH_NAMES[when.month - 1][:3]} {when.year} "
        f"{when:%H:%M:%S} {_offset(when, colon=False)}"
    )


_FORMATTERS: dict[str, Callable[[datetime], str]] = {
    # Day
    "d": lambda w: f"{w.day:02d}",
    "D": lambda w: DAY_NAMES[w.weekday()][:3],
    "j": lambda w: str(w.day),
    "l": lambda w: DAY_NAMES[w.weekday()],
    "N": lambda w: str(w.isoweekday()),
    "S": lambda w: _ordinal_suffix(w.day),
    "w": lambda w: str(w.isoweekday() % 7),
    "z": lambda w: str(w.timetuple().tm_yday - 1),
    # Week
    "W": lambda w: f"{w.isocalendar()[1]:02d}",
    # Month
    "F": lambda w: MONTH_NAMES[w.month - 1],
    "m": lambda w: f"{w.month:02d}",
    "M": lambda w: MONTH_NAMES[w.month - 1][:3],
    "n": lambda w: str(w.month),
    "t": lambda w: str(calendar.monthrange(w.year, w.month)[1]),
    # Year
    "L": lambda w: "1" if calendar.isleap(w.year) else "0",
    "o": lambda w: str(w.isocalendar()[0]),
    "Y": lambda w: f"{w.year:04d}",
    "y": lambda w: f"{w.year % 100:02d}",
    # Time
    "a": lambda w: "am" if w.hour < 12 else "pm",
    "A": lambda w: "AM" if w.hour < 12 else "PM",
    "g": lambda w: str(_hour12(w)),
    "G": lambda w: str(w.hour),
    "h": lambda w: f"{_hour12(w):02d}",
    "H": lambda w: f"{w.hour:02d}",
    "i": lambda w: f"{w.minute:02d}",
    "s": lambda w: f"{w.second:02d}",
    "u": lambda w: f"{w.microsecond:06d}",
    "v": lambda w: f"{w.microsecond // 1000:03d}",
    # Timezone
    "e": _timezone_id,
    "I": lambda w: "1" if w.dst() else "0",
    "O": lambda w: _offset(w, colon=False),
    "P": lambda w: _offset(w, colon=True),
    "p": lambda w: "Z" if _offset_seconds(w) == 0 else _offset(w, colon=True),
    "T": lambda w: w.tzname() or "UTC",
    "Z": lambda w: str(_offset_seconds(w)),
    # Full date/time
    "c": _iso_8601,
    "r": _rfc_2822,
    "U": lambda w: str(int(w.timestamp())),
}


def format_date(fmt: str, when: datetime) -> str:
    """Format a datetime using PHP ``date()`` format characters.

    Args:
        fmt: Format string such as ``m/d/Y``.
        when: Moment to format. Naive values are taken as local time.

    Returns:
        The formatted date.

    Examples:
        >>> format_date("Y-m-d", datetime(2024, 1, 5))
        '2024-01-05'

        >>> format_date("F jS, Y", datetime(2024, 1, 5))
        'January 5th, 2024'
    """
    if when.tzinfo is None:
        when = when.astimezone()

    parts: list[str] = []
    escaped = False
    for char in fmt:
        if escaped:
            parts.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _FORMATTERS:
            parts.append(_FORMATTERS[char](when))
        else:
            parts.append(char)
    if escaped:
        parts.append("\\")
    return "".join(parts)
