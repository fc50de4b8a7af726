"""RFC 822 date-time field values: day of week, month, time zone and date."""

from __future__ import annotations

import re
from typing import Optional, Union

from mimetic.fieldvalue import FieldValue
from mimetic.strutils import IString, canonical, remove_external_blanks
from mimetic.utils import str2int

__all__ = ["DayOfWeek", "Month", "Zone", "DateTime"]

_DAY_LABELS = (
    ("", ""),
    ("Mon", "Monday"),
    ("Tue", "Tuesday"),
    ("Wed", "Wednesday"),
    ("Thu", "Thursday"),
    ("Fri", "Friday"),
    ("Sat", "Saturday"),
    ("Sun", "Sunday"),
)

_MONTH_LABELS = (
    ("", ""),
    ("Jan", "January"),
    ("Feb", "February"),
    ("Mar", "March"),
    ("Apr", "April"),
    ("May", "May"),
    ("Jun", "June"),
    ("Jul", "July"),
    ("Aug", "August"),
    ("Sep", "September"),
    ("Oct", "October"),
    ("Nov", "November"),
    ("Dec", "December"),
)

_ZONES = (
    ("UNK", 0),
    ("GMT", 0),
    ("UT", 0),
    ("BST", 100),
    ("CET", 100),
    ("MET", 100),
    ("EET", 200),
    ("IST", 200),
    ("METDST", 200),
    ("MET DST", 200),
    ("EDT", -400),
    ("CDT", -500),
    ("EST", -500),
    ("CST", -600),
    ("MDT", -600),
    ("MST", -700),
    ("PDT", -700),
    ("HKT", 800),
    ("PST", -800),
    ("JST", 900),
)

_DIGITS = "0123456789"

# Month offsets used by the day-of-week formula (Sakamoto's method).
_MONTH_SHIFT = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


def _ordinal_of(labels: tuple, value: Union[int, str]) -> int:
    """Return the ordinal named by ``value`` in ``labels``, or 0 if unknown."""
    if isinstance(value, str):
        column = 0 if len(value) == 3 else 1
        key = IString(value)
        for index, names in enumerate(labels[1:], 1):
            if key == names[column]:
                return index
        return 0
    return value if 1 <= value < len(labels) else 0


def _matches(labels: tuple, ordinal: int, other: object, kind: type):
    if isinstance(other, kind):
        return ordinal == other.ordinal()
    if isinstance(other, str):
        key = IString(other)
        short, long = labels[ordinal]
        return key == short or key == long
    if isinstance(other, int):
        return ordinal == other
    return NotImplemented


class DayOfWeek:
    """A day of the week, 1 (Monday) to 7 (Sunday)."""

    def __init__(self, value: Union[int, str] = 0) -> None:
        self._ordinal = _ordinal_of(_DAY_LABELS, value)

    def __eq__(self, other: object) -> bool:
        return _matches(_DAY_LABELS, self._ordinal, other, DayOfWeek)

    __hash__ = None  # type: ignore[assignment]

    def name(self, long_name: bool = False) -> str:
        """Return the short (``Mon``) or long (``Monday``) name."""
        return _DAY_LABELS[self._ordinal][1 if long_name else 0]

    def ordinal(self) -> int:
        """Return the number, starting at 1; 0 means unknown."""
        return self._ordinal

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._ordinal})"


class Month:
    """A month, 1 (January) to 12 (December)."""

    def __init__(self, value: Union[int, str] = 0) -> None:
        self._ordinal = _ordinal_of(_MONTH_LABELS, value)

    def __eq__(self, other: object) -> bool:
        return _matches(_MONTH_LABELS, self._ordinal, other, Month)

    __hash__ = None  # type: ignore[assignment]

    def name(self, long_name: bool = False) -> str:
        """Return the short (``Jan``) or long (``January``) name."""
        return _MONTH_LABELS[self._ordinal][1 if long_name else 0]

    def ordinal(self) -> int:
        """Return the number, starting at 1; 0 means unknown."""
        return self._ordinal

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._ordinal})"


class Zone:
    """A time zone, given by name (``EST``) or numeric offset (``-0500``)."""

    def __init__(self, value: Union[int, str] = 0) -> None:
        self._index = 0
        if isinstance(value, str):
            self._offset = 0
            self._parse(value)
        else:
            self._offset = value

    def _parse(self, text: str) -> None:
        if not text:
            return
        key = IString(text)
        for index, (label, offset) in enumerate(_ZONES):
            if key == label:
                self._offset = offset
                self._index = index
        if self._offset == 0 and text[0] in "+-" + _DIGITS:
            sign = -1 if text[0] == "-" else 1
            self._offset = str2int(text[1:]) * sign

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Zone):
            return self._offset == other._offset
        if isinstance(other, str):
            label, offset = _ZONES[self._index]
            return IString(other) == label or str2int(other) == offset
        if isinstance(other, int):
            return self._offset == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def name(self) -> str:
        """Return the zone label, or the offset as ``+hhmm``/``-hhmm``."""
        if self._index:
            return _ZONES[self._index][0]
        if self._offset >= 0:
            return f"+{self._offset:04d}"
        return f"-{-self._offset:04d}"

    def ordinal(self) -> int:
        """Return the offset in ``hhmm`` form as an integer."""
        return self._offset

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name()!r})"


class _Tokenizer:
    """Splits text at single delimiter characters; the delimiters may change."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next(self, delims: str) -> Optional[str]:
        if self._pos >= len(self._text):
            return None
        match = re.compile(f"[{re.escape(delims)}]").search(self._text, self._pos)
        end = match.start() if match else len(self._text)
        token = self._text[self._pos : end]
        self._pos = end + 1
        return token


class DateTime(FieldValue):
    """An RFC 822 date such as ``Wed, 23 Nov 2005 10:11:12 +0100``.

    Without text the date is the epoch, 1 Jan 1970 00:00:00 UTC.
    """

    JAN, FEB, MAR, APR, MAY, JUN, JUL, AUG, SEP, OCT, NOV, DEC = range(1, 13)
    MON, TUE, WED, THU, FRI, SAT, SUN = range(1, 8)
    ZONE_OFFSETS = {label: offset for label, offset in _ZONES[1:]}

    def __init__(self, text: str = "") -> None:
        self.set(text)

    def _reset(self) -> None:
        self._day_of_week = 0
        self.day = 1
        self._month = 1
        self.year = 1970
        self.hour = 0
        self.minute = 0
        self.second = 0
        self._zone = "UTC"

    def set(self, text: str) -> None:
        """Parse ``text``; fields it does not reach keep their defaults."""
        self._reset()
        if not text:
            return
        tokens = _Tokenizer(remove_external_blanks(canonical(text)))

        tok = tokens.next(" ,")
        if tok is None:
            return
        if tok and tok[0] not in _DIGITS:
            self._day_of_week = DayOfWeek(tok).ordinal()
            position = 0
        else:
            self.day = str2int(tok)
            position = 1

        while position < 3:
            tok = tokens.next(" ,")
            if tok is None:
                return
            if not tok:
                continue  # a blank after a comma
            if position == 0:
                self.day = str2int(tok)
            elif position == 1:
                self._month = Month(tok).ordinal()
            else:
                self.year = str2int(tok)
            position += 1

        for position in range(3):
            tok = tokens.next(" :")
            if tok is None:
                return
            if position == 0:
                self.hour = str2int(tok)
            elif position == 1:
                self.minute = str2int(tok)
            elif len(tok) == 2:
                self._zone = ""
                self.second = str2int(tok)
            else:
                # seconds are optional: this token is already the zone
                self._zone = tok

        while (tok := tokens.next(" ")) is not None:
            if self._zone:
                self._zone += " "
            self._zone += tok

    def day_of_week(self) -> DayOfWeek:
        """Return the day of the week, computing it from the date if unset."""
        if not self._day_of_week:
            month = self._month
            if not 1 <= month <= 12:
                return DayOfWeek(0)
            year = self.year - (1 if month < 3 else 0)
            dow = (
                year + year // 4 - year // 100 + year // 400
                + _MONTH_SHIFT[month - 1] + self.day
            ) % 7
            self._day_of_week = 7 if dow == 0 else dow
        return DayOfWeek(self._day_of_week)

    def month(self) -> Month:
        """Return the month."""
        return Month(self._month)

    def zone(self) -> Zone:
        """Return the time zone."""
        return Zone(self._zone)

    def __str__(self) -> str:
        return (
            f"{self.day_of_week().name()}, {self.day:02d} {self.month().name()} "
            f"{self.year:02d} {self.hour:02d}:{self.minute:02d}:{self.second:02d} "
            f"{self.zone().name()}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"