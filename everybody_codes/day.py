"""Quest day numbers and the event calendar."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from functools import total_ordering
from typing import Iterator

MIN_DAY = 1
MAX_DAY = 25
EVENT_WEEKDAYS = 20

_DAY_PATTERN = re.compile(r"\+?[0-9]+")


class DayFromStrError(ValueError):
    """Raised when text cannot be parsed into a quest day."""

    def __init__(self, message: str = "expecting a day number between 1 and 25") -> None:
        super().__init__(message)


@total_ordering
class Day:
    """A valid quest day number, an integer from 1 to 25.

    A day displays as a two digit number, e.g. ``str(Day(8)) == "08"``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"day must be an int, not {type(value).__name__}")
        if not MIN_DAY <= value <= MAX_DAY:
            raise ValueError(
                f"invalid day number `{value}`, expecting a value between 1 and 25"
            )
        self._value = value

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a day number such as ``"8"`` or ``"08"``."""
        if not _DAY_PATTERN.fullmatch(text):
            raise DayFromStrError()
        value = int(text)
        if not MIN_DAY <= value <= MAX_DAY:
            raise DayFromStrError()
        return cls(value)

    @classmethod
    def today(cls, now: datetime | None = None) -> Day | None:
        """Return the current quest day during the event, or None.

        The event starts on the first Monday of November at 23:00 UTC and runs
        for 20 weekdays; each puzzle is released at 23:00 UTC.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        else:
            now = now.astimezone(timezone.utc)

        # Shifting back 23 hours makes 23:00 UTC the start of each puzzle day.
        adjusted = (now - timedelta(hours=23)).date()
        if adjusted.month != 11:
            return None

        first_monday = next(
            d
            for d in (date(adjusted.year, 11, n) for n in range(1, 8))
            if d.weekday() == 0
        )
        if adjusted < first_monday or adjusted.weekday() >= 5:
            return None

        span = (adjusted - first_monday).days + 1
        weekday_count = sum(
            1
            for offset in range(span)
            if (first_monday + timedelta(days=offset)).weekday() < 5
        )
        if 0 < weekday_count <= EVENT_WEEKDAYS:
            return cls(weekday_count)
        return None

    def __str__(self) -> str:
        return f"{self._value:02}"

    def __repr__(self) -> str:
        return f"Day({self._value})"

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self._value < other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


def all_days() -> Iterator[Day]:
    """Yield every quest day from the 1st to the 25th."""
    return (Day(n) for n in range(MIN_DAY, MAX_DAY + 1))