"""Benchmark timings per day, persisted as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from everybody_codes.day import Day, DayFromStrError

TIMINGS_FILE_PATH = Path("./data/timings.json")


class TimingsError(ValueError):
    """Raised when timings cannot be read from JSON."""


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: str | None = None
    part_2: str | None = None
    part_3: str | None = None
    total_nanos: float = 0.0

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-compatible dictionary."""
        return {
            "day": str(self.day),
            "total_nanos": self.total_nanos,
            "part_1": self.part_1,
            "part_2": self.part_2,
            "part_3": self.part_3,
        }

    @classmethod
    def from_json(cls, value: Any) -> Timing:
        """Build a timing from a decoded JSON object."""
        if not isinstance(value, dict):
            raise TimingsError("Expected timing to be a JSON object.")

        day_text = value.get("day")
        try:
            if not isinstance(day_text, str):
                raise DayFromStrError()
            day = Day.parse(day_text)
        except DayFromStrError:
            raise TimingsError("Expected timing.day to be a Day struct.") from None

        if "part_1" not in value:
            raise TimingsError("Expected timing.part_1 to be null or string.")
        if "part_2" not in value:
            raise TimingsError("Expected timing.part_2 to be null or string.")

        total_nanos = value.get("total_nanos")
        if isinstance(total_nanos, bool) or not isinstance(total_nanos, (int, float)):
            raise TimingsError("Expected timing.total_nanos to be a number.")

        return cls(
            day=day,
            part_1=_optional_str(value["part_1"]),
            part_2=_optional_str(value["part_2"]),
            # part_3 may be absent in files written before it existed.
            part_3=_optional_str(value.get("part_3")),
            total_nanos=float(total_nanos),
        )


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list[Timing] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-compatible dictionary."""
        return {"data": [timing.to_json() for timing in self.data]}

    @classmethod
    def from_json(cls, text: str) -> Timings:
        """Parse timings from a JSON document."""
        try:
            document = json.loads(text)
        except ValueError:
            raise TimingsError("not valid JSON file.") from None

        if not isinstance(document, dict):
            raise TimingsError("expected JSON document to be an object.")
        if "data" not in document:
            raise TimingsError("expected JSON document to have key `data`.")
        entries = document["data"]
        if not isinstance(entries, list):
            raise TimingsError("expected `json.data` to be an array.")

        return cls(data=[Timing.from_json(entry) for entry in entries])

    def store_file(self, path: str | Path = TIMINGS_FILE_PATH) -> None:
        """Write the timings to a JSON file."""
        Path(path).write_text(json.dumps(self.to_json()), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: str | Path = TIMINGS_FILE_PATH) -> Timings:
        """Read timings from a JSON file; missing or invalid files give empty timings."""
        try:
            text = Path(path).read_text(encoding="utf-8")
            return cls.from_json(text)
        except (OSError, UnicodeDecodeError, TimingsError):
            return cls()

    def merge(self, new: Timings) -> Timings:
        """Merge two sets of timings, preferring entries from ``new``."""
        data = list(new.data)
        seen = {timing.day for timing in data}
        data.extend(timing for timing in self.data if timing.day not in seen)
        data.sort(key=lambda timing: timing.day)
        return Timings(data=data)

    def total_millis(self) -> float:
        """Sum the total duration of all timings in milliseconds."""
        return sum(timing.total_nanos for timing in self.data) / 1_000_000

    def is_day_complete(self, day: Day) -> bool:
        """Return True if all three parts of ``day`` have been timed."""
        return any(
            timing.day == day
            and timing.part_1 is not None
            and timing.part_2 is not None
            and timing.part_3 is not None
            for timing in self.data
        )