"""Keep a benchmark table in the README up to date."""

from __future__ import annotations

import re
from pathlib import Path

from everybody_codes.day import Day
from everybody_codes.timings import Timings

MARKER = "<!--- benchmarking table --->"
README_PATH = Path("README.md")

_MARKER_PATTERN = re.compile(re.escape(MARKER))


class ReadmeError(Exception):
    """Raised when the README cannot be read, parsed or written."""


def get_path_for_bin(day: Day) -> str:
    """Return the path of the solution file for ``day``."""
    return f"./src/bin/{day}.rs"


def locate_table(readme: str) -> tuple[int, int]:
    """Return the start and end offsets of the benchmark table in ``readme``."""
    positions = [match.start() for match in _MARKER_PATTERN.finditer(readme)]
    if len(positions) > 2:
        raise ReadmeError("too many occurrences of marker in README.")
    if not positions:
        raise ReadmeError("Could not find table start position.")
    return positions[0], positions[-1] + len(MARKER)


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    """Render the benchmark table, markers included."""
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 | Part 3 |",
        "| :---: | :---: | :---:  | :---:  |",
    ]
    for timing in timings.data:
        parts = (
            part if part is not None else "-"
            for part in (timing.part_1, timing.part_2, timing.part_3)
        )
        cells = " | ".join(f"`{part}`" for part in parts)
        lines.append(
            f"| [Day {int(timing.day)}]({get_path_for_bin(timing.day)}) | {cells} |"
        )
    lines.extend(["", f"**Total: {total_millis:.2f}ms**", MARKER])
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return ``text`` with its benchmark table replaced by a fresh one."""
    start, end = locate_table(text)
    table = construct_table("##", timings, total_millis)
    return text[:start] + table + text[end:]


def update(timings: Timings, path: str | Path = README_PATH) -> None:
    """Rewrite the benchmark table in the README at ``path``."""
    readme_path = Path(path)
    try:
        readme = readme_path.read_bytes().decode("utf-8", errors="replace")
    except OSError as error:
        raise ReadmeError(f"could not read {readme_path}: {error}") from error
    updated = update_content(readme, timings, timings.total_millis())
    try:
        readme_path.write_bytes(updated.encode("utf-8"))
    except OSError as error:
        raise ReadmeError(f"could not write {readme_path}: {error}") from error