"""Run several solutions in turn and collect their timings."""

from __future__ import annotations

import re
import subprocess
import sys
import threading
from collections.abc import Iterable
from pathlib import Path

from everybody_codes.day import Day, all_days
from everybody_codes.readme_benchmarks import get_path_for_bin
from everybody_codes.timings import Timing, Timings

_ANSI_ITALIC = "\x1b[3m"
_ANSI_BOLD = "\x1b[1m"
_ANSI_RESET = "\x1b[0m"

_SAMPLES_TAG = " samples)"
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def run_multi(
    days_to_run: Iterable[Day], is_release: bool, is_timed: bool
) -> Timings | None:
    """Run the solutions of the given days in order; return timings when timed."""
    wanted = set(days_to_run)
    collected: list[Timing] = []

    for index, day in enumerate(d for d in all_days() if d in wanted):
        if index:
            print()
        print(f"{_ANSI_BOLD}Day {day}{_ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            collected.append(parse_exec_time(output, day))

    if not is_timed:
        return None

    timings = Timings(data=collected)
    print(
        f"\n{_ANSI_BOLD}Total (Run):{_ANSI_RESET} "
        f"{_ANSI_ITALIC}{timings.total_millis():.2f}ms{_ANSI_RESET}"
    )
    return timings


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run the solution for ``day``, echoing its output and returning its stdout lines.

    Days without a solution file are skipped and give an empty list.
    """
    if not Path(get_path_for_bin(day)).exists():
        return []

    args = ["cargo", "run", "--quiet", "--bin", str(day)]
    if is_release:
        args.append("--release")
    if is_timed:
        # Mirror the timing flag to the child invocation.
        args.extend(["--", "--time"])

    output: list[str] = []
    with subprocess.Popen(
        args,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
    ) as process:
        stderr = process.stderr
        stdout = process.stdout
        if stderr is None or stdout is None:
            raise BrokenPipeError("child process has no output pipes")

        def forward_stderr() -> None:
            for line in stderr:
                print(_strip_newline(line), file=sys.stderr)

        thread = threading.Thread(target=forward_stderr, daemon=True)
        thread.start()

        for raw in stdout:
            line = _strip_newline(raw)
            print(line)
            output.append(line)

        thread.join()
        process.wait()

    return output


def parse_exec_time(output: Iterable[str], day: Day) -> Timing:
    """Collect the per-part timings reported in a solution's output."""
    timing = Timing(day=day)

    for line in output:
        if _SAMPLES_TAG not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        timing_str, nanos = parsed
        part = line.split(":", 1)[0]

        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        elif "Part 3" in part:
            timing.part_3 = timing_str

        timing.total_nanos += nanos

    return timing


def _parse_float(text: str) -> float | None:
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    return float(text)


def _scaled(text: str, suffix: str, factor: float) -> float | None:
    value = _parse_float(text.split(suffix, 1)[0])
    return None if value is None else value * factor


def parse_time(line: str) -> tuple[str, float] | None:
    """Extract the duration text and its value in nanoseconds from a timing line."""
    timing_str = (
        line.split(_SAMPLES_TAG, 1)[0].split("(")[-1].split("@", 1)[0].strip()
    )

    if "ns" in timing_str:
        nanos = _scaled(timing_str, "ns", 1.0)
    elif "\u00b5s" in timing_str:
        nanos = _scaled(timing_str, "\u00b5s", 1_000.0)
    elif "ms" in timing_str:
        nanos = _scaled(timing_str, "ms", 1_000_000.0)
    else:
        nanos = _scaled(timing_str, "s", 1_000_000_000.0)

    if nanos is None:
        return None
    return timing_str, nanos