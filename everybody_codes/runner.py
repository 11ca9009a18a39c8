"""Run and time solution parts, print their results and submit answers."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

from everybody_codes import ec_cli
from everybody_codes.day import Day

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_BENCH_BUDGET_NANOS = 1_000_000_000
_MIN_ITERATIONS = 10
_MAX_ITERATIONS = 10_000
_SUBMIT_USAGE = "Unexpected command-line input. Format: cargo solve 1 --submit 1"
_INSTALL_HINT = (
    'command "ec-cli" not found or not callable. '
    "Try installing ec-cli and make sure it is on your PATH."
)


def read_file(folder: str, day: Day, part: int) -> str:
    """Read ``data/<folder>/<day>-<part>.txt`` relative to the working directory."""
    return (Path.cwd() / "data" / folder / f"{day}-{part}.txt").read_text(
        encoding="utf-8"
    )


def bench(func: Callable[[Any], Any], input: Any, base_nanos: int) -> tuple[int, int]:
    """Run ``func`` repeatedly; return the mean duration in nanoseconds and the sample count."""
    print(f" > {ANSI_ITALIC}benching{ANSI_RESET}", end="", flush=True)
    iterations = _BENCH_BUDGET_NANOS // max(base_nanos, 10)
    iterations = min(max(iterations, _MIN_ITERATIONS), _MAX_ITERATIONS)

    durations = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(input)
        durations.append(time.perf_counter_ns() - start)
    return sum(durations) // len(durations), iterations


def _format_nanos(nanos: int) -> str:
    if nanos >= 1_000_000_000:
        divisor, unit = 1_000_000_000, "s"
    elif nanos >= 1_000_000:
        divisor, unit = 1_000_000, "ms"
    elif nanos >= 1_000:
        divisor, unit = 1_000, "\u00b5s"
    else:
        divisor, unit = 1, "ns"
    tenths = (nanos * 10 + divisor // 2) // divisor
    return f"{tenths // 10}.{tenths % 10}{unit}"


def format_duration(nanos: int, samples: int) -> str:
    """Format a duration, with the sample count when more than one run was made."""
    text = _format_nanos(int(nanos))
    if samples == 1:
        return f" ({text})"
    return f" ({text} @ {samples} samples)"


def print_result(result: Any, part: str, duration_str: str) -> None:
    """Print a part's result; an empty ``duration_str`` marks an intermediate line."""
    intermediate = not duration_str

    if result is None:
        if intermediate:
            print(f"{part}: \u2716", end="", flush=True)
        else:
            print("\r", end="")
            print(f"{part}: \u2716             ")
        return

    text = str(result)
    if "\n" in text:
        line = f"{part}: \u25bc {duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)
            print(text)
    else:
        line = f"{part}: {ANSI_BOLD}{text}{ANSI_RESET}{duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)


def submit_result(
    result: Any, day: Day, part: int, argv: Sequence[str] | None = None
) -> Any:
    """Submit ``result`` via ec-cli when ``--submit <part>`` asks for this part.

    Returns the finished ec-cli process, or None when nothing is submitted.
    """
    args = list(sys.argv if argv is None else argv)
    if "--submit" not in args:
        return None
    if len(args) < 3:
        print(_SUBMIT_USAGE, file=sys.stderr)
        raise SystemExit(1)

    index = args.index("--submit") + 1
    try:
        part_submit = int(args[index])
    except (IndexError, ValueError):
        print(_SUBMIT_USAGE, file=sys.stderr)
        raise SystemExit(1) from None
    if not 0 <= part_submit <= 255:
        print(_SUBMIT_USAGE, file=sys.stderr)
        raise SystemExit(1)

    if part_submit != part:
        return None

    try:
        ec_cli.check()
    except ec_cli.EcCommandError:
        print(_INSTALL_HINT, file=sys.stderr)
        raise SystemExit(1) from None

    print("Submitting result via ec-cli...")
    return ec_cli.submit(day, part, str(result))


def run_part(
    func: Callable[[Any], Any],
    input: Any,
    day: Day,
    part: int,
    argv: Sequence[str] | None = None,
) -> Any:
    """Run one part, print its result and timing, and submit it if requested."""
    args = list(sys.argv if argv is None else argv)
    label = f"Part {part}"

    start = time.perf_counter_ns()
    result = func(input)
    base_nanos = time.perf_counter_ns() - start

    print_result(result, label, "")

    if "--time" in args:
        nanos, samples = bench(func, input, base_nanos)
    else:
        nanos, samples = base_nanos, 1

    print_result(result, label, format_duration(nanos, samples))

    if result is not None:
        try:
            submit_result(result, day, part, args)
        except ec_cli.EcCommandError as error:
            print(f"failed to call ec-cli: {error}", file=sys.stderr)
    return result


def run_day(
    day: Day,
    parts: Mapping[int, Callable[[Any], Any]],
    argv: Sequence[str] | None = None,
) -> None:
    """Run the given parts of ``day`` against their input files."""
    for part, func in sorted(parts.items()):
        run_part(func, read_file("inputs", day, part), day, part, argv)