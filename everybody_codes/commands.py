"""Handlers for the command-line subcommands."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from everybody_codes import ec_cli, readme_benchmarks
from everybody_codes.day import Day, all_days
from everybody_codes.run_multi import run_multi
from everybody_codes.timings import Timings

TEMPLATE_PATH = Path("src/template.txt")
_DATA_DIRS = ("data/inputs", "data/samples", "data/descriptions")
_INSTALL_HINT = (
    'command "ec-cli" not found or not callable. '
    "Try installing ec-cli and make sure it is on your PATH."
)


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _require_ec_cli() -> None:
    try:
        ec_cli.check()
    except ec_cli.EcCommandError:
        _fail(_INSTALL_HINT)


def handle_all(is_release: bool) -> None:
    """Run every day's solution."""
    run_multi(all_days(), is_release, False)


def handle_download(day: Day) -> None:
    """Download the puzzle files of ``day``."""
    _require_ec_cli()
    try:
        ec_cli.download(day)
    except ec_cli.EcCommandError as error:
        _fail(f"failed to call ec-cli: {error}")


def handle_read(day: Day) -> None:
    """Show the puzzle description of ``day``."""
    _require_ec_cli()
    try:
        ec_cli.read(day)
    except ec_cli.EcCommandError as error:
        _fail(f"failed to call ec-cli: {error}")


def _create_empty(path: str, what: str) -> None:
    try:
        Path(path).write_bytes(b"")
    except OSError as error:
        _fail(f"Failed to create {what} file: {error}")
    print(f'Created empty {what} file "{path}"')


def handle_scaffold(day: Day, overwrite: bool) -> None:
    """Create the solution module and empty input and sample files for ``day``."""
    for directory in _DATA_DIRS:
        try:
            Path(directory).mkdir(parents=True, exist_ok=True)
        except OSError as error:
            _fail(f"Failed to create {directory} directory: {error}")

    try:
        template = TEMPLATE_PATH.read_text(encoding="utf-8")
    except OSError as error:
        _fail(f"Failed to read module template: {error}")

    module_path = f"src/bin/{day}.rs"
    try:
        handle = open(module_path, "w" if overwrite else "x", encoding="utf-8")
    except OSError as error:
        _fail(f"Failed to create module file: {error}")

    with handle:
        try:
            handle.write(template.replace("%DAY_NUMBER%", str(int(day))))
        except OSError as error:
            _fail(f"Failed to write module contents: {error}")
    print(f'Created module file "{module_path}"')

    for part in (1, 2, 3):
        _create_empty(f"data/inputs/{day}-{part}.txt", "input")
        _create_empty(f"data/samples/{day}-{part}.txt", "sample")

    print("---")
    print(f"🎯 Type `cargo solve {day}` to run your solution.")


def handle_solve(day: Day, release: bool, submit_part: int | None) -> None:
    """Run the solution of ``day``, optionally submitting one part."""
    args = ["cargo", "run", "--bin", str(day)]
    if release:
        args.append("--release")
    args.append("--")
    if submit_part is not None:
        args.extend(["--submit", str(submit_part)])
    subprocess.run(args, check=False)


def handle_time(day: Day | None, run_all: bool, store: bool) -> None:
    """Benchmark solutions, optionally storing the results and README table."""
    stored = Timings.read_from_file()

    if day is not None:
        days = {day}
    elif run_all:
        days = set(all_days())
    else:
        days = {d for d in all_days() if not stored.is_day_complete(d)}

    timings = run_multi(days, True, True)
    if timings is None:
        timings = Timings()

    if store:
        merged = stored.merge(timings)
        merged.store_file()
        print()
        try:
            readme_benchmarks.update(merged)
        except readme_benchmarks.ReadmeError:
            print("Failed to store updated benchmarks.", file=sys.stderr)
        else:
            print("Stored updated benchmarks.")


def handle_today() -> None:
    """Scaffold, download and read the current event day."""
    day = Day.today()
    if day is None:
        _fail(
            "`today` command can only be run during an active Everybody Codes "
            "event. Please use `scaffold` with a specific day."
        )
    handle_scaffold(day, False)
    handle_download(day)
    handle_read(day)