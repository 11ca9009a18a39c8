"""Wrapper around the ``ec-cli`` command-line tool."""

from __future__ import annotations

import os
import re
import subprocess
from pathlib import Path

from everybody_codes.day import Day

EC_CLI = "ec-cli"
PARTS = (1, 2, 3)

_YEAR_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_YEAR = 0xFFFF


class EcCommandError(Exception):
    """Base class for failures of the ``ec-cli`` tool."""


class CommandNotFoundError(EcCommandError):
    """Raised when ``ec-cli`` is not installed."""

    def __init__(self) -> None:
        super().__init__("ec-cli is not present in environment.")


class CommandNotCallableError(EcCommandError):
    """Raised when ``ec-cli`` cannot be started."""

    def __init__(self) -> None:
        super().__init__("ec-cli could not be called.")


class BadExitStatusError(EcCommandError):
    """Raised when ``ec-cli`` exits with a non-zero status."""

    def __init__(self, result: subprocess.CompletedProcess) -> None:
        super().__init__("ec-cli exited with a non-zero status.")
        self.result = result

    @property
    def returncode(self) -> int:
        return self.result.returncode


def check() -> None:
    """Raise CommandNotFoundError unless ``ec-cli`` can be run."""
    try:
        subprocess.run([EC_CLI, "--version"], capture_output=True, check=False)
    except OSError:
        raise CommandNotFoundError() from None


def get_year() -> int | None:
    """Return the event year from ``EC_YEAR``, or None if unset or invalid."""
    text = os.environ.get("EC_YEAR")
    if text is None or not _YEAR_PATTERN.fullmatch(text):
        return None
    year = int(text)
    return year if year <= _MAX_YEAR else None


def input_path(day: Day, part: int) -> str:
    return f"data/inputs/{day}-{part}.txt"


def sample_path(day: Day, part: int) -> str:
    return f"data/samples/{day}-{part}.txt"


def sample_answer_path(day: Day, part: int) -> str:
    return f"data/answers/{day}-{part}.txt"


def description_path(day: Day, part: int) -> str:
    return f"data/descriptions/{day}-{part}.html"


def _with_year(args: list[str]) -> list[str]:
    year = get_year()
    if year is not None:
        return [*args, "-y", str(year)]
    return args


def _call(args: list[str]) -> subprocess.CompletedProcess:
    try:
        result = subprocess.run([EC_CLI, *args], check=False)
    except OSError:
        raise CommandNotCallableError() from None
    if result.returncode != 0:
        raise BadExitStatusError(result)
    return result


def read(day: Day) -> subprocess.CompletedProcess:
    """Show the description of ``day``."""
    return _call(_with_year(["read", "-d", str(day)]))


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit ``result`` as the answer to ``part`` of ``day``."""
    return _call(_with_year(["submit", "-d", str(day), "-p", str(part), str(result)]))


def _write_default(path: str, what: str) -> None:
    try:
        Path(path).write_text("0", encoding="utf-8")
    except OSError as error:
        print(f"Failed to write default {what} to {path}: {error}")


def download(day: Day) -> None:
    """Fetch description, input, sample and sample answer for every part of ``day``.

    Parts after the first that are not yet available get "0" written to their
    sample and answer files; a failure on the first part is raised.
    """
    for part in PARTS:
        inp = input_path(day, part)
        sample = sample_path(day, part)
        answer = sample_answer_path(day, part)
        desc = description_path(day, part)

        args = _with_year(
            [
                "fetch",
                "-d",
                str(day),
                "-p",
                str(part),
                "--sample-path",
                sample,
                "--sample-answer-path",
                answer,
                "--input-path",
                inp,
                "--description-path",
                desc,
            ]
        )

        try:
            _call(args)
            failed = None
        except EcCommandError as error:
            failed = error

        if part == 1:
            print("---")

        if failed is None:
            print(f'📝 Successfully wrote description to "{desc}".')
            print(f'📥 Successfully wrote input to "{inp}".')
            print(f'🧪 Successfully wrote sample to "{sample}".')
            print(f'✅ Successfully wrote sample answer to "{answer}".')
        elif part > 1:
            _write_default(sample, "sample")
            _write_default(answer, "sample answer")
            print(
                f"⚠️  Part {part} not available, "
                "wrote defaults to sample and answer files."
            )
        else:
            raise failed

        if part < PARTS[-1]:
            print()

    print("---")