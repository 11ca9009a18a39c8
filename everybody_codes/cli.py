"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from everybody_codes import commands
from everybody_codes.day import Day, DayFromStrError


class ArgsError(Exception):
    """Raised when the command line cannot be parsed."""


class UnknownCommandError(ArgsError):
    """Raised when no or an unknown subcommand is given."""


@dataclass(frozen=True)
class Download:
    day: Day


@dataclass(frozen=True)
class Read:
    day: Day


@dataclass(frozen=True)
class Scaffold:
    day: Day
    download: bool = False
    overwrite: bool = False


@dataclass(frozen=True)
class Solve:
    day: Day
    release: bool = False
    submit: int | None = None


@dataclass(frozen=True)
class All:
    release: bool = False


@dataclass(frozen=True)
class Time:
    all: bool = False
    day: Day | None = None
    store: bool = False


@dataclass(frozen=True)
class Today:
    pass


Command = Download | Read | Scaffold | Solve | All | Time | Today


class _Args:
    def __init__(self, argv: Sequence[str]) -> None:
        self.items = list(argv)

    def contains(self, flag: str) -> bool:
        if flag in self.items:
            self.items.remove(flag)
            return True
        return False

    def opt_value(self, flag: str) -> str | None:
        for index, item in enumerate(self.items):
            if item == flag:
                if index + 1 >= len(self.items):
                    raise ArgsError(f"the '{flag}' option doesn't have an associated value")
                value = self.items[index + 1]
                del self.items[index : index + 2]
                return value
            if item.startswith(flag + "="):
                del self.items[index]
                return item[len(flag) + 1 :]
        return None

    def opt_free(self) -> str | None:
        for index, item in enumerate(self.items):
            if not item.startswith("-") or item == "-":
                del self.items[index]
                return item
        return None

    def free(self) -> str:
        value = self.opt_free()
        if value is None:
            raise ArgsError("the required free-standing argument is missing")
        return value


def _day(text: str) -> Day:
    try:
        return Day.parse(text)
    except DayFromStrError as error:
        raise ArgsError(f"failed to parse '{text}': {error}") from None


def _u8(text: str) -> int:
    if not text.isdigit() or int(text) > 255:
        raise ArgsError(f"failed to parse '{text}': invalid digit or out of range")
    return int(text)


def parse_args(argv: Sequence[str]) -> Command:
    """Parse the arguments following the program name into a command."""
    args = _Args(argv)
    name = args.items.pop(0) if args.items else None

    command: Command
    if name == "all":
        command = All(release=args.contains("--release"))
    elif name == "time":
        run_all = args.contains("--all")
        store = args.contains("--store")
        text = args.opt_free()
        command = Time(all=run_all, day=None if text is None else _day(text), store=store)
    elif name == "download":
        command = Download(day=_day(args.free()))
    elif name == "read":
        command = Read(day=_day(args.free()))
    elif name == "scaffold":
        day = _day(args.free())
        command = Scaffold(
            day=day,
            download=args.contains("--download"),
            overwrite=args.contains("--overwrite"),
        )
    elif name == "solve":
        day = _day(args.free())
        release = args.contains("--release")
        value = args.opt_value("--submit")
        command = Solve(day=day, release=release, submit=None if value is None else _u8(value))
    elif name == "today":
        command = Today()
    elif name is None:
        raise UnknownCommandError("No command specified.")
    else:
        raise UnknownCommandError(f"Unknown command: {name}")

    if args.items:
        print(f"Warning: unknown argument(s): {args.items!r}.", file=sys.stderr)
    return command


def main(argv: Sequence[str] | None = None) -> None:
    """Parse the command line and run the chosen command."""
    try:
        command = parse_args(sys.argv[1:] if argv is None else argv)
    except UnknownCommandError as error:
        print(error, file=sys.stderr)
        raise SystemExit(1) from None
    except ArgsError as error:
        print(f"Error: {error}", file=sys.stderr)
        raise SystemExit(1) from None

    match command:
        case All(release=release):
            commands.handle_all(release)
        case Time(all=run_all, day=day, store=store):
            commands.handle_time(day, run_all, store)
        case Download(day=day):
            commands.handle_download(day)
        case Read(day=day):
            commands.handle_read(day)
        case Scaffold(day=day, download=download, overwrite=overwrite):
            commands.handle_scaffold(day, overwrite)
            if download:
                commands.handle_download(day)
        case Solve(day=day, release=release, submit=submit):
            commands.handle_solve(day, release, submit)
        case Today():
            commands.handle_today()


if __name__ == "__main__":
    main()