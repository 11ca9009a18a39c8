# everybody_codes

A command-line helper for a workspace of Everybody Codes quest solutions. It
creates the files for each quest day, fetches descriptions and inputs through
the `ec-cli` tool, runs and benchmarks solutions, submits answers and keeps a
benchmark table in `README.md` up to date.

Every quest day is a number from 1 to 25 and is written with two digits
(`01`, `02`, …, `25`). Each day has three parts.

## Installation

```
pip install .
```

This installs the `everybody-codes` command. Downloading, reading and
submitting call the external `ec-cli` program, which must be installed
separately and be on your `PATH`. Running, solving and timing call `cargo`.

## Workspace layout

All commands work relative to the current directory:

```
src/template.txt             template for new solution modules
src/bin/NN.rs                solution module for day NN
data/
  inputs/        NN-P.txt    puzzle input for day NN, part P
  samples/       NN-P.txt    sample input
  answers/       NN-P.txt    sample answer
  descriptions/  NN-P.html   quest description
  timings.json               stored benchmark results
README.md                    holds the benchmark table
```

## Commands

### scaffold

```
everybody-codes scaffold 3
everybody-codes scaffold 3 --overwrite
everybody-codes scaffold 3 --download
```

Creates `data/inputs`, `data/samples` and `data/descriptions` if needed, writes
`src/bin/03.rs` from `src/template.txt` with `%DAY_NUMBER%` replaced by the day
number, and creates empty input and sample files for parts 1 to 3. An existing
module file is an error unless `--overwrite` is given; input and sample files
are always emptied. `--download` runs `download` for the day afterwards.

### download

```
everybody-codes download 3
```

Runs `ec-cli fetch` for each of the three parts, writing the description,
input, sample and sample answer. If part 1 fails the command exits with an
error; if part 2 or 3 is not available yet, `0` is written to its sample and
answer files.

### read

```
everybody-codes read 3
```

Shows the quest description via `ec-cli read`.

### solve

```
everybody-codes solve 3
everybody-codes solve 3 --release
everybody-codes solve 3 --submit 2
```

Runs `cargo run --bin 03 [--release] -- [--submit P]`.

### all

```
everybody-codes all
everybody-codes all --release
```

Runs every day that has a `src/bin/NN.rs` file, in order; other days print
`Not solved.`

### time

```
everybody-codes time          # days not yet fully benchmarked
everybody-codes time --all    # every day
everybody-codes time 3        # one day
everybody-codes time --store  # also save results
```

Runs the chosen days in release mode with `--time` and reads the
`Part N: … (<duration> @ <samples> samples)` lines they print. With `--store`,
the results are merged into `data/timings.json` (new results replace stored
ones for the same day) and the benchmark table in `README.md` is rewritten.
The table lives between two marker lines, which must be in the README before
the first store:

```
<!--- benchmarking table --->
<!--- benchmarking table --->
```

### today

```
everybody-codes today
```

During an active event, runs `scaffold`, `download` and `read` for the current
day. The event starts on the first Monday of November at 23:00 UTC and runs for
20 weekdays, with a new quest every weekday at 23:00 UTC. Outside the event
the command exits with an error.

Unknown commands and unparsable arguments exit with status 1; extra arguments
only produce a warning.

## Year selection

Set `EC_YEAR` to pass `-y <year>` to `ec-cli` when fetching, reading and
submitting:

```
EC_YEAR=2024 everybody-codes download 3
```

## Library use

Solutions written in Python can use `everybody_codes.runner`:

```python
from everybody_codes.day import Day
from everybody_codes.runner import run_day

def part_one(text):
    return len(text.split())

run_day(Day(3), {1: part_one})
```

`run_day` reads `data/inputs/03-1.txt` and calls `run_part`, which prints the
result and its duration (`✖` for `None`). If the command line contains
`--time`, each part is benchmarked for about one second, with at least 10 and
at most 10000 samples, and the mean is shown. With `--submit P`, a non-`None`
result of part `P` is submitted through `ec-cli`.

Other modules:

- `everybody_codes.day`: `Day` (validated 1–25, `Day.parse`, `Day.today`) and
  `all_days()`.
- `everybody_codes.timings`: `Timing` and `Timings`, with JSON reading,
  writing and merging.
- `everybody_codes.readme_benchmarks`: `update_content` and `update` for the
  README table.
- `everybody_codes.ec_cli`: `check`, `read`, `download` and `submit` wrappers,
  raising `EcCommandError` subclasses on failure.

## What it does not do

- It ships no `src/template.txt`; `scaffold` fails until you provide one.
- `solve`, `all` and `time` only run solutions through `cargo` from
  `src/bin/NN.rs`; Python solutions are run by calling `run_day` yourself and
  are not picked up by these commands.