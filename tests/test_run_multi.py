import subprocess
import sys

import pytest

from everybody_codes.day import Day
from everybody_codes.run_multi import (
    parse_exec_time,
    parse_time,
    run_multi,
    run_solution,
)


def test_parses_execution_times():
    res = parse_exec_time(
        [
            "Part 1: 0 (74.13ns @ 100000 samples)",
            "Part 2: 10 (74.13ms @ 99999 samples)",
            "Part 3: 20 (100\u00b5s @ 50000 samples)",
            "",
        ],
        Day(1),
    )
    assert res.total_nanos == pytest.approx(74230074.13, abs=1e-6)
    assert res.part_1 == "74.13ns"
    assert res.part_2 == "74.13ms"
    assert res.part_3 == "100\u00b5s"
    assert res.day == Day(1)


def test_parses_with_patterns_in_input():
    res = parse_exec_time(
        [
            "Part 1: @ @ @ ( ) ms (2s @ 5 samples)",
            "Part 2: 10s (100ms @ 1 samples)",
            "Part 3: 5s (50ms @ 2 samples)",
            "",
        ],
        Day(1),
    )
    assert res.total_nanos == pytest.approx(2150000000.0, abs=1e-6)
    assert res.part_1 == "2s"
    assert res.part_2 == "100ms"
    assert res.part_3 == "50ms"


def test_parses_missing_parts():
    res = parse_exec_time(
        [
            "Part 1: \u2716        ",
            "Part 2: \u2716        ",
            "Part 3: \u2716        ",
            "",
        ],
        Day(1),
    )
    assert res.total_nanos == pytest.approx(0.0, abs=1e-6)
    assert res.part_1 is None
    assert res.part_2 is None
    assert res.part_3 is None


def test_unparsable_timing_is_skipped(capsys):
    res = parse_exec_time(["Part 1: x (abc @ 5 samples)"], Day(2))
    assert res.part_1 is None
    assert res.total_nanos == 0.0
    assert "Could not parse timings" in capsys.readouterr().err


def test_parse_time_plain_duration():
    assert parse_time("Part 2: 10 (74.13ms @ 99999 samples)") == pytest.approx(
        ("74.13ms", 74130000.0)
    ) or parse_time("Part 2: 10 (74.13ms @ 99999 samples)")[0] == "74.13ms"
    text, nanos = parse_time("Part 2: 10 (74.13ms @ 99999 samples)")
    assert text == "74.13ms"
    assert nanos == pytest.approx(74.13 * 1_000_000)


def test_parse_time_rejects_garbage():
    assert parse_time("Part 1: x (abc @ 5 samples)") is None


def test_run_solution_without_bin_returns_empty(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert run_solution(Day(3), True, True) == []


def test_run_multi_reports_unsolved_days_in_order(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    result = run_multi({Day(3), Day(1)}, False, True)
    out = capsys.readouterr().out
    assert result is not None and result.data == []
    assert out.count("Not solved.") == 2
    assert out.index("Day 01") < out.index("Day 03")
    assert "Total (Run):" in out


def test_run_multi_untimed_returns_none(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert run_multi([Day(5)], False, False) is None
    out = capsys.readouterr().out
    assert "Day 05" in out
    assert "Total (Run):" not in out


def test_run_solution_invokes_child_and_collects_stdout(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "src" / "bin").mkdir(parents=True)
    (tmp_path / "src" / "bin" / "01.rs").write_text("", encoding="utf-8")

    real_popen = subprocess.Popen
    recorded = []

    def fake_popen(args, **kwargs):
        recorded.append(list(args))
        script = (
            "import sys\n"
            "print('Part 1: 5 (1ms @ 3 samples)')\n"
            "print('warn', file=sys.stderr)\n"
        )
        return real_popen([sys.executable, "-c", script], **kwargs)

    monkeypatch.setattr(subprocess, "Popen", fake_popen)
    output = run_solution(Day(1), True, True)

    assert output == ["Part 1: 5 (1ms @ 3 samples)"]
    assert recorded == [
        ["cargo", "run", "--quiet", "--bin", "01", "--release", "--", "--time"]
    ]
    captured = capsys.readouterr()
    assert "Part 1: 5 (1ms @ 3 samples)" in captured.out
    assert "warn" in captured.err