import pytest

from everybody_codes.day import Day
from everybody_codes.runner import (
    bench,
    format_duration,
    print_result,
    read_file,
    run_day,
    run_part,
    submit_result,
)


def test_read_file(tmp_path, monkeypatch):
    folder = tmp_path / "data" / "inputs"
    folder.mkdir(parents=True)
    (folder / "03-2.txt").write_text("abc", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert read_file("inputs", Day(3), 2) == "abc"


def test_read_file_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        read_file("inputs", Day(1), 1)


def test_bench_clamps_low():
    calls = []
    _, samples = bench(calls.append, 1, 10**12)
    assert samples == 10
    assert len(calls) == 10


def test_bench_clamps_high():
    _, samples = bench(lambda x: x, 1, 0)
    assert samples == 10000


def test_format_duration_single_sample():
    assert format_duration(74, 1) == " (74.0ns)"


def test_format_duration_samples_suffix():
    assert format_duration(5_000_000, 20).endswith(" @ 20 samples)")


def test_print_result_none_final(capsys):
    print_result(None, "Part 1", " (1.0ns)")
    assert "Part 1: \u2716" in capsys.readouterr().out


def test_print_result_multiline(capsys):
    print_result("a\nb", "Part 2", " (1.0ns)")
    out = capsys.readouterr().out
    assert "Part 2: \u25bc" in out
    assert out.rstrip().endswith("a\nb")


def test_submit_not_requested():
    assert submit_result(1, Day(1), 1, ["prog"]) is None


def test_submit_bad_part():
    with pytest.raises(SystemExit) as info:
        submit_result(1, Day(1), 1, ["prog", "--submit", "x"])
    assert info.value.code == 1


def test_submit_other_part():
    assert submit_result(1, Day(1), 1, ["prog", "--submit", "2"]) is None


def test_run_part_returns_result(capsys):
    assert run_part(lambda s: len(s), "hello", Day(1), 1, ["prog"]) == 5
    assert "Part 1: " in capsys.readouterr().out


def test_run_day(tmp_path, monkeypatch, capsys):
    folder = tmp_path / "data" / "inputs"
    folder.mkdir(parents=True)
    (folder / "02-1.txt").write_text("xyz", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    run_day(Day(2), {1: str.upper}, ["prog"])
    assert "XYZ" in capsys.readouterr().out