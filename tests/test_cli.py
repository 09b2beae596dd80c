"""Tests for the command line interface."""

from __future__ import annotations

import json

import pytest

from snapinspect import __version__
from snapinspect.cli import build_parser, main


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.fixture
def report_file(tmp_path):
    path = tmp_path / "report.json"
    path.write_text(
        json.dumps(
            {
                "ID": "2-5-1",
                "Size": 4096,
                "Index": 5,
                "Term": 2,
                "Version": 1,
                "Stats": {
                    "A": {"Name": "A", "Sum": 300, "Count": 3},
                    "B": {"Name": "B", "Sum": 100, "Count": 1},
                    "C": {"Name": "C", "Sum": 200, "Count": 2},
                },
                "Offset": 2048,
            }
        )
    )
    return path


def test_render_pretty(report_file, capsys):
    assert _run(["render", str(report_file), "--format", "pretty"]) == 0

    out = capsys.readouterr().out
    assert out.startswith(" ID")
    assert out.index(" A ") < out.index(" C ") < out.index(" B ")
    assert out.rstrip("\n").split("\n")[-1].split() == ["Total", "2KB"]


def test_render_json_round_trips(report_file, capsys):
    assert _run(["render", str(report_file), "-f", "json"]) == 0

    out = capsys.readouterr().out
    assert json.loads(out) == json.loads(report_file.read_text())


def test_render_to_output_file(report_file, tmp_path, capsys):
    target = tmp_path / "out.txt"
    assert _run(["render", str(report_file), "-f", "json", "-o", str(target)]) == 0

    assert capsys.readouterr().out == ""
    assert json.loads(target.read_text())["Offset"] == 2048


def test_render_missing_file(tmp_path, capsys):
    assert _run(["render", str(tmp_path / "nope.json")]) == 1
    assert "Error: cannot read" in capsys.readouterr().err


def test_render_invalid_json(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    assert _run(["render", str(path)]) == 1
    assert "is not valid JSON" in capsys.readouterr().err


def test_render_invalid_report(tmp_path, capsys):
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"ID": "x"}))

    assert _run(["render", str(path)]) == 1
    assert "Error: Invalid report: missing keys" in capsys.readouterr().err


def test_render_rejects_unknown_format(report_file, capsys):
    assert _run(["render", str(report_file), "-f", "xml"]) == 2
    err = capsys.readouterr().err
    assert "invalid choice" in err
    assert "xml" in err


def test_formats_command(capsys):
    assert _run(["formats"]) == 0
    assert capsys.readouterr().out == "pretty\njson\n"


def test_version_command(capsys):
    assert _run(["version"]) == 0
    assert capsys.readouterr().out == f"snapinspect version {__version__}\n"


def test_version_flag(capsys):
    assert _run(["--version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert _run([]) == 0
    assert "usage: snapinspect" in capsys.readouterr().out


def test_format_defaults_to_pretty():
    args = build_parser().parse_args(["render", "report.json"])
    assert args.format == "pretty"


@pytest.mark.parametrize(
    "change",
    [
        {"Offset": "abc"},
        {"Offset": -1},
        {"Offset": None},
        {"Stats": {"A": {"Name": "A", "Sum": -5, "Count": 1}}},
    ],
)
@pytest.mark.parametrize("fmt", ["pretty", "json"])
def test_render_rejects_bad_values(report_file, capsys, change, fmt):
    data = json.loads(report_file.read_text())
    report_file.write_text(json.dumps({**data, **change}))

    assert _run(["render", str(report_file), "-f", fmt]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Invalid report:" in captured.err


def test_render_output_file_reloads_after_repeated_runs(report_file, tmp_path, capsys):
    target = tmp_path / "out.json"
    assert _run(["render", str(report_file), "-f", "json", "-o", str(target)]) == 0
    assert _run(["render", str(report_file), "-f", "json", "-o", str(target)]) == 0

    assert json.loads(target.read_text(encoding="utf-8")) == json.loads(report_file.read_text())
    assert _run(["render", str(target), "-f", "pretty"]) == 0
    assert "Total" in capsys.readouterr().out
