"""Tests for the calculator CLI."""

from __future__ import annotations

import sys

import pytest

from calcore.cli import run_calc as mod
from calcore.core.domain.enums import OperationKind


def _run(argv: list[str], capsys) -> tuple[int, str, str]:
    with pytest.raises(SystemExit) as exc:
        mod.main(argv)
    captured = capsys.readouterr()
    return exc.value.code, captured.out, captured.err


def test_add_prints_result(capsys) -> None:
    code, out, err = _run(["-a", "2", "-b", "3", "-o", "+"], capsys)

    assert code == 0
    assert out.strip() == "Result: 5"
    assert err == ""


def test_division_by_zero_reports_status(capsys) -> None:
    code, out, err = _run(["-a", "5", "-b", "0", "--op", "div"], capsys)

    assert code == 1
    assert out == ""
    assert err.startswith("Error: DIVISION_BY_ZERO: ")


def test_factorial_without_second(capsys) -> None:
    code, out, _ = _run(["-a", "5", "--op", "fact"], capsys)

    assert code == 0
    assert out.strip() == "Result: 120"


def test_factorial_unsigned_max(capsys) -> None:
    code, out, _ = _run(["-a", "20", "-o", "!"], capsys)

    assert code == 0
    assert out.strip() == "Result: 2432902008176640000"


def test_negative_factorial_operand(capsys) -> None:
    code, _, err = _run(["-a", "-3", "-o", "fact"], capsys)

    assert code == 1
    assert err.startswith("Error: VALIDATION_ERROR: ")


def test_negative_exponent(capsys) -> None:
    code, _, err = _run(["--a", "2", "--b", "-1", "--op", "^"], capsys)

    assert code == 1
    assert err.startswith("Error: VALIDATION_ERROR: ")


def test_add_overflow(capsys) -> None:
    code, _, err = _run(["-a", "9223372036854775807", "-b", "1", "-o", "add"], capsys)

    assert code == 1
    assert err.startswith("Error: OVERFLOW: ")


def test_binary_operation_missing_second(capsys) -> None:
    code, _, err = _run(["-a", "4", "-o", "mul"], capsys)

    assert code == 1
    assert err.startswith("Error: VALIDATION_ERROR: ")


def test_minus_alias_selects_subtraction(capsys) -> None:
    code, out, _ = _run(["-a", "2", "-b", "5", "-o", "-"], capsys)

    assert code == 0
    assert out.strip() == "Result: -3"


@pytest.mark.parametrize(
    "alias,expected",
    [
        ("add", OperationKind.ADD),
        ("*", OperationKind.MUL),
        ("/", OperationKind.DIV),
        ("pow", OperationKind.POW),
        ("!", OperationKind.FACT),
    ],
)
def test_parse_operation_aliases(alias: str, expected: OperationKind) -> None:
    assert mod.parse_operation(alias) is expected


@pytest.mark.parametrize(
    "argv",
    [
        ["-a", "x", "-o", "add", "-b", "1"],
        ["-a", "9223372036854775808", "-b", "1", "-o", "add"],
        ["-a", "1", "-b", "1", "-o", "mod"],
        ["-b", "1", "-o", "add"],
        ["-a", "1", "-b", "1"],
        ["-a", "1_000", "-o", "fact"],
        ["-a", " 5 ", "-o", "fact"],
        ["-a", "٥", "-o", "fact"],
    ],
)
def test_malformed_arguments_are_usage_errors(argv: list[str], capsys) -> None:
    code, out, err = _run(argv, capsys)

    assert code == 2
    assert out == ""
    assert "usage:" in err


def test_help_exits_zero(capsys) -> None:
    code, out, _ = _run(["--help"], capsys)

    assert code == 0
    assert "fact(!)" in out
    assert "calcore -a 5 --op fact" in out


def test_debug_trace_lines(capsys) -> None:
    code, out, _ = _run(["-a", "2", "-b", "3", "-o", "+", "--debug"], capsys)

    assert code == 0
    lines = out.strip().splitlines()
    assert lines[0] == "[debug] parsed op=add first=2 second=3"
    assert "[debug] DISPATCH op=add status=ALL_RIGHT" in lines
    assert lines[-1] == "Result: 5"


def test_main_reads_sys_argv(capsys, monkeypatch) -> None:
    monkeypatch.setattr(sys, "argv", ["run_calc.py", "-a", "7", "-b", "2", "-o", "/"])
    with pytest.raises(SystemExit) as exc:
        mod.main()

    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == "Result: 3"
