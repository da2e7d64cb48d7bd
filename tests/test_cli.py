"""Tests for the command line demo."""

import pytest

from orderflow import Failure, Success
from orderflow.cli import BANNER, build_parser, main, run_cli, terminal_line
from orderflow.config import get_settings

STEP_LINES = ("Retrieving order.", "Applying discounts.", "Updating order.")


def test_terminal_lines():
    assert terminal_line(123, Success()) == "Order 123 processed successfully."
    assert terminal_line(123, Failure("Order not found.")) == (
        "Order 123 processing failed: Order not found."
    )


def test_parser_defaults_come_from_settings(monkeypatch):
    monkeypatch.setenv("ORDERFLOW_VARIANT", "reactive")
    monkeypatch.setenv("ORDERFLOW_ORDER_ID", "77")

    args = build_parser(get_settings()).parse_args([])

    assert args.variant == "reactive"
    assert args.order_id == 77
    assert args.latency == 1.0
    assert not args.missing


@pytest.mark.asyncio
async def test_success_prints_banner_steps_and_one_terminal_line(capsys):
    code = await run_cli(["--variant", "structured", "--latency", "0"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines()[0] == BANNER
    assert out.count("Order 123 processed successfully.") == 1
    assert "processing failed" not in out


@pytest.mark.asyncio
async def test_missing_order_fails(capsys):
    code = await run_cli(["-v", "chain", "--latency", "0", "--missing", "--order-id", "5"])

    out = capsys.readouterr().out
    assert code == 1
    assert "Order 5 processing failed: Order not found." in out


@pytest.mark.asyncio
async def test_all_variants_each_report_once(capsys):
    code = await run_cli(["--variant", "all", "--latency", "0", "--update-error", "Disk full"])

    out = capsys.readouterr().out
    assert code == 1
    assert out.count("Order 123 processing failed: Disk full") == 5
    for name in ("chain", "structured", "dataflow", "reactive", "events"):
        assert f"── {name} ──" in out


def _step_events(out: str) -> tuple[list[str], str]:
    """Split CLI output into the log lines after the banner and the terminal line."""
    lines = out.strip().splitlines()
    assert lines[0] == BANNER
    return lines[1:-1], lines[-1]


def test_success_shows_three_step_lines_then_one_result(capsys, variant):
    code = main(["--variant", variant, "--latency", "0"])

    logged, last = _step_events(capsys.readouterr().out)
    assert code == 0
    assert len(logged) == 3
    for line, message in zip(logged, STEP_LINES):
        assert message in line
    assert last == "Order 123 processed successfully."


def test_missing_order_shows_only_retrieval_line(capsys, variant):
    code = main(["--variant", variant, "--latency", "0", "--missing"])

    logged, last = _step_events(capsys.readouterr().out)
    assert code == 1
    assert len(logged) == 1
    assert "Retrieving order." in logged[0]
    assert last == "Order 123 processing failed: Order not found."


def test_unknown_variant_rejected(capsys):
    with pytest.raises(SystemExit):
        build_parser(get_settings()).parse_args(["--variant", "threads"])
