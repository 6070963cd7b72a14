"""Tests for deadscan.reporting."""

from __future__ import annotations

import io
import json

from rich.console import Console

from deadscan.models import ScanResult
from deadscan.reporting import OutputMode, render_dump, render_text, report, select_mode


def _result() -> ScanResult:
    return ScanResult(
        analyzer="methods",
        symbols={
            "export": ["/app/Contracts/Exporter.php", "/app/Services/CsvExporter.php"],
            "purge": ["/app/Jobs/Purge.php"],
        },
    )


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def test_select_mode_prefers_dump_then_text() -> None:
    assert select_mode(dump_output=True, text_output=True) is OutputMode.DUMP
    assert select_mode(text_output=True) is OutputMode.TEXT
    assert select_mode() is OutputMode.TABLE


def test_render_text_lists_names_under_header() -> None:
    assert render_text(_result(), "functions") == "Unused functions:\nexport\npurge"


def test_render_dump_keeps_every_declaring_file() -> None:
    assert json.loads(render_dump(_result()))["export"] == [
        "/app/Contracts/Exporter.php",
        "/app/Services/CsvExporter.php",
    ]


def test_table_shows_first_file_per_symbol() -> None:
    console, buffer = _console()

    report(_result(), OutputMode.TABLE, label="functions", console=console)

    output = buffer.getvalue()
    assert "Unused functions" in output
    assert "/app/Contracts/Exporter.php" in output
    assert "/app/Services/CsvExporter.php" not in output
    assert "purge" in output


def test_empty_table_reports_nothing_found() -> None:
    console, buffer = _console()

    report(ScanResult(analyzer="classes", symbols={}), OutputMode.TABLE, console=console)

    assert buffer.getvalue().strip() == "No dead classes found."
