"""Renderers for scan results."""

from __future__ import annotations

import json
from enum import Enum

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import ScanResult


class OutputMode(str, Enum):
    TABLE = "table"
    TEXT = "text"
    DUMP = "dump"


def select_mode(*, dump_output: bool = False, text_output: bool = False) -> OutputMode:
    """Dump wins over text; neither flag means a table."""
    if dump_output:
        return OutputMode.DUMP
    if text_output:
        return OutputMode.TEXT
    return OutputMode.TABLE


def render_dump(result: ScanResult) -> str:
    return json.dumps(result.symbols, indent=2, sort_keys=True)


def render_text(result: ScanResult, label: str) -> str:
    lines = [f"Unused {label}:"]
    lines.extend(result.symbols)
    return "\n".join(lines)


def build_table(result: ScanResult, label: str) -> Table:
    table = Table(title=f"Unused {label}")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("File", overflow="fold")
    for index, (name, path) in enumerate(result.rows(), start=1):
        table.add_row(str(index), Text(name), Text(path))
    return table


def report(
    result: ScanResult,
    mode: OutputMode,
    *,
    label: str | None = None,
    console: Console | None = None,
) -> None:
    """Write ``result`` to the console in the requested mode."""
    console = console or Console()
    label = label or result.analyzer

    if mode is OutputMode.DUMP:
        console.print(render_dump(result), markup=False, highlight=False, emoji=False, soft_wrap=True)
        return

    if mode is OutputMode.TEXT:
        console.print(render_text(result, label), markup=False, highlight=False, emoji=False, soft_wrap=True)
        return

    if not result.symbols:
        console.print(f"No dead {label} found.", markup=False, highlight=False, emoji=False)
        return
    console.print(build_table(result, label))


__all__ = ["OutputMode", "build_table", "render_dump", "render_text", "report", "select_mode"]
