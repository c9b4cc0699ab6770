"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Plain text lines for patterns and demo runs
- Rich tables for pattern listings and run summaries
- JSON and YAML dumps of the same data
"""
import json
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.table import Table

SEPARATOR = " — "


def format_output(data: Any, format_type: str, width: int = 120) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data, width)
    else:
        return format_text_output(data)


def format_text_output(data: Any) -> str:
    """Format data as plain text lines."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_text(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_pattern_line(data["pattern"])
    elif isinstance(data, dict) and "results" in data:
        return format_run_text(data)
    else:
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any, width: int = 120) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"], width)
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_table([data["pattern"]], width)
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"], width)
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_pattern_line(pattern: Dict[str, Any]) -> str:
    """One descriptor as ``name — category — description``."""
    return SEPARATOR.join(
        [pattern.get("name", ""), pattern.get("category", ""), pattern.get("description", "")]
    )


def format_patterns_text(patterns: List[Dict[str, Any]]) -> str:
    if not patterns:
        return "No patterns found."
    return "\n".join(format_pattern_line(pattern) for pattern in patterns)


def format_summary_line(result: Dict[str, Any]) -> str:
    if result.get("succeeded"):
        return f"[PASS] {result['pattern_name']}"
    return f"[FAIL] {result['pattern_name']}: {result.get('error') or 'unknown error'}"


def format_run_text(report: Dict[str, Any], show_output: bool = True, summary: Optional[bool] = None) -> str:
    """
    Format a run report.

    Demo output is included unless ``show_output`` is False. Summary lines
    are printed when ``summary`` is set (default: more than one result), and
    always for failed demos.
    """
    results = report.get("results", [])
    if summary is None:
        summary = len(results) > 1

    if not results:
        return "No demos were run."

    lines: List[str] = []
    for result in results:
        if show_output:
            if len(results) > 1:
                lines.append(f"== {result['pattern_name']} ==")
            lines.extend(result.get("output_lines", []))
        if not summary and not result.get("succeeded"):
            lines.append(format_summary_line(result))

    if summary:
        lines.extend(format_summary_line(result) for result in results)
        passed = len(results) - len(report.get("failed", []))
        lines.append(f"{passed}/{len(results)} demos passed")

    return "\n".join(lines)


def format_patterns_table(patterns: List[Dict[str, Any]], width: int = 120) -> str:
    """Format pattern descriptors as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category", style="green")
    table.add_column("Description", style="white")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("name", "N/A")),
            str(pattern.get("category", "N/A")),
            str(pattern.get("description", "")),
        )

    return _render(table, width)


def format_results_table(results: List[Dict[str, Any]], width: int = 120) -> str:
    """Format demo results as a Rich table."""
    if not results:
        return "No demos were run."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Pattern", style="cyan", no_wrap=True)
    table.add_column("Status", justify="center")
    table.add_column("Lines", style="yellow", justify="right")
    table.add_column("Time (ms)", style="yellow", justify="right")
    table.add_column("Error", style="red")

    for result in results:
        status = "[green]PASS[/green]" if result.get("succeeded") else "[red]FAIL[/red]"
        table.add_row(
            str(result.get("pattern_name", "N/A")),
            status,
            str(len(result.get("output_lines", []))),
            f"{result.get('duration_ms', 0.0):.1f}",
            str(result.get("error") or ""),
        )

    return _render(table, width)


def _render(table: Table, width: int) -> str:
    # Capture Rich output as string
    console = Console(width=width, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip("\n")
