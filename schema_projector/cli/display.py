"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted JSON
- Success/failure indicators
- A summary table of the projected schema
"""

import json
from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_json(data: Any, title: Optional[str] = None) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
    """
    if isinstance(data, str):
        json_str = data
    else:
        json_str = json.dumps(data, indent=2, ensure_ascii=False)

    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False, word_wrap=True)

    if title:
        panel = Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan")
        console.print(panel)
    else:
        console.print(syntax)


def print_projection_summary(projected: Dict[str, Any], total_schemas: int) -> None:
    """
    Print a table describing the projected schema.

    Args:
        projected: ``ProjectedSchema.to_dict()`` output
        total_schemas: Number of definitions in the source document
    """
    table = Table(title="Projection", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="cyan", width=14)
    table.add_column("Value", style="white", width=50)

    table.add_row("Name", projected["name"])
    table.add_row("Description", projected.get("description", "[dim]absent[/dim]"))
    if "strict" in projected:
        table.add_row("Strict", json.dumps(projected["strict"]))
    else:
        table.add_row("Strict", "[dim]absent[/dim]")
    table.add_row("Definitions", str(total_schemas))

    console.print()
    console.print(table)
    console.print()
