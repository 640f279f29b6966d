# build_ref_tool/cli/utils/output.py
"""Output formatting utilities"""

from typing import Dict, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from ...constants import EMOJI_ARROW
from ...models import OperationResult, UnitStatus

console = Console()

STATUS_STYLES = {
    UnitStatus.LISTED: "cyan",
    UnitStatus.ACCEPTED: "green",
    UnitStatus.UPDATED: "green",
    UnitStatus.VERIFIED: "green",
    UnitStatus.SKIPPED: "yellow",
}


def format_operation_result(result: OperationResult) -> None:
    """Format and display the per-unit results of a run"""
    if not result.units:
        console.print(f"[yellow]No deployment units processed ({result.operation.value})[/yellow]")
        return

    table = Table(title=f"Build References ({result.operation.value})", box=box.ROUNDED)
    table.add_column("Unit", style="cyan", no_wrap=True)
    table.add_column("Commit", style="green")
    table.add_column("Tag")
    table.add_column("Formats", style="yellow")
    table.add_column("Status", style="bold")

    for unit_result in result.units:
        unit = unit_result.unit
        if unit_result.is_indirected:
            unit = f"{unit} {EMOJI_ARROW} {unit_result.effective_unit}"

        style = STATUS_STYLES[unit_result.status]
        table.add_row(
            unit,
            unit_result.short_commit or "?",
            unit_result.tag or "?",
            unit_result.formats or "?",
            f"[{style}]{unit_result.status.value}[/{style}]",
        )

    console.print(table)

    if result.detail_message:
        console.print(f"[bold]Detail:[/bold] {result.detail_message.lstrip(', ')}")


def format_context(context: Dict[str, str], title: Optional[str] = "Published Context") -> None:
    """Format and display published context pairs"""
    if not context:
        return

    lines = [f"[bold]{key}[/bold]={value}" for key, value in context.items()]
    panel = Panel(
        "\n".join(lines),
        title=title,
        border_style="blue"
    )
    console.print(panel)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")

