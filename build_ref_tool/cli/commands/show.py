"""Build reference display command"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich import box

from ...constants import EMOJI_ARROW
from ...core.registry import BuildReferenceRegistry

console = Console()


@click.command()
@click.option('-g', '--registry-dir', required=True,
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Registry directory with one subdirectory per deployment unit')
@click.argument('units', nargs=-1, required=True)
@click.pass_context
def show(ctx, registry_dir, units):
    """Show the stored build reference of deployment units

    Indirection files are followed, so a unit shows the record of the
    unit it refers to. Nothing is created or changed.

    Examples:
        build-ref-tool show -g appsettings/seg api web
    """
    registry = BuildReferenceRegistry(registry_dir)

    table = Table(title="Build References", box=box.ROUNDED)
    table.add_column("Unit", style="cyan", no_wrap=True)
    table.add_column("Record", style="dim")
    table.add_column("Commit", style="green")
    table.add_column("Tag")
    table.add_column("Formats", style="yellow")

    missing = 0
    for unit in units:
        location = registry.locate(unit, create_dirs=False)
        reference = registry.read(location)

        name = unit
        if location.is_indirected:
            name = f"{unit} {EMOJI_ARROW} {location.effective}"

        if reference is None:
            missing += 1
            table.add_row(name, "[red]none[/red]", "", "", "")
            continue

        table.add_row(
            name,
            "legacy" if location.is_legacy else "json",
            reference.commit or "?",
            reference.tag or "?",
            ", ".join(reference.formats) if reference.formats is not None else "?",
        )

    console.print(table)

    if missing:
        console.print(f"[yellow]{missing} deployment unit(s) have no build reference[/yellow]")
        sys.exit(1)
