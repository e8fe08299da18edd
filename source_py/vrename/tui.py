import logging

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from .editor import edit_names
from .renamer import plan_renames, apply_renames
from .types import Config


def run_tui(config: Config) -> int:
    # The editor owns the terminal's stdout, so everything here goes to stderr
    console = Console(stderr=True)
    console.print("[bold green]vrename[/bold green]")

    # 1. Edit
    name_map = edit_names(config.editor, config.file_names)
    operations = plan_renames(name_map)
    logging.info(f"Mapped {len(operations)} names")

    # 2. Plan
    table = Table(title="Planned renames")
    table.add_column("Old name", style="cyan")
    table.add_column("New name", style="magenta")
    for op in operations:
        new_name = escape(op.to_path) if op.changed else "[dim](unchanged)[/dim]"
        table.add_row(escape(op.from_path), new_name)
    console.print(table)

    # 3. Execute
    verb = "would rename" if config.dry_run else "renamed"
    description = "[yellow]Checking..." if config.dry_run else "[red]Renaming..."
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console
    ) as progress:
        task_exec = progress.add_task(description, total=len(operations))
        for op in apply_renames(operations, config.dry_run):
            console.print(f'{verb} "{escape(op.from_path)}" to "{escape(op.to_path)}"')
            progress.advance(task_exec)

    if config.dry_run:
        console.print("[bold yellow]Dry Run Complete[/bold yellow]")
    else:
        console.print("[bold green]Done![/bold green]")

    return 0
