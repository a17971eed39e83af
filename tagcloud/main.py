#!/usr/bin/env python3
"""
Main CLI entry point for tagcloud
"""

from typing import List, Optional

import typer
from rich.table import Table

from tagcloud import __version__
from tagcloud.config.ui_config import TagCloudConfig, get_ui_config_path
from tagcloud.exceptions import TagCloudError
from tagcloud.ui.gui import gui
from tagcloud.utils.logging import set_verbose
from tagcloud.utils.output import console

app = typer.Typer(help="Unique tag chips for the terminal")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    tagcloud - Unique tag chips for the terminal

    [bold]Examples:[/bold]

    Open a cloud with two tags:
        [cyan]tagcloud gui -t python -t textual[/cyan]

    Open it read-only:
        [cyan]tagcloud gui -t python --indicator[/cyan]
    """
    set_verbose(verbose)


@app.command()
def version():
    """Show tagcloud version"""
    typer.echo(f"tagcloud version {__version__}")


@app.command()
def config(
    indicator: Optional[bool] = typer.Option(
        None, "--indicator/--editable", help="Save the default mode"
    ),
    colors: Optional[List[str]] = typer.Option(
        None, "--color", "-c", help="Save the palette (repeatable)"
    ),
    columns: Optional[int] = typer.Option(None, "--columns", help="Save the chips per row"),
):
    """Show the effective configuration, saving any settings given"""
    try:
        settings = TagCloudConfig.load()
        if indicator is not None or colors or columns is not None:
            settings = TagCloudConfig(
                is_indicator=settings.is_indicator if indicator is None else indicator,
                possible_background_colors=colors or settings.possible_background_colors,
                columns=settings.columns if columns is None else columns,
            )
            settings.save()
            console.print("[green]✅ Saved configuration[/green]")
    except TagCloudError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    table = Table(title=str(get_ui_config_path()))
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in settings.to_dict().items():
        if isinstance(value, list):
            value = ", ".join(value) or "(default)"
        table.add_row(key, str(value))
    console.print(table)


app.command()(gui)


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
