"""
Demo TUI for tagcloud - a single TagCloud plus a status line
"""

from typing import Iterable, List, Optional

import typer
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static

from tagcloud.config.ui_config import TagCloudConfig
from tagcloud.exceptions import TagCloudError
from tagcloud.utils.output import console

from .tag_cloud import TagCloud


class TagCloudApp(App[List[str]]):
    """Shows a TagCloud and reports its events. Exits with the final tags."""

    TITLE = "tagcloud"

    CSS = """
    Screen {
        layout: vertical;
    }

    #tag-cloud-status {
        dock: bottom;
        height: 1;
        background: $boost;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("i", "toggle_indicator", "Toggle read-only"),
        ("q", "quit_with_tags", "Quit"),
    ]

    def __init__(self, tags: Iterable[str] = (), config: Optional[TagCloudConfig] = None):
        super().__init__()
        self._initial_tags = list(tags)
        self._config = config or TagCloudConfig()

    def compose(self) -> ComposeResult:
        yield Header()
        yield TagCloud(self._initial_tags, config=self._config, id="tag-cloud")
        yield Static("", id="tag-cloud-status")
        yield Footer()

    def _set_status(self, text: str) -> None:
        self.query_one("#tag-cloud-status", Static).update(text)

    def on_tag_cloud_tag_string_conflict(self, event: TagCloud.TagStringConflict) -> None:
        self._set_status(f"[yellow]'{event.text}' already exists[/yellow]")

    def on_tag_cloud_tag_removed(self, event: TagCloud.TagRemoved) -> None:
        self._set_status(f"Removed '{event.chip.text}' from #{event.index}, {event.count} left")

    def on_tag_cloud_tag_clicked(self, event: TagCloud.TagClicked) -> None:
        self._set_status(f"Clicked '{event.chip.text}' at #{event.index}")

    def action_toggle_indicator(self) -> None:
        cloud = self.query_one("#tag-cloud", TagCloud)
        cloud.is_indicator = not cloud.is_indicator
        self._set_status("Read-only" if cloud.is_indicator else "Editable")

    def action_quit_with_tags(self) -> None:
        self.exit(self.query_one("#tag-cloud", TagCloud).get_all_tag_strings())


def gui(
    tags: Optional[List[str]] = typer.Option(
        None, "--tag", "-t", help="Initial tag (repeatable)"
    ),
    indicator: Optional[bool] = typer.Option(
        None, "--indicator/--editable", help="Start read-only or editable (default from config)"
    ),
    colors: Optional[List[str]] = typer.Option(
        None, "--color", "-c", help="Background colour for new chips (repeatable)"
    ),
):
    """Open an interactive tag cloud. Prints the final tags on exit."""
    try:
        config = TagCloudConfig.load()
        if indicator is not None:
            config.is_indicator = indicator
        if colors:
            config = TagCloudConfig(
                is_indicator=config.is_indicator,
                possible_background_colors=colors,
                columns=config.columns,
            )
    except TagCloudError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    try:
        result = TagCloudApp(tags or [], config=config).run()
    except KeyboardInterrupt:
        return
    for tag in result or []:
        typer.echo(tag)
