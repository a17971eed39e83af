"""Tag chip widget for displaying a single tag.

A compact inline widget with the tag text and a remove button. The chip
does not remove itself: it reports the request to whoever bound its
signals (normally a TagCollection) and posts a message for the DOM.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button

from tagcloud.config.constants import REMOVE_TAG_BUTTON_LABEL
from tagcloud.protocols import ChipCallback

logger = logging.getLogger(__name__)


class TagChip(Widget):
    """A single tag, rendered as a label button plus a remove button.

    Messages:
        Clicked: Fired when the label is pressed
        RemoveRequested: Fired when the remove button or key is used
    """

    DEFAULT_CSS = """
    TagChip {
        layout: horizontal;
        height: 1;
        width: auto;
        margin: 0 1 1 0;
        background: $primary-darken-2;
    }

    TagChip Button {
        height: 1;
        min-width: 0;
        border: none;
        background: transparent;
        padding: 0 1;
    }

    TagChip .tag-chip--label {
        text-style: bold;
    }

    TagChip .tag-chip--remove {
        color: $text-muted;
        padding: 0 1 0 0;
    }

    TagChip.-indicator .tag-chip--remove {
        display: none;
    }
    """

    BINDINGS = [
        Binding("backspace", "remove_tag", "Remove", show=False),
        Binding("delete", "remove_tag", "Remove", show=False),
    ]

    class Clicked(Message):
        """Fired when the chip's label is pressed."""
        def __init__(self, chip: "TagChip") -> None:
            self.chip = chip
            super().__init__()

    class RemoveRequested(Message):
        """Fired when the user asks to remove the chip."""
        def __init__(self, chip: "TagChip") -> None:
            self.chip = chip
            super().__init__()

    def __init__(
        self,
        text: str,
        is_indicator: bool = False,
        palette: Optional[Iterable[str]] = None,
        *,
        rng: Optional[random.Random] = None,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        """Initialize the chip.

        Args:
            text: The tag string
            is_indicator: Build the chip without a remove affordance
            palette: Background colours to pick from at random (None or
                empty keeps the default background)
            rng: Random source for the palette pick
        """
        super().__init__(name=name, id=id, classes=classes)
        self._text = text
        self._on_removed: Optional[ChipCallback] = None
        self._on_clicked: Optional[ChipCallback] = None

        self.background_color: Optional[str] = None
        colors = sorted(palette) if palette else []
        if colors:
            self.background_color = (rng or random).choice(colors)
            self.styles.background = self.background_color

        self._removable = True
        self.set_removable(not is_indicator)

    def compose(self) -> ComposeResult:
        yield Button(Text(self._text), classes="tag-chip--label")
        yield Button(REMOVE_TAG_BUTTON_LABEL, classes="tag-chip--remove")

    @property
    def text(self) -> str:
        return self._text

    @property
    def removable(self) -> bool:
        return self._removable

    def set_removable(self, removable: bool) -> None:
        """Show or hide the remove button."""
        self._removable = removable
        self.set_class(not removable, "-indicator")

    def bind_signals(self, on_removed: ChipCallback, on_clicked: ChipCallback) -> None:
        self._on_removed = on_removed
        self._on_clicked = on_clicked

    # -------------------------------------------------------------------------
    # Signals
    # -------------------------------------------------------------------------

    def request_remove(self) -> None:
        """Report that the user wants this chip gone."""
        if not self._removable:
            return
        logger.debug(f"Chip {self._text!r} requested removal")
        self.post_message(self.RemoveRequested(self))
        if self._on_removed is not None:
            self._on_removed(self)

    def report_click(self) -> None:
        """Report that the user pressed this chip."""
        self.post_message(self.Clicked(self))
        if self._on_clicked is not None:
            self._on_clicked(self)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("tag-chip--remove"):
            self.request_remove()
        else:
            self.report_click()

    def action_remove_tag(self) -> None:
        self.request_remove()
