#!/usr/bin/env python3
"""
Modal screens for tagcloud.
"""

import logging
from typing import Callable, Optional

from textual.app import ComposeResult
from textual.containers import Grid
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from tagcloud.config.constants import (
    ADD_TAG_CANCEL,
    ADD_TAG_PLACEHOLDER,
    ADD_TAG_SUBMIT,
    ADD_TAG_TITLE,
    DUPLICATE_TAG_ERROR,
    EMPTY_TAG_ERROR,
)

logger = logging.getLogger(__name__)


class AddTagScreen(ModalScreen[Optional[str]]):
    """Modal prompt for a new tag.

    ``on_submit`` receives the stripped text and returns whether the tag
    was accepted. The prompt only closes on acceptance or cancel, so a
    rejected tag can be corrected in place.
    """

    DEFAULT_CSS = """
    AddTagScreen {
        align: center middle;
    }

    #add-tag-dialog {
        grid-size: 2;
        grid-gutter: 1 2;
        grid-rows: 1 3 1 3;
        padding: 0 2;
        width: 60;
        height: 15;
        border: thick $background 80%;
        background: $surface;
    }

    #add-tag-title {
        column-span: 2;
        text-style: bold;
    }

    #add-tag-input {
        column-span: 2;
    }

    #add-tag-error {
        column-span: 2;
        color: $error;
    }

    AddTagScreen Button {
        width: 100%;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(self, on_submit: Callable[[str], bool]):
        super().__init__()
        self._on_submit = on_submit

    def compose(self) -> ComposeResult:
        with Grid(id="add-tag-dialog"):
            yield Label(ADD_TAG_TITLE, id="add-tag-title")
            yield Input(placeholder=ADD_TAG_PLACEHOLDER, id="add-tag-input")
            yield Label("", id="add-tag-error")
            yield Button(ADD_TAG_CANCEL, variant="default", id="add-tag-cancel")
            yield Button(ADD_TAG_SUBMIT, variant="primary", id="add-tag-submit")

    def on_mount(self) -> None:
        self.query_one("#add-tag-input", Input).focus()

    def submit(self) -> None:
        """Hand the current input to ``on_submit`` and close if accepted."""
        text = self.query_one("#add-tag-input", Input).value.strip()
        error = self.query_one("#add-tag-error", Label)

        if not text:
            error.update(EMPTY_TAG_ERROR)
            return

        if self._on_submit(text):
            logger.debug(f"AddTagScreen accepted {text!r}")
            self.dismiss(text)
        else:
            error.update(DUPLICATE_TAG_ERROR)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-tag-submit":
            self.submit()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
