#!/usr/bin/env python3
"""
TagCloud - a wrapping grid of unique, removable tag chips.

The widget is a thin Textual host around TagCollection: the collection
decides what is added, removed and reported, and calls back into the
widget (as its TagContainer) to mount and unmount chips.

Example usage:
    class MyScreen(Screen):
        def compose(self):
            yield TagCloud(["python", "textual"], id="tags")

        def on_tag_cloud_tag_removed(self, event: TagCloud.TagRemoved):
            self.notify(f"Removed {event.chip.text}")
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.css.query import NoMatches
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button

from tagcloud.collection import TagCollection
from tagcloud.config.constants import ADD_TAG_BUTTON_LABEL
from tagcloud.config.ui_config import TagCloudConfig, validate_palette
from tagcloud.protocols import (
    OnTagClickListener,
    OnTagRemoveListener,
    OnTagStringConflictListener,
    TagChipLike,
)

from .modals import AddTagScreen
from .tag_chip import TagChip

logger = logging.getLogger(__name__)


class TagCloud(Widget):
    """Tag chips in a wrapping grid, followed by an "add new tag" button.

    Messages:
        TagStringConflict: Fired when an added tag already exists
        TagRemoved: Fired after a tag leaves the cloud
        TagClicked: Fired when a chip's label is pressed
    """

    DEFAULT_CSS = """
    TagCloud {
        height: auto;
    }

    TagCloud #tag-cloud-tags {
        layout: grid;
        grid-size: 4;
        grid-rows: 2;
        height: auto;
    }

    TagCloud #tag-cloud-add {
        height: 1;
        min-width: 5;
        width: 5;
        border: none;
    }

    TagCloud.-indicator #tag-cloud-add {
        display: none;
    }
    """

    BINDINGS = [
        Binding("a", "add_tag", "Add tag", show=False),
    ]

    class TagStringConflict(Message):
        """Fired when an added tag's string already exists."""
        def __init__(self, cloud: "TagCloud", text: str) -> None:
            self.cloud = cloud
            self.text = text
            super().__init__()

        @property
        def control(self) -> "TagCloud":
            return self.cloud

    class TagRemoved(Message):
        """Fired after a tag has been removed."""
        def __init__(self, cloud: "TagCloud", chip: TagChipLike, index: int, count: int) -> None:
            self.cloud = cloud
            self.chip = chip
            self.index = index
            self.count = count
            super().__init__()

        @property
        def control(self) -> "TagCloud":
            return self.cloud

    class TagClicked(Message):
        """Fired when a chip's label is pressed."""
        def __init__(self, cloud: "TagCloud", chip: TagChipLike, index: int) -> None:
            self.cloud = cloud
            self.chip = chip
            self.index = index
            super().__init__()

        @property
        def control(self) -> "TagCloud":
            return self.cloud

    def __init__(
        self,
        tags: Optional[Iterable[str]] = None,
        *,
        is_indicator: Optional[bool] = None,
        possible_background_colors: Optional[Iterable[str]] = None,
        columns: Optional[int] = None,
        config: Optional[TagCloudConfig] = None,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        """Initialize the TagCloud.

        Args:
            tags: Initial tags, added in order (duplicates are rejected)
            is_indicator: Start in read-only mode
            possible_background_colors: Palette for new chips
            columns: Chips per grid row
            config: Defaults for any of the above left as None

        Raises:
            ConfigurationError: If a palette entry is not a colour
        """
        super().__init__(name=name, id=id, classes=classes)
        self._config = config or TagCloudConfig()
        self._columns = columns if columns is not None else self._config.columns

        self._on_tag_string_conflict: Optional[OnTagStringConflictListener] = None
        self._on_tag_remove: Optional[OnTagRemoveListener] = None
        self._on_tag_click: Optional[OnTagClickListener] = None

        if possible_background_colors is not None:
            palette = validate_palette(list(possible_background_colors))
        else:
            palette = self._config.possible_background_colors
        self._collection = TagCollection(
            TagChip,
            is_indicator=self._config.is_indicator if is_indicator is None else is_indicator,
            possible_background_colors=palette,
            container=self,
            owner=self,
        )
        self._collection.set_on_tag_string_conflict_listener(self._handle_conflict)
        self._collection.set_on_tag_remove_listener(self._handle_remove)
        self._collection.set_on_tag_click_listener(self._handle_click)

        for tag in tags or ():
            self.add_tag(tag)

    def compose(self) -> ComposeResult:
        with Container(id="tag-cloud-tags"):
            yield from self._collection
            yield Button(ADD_TAG_BUTTON_LABEL, id="tag-cloud-add")

    def on_mount(self) -> None:
        self.query_one("#tag-cloud-tags", Container).styles.grid_size_columns = self._columns

    @property
    def collection(self) -> TagCollection:
        """The collection backing this widget."""
        return self._collection

    # -------------------------------------------------------------------------
    # TagContainer
    # -------------------------------------------------------------------------

    def insert_chip(self, chip: TagChipLike) -> None:
        try:
            grid = self.query_one("#tag-cloud-tags", Container)
        except NoMatches:
            # Not composed yet; compose() will yield the chip
            return
        grid.mount(chip, before="#tag-cloud-add")

    def remove_chip(self, chip: TagChipLike) -> None:
        if isinstance(chip, Widget) and chip.parent is not None:
            chip.remove()

    def set_add_affordance_visible(self, visible: bool) -> None:
        self.set_class(not visible, "-indicator")

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def add_tag(self, text: str) -> bool:
        return self._collection.add_tag(text)

    def remove_tag_by_index(self, index: int) -> bool:
        return self._collection.remove_tag_by_index(index)

    def remove_tag_by_string(self, text: str) -> bool:
        return self._collection.remove_tag_by_string(text)

    def get_tag_at(self, index: int) -> Optional[TagChipLike]:
        return self._collection.get_tag_at(index)

    def get_tag_string_at(self, index: int) -> Optional[str]:
        return self._collection.get_tag_string_at(index)

    def get_all_tag_strings(self) -> List[str]:
        return self._collection.get_all_tag_strings()

    def contains_tag(self, text: str) -> bool:
        return self._collection.contains_tag(text)

    @property
    def count(self) -> int:
        return self._collection.count

    @property
    def is_indicator(self) -> bool:
        return self._collection.is_indicator

    @is_indicator.setter
    def is_indicator(self, value: bool) -> None:
        self._collection.is_indicator = value

    @property
    def possible_background_colors(self) -> Set[str]:
        return self._collection.possible_background_colors

    @possible_background_colors.setter
    def possible_background_colors(self, colors: Iterable[str]) -> None:
        # Rejected palettes leave the current one in place
        self._collection.possible_background_colors = validate_palette(list(colors))

    def set_on_tag_string_conflict_listener(
        self, listener: Optional[OnTagStringConflictListener]
    ) -> None:
        self._on_tag_string_conflict = listener

    def set_on_tag_remove_listener(self, listener: Optional[OnTagRemoveListener]) -> None:
        self._on_tag_remove = listener

    def set_on_tag_click_listener(self, listener: Optional[OnTagClickListener]) -> None:
        self._on_tag_click = listener

    # -------------------------------------------------------------------------
    # Collection notifications
    # -------------------------------------------------------------------------

    def _handle_conflict(self, cloud: "TagCloud", text: str) -> None:
        self.post_message(self.TagStringConflict(self, text))
        if self._on_tag_string_conflict is not None:
            self._on_tag_string_conflict(self, text)

    def _handle_remove(self, cloud: "TagCloud", chip: TagChipLike, index: int, count: int) -> None:
        self.post_message(self.TagRemoved(self, chip, index, count))
        if self._on_tag_remove is not None:
            self._on_tag_remove(self, chip, index, count)

    def _handle_click(self, cloud: "TagCloud", chip: TagChipLike, index: int) -> None:
        self.post_message(self.TagClicked(self, chip, index))
        if self._on_tag_click is not None:
            self._on_tag_click(self, chip, index)

    # -------------------------------------------------------------------------
    # Add prompt
    # -------------------------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "tag-cloud-add":
            event.stop()
            self.action_add_tag()

    def action_add_tag(self) -> None:
        """Open the add-tag prompt unless the cloud is read-only."""
        if self.is_indicator:
            return
        logger.debug("Opening add-tag prompt")
        self.app.push_screen(AddTagScreen(self.add_tag))
