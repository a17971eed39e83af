"""
TagCollection - the ordered set of unique tags behind a tag cloud.

The collection is the single source of truth for which tags exist, in
which order, and which chip renders each one. It knows nothing about the
rendering backend: chips come from a factory and are shown through an
optional TagContainer.

Example usage:
    collection = TagCollection(make_chip)
    collection.set_on_tag_string_conflict_listener(
        lambda coll, text: print(f"{text!r} already exists")
    )
    collection.add_tag("python")    # True
    collection.add_tag("python")    # False, listener fired
    collection.get_all_tag_strings()  # ["python"]
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set

from tagcloud.protocols import (
    ChipFactory,
    OnTagClickListener,
    OnTagRemoveListener,
    OnTagStringConflictListener,
    TagChipLike,
    TagContainer,
)

logger = logging.getLogger(__name__)


class TagCollection:
    """Ordered, unique tags with conflict, removal and click notifications.

    Listeners receive ``owner`` as their collection argument. It defaults to
    the collection itself; widgets that wrap a collection pass themselves so
    their callers see the widget.
    """

    def __init__(
        self,
        chip_factory: ChipFactory,
        *,
        is_indicator: bool = False,
        possible_background_colors: Optional[Iterable[str]] = None,
        container: Optional[TagContainer] = None,
        owner: Any = None,
    ) -> None:
        self._chip_factory = chip_factory
        self._container = container
        self._owner = owner if owner is not None else self

        # Both structures always hold the same texts
        self._chips: List[TagChipLike] = []
        self._chips_by_text: Dict[str, TagChipLike] = {}

        self._palette: Set[str] = set(possible_background_colors or ())

        self._on_tag_string_conflict: Optional[OnTagStringConflictListener] = None
        self._on_tag_remove: Optional[OnTagRemoveListener] = None
        self._on_tag_click: Optional[OnTagClickListener] = None

        self._is_indicator = False
        self.is_indicator = is_indicator

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def is_indicator(self) -> bool:
        """Read-only mode: no remove affordances and no add affordance."""
        return self._is_indicator

    @is_indicator.setter
    def is_indicator(self, value: bool) -> None:
        self._is_indicator = bool(value)
        for chip in self._chips:
            chip.set_removable(not self._is_indicator)
        if self._container is not None:
            self._container.set_add_affordance_visible(not self._is_indicator)
        logger.debug(f"Indicator mode set to {self._is_indicator} on {len(self._chips)} chips")

    @property
    def possible_background_colors(self) -> Set[str]:
        """Colours new chips may be given. Returns a copy."""
        return set(self._palette)

    @possible_background_colors.setter
    def possible_background_colors(self, colors: Iterable[str]) -> None:
        new_colors = list(colors)
        self._palette.clear()
        self._palette.update(new_colors)

    @property
    def count(self) -> int:
        """Number of tags currently held."""
        return len(self._chips)

    def __len__(self) -> int:
        return len(self._chips)

    def __iter__(self) -> Iterator[TagChipLike]:
        return iter(list(self._chips))

    def __contains__(self, text: object) -> bool:
        return text in self._chips_by_text

    # -------------------------------------------------------------------------
    # Adders & removers
    # -------------------------------------------------------------------------

    def add_tag(self, text: str) -> bool:
        """Add a tag at the end of the collection.

        Returns:
            True if the tag was added, False if ``text`` already exists. On
            False the conflict listener has been notified and nothing changed.
        """
        palette = frozenset(self._palette) if self._palette else None
        chip = self._chip_factory(text, self._is_indicator, palette)
        chip.bind_signals(self._handle_chip_removed, self._handle_chip_clicked)

        if self.contains_tag(text):
            logger.info(f"Rejected duplicate tag {text!r}")
            if self._on_tag_string_conflict is not None:
                self._on_tag_string_conflict(self._owner, text)
            return False

        self._chips.append(chip)
        self._chips_by_text[text] = chip
        if self._container is not None:
            self._container.insert_chip(chip)

        logger.debug(f"Added tag {text!r} at index {len(self._chips) - 1}")
        return True

    def remove_tag_by_index(self, index: int) -> bool:
        """Remove the tag at ``index``. Out-of-range indices return False."""
        if index < 0 or index >= len(self._chips):
            return False

        chip = self._chips.pop(index)
        del self._chips_by_text[chip.text]
        if self._container is not None:
            self._container.remove_chip(chip)

        logger.debug(f"Removed tag {chip.text!r} from index {index}")
        if self._on_tag_remove is not None:
            self._on_tag_remove(self._owner, chip, index, len(self._chips))
        return True

    def remove_tag_by_string(self, text: str) -> bool:
        """Remove the tag whose text equals ``text`` exactly."""
        for index, chip in enumerate(self._chips):
            if chip.text == text:
                return self.remove_tag_by_index(index)
        return False

    # -------------------------------------------------------------------------
    # Getters
    # -------------------------------------------------------------------------

    def get_tag_at(self, index: int) -> Optional[TagChipLike]:
        if 0 <= index < len(self._chips):
            return self._chips[index]
        return None

    def get_tag_string_at(self, index: int) -> Optional[str]:
        chip = self.get_tag_at(index)
        return chip.text if chip is not None else None

    def get_all_tag_strings(self) -> List[str]:
        """Texts of all tags in display order, as a new list."""
        return [chip.text for chip in self._chips]

    def contains_tag(self, text: str) -> bool:
        return text in self._chips_by_text

    def index_of(self, chip: TagChipLike) -> int:
        """Current position of ``chip`` by identity, or -1."""
        for index, held in enumerate(self._chips):
            if held is chip:
                return index
        return -1

    # -------------------------------------------------------------------------
    # Listener setters
    # -------------------------------------------------------------------------

    def set_on_tag_string_conflict_listener(
        self, listener: Optional[OnTagStringConflictListener]
    ) -> None:
        self._on_tag_string_conflict = listener

    def set_on_tag_remove_listener(self, listener: Optional[OnTagRemoveListener]) -> None:
        self._on_tag_remove = listener

    def set_on_tag_click_listener(self, listener: Optional[OnTagClickListener]) -> None:
        self._on_tag_click = listener

    # -------------------------------------------------------------------------
    # Chip signals
    # -------------------------------------------------------------------------

    def _handle_chip_removed(self, chip: TagChipLike) -> None:
        # Prior removals may have shifted the chip, so look it up now
        index = self.index_of(chip)
        if index < 0:
            logger.debug(f"Ignoring removal request from detached chip {chip.text!r}")
            return
        self.remove_tag_by_index(index)

    def _handle_chip_clicked(self, chip: TagChipLike) -> None:
        index = self.index_of(chip)
        if index < 0:
            return
        if self._on_tag_click is not None:
            self._on_tag_click(self._owner, chip, index)
