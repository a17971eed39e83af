#!/usr/bin/env python3
"""
Protocols for tag chips, their containers and collection listeners.

These protocols define the interface a rendering backend must implement
to work with TagCollection. The Textual widgets in tagcloud.ui are one
such backend; tests use plain in-memory fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Set


ChipCallback = Callable[[Any], None]


@runtime_checkable
class TagChipLike(Protocol):
    """
    The renderable unit representing one tag.

    A chip is owned by exactly one collection from the moment it is added
    until it is removed.
    """

    @property
    def text(self) -> str:
        """The tag string this chip was built for."""
        ...

    @property
    def removable(self) -> bool:
        """Whether the chip currently shows its remove affordance."""
        ...

    def set_removable(self, removable: bool) -> None:
        """Show or hide the remove affordance."""
        ...

    def bind_signals(self, on_removed: ChipCallback, on_clicked: ChipCallback) -> None:
        """Attach the removed and clicked signals. Each callback gets the chip."""
        ...


class ChipFactory(Protocol):
    """Builds a chip from its text, the indicator flag and the palette."""

    def __call__(
        self,
        text: str,
        is_indicator: bool,
        palette: Optional[Set[str]],
    ) -> TagChipLike: ...


@runtime_checkable
class TagContainer(Protocol):
    """Where chips are displayed, plus the "add new tag" affordance."""

    def insert_chip(self, chip: TagChipLike) -> None:
        """Show a newly accepted chip after every existing one."""
        ...

    def remove_chip(self, chip: TagChipLike) -> None:
        """Stop showing a chip that left the collection."""
        ...

    def set_add_affordance_visible(self, visible: bool) -> None:
        """Show or hide the add-tag affordance."""
        ...


class OnTagStringConflictListener(Protocol):
    def __call__(self, collection: Any, text: str) -> None: ...


class OnTagRemoveListener(Protocol):
    def __call__(
        self,
        collection: Any,
        chip: TagChipLike,
        index: int,
        count: int,
    ) -> None: ...


class OnTagClickListener(Protocol):
    def __call__(self, collection: Any, chip: TagChipLike, index: int) -> None: ...
