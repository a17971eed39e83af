"""Shared pytest fixtures for tagcloud tests."""

from typing import Callable, List, Optional, Set

import pytest

from tagcloud.collection import TagCollection


class FakeChip:
    """In-memory chip that records what the collection told it."""

    def __init__(self, text: str, is_indicator: bool, palette: Optional[Set[str]]):
        self._text = text
        self.palette = palette
        self._removable = not is_indicator
        self._on_removed: Optional[Callable] = None
        self._on_clicked: Optional[Callable] = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def removable(self) -> bool:
        return self._removable

    def set_removable(self, removable: bool) -> None:
        self._removable = removable

    def bind_signals(self, on_removed, on_clicked) -> None:
        self._on_removed = on_removed
        self._on_clicked = on_clicked

    def press_remove(self) -> None:
        self._on_removed(self)

    def press(self) -> None:
        self._on_clicked(self)


class FakeContainer:
    """Records chips the way a rendering backend would show them."""

    def __init__(self):
        self.chips: List[FakeChip] = []
        self.add_visible = True

    def insert_chip(self, chip) -> None:
        self.chips.append(chip)

    def remove_chip(self, chip) -> None:
        self.chips.remove(chip)

    def set_add_affordance_visible(self, visible: bool) -> None:
        self.add_visible = visible


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config/tagcloud."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("TAGCLOUD_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def created_chips() -> List[FakeChip]:
    """Every chip the factory built, including rejected duplicates."""
    return []


@pytest.fixture
def chip_factory(created_chips):
    def factory(text, is_indicator, palette):
        chip = FakeChip(text, is_indicator, palette)
        created_chips.append(chip)
        return chip

    return factory


@pytest.fixture
def container() -> FakeContainer:
    return FakeContainer()


@pytest.fixture
def collection(chip_factory, container) -> TagCollection:
    return TagCollection(chip_factory, container=container)


@pytest.fixture
def abc_collection(collection) -> TagCollection:
    for text in ("a", "b", "c"):
        collection.add_tag(text)
    return collection
