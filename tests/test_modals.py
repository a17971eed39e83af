"""Pilot-based tests for the add-tag prompt."""

from __future__ import annotations

from typing import List, Optional

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Button, Input, Label

from tagcloud.config.constants import DUPLICATE_TAG_ERROR, EMPTY_TAG_ERROR
from tagcloud.ui import AddTagScreen, TagCloud

# ---------------------------------------------------------------------------
# Test apps
# ---------------------------------------------------------------------------


class PromptTestApp(App[None]):
    """Pushes an AddTagScreen whose callback accepts unseen texts."""

    def __init__(self) -> None:
        super().__init__()
        self.submitted: List[str] = []
        self.results: List[Optional[str]] = []

    def _accept(self, text: str) -> bool:
        if text in self.submitted:
            return False
        self.submitted.append(text)
        return True

    def on_mount(self) -> None:
        self.push_screen(AddTagScreen(self._accept), callback=self.results.append)


class CloudPromptApp(App[None]):
    def __init__(self, tags: List[str], is_indicator: bool = False) -> None:
        super().__init__()
        self._tags = tags
        self._is_indicator = is_indicator

    def compose(self) -> ComposeResult:
        yield TagCloud(self._tags, is_indicator=self._is_indicator, id="cloud")


def _error_text(app: App[None]) -> str:
    return str(app.screen.query_one("#add-tag-error", Label).content)


# ---------------------------------------------------------------------------
# Tests: AddTagScreen
# ---------------------------------------------------------------------------


class TestAddTagScreen:
    @pytest.mark.asyncio
    async def test_input_focused(self) -> None:
        app = PromptTestApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, AddTagScreen)
            assert app.screen.query_one("#add-tag-input", Input).has_focus

    @pytest.mark.asyncio
    async def test_enter_submits_and_dismisses(self) -> None:
        app = PromptTestApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press(*"python")
            await pilot.press("enter")
            await pilot.pause()

            assert app.submitted == ["python"]
            assert app.results == ["python"]
            assert not isinstance(app.screen, AddTagScreen)

    @pytest.mark.asyncio
    async def test_whitespace_is_stripped(self) -> None:
        app = PromptTestApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.query_one("#add-tag-input", Input).value = "  rust  "
            app.screen.query_one("#add-tag-submit", Button).press()
            await pilot.pause()

            assert app.submitted == ["rust"]

    @pytest.mark.asyncio
    async def test_empty_input_keeps_prompt_open(self) -> None:
        app = PromptTestApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("space", "enter")
            await pilot.pause()

            assert isinstance(app.screen, AddTagScreen)
            assert app.submitted == []
            assert _error_text(app) == EMPTY_TAG_ERROR

    @pytest.mark.asyncio
    async def test_rejected_input_keeps_prompt_open(self) -> None:
        app = PromptTestApp()
        app.submitted.append("dup")
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press(*"dup")
            await pilot.press("enter")
            await pilot.pause()

            assert isinstance(app.screen, AddTagScreen)
            assert app.results == []
            assert _error_text(app) == DUPLICATE_TAG_ERROR

    @pytest.mark.asyncio
    async def test_escape_cancels(self) -> None:
        app = PromptTestApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press(*"abc")
            await pilot.press("escape")
            await pilot.pause()

            assert app.results == [None]
            assert app.submitted == []

    @pytest.mark.asyncio
    async def test_cancel_button(self) -> None:
        app = PromptTestApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.query_one("#add-tag-cancel", Button).press()
            await pilot.pause()

            assert app.results == [None]


# ---------------------------------------------------------------------------
# Tests: TagCloud add flow
# ---------------------------------------------------------------------------


class TestTagCloudAddFlow:
    @pytest.mark.asyncio
    async def test_add_button_opens_prompt_and_adds(self) -> None:
        app = CloudPromptApp(["a"])
        async with app.run_test() as pilot:
            await pilot.pause()
            app.query_one("#tag-cloud-add", Button).press()
            await pilot.pause()
            assert isinstance(app.screen, AddTagScreen)

            await pilot.press("b", "enter")
            await pilot.pause()

            assert not isinstance(app.screen, AddTagScreen)
            assert app.query_one("#cloud", TagCloud).get_all_tag_strings() == ["a", "b"]

    @pytest.mark.asyncio
    async def test_duplicate_keeps_prompt_and_state(self) -> None:
        app = CloudPromptApp(["a"])
        async with app.run_test() as pilot:
            await pilot.pause()
            app.query_one("#cloud", TagCloud).action_add_tag()
            await pilot.pause()

            await pilot.press("a", "enter")
            await pilot.pause()

            assert isinstance(app.screen, AddTagScreen)
            assert app.query_one("#cloud", TagCloud).get_all_tag_strings() == ["a"]

    @pytest.mark.asyncio
    async def test_indicator_blocks_prompt(self) -> None:
        app = CloudPromptApp(["a"], is_indicator=True)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.query_one("#cloud", TagCloud).action_add_tag()
            await pilot.pause()

            assert not isinstance(app.screen, AddTagScreen)
