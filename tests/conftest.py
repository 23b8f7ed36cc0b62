"""Shared fixtures: an in-memory stand-in for Playwright."""
from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

import pytest

from tools import browser_session


class FakeElement:
    def __init__(self, text: Optional[str]) -> None:
        self._text = text

    async def text_content(self) -> Optional[str]:
        return self._text


class FakePage:
    def __init__(self, world: "FakeWorld") -> None:
        self.world = world
        self.timeout: Optional[int] = None

    def set_default_timeout(self, timeout: int) -> None:
        self.timeout = timeout

    async def _maybe_fail(self, step: str) -> None:
        self.world.calls.append(step)
        if step in self.world.delays:
            await asyncio.sleep(self.world.delays[step])
        if step in self.world.failures:
            raise self.world.failures[step]

    async def goto(self, url: str) -> None:
        await self._maybe_fail("goto")
        self.world.visited.append(url)

    async def click(self, selector: str) -> None:
        await self._maybe_fail("click")

    async def fill(self, selector: str, text: str) -> None:
        await self._maybe_fail("fill")
        self.world.filled[selector] = text

    async def text_content(self, selector: str) -> Optional[str]:
        await self._maybe_fail("text_content")
        return self.world.texts.get(selector)

    async def query_selector(self, selector: str) -> Optional[FakeElement]:
        await self._maybe_fail("query_selector")
        if selector not in self.world.texts:
            return None
        return FakeElement(self.world.texts[selector])

    async def wait_for_selector(self, selector: str) -> None:
        await self._maybe_fail("wait_for_selector")

    async def content(self) -> str:
        await self._maybe_fail("content")
        return self.world.html

    async def screenshot(self, full_page: bool = False) -> bytes:
        await self._maybe_fail("screenshot")
        self.world.full_page = full_page
        return self.world.image


class FakeBrowser:
    def __init__(self, world: "FakeWorld") -> None:
        self.world = world

    async def new_page(self) -> FakePage:
        page = FakePage(self.world)
        self.world.pages.append(page)
        return page

    async def close(self) -> None:
        self.world.browser_closes += 1


class FakeChromium:
    def __init__(self, world: "FakeWorld") -> None:
        self.world = world

    async def launch(self, headless: bool = True) -> FakeBrowser:
        self.world.launches += 1
        self.world.headless = headless
        if "launch" in self.world.failures:
            raise self.world.failures["launch"]
        return FakeBrowser(self.world)


class FakePlaywright:
    def __init__(self, world: "FakeWorld") -> None:
        self.world = world
        self.chromium = FakeChromium(world)

    async def stop(self) -> None:
        self.world.playwright_stops += 1


class FakeWorld:
    """Records every interaction with the fake browser engine."""

    def __init__(self) -> None:
        self.html = "<html><body><h1>Example Domain</h1></body></html>"
        self.texts: Dict[str, Optional[str]] = {"h1": "Example Domain"}
        self.image = b"\x89PNG" + b"\x00" * 124
        self.failures: Dict[str, Exception] = {}
        self.delays: Dict[str, float] = {}
        self.calls: List[str] = []
        self.visited: List[str] = []
        self.filled: Dict[str, str] = {}
        self.pages: List[FakePage] = []
        self.launches = 0
        self.browser_closes = 0
        self.playwright_stops = 0
        self.headless: Optional[bool] = None
        self.full_page: Optional[bool] = None

    def async_playwright(self) -> "FakeWorld._Starter":
        return FakeWorld._Starter(self)

    class _Starter:
        def __init__(self, world: "FakeWorld") -> None:
            self.world = world

        async def start(self) -> FakePlaywright:
            return FakePlaywright(self.world)


@pytest.fixture
def fake_browser(monkeypatch) -> FakeWorld:
    world = FakeWorld()
    monkeypatch.setattr(browser_session, "async_playwright", world.async_playwright)
    return world
