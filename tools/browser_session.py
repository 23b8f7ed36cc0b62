"""Short-lived Playwright browser session.

One session owns one Chromium process and one page.  It is opened at the start
of a single tool invocation and closed before that invocation returns, on
success and failure alike.  Use it as an async context manager::

    async with BrowserSession() as session:
        await session.goto(url)
"""
from __future__ import annotations

import logging
from typing import Optional

from playwright.async_api import Browser, Page, async_playwright

logger = logging.getLogger(__name__)


class BrowserSession:
    """Manage a single headless browser and page."""

    def __init__(self, headless: bool = True, timeout_ms: int = 30000) -> None:
        self.headless = headless
        self.timeout_ms = timeout_ms
        self._playwright = None
        self.browser: Optional[Browser] = None
        self.page: Optional[Page] = None
        self.closed = False

    async def start(self) -> "BrowserSession":
        """Launch Chromium and open a blank page."""
        self._playwright = await async_playwright().start()
        self.browser = await self._playwright.chromium.launch(headless=self.headless)
        self.page = await self.browser.new_page()
        self.page.set_default_timeout(self.timeout_ms)
        logger.debug("Browser session started (headless=%s)", self.headless)
        return self

    async def __aenter__(self) -> "BrowserSession":
        try:
            return await self.start()
        except BaseException:
            await self.close()
            raise

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def goto(self, url: str) -> None:
        assert self.page is not None
        await self.page.goto(url)
        logger.info("Navigated to %s", url)

    async def click(self, selector: str) -> None:
        assert self.page is not None
        await self.page.click(selector)
        logger.info("Clicked %s", selector)

    async def fill(self, selector: str, text: str) -> None:
        assert self.page is not None
        await self.page.fill(selector, text)
        logger.info("Filled %s with %d characters", selector, len(text))

    async def text_content(self, selector: str) -> Optional[str]:
        """Wait for ``selector`` and return the first match's text content."""
        assert self.page is not None
        return await self.page.text_content(selector)

    async def first_text(self, selector: str) -> str:
        """Text of the first element matching ``selector``, ``""`` if none."""
        assert self.page is not None
        element = await self.page.query_selector(selector)
        if element is None:
            return ""
        return await element.text_content() or ""

    async def wait_for(self, selector: str) -> None:
        assert self.page is not None
        await self.page.wait_for_selector(selector)

    async def content(self) -> str:
        assert self.page is not None
        return await self.page.content()

    async def screenshot(self) -> bytes:
        """Capture the full page as PNG bytes."""
        assert self.page is not None
        return await self.page.screenshot(full_page=True)

    async def close(self) -> None:
        """Release the page, browser and Playwright driver.

        Only the first call does any work.
        """
        if self.closed:
            return
        self.closed = True
        try:
            if self.browser is not None:
                await self.browser.close()
        finally:
            if self._playwright is not None:
                await self._playwright.stop()
            logger.debug("Browser session closed")
