"""Browser automation tools backed by Playwright.

Each invocation opens its own :class:`~tools.browser_session.BrowserSession`
and always closes it before returning.  Failures are reported through the
result envelope (``Error: <message>``) instead of protocol errors.
"""
from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Any, Awaitable, Callable, List

from config import Settings
from registry import (
    ToolError,
    ToolRegistry,
    ToolResult,
    ToolTimeout,
    UnsupportedAction,
    reports_errors,
)

from .browser_session import BrowserSession
from .models import NavigateInput, ScrapeInput

logger = logging.getLogger(__name__)

ACTIONS = ("click", "type", "getText")


class BrowserTools:
    """``playwright_navigate`` and ``playwright_scrape`` handlers."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    def _session(self) -> BrowserSession:
        return BrowserSession(
            headless=self.settings.browser_headless,
            timeout_ms=self.settings.browser_timeout_ms,
        )

    async def _run(self, steps: Callable[[BrowserSession], Awaitable[str]]) -> str:
        timeout = self.settings.tool_timeout_seconds
        async with self._session() as session:
            task = asyncio.ensure_future(steps(session))
            try:
                done, _ = await asyncio.wait({task}, timeout=timeout)
            finally:
                if not task.done():
                    task.cancel()
                    with contextlib.suppress(asyncio.CancelledError):
                        await task
            if not done:
                raise ToolTimeout(timeout)
            return task.result()

    @reports_errors
    async def navigate(self, params: NavigateInput) -> ToolResult:
        """Load ``params.url`` and optionally interact with one element."""
        if params.action is not None and params.action not in ACTIONS:
            raise UnsupportedAction(params.action, ACTIONS)
        if params.selector and params.action == "type" and not params.text:
            raise ToolError("action 'type' requires text")

        async def steps(session: BrowserSession) -> str:
            lines: List[str] = []
            await session.goto(params.url)
            lines.append(f"Navigated to {params.url}")
            selector = params.selector
            if selector and params.action:
                if params.action == "click":
                    await session.click(selector)
                    lines.append(f"Clicked element: {selector}")
                elif params.action == "type":
                    await session.fill(selector, params.text)
                    lines.append(f'Typed "{params.text}" into element: {selector}')
                else:
                    content = await session.text_content(selector)
                    shown = "null" if content is None else content
                    lines.append(f"Text from {selector}: {shown}")
            if params.screenshot:
                image = await session.screenshot()
                lines.append(f"Screenshot taken ({len(image)} bytes)")
            return "\n".join(lines)

        return ToolResult.text(await self._run(steps))

    @reports_errors
    async def scrape(self, params: ScrapeInput) -> ToolResult:
        """Return the first ``selector`` match's text, or the page markup."""

        async def steps(session: BrowserSession) -> str:
            await session.goto(params.url)
            if params.wait_for:
                await session.wait_for(params.wait_for)
            if params.selector:
                return await session.first_text(params.selector)
            return await session.content()

        return ToolResult.text(await self._run(steps))


def register(registry: ToolRegistry, settings: Any = None) -> None:
    tools = BrowserTools(settings)
    registry.register(
        "playwright_navigate",
        NavigateInput,
        tools.navigate,
        description=(
            "Open a URL in a headless browser, optionally click, type into or "
            "read one element, and optionally take a full-page screenshot."
        ),
    )
    registry.register(
        "playwright_scrape",
        ScrapeInput,
        tools.scrape,
        description=(
            "Open a URL and return the text of the first element matching "
            "selector, or the full page HTML when no selector is given."
        ),
    )
