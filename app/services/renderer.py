from __future__ import annotations

import asyncio
import logging
import weakref
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, Dict, List, Optional

from playwright.async_api import Browser, async_playwright

from app.core.config import settings


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int
    scale: float = 1.0


@dataclass(frozen=True)
class PrintOptions:
    width: str
    height: str
    margins: Dict[str, str] = field(
        default_factory=lambda: {"top": "0", "right": "0", "bottom": "0", "left": "0"}
    )
    background: bool = True
    page_ranges: Optional[str] = None


class PageRenderer:
    """Headless Chromium behind a bounded number of concurrent sessions.

    Each call launches its own browser and closes it before returning, on
    success and on error alike. Nothing is shared between calls except the
    session semaphore, created per event loop.
    """

    def __init__(self, max_sessions: Optional[int] = None, launch_args: Optional[List[str]] = None) -> None:
        self._max_sessions = max_sessions or settings.MAX_BROWSER_SESSIONS
        self._slots: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
        self._launch_args = list(launch_args if launch_args is not None else settings.BROWSER_ARGS)

    def _loop_slots(self) -> asyncio.Semaphore:
        loop = asyncio.get_running_loop()
        slots = self._slots.get(loop)
        if slots is None:
            slots = self._slots[loop] = asyncio.Semaphore(self._max_sessions)
        return slots

    @asynccontextmanager
    async def session(self) -> AsyncIterator[Browser]:
        async with self._loop_slots():
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True, args=self._launch_args)
                try:
                    yield browser
                finally:
                    try:
                        await browser.close()
                    except Exception as e:
                        logger.warning("Browser close failed: %s", e)

    async def capture_screenshot(self, url: str, timeout_ms: Optional[int] = None) -> bytes:
        timeout = timeout_ms if timeout_ms is not None else settings.SCREENSHOT_TIMEOUT_MS
        async with self.session() as browser:
            page = await browser.new_page(
                viewport={"width": settings.SCREENSHOT_WIDTH_PX, "height": settings.SCREENSHOT_HEIGHT_PX},
            )
            await page.goto(url, timeout=timeout)
            return await page.screenshot(type="png")

    async def render_to_pdf(self, html: str, viewport: Viewport, options: PrintOptions) -> bytes:
        async with self.session() as browser:
            page = await browser.new_page(
                viewport={"width": viewport.width, "height": viewport.height},
                device_scale_factor=viewport.scale,
            )
            await page.set_content(html, wait_until="networkidle")
            kwargs = {}
            if options.page_ranges:
                kwargs["page_ranges"] = options.page_ranges
            return await page.pdf(
                width=options.width,
                height=options.height,
                margin=options.margins,
                print_background=options.background,
                prefer_css_page_size=True,
                display_header_footer=False,
                scale=1.0,
                **kwargs,
            )


_renderer: Optional[PageRenderer] = None


def get_renderer() -> PageRenderer:
    global _renderer
    if _renderer is None:
        _renderer = PageRenderer()
        logger.info("Page renderer initialized (max sessions=%d)", settings.MAX_BROWSER_SESSIONS)
    return _renderer
