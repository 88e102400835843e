#!/usr/bin/env python3
"""
Browser Session - Chromium lifecycle for one run
Acquired once, always closed (success, failure or early abort).
"""

import logging
import time
from pathlib import Path
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Error as PlaywrightError, Page, Playwright, async_playwright

from router_dns.browser.dialogs import AUTO_ACCEPT_DIALOGS_SCRIPT, accept_dialog
from router_dns.core.config import DEFAULT_TIMINGS, Timings
from router_dns.utils.logger_config import log

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    Usage:
        async with BrowserSession(headful=False) as page:
            await page.goto(url)
    """

    def __init__(self, headful: bool = False, timings: Timings = DEFAULT_TIMINGS,
                 auto_accept_dialogs: bool = True):
        self.headful = headful
        self.timings = timings
        self.auto_accept_dialogs = auto_accept_dialogs
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    async def start(self) -> Page:
        """Launch Chromium and open the page every step runs on"""
        self.playwright = await async_playwright().start()
        log(logger, 'debug', f"Launching Chromium (headless={not self.headful})", 'BROWSER', 'SESSION')
        self.browser = await self.playwright.chromium.launch(
            headless=not self.headful,
            args=['--no-sandbox'],
        )
        self.context = await self.browser.new_context(ignore_https_errors=True)
        self.context.set_default_timeout(self.timings.default_timeout * 1000)

        if self.auto_accept_dialogs:
            await self.enable_dialog_auto_accept()

        self.page = await self.context.new_page()
        if self.auto_accept_dialogs:
            self.page.on('dialog', accept_dialog)
        return self.page

    async def enable_dialog_auto_accept(self) -> None:
        """
        Make every alert/confirm/prompt auto-accept, in all frames, before any
        page script runs.
        """
        await self.context.add_init_script(AUTO_ACCEPT_DIALOGS_SCRIPT)
        log(logger, 'debug', "Native dialogs will auto-accept", 'BROWSER', 'DIALOG')

    async def screenshot(self, directory: Optional[Path] = None) -> Optional[Path]:
        """Full-page capture named debug-<ms timestamp>.png; None if it fails"""
        if not self.page or self.page.is_closed():
            return None
        path = Path(directory or Path.cwd()) / f"debug-{int(time.time() * 1000)}.png"
        try:
            await self.page.screenshot(path=str(path), full_page=True)
        except PlaywrightError as e:
            log(logger, 'warning', f"Screenshot failed: {e}", 'BROWSER', 'SESSION')
            return None
        return path.resolve()

    async def close(self) -> None:
        try:
            if self.browser:
                await self.browser.close()
        except PlaywrightError as e:
            log(logger, 'warning', f"Error while closing browser: {e}", 'BROWSER', 'SESSION')
        finally:
            self.browser = None
            self.context = None
            self.page = None
            if self.playwright:
                await self.playwright.stop()
                self.playwright = None

    async def __aenter__(self) -> Page:
        try:
            return await self.start()
        except BaseException:
            await self.close()
            raise

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
