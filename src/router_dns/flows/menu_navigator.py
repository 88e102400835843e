#!/usr/bin/env python3
"""
Menu Navigator - click through the router's three-level menu to the DHCP page
Path: Advanced Configuration → LAN → DHCP Server (page loads in the content iframe)
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Optional

from playwright.async_api import Error as PlaywrightError, Frame, Page, TimeoutError as PlaywrightTimeoutError

from router_dns.core.config import DEFAULT_TIMINGS, Timings
from router_dns.dom.cascade import FallbackChain
from router_dns.dom.frames import get_content_frame
from router_dns.dom.text_matcher import click_by_text
from router_dns.utils.router_keywords import DEFAULT_SELECTORS, MenuState, MenuStep, SelectorTables

logger = logging.getLogger(__name__)


@dataclass
class NavigationResult:
    reached: bool
    state: MenuState
    frame: Optional[Frame] = None
    title_confirmed: bool = False
    failed_step: Optional[str] = None

    @property
    def path(self) -> Optional[str]:
        """Short label for logs: which way the page was reached"""
        if not self.reached:
            return None
        return 'iframe-dhcp' if self.title_confirmed else 'iframe-dhcp-no-title'


class MenuNavigator:
    """
    TOP_MENU → SUB_MENU → LEAF_PAGE state machine.

    Each transition tries the step's fixed element id first, then its label
    text in every known language. A failed transition ends navigation; there is
    no retry at this layer.
    """

    def __init__(self, page: Page, selectors: SelectorTables = DEFAULT_SELECTORS,
                 timings: Timings = DEFAULT_TIMINGS):
        self.page = page
        self.selectors = selectors
        self.timings = timings
        self.state = MenuState.START

    async def navigate(self) -> NavigationResult:
        logger.info("NAVIGATION: Advanced Configuration → LAN → DHCP Server (iframe-aware)")
        self.state = MenuState.START

        for step in self.selectors.menu_path:
            if not await self._transition(step):
                logger.error(f"NAVIGATION: ❌ Could not click {step.name}")
                return NavigationResult(False, self.state, failed_step=step.name)
            self.state = step.state

        frame = await get_content_frame(self.page, self.selectors.content_frames)
        if not frame:
            logger.error("NAVIGATION: ❌ Content frame not found after menu clicks")
            return NavigationResult(False, self.state, failed_step='CONTENT_FRAME')

        title_confirmed = await self._confirm_title(frame)
        logger.info(f"NAVIGATION: DHCP Server title detected: {title_confirmed}")
        if not title_confirmed:
            logger.warning("NAVIGATION: Leaf page title not confirmed, continuing with content frame")
        return NavigationResult(True, self.state, frame=frame, title_confirmed=title_confirmed)

    async def _transition(self, step: MenuStep) -> bool:
        chain = FallbackChain(f"NAVIGATION {step.name}")
        chain.add(f"id {step.selector}", lambda: self._click_fixed(step.selector))
        for label in step.labels.all_keywords():
            chain.add(f"text '{label}'", lambda label=label: click_by_text(self.page, label, settle=0))

        result = await chain.run()
        if not result.success:
            return False
        logger.debug(f"NAVIGATION: {step.name} via {result.strategy}")

        if step.wait_for:
            try:
                await self.page.wait_for_selector(step.wait_for, timeout=self.timings.submenu_wait * 1000)
            except PlaywrightTimeoutError:
                logger.debug(f"NAVIGATION: '{step.wait_for}' did not appear, continuing")
        await asyncio.sleep(self.timings.settle_delay)
        return True

    async def _click_fixed(self, selector: str) -> bool:
        element = await self.page.query_selector(selector)
        if not element:
            return False
        try:
            await element.click()
        except PlaywrightError as e:
            logger.debug(f"NAVIGATION: click on {selector} failed: {e}")
        return True

    async def _confirm_title(self, frame: Frame) -> bool:
        title_selector = self.selectors.leaf_title_selector
        try:
            await frame.wait_for_selector(title_selector, timeout=self.timings.title_wait * 1000)
        except PlaywrightError:
            # Includes timeouts and a frame detached mid-wait
            return False
        try:
            text = await frame.eval_on_selector(
                title_selector, "(el) => el.innerText || el.textContent || ''"
            )
        except PlaywrightError:
            return False
        return bool(re.search(self.selectors.leaf_title_pattern, text or '', re.IGNORECASE))
