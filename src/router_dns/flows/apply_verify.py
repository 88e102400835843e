#!/usr/bin/env python3
"""
Apply/Verify Controller
Click the Save/Apply control, then read the DNS inputs back until they show
the written values. Verification is advisory: a mismatch never fails the run.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from playwright.async_api import Error as PlaywrightError, Page

from router_dns.browser.dialogs import install_dialog_overrides
from router_dns.core.config import DEFAULT_TIMINGS, Timings
from router_dns.core.errors import ApplyControlNotFoundError
from router_dns.dom.cascade import DomContext, FallbackChain, click_first
from router_dns.dom.frames import get_content_frame
from router_dns.dom.text_matcher import click_by_text
from router_dns.flows.dns_fields import DnsFieldResolver
from router_dns.utils.router_keywords import DEFAULT_SELECTORS, SelectorTables

logger = logging.getLogger(__name__)

_INVOKE_GLOBAL_JS = """
    (name) => {
        try {
            const fn = window[name];
            if (typeof fn === 'function') {
                fn();
                return true;
            }
        } catch (e) {}
        return false;
    }
"""


@dataclass
class VerifyResult:
    verified: bool
    attempts: int
    renavigated: bool = False
    primary: str = ''
    secondary: str = ''


class ApplyVerifyController:
    """
    Apply order: fixed id → generic save selectors → button text in several
    languages → the page's own global apply function.
    """

    def __init__(self, page: Page, navigator=None, selectors: SelectorTables = DEFAULT_SELECTORS,
                 timings: Timings = DEFAULT_TIMINGS):
        self.page = page
        self.navigator = navigator
        self.selectors = selectors
        self.timings = timings

    async def apply(self, ctx: Optional[DomContext] = None) -> str:
        """
        Click Save/Apply in `ctx` (content frame by default, else the page).

        Returns:
            Name of the strategy that worked

        Raises:
            ApplyControlNotFoundError: every strategy came up empty
        """
        if ctx is None:
            ctx = await get_content_frame(self.page, self.selectors.content_frames) or self.page

        # Force-confirm within this context before clicking anything
        await install_dialog_overrides(ctx)

        settle = self.timings.settle_delay
        chain = FallbackChain("APPLY")
        chain.add(f"id {self.selectors.apply_button}",
                  lambda: click_first(ctx, (self.selectors.apply_button,), settle=settle))
        chain.add("save selectors", lambda: click_first(ctx, self.selectors.save_buttons, settle=settle))
        for word in self.selectors.apply_keywords.all_keywords():
            chain.add(f"text '{word}'",
                      lambda word=word: click_by_text(ctx, word, visible_only=True, settle=settle))
        chain.add(f"{self.selectors.apply_function}()", lambda: self._invoke_apply_function(ctx))

        result = await chain.run()
        if not result.success:
            logger.error(f"APPLY: ❌ No save control found (tried: {', '.join(result.attempted)})")
            raise ApplyControlNotFoundError("Could not find a Save/Apply button.")

        logger.info(f"APPLY: ✅ Settings submitted via {result.strategy}")
        await asyncio.sleep(settle)
        return result.strategy

    async def _invoke_apply_function(self, ctx: DomContext) -> bool:
        try:
            return await ctx.evaluate(_INVOKE_GLOBAL_JS, self.selectors.apply_function)
        except PlaywrightError:
            return False

    async def verify(self, expected1: str, expected2: str = '',
                     retries: Optional[int] = None, delay: Optional[float] = None) -> VerifyResult:
        """
        Poll the DNS inputs in the (possibly re-rendered) content frame.
        When one attempt is left and values still differ, navigate to the page
        again once, since some firmwares only show applied values after a reload.
        """
        retries = self.timings.verify_retries if retries is None else retries
        delay = self.timings.verify_delay if delay is None else delay
        renavigated = False
        primary = secondary = ''
        attempts = 0

        for attempt in range(retries):
            frame = await get_content_frame(self.page, self.selectors.content_frames)
            if not frame:
                logger.warning("VERIFY: Content frame gone, cannot read values back")
                break

            attempts += 1
            resolver = DnsFieldResolver(frame, self.selectors, self.timings)
            primary, secondary = await resolver.read_values(want_secondary=bool(expected2))
            ok1 = primary == expected1
            ok2 = not expected2 or secondary == expected2
            logger.debug(f"VERIFY: attempt {attempt + 1}/{retries}: primary={primary!r} secondary={secondary!r}")
            if ok1 and ok2:
                logger.info(f"VERIFY: ✅ DNS values matched on attempt {attempt + 1}")
                return VerifyResult(True, attempt + 1, renavigated, primary, secondary)

            await asyncio.sleep(delay)

            if attempt == retries - 2 and self.navigator is not None and not renavigated:
                renavigated = True
                logger.info("VERIFY: Values not matched yet, navigating to the DNS page again")
                try:
                    await self.navigator.navigate()
                except PlaywrightError as e:
                    logger.debug(f"VERIFY: re-navigation failed: {e}")

        logger.warning("VERIFY: DNS values not matched yet (not fatal)")
        return VerifyResult(False, attempts, renavigated, primary, secondary)
