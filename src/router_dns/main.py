#!/usr/bin/env python3
"""
Router DNS - full run
Login → Menu Navigator → DNS Field Resolver → Apply/Verify, on one browser session.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from playwright.async_api import Page

from router_dns.browser.session import BrowserSession
from router_dns.core.config import DEFAULT_TIMINGS, RunParameters, Timings
from router_dns.core.errors import NavigationError
from router_dns.dom.frames import get_content_frame
from router_dns.flows.apply_verify import ApplyVerifyController, VerifyResult
from router_dns.flows.dns_fields import DnsFieldResolver, DnsWriteResult
from router_dns.flows.login import login
from router_dns.flows.menu_navigator import MenuNavigator
from router_dns.utils.router_keywords import DEFAULT_SELECTORS, SelectorTables

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    dns1: str
    dns2: str
    navigation_path: Optional[str] = None
    write: Optional[DnsWriteResult] = None
    apply_strategy: Optional[str] = None
    verification: Optional[VerifyResult] = None

    @property
    def verified(self) -> bool:
        return bool(self.verification and self.verification.verified)


class DnsConfigurator:
    """
    Main entry point for the Router DNS package.
    Owns the browser session and runs every step against it.
    """

    def __init__(self, params: RunParameters, selectors: SelectorTables = DEFAULT_SELECTORS,
                 timings: Timings = DEFAULT_TIMINGS):
        self.params = params
        self.selectors = selectors
        self.timings = timings
        self.screenshot_path = None

    async def run(self) -> RunResult:
        """
        Launch the browser, configure the router and always close the browser.
        In debug mode a full-page screenshot is saved when a step fails.
        """
        session = BrowserSession(headful=self.params.headful, timings=self.timings)
        async with session as page:
            try:
                return await self.configure(page)
            except Exception:
                if self.params.debug:
                    self.screenshot_path = await session.screenshot()
                raise

    async def configure(self, page: Page) -> RunResult:
        """Run every step on an already open page"""
        params = self.params

        logger.debug(f"Opening {params.url}")
        await page.goto(params.url, wait_until='domcontentloaded')

        await login(page, params.user, params.password, self.selectors, self.timings)

        navigator = MenuNavigator(page, self.selectors, self.timings)
        navigation = await navigator.navigate()
        if not navigation.reached:
            raise NavigationError(
                "Could not reach DNS page automatically. Run with --headful and adjust the selector tables."
            )
        logger.debug(f"Reached DNS page via path: {navigation.path}")

        frame = await get_content_frame(page, self.selectors.content_frames)
        if not frame:
            raise NavigationError("Content frame not found (menuIframe).")
        logger.debug(f"Content frame URL: {frame.url}")

        write = await DnsFieldResolver(frame, self.selectors, self.timings).write(params.dns1, params.dns2)

        controller = ApplyVerifyController(page, navigator, self.selectors, self.timings)
        content_frame = await get_content_frame(page, self.selectors.content_frames)
        apply_strategy = await controller.apply(content_frame or page)

        # Give the router a moment to apply settings and re-render the form
        await asyncio.sleep(self.timings.post_apply_settle)
        verification = await controller.verify(params.dns1, params.dns2)
        logger.debug(f"Post-apply DNS verification: {'matched' if verification.verified else 'not matched yet'}")

        if logger.isEnabledFor(logging.DEBUG):
            current = await get_content_frame(page, self.selectors.content_frames)
            if current:
                presence = await DnsFieldResolver(current, self.selectors, self.timings).label_presence()
                logger.debug(f"Field presence (labels): {presence}")

        await asyncio.sleep(self.timings.final_settle)
        return RunResult(
            dns1=params.dns1,
            dns2=params.dns2,
            navigation_path=navigation.path,
            write=write,
            apply_strategy=apply_strategy,
            verification=verification,
        )


async def configure_router_dns(params: RunParameters, **kwargs) -> RunResult:
    """Convenience wrapper: DnsConfigurator(params, **kwargs).run()"""
    return await DnsConfigurator(params, **kwargs).run()
