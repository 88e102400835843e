#!/usr/bin/env python3
"""
Login - fill the router's login form and submit it
Username is optional (some firmwares use password-only login); password is not.
"""

import asyncio
import logging

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from router_dns.core.config import DEFAULT_TIMINGS, Timings
from router_dns.core.errors import LoginError
from router_dns.dom.cascade import click_first, type_into_first
from router_dns.dom.text_matcher import click_by_any_text
from router_dns.utils.router_keywords import DEFAULT_SELECTORS, SelectorTables

logger = logging.getLogger(__name__)


async def login(page: Page, user: str, password: str,
                selectors: SelectorTables = DEFAULT_SELECTORS,
                timings: Timings = DEFAULT_TIMINGS) -> bool:
    """
    Type credentials and click the login control.

    Returns:
        True if a login control was clicked, False if the page had to be left
        to auto-submit.

    Raises:
        LoginError: no password field on the page
    """
    logger.info("LOGIN: Filling credentials")

    username_typed = False
    if user:
        username_typed = await type_into_first(page, selectors.username, user, timings.type_delay_ms)
    if not username_typed:
        logger.debug("LOGIN: Username field not found; continuing (some firmwares use password-only login)")

    password_typed = await type_into_first(page, selectors.password, password, timings.type_delay_ms)
    if not password_typed:
        raise LoginError("Password field not found on login page.")

    clicked = False
    try:
        async with page.expect_navigation(wait_until='domcontentloaded',
                                          timeout=timings.navigation_timeout * 1000):
            clicked = await _click_login(page, selectors, timings)
    except PlaywrightTimeoutError:
        logger.debug("LOGIN: No navigation after submitting credentials")

    if not clicked:
        logger.debug("LOGIN: No explicit login button clicked (page may auto-submit)")

    await asyncio.sleep(timings.post_login_settle)
    logger.info(f"LOGIN: Done, now at {page.url}")
    return clicked


async def _click_login(page: Page, selectors: SelectorTables, timings: Timings) -> bool:
    if await click_first(page, selectors.login_buttons, settle=timings.settle_delay):
        return True
    matched = await click_by_any_text(page, selectors.login_keywords.all_keywords(), settle=timings.settle_delay)
    return bool(matched)
