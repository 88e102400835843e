"""
Frame Locator
Finds the iframe that hosts the dynamically loaded configuration page.
"""

import logging
from typing import Optional, Sequence

from playwright.async_api import Error as PlaywrightError, Frame, Page

from router_dns.utils.router_keywords import CONTENT_FRAME_SELECTORS

logger = logging.getLogger(__name__)


async def get_content_frame(page: Page, selectors: Sequence[str] = CONTENT_FRAME_SELECTORS) -> Optional[Frame]:
    """
    Return the first iframe (by id, by src fragment, then any iframe) whose
    embedded document is accessible, or None.
    """
    for selector in selectors:
        try:
            handle = await page.query_selector(selector)
        except PlaywrightError:
            continue
        if not handle:
            continue
        try:
            frame = await handle.content_frame()
        except PlaywrightError:
            frame = None
        if frame and not frame.is_detached():
            logger.debug(f"Content frame resolved via '{selector}': {frame.url}")
            return frame
    return None
