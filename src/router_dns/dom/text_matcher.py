#!/usr/bin/env python3
"""
Text/DOM Matcher
Finds an element by case-insensitive visible text (or value) and clicks it.
Finding and clicking happen in the same evaluation since every caller clicks
whatever it finds.
"""

import asyncio
import logging
from typing import Sequence

from playwright.async_api import Error as PlaywrightError

from router_dns.dom.cascade import DomContext

logger = logging.getLogger(__name__)

# Interactive elements are searched before anything else
INTERACTIVE_ELEMENTS = 'button, input[type="submit"], a, [role="button"]'
VISIBLE_ELEMENTS = 'button, input[type="submit"], a, [role="button"], li, span, div'

_CLICK_BY_TEXT_JS = """
    ({ needle, visibleOnly, interactive, visible }) => {
        const matches = (el) => {
            // Script and template text is never rendered
            if (el.closest('script, style, noscript, template')) return false;
            const inner = (el.innerText || el.textContent || '').trim().toLowerCase();
            const val = (typeof el.value === 'string' ? el.value : '').trim().toLowerCase();
            return inner.includes(needle) || val.includes(needle);
        };

        const isVisible = (el) => {
            if (el.offsetParent) return true;
            const style = getComputedStyle(el);
            return style.position === 'fixed' && style.visibility !== 'hidden';
        };

        // Prefer the innermost match so a container is never clicked instead of its item
        const innermost = (els) => els.find(
            (el) => !els.some((other) => other !== el && el.contains(other))
        );

        const pick = (selector) => {
            let found = Array.from(document.querySelectorAll(selector)).filter(matches);
            if (visibleOnly) found = found.filter(isVisible);
            return innermost(found) || null;
        };

        let el = pick(visibleOnly ? visible : interactive);
        // Last resort: any element at all
        if (!el && !visibleOnly) el = pick('body *');

        if (el) {
            el.click();
            return true;
        }
        return false;
    }
"""


async def click_by_text(ctx: DomContext, text: str, visible_only: bool = False, settle: float = 0.4) -> bool:
    """
    Click the first element whose text or value contains `text` (case-insensitive).

    Args:
        ctx: Page or Frame to search
        text: Fragment to look for
        visible_only: Restrict to rendered elements (non-zero box or fixed and visible)
        settle: Delay after a successful click for the UI to re-render

    Returns:
        True if something was clicked
    """
    try:
        clicked = await ctx.evaluate(_CLICK_BY_TEXT_JS, {
            'needle': text.lower(),
            'visibleOnly': visible_only,
            'interactive': INTERACTIVE_ELEMENTS,
            'visible': VISIBLE_ELEMENTS,
        })
    except PlaywrightError as e:
        logger.debug(f"Text match for '{text}' failed: {e}")
        return False

    if clicked:
        logger.debug(f"Clicked element matching text '{text}'")
        if settle:
            await asyncio.sleep(settle)
        return True
    return False


async def click_by_any_text(ctx: DomContext, texts: Sequence[str], visible_only: bool = False, settle: float = 0.4) -> str:
    """Try each text in order; return the one that was clicked, or '' if none"""
    for text in texts:
        if await click_by_text(ctx, text, visible_only=visible_only, settle=settle):
            return text
    return ''
