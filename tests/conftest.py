"""Pytest configuration for Router DNS."""
import html

import pytest
import pytest_asyncio
from playwright.async_api import Error as PlaywrightError, async_playwright

from router_dns.core.config import Timings

# Near-zero delays so browser tests stay fast
FAST_TIMINGS = Timings(
    settle_delay=0,
    submenu_wait=0.2,
    title_wait=3.0,
    post_login_settle=0,
    navigation_timeout=0.5,
    manual_mode_settle=0,
    post_apply_settle=0,
    verify_retries=4,
    verify_delay=0,
    final_settle=0,
    default_timeout=5.0,
    type_delay_ms=0,
)


def frame_page(inner_html: str, frame_id: str = 'menuIframe') -> str:
    """Top-level document hosting `inner_html` in a same-origin srcdoc iframe"""
    return f'<iframe id="{frame_id}" srcdoc="{html.escape(inner_html, quote=True)}"></iframe>'


@pytest.fixture
def fast_timings():
    return FAST_TIMINGS


@pytest_asyncio.fixture
async def page():
    """Fresh headless Chromium page; tests are skipped when no browser is installed"""
    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=True, args=['--no-sandbox'])
        except PlaywrightError as e:
            pytest.skip(f"Chromium not available: {e}")
        context = await browser.new_context()
        context.set_default_timeout(FAST_TIMINGS.default_timeout * 1000)
        page = await context.new_page()
        try:
            yield page
        finally:
            await browser.close()
