"""
Field Writer
Sets a form control's value the way typing would: clear, notify, set, notify.
"""

import logging

from playwright.async_api import ElementHandle, Error as PlaywrightError

logger = logging.getLogger(__name__)

_WRITE_VALUE_JS = """
    (el, value) => {
        if (typeof el.focus === 'function') el.focus();
        el.value = '';
        el.dispatchEvent(new Event('input', { bubbles: true }));
        el.value = value;
        el.dispatchEvent(new Event('input', { bubbles: true }));
        el.dispatchEvent(new Event('change', { bubbles: true }));
        return el.value;
    }
"""


async def write_field_value(element: ElementHandle, value: str) -> bool:
    """
    Clear the element, emit "input", set the value, then emit "input" and "change".
    Works for text inputs and <select> controls alike.

    Returns:
        True if the element reports the new value afterwards
    """
    if element is None:
        return False
    try:
        written = await element.evaluate(_WRITE_VALUE_JS, value)
    except PlaywrightError as e:
        logger.debug(f"Writing field value failed: {e}")
        return False
    if written != value:
        logger.debug(f"Field kept value {written!r} after writing {value!r}")
    return written == value


async def read_field_value(element: ElementHandle) -> str:
    """Current value of an input/select, or '' if it cannot be read"""
    if element is None:
        return ''
    try:
        return await element.evaluate("(el) => el.value || ''")
    except PlaywrightError:
        return ''
