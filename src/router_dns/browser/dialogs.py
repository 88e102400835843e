"""
Native dialog auto-accept
The firmware pops confirm() boxes (e.g. the triple-play warning) when settings
are applied; every alert/confirm/prompt must resolve as accepted.
"""

import logging

from playwright.async_api import Dialog, Error as PlaywrightError

from router_dns.dom.cascade import DomContext

logger = logging.getLogger(__name__)

# Injected before any page script runs, in every document and iframe
AUTO_ACCEPT_DIALOGS_SCRIPT = """
    (() => {
        try {
            window.__AUTO_CONFIRM__ = true;
            window.alert = function () { return; };
            window.confirm = function () { return true; };
            window.prompt = function (_message, defaultValue) { return defaultValue || ''; };
        } catch (e) {}
    })();
"""


async def install_dialog_overrides(ctx: DomContext) -> bool:
    """Apply the overrides to a document that has already loaded"""
    try:
        await ctx.evaluate(f"() => {{ {AUTO_ACCEPT_DIALOGS_SCRIPT} }}")
        return True
    except PlaywrightError as e:
        logger.debug(f"Dialog override not installed: {e}")
        return False


async def accept_dialog(dialog: Dialog) -> None:
    """Page 'dialog' handler for dialogs raised before the overrides exist"""
    logger.debug(f"Dialog: {dialog.type} {dialog.message}")
    try:
        await dialog.accept()
    except PlaywrightError as e:
        logger.debug(f"Dialog already handled: {e}")
