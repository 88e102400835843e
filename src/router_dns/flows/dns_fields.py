#!/usr/bin/env python3
"""
DNS Field Resolver - locate and fill the Primary/Secondary DNS inputs
Works inside the content frame of the DHCP Server page.

Resolution order per field (each tier only if the previous found nothing):
    1. Selector cascade (explicit ids/names, then attribute patterns)
    2. Label text association (for=, nested input, sibling input)
    3. Heuristic attribute scan (id/name/class containing "dns")
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from playwright.async_api import ElementHandle, Error as PlaywrightError

from router_dns.core.config import DEFAULT_TIMINGS, Timings
from router_dns.core.errors import DnsFieldNotFoundError
from router_dns.dom.cascade import DomContext, FallbackChain, click_first, resolve_first_with_selector
from router_dns.dom.field_writer import read_field_value, write_field_value
from router_dns.dom.text_matcher import click_by_text
from router_dns.utils.router_keywords import DEFAULT_SELECTORS, KeywordSet, SelectorTables

logger = logging.getLogger(__name__)

TIER_SELECTOR = 'selector'
TIER_LABEL = 'label'
TIER_HEURISTIC = 'heuristic'

_MANUAL_MODE_SELECT_JS = """
    () => {
        const selects = Array.from(document.querySelectorAll('select'));
        const candidate = selects.find((s) =>
            /dns/i.test((s.name || '') + (s.id || '')) ||
            /Automatic|Manual/i.test(s.innerText || s.textContent || '')
        );
        if (!candidate) return null;
        const manual = Array.from(candidate.options).find((o) =>
            /manual|static|est[aá]tico/i.test(o.textContent || '') || /manual/i.test(o.value || '')
        );
        return manual ? candidate : null;
    }
"""

_MANUAL_OPTION_VALUE_JS = """
    (select) => {
        const manual = Array.from(select.options).find((o) =>
            /manual|static|est[aá]tico/i.test(o.textContent || '') || /manual/i.test(o.value || '')
        );
        return manual.value;
    }
"""

_INPUT_BY_LABEL_JS = """
    ({ phrase, taken }) => {
        const needle = phrase.toLowerCase();
        const free = (el) => el && !taken.includes(el);
        const label = Array.from(document.querySelectorAll('label')).find((l) =>
            (l.textContent || '').trim().toLowerCase().includes(needle)
        );
        if (!label) return null;

        const forId = label.getAttribute('for');
        if (forId) {
            const target = document.getElementById(forId);
            if (free(target)) return target;
        }

        const nested = label.querySelector('input');
        if (free(nested)) return nested;

        // Following siblings first, so two label/input pairs sharing a parent stay paired
        for (let sib = label.nextElementSibling; sib; sib = sib.nextElementSibling) {
            if (sib.tagName === 'LABEL') break;
            const input = sib.tagName === 'INPUT' ? sib : sib.querySelector('input');
            if (free(input)) return input;
        }

        if (label.parentElement) {
            const sibling = Array.from(label.parentElement.querySelectorAll('input')).find(free);
            if (sibling) return sibling;
        }
        return null;
    }
"""

_HEURISTIC_SCAN_JS = """
    ({ priPattern, secPattern, wantPrimary, wantSecondary, taken }) => {
        const attrs = (el) =>
            (el.id || '') + ' ' + (el.name || '') + ' ' +
            (typeof el.className === 'string' ? el.className : '');
        const inputs = Array.from(document.querySelectorAll(
            'input[type="text"], input[type="tel"], input:not([type])'
        ))
            .filter((el) => attrs(el).toLowerCase().includes('dns'))
            .filter((el) => !taken.includes(el));

        if (!inputs.length) return { primary: null, secondary: null };

        const pick = (pattern, pool) => {
            const rx = new RegExp(pattern, 'i');
            return pool.find((el) => rx.test(attrs(el)));
        };

        // Positional fallback: first remaining input
        const primary = wantPrimary ? (pick(priPattern, inputs) || inputs[0]) : null;
        let secondary = null;
        if (wantSecondary) {
            const rest = inputs.filter((el) => el !== primary);
            secondary = pick(secPattern, rest) || rest[0] || null;
        }
        return { primary, secondary };
    }
"""

_DUMP_INPUTS_JS = """
    () => Array.from(document.querySelectorAll('input')).map((i) => ({
        id: i.id,
        name: i.name,
        class: typeof i.className === 'string' ? i.className : '',
        type: i.type,
        value: i.value,
    }))
"""

_LABEL_PRESENCE_JS = """
    () => {
        const labels = Array.from(document.querySelectorAll('label'))
            .map((l) => (l.innerText || l.textContent || '').trim().toLowerCase());
        return {
            primary: labels.some((t) => t.includes('primary dns')),
            secondary: labels.some((t) => t.includes('secondary dns')),
        };
    }
"""


@dataclass
class FieldResolution:
    """Where a DNS input was found"""
    element: Optional[ElementHandle] = None
    tier: Optional[str] = None
    detail: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.element is not None


@dataclass
class DnsWriteResult:
    primary: FieldResolution
    secondary: Optional[FieldResolution]
    ok1: bool
    ok2: bool
    manual_mode: Optional[str] = None
    tiers_attempted: Dict[str, Tuple[str, ...]] = field(default_factory=dict)


class DnsFieldResolver:
    """Resolves and writes the DNS inputs in one browsing context (page or frame)"""

    def __init__(self, ctx: DomContext, selectors: SelectorTables = DEFAULT_SELECTORS,
                 timings: Timings = DEFAULT_TIMINGS):
        self.ctx = ctx
        self.selectors = selectors
        self.timings = timings
        self._attempts: Dict[str, Tuple[str, ...]] = {}

    # ------------------------------------------------------------------
    # Manual mode
    # ------------------------------------------------------------------

    async def ensure_manual_mode(self) -> Optional[str]:
        """
        Switch a DNS mode selector/toggle from automatic to manual.
        Not every firmware has one, so a miss is only logged.

        Returns:
            Name of the strategy that worked, or None
        """
        chain = FallbackChain("DNS FIELDS manual mode", [
            ('mode select', self._select_manual_option),
            ('toggle cascade', lambda: click_first(self.ctx, self.selectors.manual_toggles,
                                                   settle=self.timings.settle_delay)),
        ])
        for keyword in self.selectors.manual_keywords.all_keywords():
            chain.add(f"text '{keyword}'",
                      lambda keyword=keyword: click_by_text(self.ctx, keyword, settle=self.timings.settle_delay))

        result = await chain.run()
        if result.success:
            logger.info(f"DNS FIELDS: Manual DNS mode selected via {result.strategy}")
        else:
            logger.debug("DNS FIELDS: No DNS mode control found (firmware may not have one)")
        await asyncio.sleep(self.timings.manual_mode_settle)
        return result.strategy

    async def _select_manual_option(self) -> bool:
        select = (await self.ctx.evaluate_handle(_MANUAL_MODE_SELECT_JS)).as_element()
        if select is None:
            return False
        value = await select.evaluate(_MANUAL_OPTION_VALUE_JS)
        return await write_field_value(select, value)

    # ------------------------------------------------------------------
    # Resolution tiers
    # ------------------------------------------------------------------

    async def resolve(self, want_secondary: bool) -> Tuple[FieldResolution, Optional[FieldResolution]]:
        """Locate the primary input and, when requested, the secondary one"""
        self._attempts = {}
        primary = await self._resolve_field(
            'primary', self.selectors.primary_dns, self.selectors.primary_labels, taken=[]
        )
        secondary = None
        if want_secondary:
            taken = [primary.element] if primary.found else []
            secondary = await self._resolve_field(
                'secondary', self.selectors.secondary_dns, self.selectors.secondary_labels, taken=taken
            )
        return primary, secondary

    async def _resolve_field(self, which: str, cascade: Sequence[str], labels: KeywordSet,
                             taken: List[ElementHandle]) -> FieldResolution:
        chain = FallbackChain(f"DNS FIELDS {which}", [
            (TIER_SELECTOR, lambda: self._by_selector(cascade, taken)),
            (TIER_LABEL, lambda: self._by_label(labels, taken)),
            (TIER_HEURISTIC, lambda: self._by_heuristic(which, taken)),
        ])
        result = await chain.run()
        self._attempts[which] = result.attempted
        if not result.success:
            return FieldResolution()
        element, detail = result.value
        logger.debug(f"DNS FIELDS: {which} field resolved by {result.strategy} ({detail})")
        return FieldResolution(element, result.strategy, detail)

    async def _by_selector(self, cascade: Sequence[str], taken: List[ElementHandle]):
        remaining = list(cascade)
        while remaining:
            element, selector = await resolve_first_with_selector(self.ctx, remaining)
            if not element:
                return None
            if not await self._is_taken(element, taken):
                return element, selector
            # Already assigned to the other field, keep going down the cascade
            remaining = remaining[remaining.index(selector) + 1:]
        return None

    async def _by_label(self, labels: KeywordSet, taken: List[ElementHandle]):
        for phrase in labels.all_keywords():
            handle = await self.ctx.evaluate_handle(_INPUT_BY_LABEL_JS, {'phrase': phrase, 'taken': taken})
            element = handle.as_element()
            if element:
                return element, phrase
        return None

    async def _by_heuristic(self, which: str, taken: List[ElementHandle]):
        handle = await self.ctx.evaluate_handle(_HEURISTIC_SCAN_JS, {
            'priPattern': self.selectors.primary_name_pattern,
            'secPattern': self.selectors.secondary_name_pattern,
            'wantPrimary': which == 'primary',
            'wantSecondary': which == 'secondary',
            'taken': taken,
        })
        element = (await handle.get_property(which)).as_element()
        if not element:
            return None
        element_id = await element.evaluate("(el) => el.id || el.name || ''")
        return element, element_id

    async def _is_taken(self, element: ElementHandle, taken: List[ElementHandle]) -> bool:
        if not taken:
            return False
        return await element.evaluate("(el, taken) => taken.includes(el)", taken)

    # ------------------------------------------------------------------
    # Write / read
    # ------------------------------------------------------------------

    async def write(self, dns1: str, dns2: str = '') -> DnsWriteResult:
        """
        Resolve both inputs and write the values.

        Raises:
            DnsFieldNotFoundError: primary input not found by any tier
        """
        manual_mode = await self.ensure_manual_mode()
        primary, secondary = await self.resolve(want_secondary=bool(dns2))

        ok1 = await write_field_value(primary.element, dns1) if primary.found else False
        if dns2:
            ok2 = await write_field_value(secondary.element, dns2) if secondary.found else False
        else:
            ok2 = True

        if not primary.found or not ok2:
            logger.debug(f"DNS FIELDS: input candidates: {await self.dump_inputs()}")

        logger.info(f"DNS FIELDS: Primary field set: {ok1} ({primary.tier}), "
                    f"Secondary field set: {ok2} ({secondary.tier if secondary else 'not requested'})")
        if dns2 and not secondary.found:
            logger.warning("DNS FIELDS: Secondary DNS field not found, leaving it unchanged")

        if not primary.found:
            raise DnsFieldNotFoundError("Could not locate the Primary DNS field in the DHCP page.")

        return DnsWriteResult(primary, secondary, ok1, ok2, manual_mode, dict(self._attempts))

    async def read_values(self, want_secondary: bool = True) -> Tuple[str, str]:
        """Re-resolve the inputs and return (primary, secondary) values; '' when absent"""
        try:
            primary, secondary = await self.resolve(want_secondary)
        except PlaywrightError as e:
            logger.debug(f"DNS FIELDS: reading values failed: {e}")
            return '', ''
        primary_value = await read_field_value(primary.element) if primary.found else ''
        secondary_value = await read_field_value(secondary.element) if secondary and secondary.found else ''
        return primary_value, secondary_value

    async def dump_inputs(self) -> List[Dict[str, Any]]:
        """Every input in the context with id/name/class/value, for debugging"""
        try:
            return await self.ctx.evaluate(_DUMP_INPUTS_JS)
        except PlaywrightError:
            return []

    async def label_presence(self) -> Dict[str, bool]:
        """Whether Primary/Secondary DNS labels are rendered, for debugging"""
        try:
            return await self.ctx.evaluate(_LABEL_PRESENCE_JS)
        except PlaywrightError:
            return {'primary': False, 'secondary': False}
