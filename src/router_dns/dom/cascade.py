#!/usr/bin/env python3
"""
Selector Cascade - ordered fallback primitives
Every heuristic in the flows is an ordered list of strategies where the first
success wins and individual failures are never fatal.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, List, Optional, Sequence, Tuple, Union

from playwright.async_api import ElementHandle, Error as PlaywrightError, Frame, Page

logger = logging.getLogger(__name__)

# Anything that can run querySelector/evaluate: the top-level page or an iframe
DomContext = Union[Page, Frame]

Strategy = Callable[[], Awaitable[Any]]


@dataclass
class StrategyResult:
    """Outcome of a fallback chain"""
    success: bool
    strategy: Optional[str] = None
    value: Any = None
    attempted: Tuple[str, ...] = ()


class FallbackChain:
    """
    Ordered list of named strategies: try in order, first success wins.

    A strategy succeeds when it returns a truthy value. Playwright errors
    raised by a strategy count as "not found" and the chain moves on.
    """

    def __init__(self, name: str, strategies: Iterable[Tuple[str, Strategy]] = ()):
        self.name = name
        self.strategies: List[Tuple[str, Strategy]] = list(strategies)

    def add(self, name: str, strategy: Strategy) -> 'FallbackChain':
        self.strategies.append((name, strategy))
        return self

    async def run(self) -> StrategyResult:
        attempted = []
        for name, strategy in self.strategies:
            attempted.append(name)
            try:
                value = await strategy()
            except PlaywrightError as e:
                logger.debug(f"{self.name}: strategy '{name}' errored: {e}")
                continue
            if value:
                logger.debug(f"{self.name}: strategy '{name}' succeeded")
                return StrategyResult(True, name, value, tuple(attempted))
            logger.debug(f"{self.name}: strategy '{name}' found nothing")
        return StrategyResult(False, None, None, tuple(attempted))


async def resolve_first(ctx: DomContext, selectors: Sequence[str]) -> Optional[ElementHandle]:
    """
    Return the first element matched by the selector list, in priority order.
    Malformed or unsupported selectors are treated as "not found". No waiting.
    """
    for selector in selectors:
        try:
            element = await ctx.query_selector(selector)
        except PlaywrightError:
            # Skip invalid selector strings
            continue
        if element:
            return element
    return None


async def resolve_first_with_selector(ctx: DomContext, selectors: Sequence[str]) -> Tuple[Optional[ElementHandle], Optional[str]]:
    """Same as resolve_first, also returning the selector that matched"""
    for selector in selectors:
        try:
            element = await ctx.query_selector(selector)
        except PlaywrightError:
            continue
        if element:
            return element, selector
    return None, None


async def click_first(ctx: DomContext, selectors: Sequence[str], settle: float = 0.4) -> bool:
    """Click the first element the cascade resolves. Click errors are ignored."""
    element, selector = await resolve_first_with_selector(ctx, selectors)
    if not element:
        return False
    try:
        await element.click()
    except PlaywrightError as e:
        logger.debug(f"Click on '{selector}' failed: {e}")
    if settle:
        await asyncio.sleep(settle)
    return True


async def type_into_first(ctx: DomContext, selectors: Sequence[str], value: str, delay_ms: int = 20) -> bool:
    """Select any existing text in the first resolved input and type the value"""
    element = await resolve_first(ctx, selectors)
    if not element:
        return False
    try:
        await element.click(click_count=3)
    except PlaywrightError:
        pass
    await element.type(value, delay=delay_ms)
    return True
