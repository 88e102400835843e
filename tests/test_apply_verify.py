"""
Apply/Verify Controller tests
"""

import pytest

from router_dns.core.errors import ApplyControlNotFoundError
from router_dns.flows.apply_verify import ApplyVerifyController

from conftest import FAST_TIMINGS, frame_page

DNS_FORM = '<input id="dnsMainPri" value="{}"><input id="dnsMainSec" value="{}">'


class StubNavigator:
    """Stands in for MenuNavigator: re-rendering the page shows the applied values"""

    def __init__(self, page, primary, secondary):
        self.page = page
        self.primary = primary
        self.secondary = secondary
        self.calls = 0

    async def navigate(self):
        self.calls += 1
        await self.page.set_content(frame_page(DNS_FORM.format(self.primary, self.secondary)))


def _controller(page, navigator=None):
    return ApplyVerifyController(page, navigator, timings=FAST_TIMINGS)


@pytest.mark.asyncio
async def test_apply_prefers_fixed_id_and_accepts_confirm(page):
    await page.set_content("""
        <button id="btnApply_ex" onclick="if (confirm('Triple play may be interrupted')) window.applied = true;">
            Apply
        </button>
    """)

    strategy = await _controller(page).apply(page)

    assert strategy == 'id #btnApply_ex'
    assert await page.evaluate('window.applied') is True


@pytest.mark.asyncio
async def test_apply_by_visible_text(page):
    await page.set_content("""
        <span style="display:none" onclick="window.hit = 'hidden'">Guardar</span>
        <a onclick="window.hit = 'link'">Guardar</a>
    """)

    strategy = await _controller(page).apply(page)

    assert strategy == "text 'Guardar'"
    assert await page.evaluate('window.hit') == 'link'


@pytest.mark.asyncio
async def test_apply_falls_back_to_global_function(page):
    await page.set_content("""
        <p>Router</p>
        <script>window.ApplyConfig = function () { window.applied = (window.applied || 0) + 1; };</script>
    """)

    strategy = await _controller(page).apply(page)

    assert strategy == 'ApplyConfig()'
    assert await page.evaluate('window.applied') == 1


@pytest.mark.asyncio
async def test_apply_without_any_control_raises(page):
    await page.set_content('<p>Nothing here</p>')

    with pytest.raises(ApplyControlNotFoundError):
        await _controller(page).apply(page)


@pytest.mark.asyncio
async def test_apply_defaults_to_content_frame(page):
    await page.set_content(frame_page(
        '<button id="btnApply_ex" onclick="window.parent.applied = confirm(\'sure?\')">Apply</button>'
    ))

    assert await _controller(page).apply() == 'id #btnApply_ex'
    assert await page.evaluate('window.applied') is True


@pytest.mark.asyncio
async def test_verify_matches_first_attempt(page):
    await page.set_content(frame_page(DNS_FORM.format('1.1.1.1', '1.0.0.1')))

    result = await _controller(page).verify('1.1.1.1', '1.0.0.1')

    assert result.verified is True
    assert result.attempts == 1
    assert result.renavigated is False
    assert (result.primary, result.secondary) == ('1.1.1.1', '1.0.0.1')


@pytest.mark.asyncio
async def test_verify_without_secondary_ignores_second_field(page):
    await page.set_content(frame_page('<input id="dnsMainPri" value="1.1.1.1">'))

    result = await _controller(page).verify('1.1.1.1')

    assert result.verified is True


@pytest.mark.asyncio
async def test_verify_mismatch_is_not_fatal(page):
    await page.set_content(frame_page(DNS_FORM.format('8.8.8.8', '8.8.4.4')))

    result = await _controller(page).verify('1.1.1.1', '1.0.0.1', retries=3)

    assert result.verified is False
    assert result.attempts == 3
    assert result.primary == '8.8.8.8'


@pytest.mark.asyncio
async def test_verify_renavigates_once_before_last_attempt(page):
    await page.set_content(frame_page(DNS_FORM.format('8.8.8.8', '8.8.4.4')))
    navigator = StubNavigator(page, '1.1.1.1', '1.0.0.1')

    result = await _controller(page, navigator).verify('1.1.1.1', '1.0.0.1', retries=4)

    assert navigator.calls == 1
    assert result.verified is True
    assert result.renavigated is True
    assert result.attempts == 4


@pytest.mark.asyncio
async def test_verify_without_content_frame(page):
    await page.set_content('<input id="dnsMainPri" value="1.1.1.1">')

    result = await _controller(page).verify('1.1.1.1')

    assert result.verified is False
    assert result.attempts == 0
