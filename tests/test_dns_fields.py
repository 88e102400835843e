"""
DNS Field Resolver tests: the three resolution tiers, manual mode and writing
"""

import pytest

from router_dns.core.errors import DnsFieldNotFoundError
from router_dns.flows.dns_fields import TIER_HEURISTIC, TIER_LABEL, TIER_SELECTOR, DnsFieldResolver

from conftest import FAST_TIMINGS


def _resolver(page):
    return DnsFieldResolver(page, timings=FAST_TIMINGS)


@pytest.mark.asyncio
async def test_known_ids_resolve_by_selector(page):
    await page.set_content('<input id="dnsMainPri" value="8.8.8.8"><input id="dnsMainSec" value="8.8.4.4">')

    result = await _resolver(page).write('1.1.1.1', '1.0.0.1')

    assert result.ok1 and result.ok2
    assert result.primary.tier == TIER_SELECTOR
    assert result.primary.detail == 'input#dnsMainPri'
    assert result.tiers_attempted == {'primary': (TIER_SELECTOR,), 'secondary': (TIER_SELECTOR,)}
    assert await page.input_value('#dnsMainPri') == '1.1.1.1'
    assert await page.input_value('#dnsMainSec') == '1.0.0.1'


@pytest.mark.asyncio
async def test_label_tier_pairs_each_label_with_its_own_input(page):
    await page.set_content("""
        <div>
            <label>Primary DNS Server</label><input id="a">
            <label>Secondary DNS Server</label><input id="b">
        </div>
    """)

    result = await _resolver(page).write('9.9.9.9', '149.112.112.112')

    assert result.primary.tier == TIER_LABEL
    assert result.secondary.tier == TIER_LABEL
    assert result.tiers_attempted['primary'] == (TIER_SELECTOR, TIER_LABEL)
    assert await page.input_value('#a') == '9.9.9.9'
    assert await page.input_value('#b') == '149.112.112.112'


@pytest.mark.asyncio
async def test_label_tier_follows_for_attribute(page):
    await page.set_content("""
        <table>
            <tr><td><label for="x2">Alternate DNS</label></td><td><input id="x2"></td></tr>
            <tr><td><label for="x1">Preferred DNS</label></td><td><input id="x1"></td></tr>
        </table>
    """)

    primary, secondary = await _resolver(page).resolve(want_secondary=True)

    assert await primary.element.get_attribute('id') == 'x1'
    assert await secondary.element.get_attribute('id') == 'x2'
    assert primary.detail == 'Preferred DNS'


@pytest.mark.asyncio
async def test_heuristic_tier_falls_back_to_position(page):
    await page.set_content('<input id="foo-dns-a"><input id="foo-dns-b"><input id="gateway">')

    result = await _resolver(page).write('1.1.1.1', '1.0.0.1')

    assert result.primary.tier == TIER_HEURISTIC
    assert result.tiers_attempted['primary'] == (TIER_SELECTOR, TIER_LABEL, TIER_HEURISTIC)
    assert await page.input_value('#foo-dns-a') == '1.1.1.1'
    assert await page.input_value('#foo-dns-b') == '1.0.0.1'
    assert await page.input_value('#gateway') == ''


@pytest.mark.asyncio
async def test_heuristic_tier_uses_name_patterns_before_position(page):
    await page.set_content('<input id="dns-alt"><input id="dns-pref">')

    await _resolver(page).write('1.1.1.1', '1.0.0.1')

    assert await page.input_value('#dns-pref') == '1.1.1.1'
    assert await page.input_value('#dns-alt') == '1.0.0.1'


@pytest.mark.asyncio
async def test_missing_primary_raises(page):
    await page.set_content('<input id="gateway"><input id="netmask">')

    with pytest.raises(DnsFieldNotFoundError):
        await _resolver(page).write('1.1.1.1')


@pytest.mark.asyncio
async def test_missing_secondary_is_not_fatal(page):
    await page.set_content('<input id="dnsMainPri">')

    result = await _resolver(page).write('1.1.1.1', '1.0.0.1')

    assert result.ok1 is True
    assert result.ok2 is False
    assert result.secondary is not None and not result.secondary.found
    assert await page.input_value('#dnsMainPri') == '1.1.1.1'


@pytest.mark.asyncio
async def test_secondary_not_requested(page):
    await page.set_content('<input id="dnsMainPri"><input id="dnsMainSec" value="8.8.4.4">')

    result = await _resolver(page).write('1.1.1.1')

    assert result.secondary is None
    assert result.ok2 is True
    assert 'secondary' not in result.tiers_attempted
    assert await page.input_value('#dnsMainSec') == '8.8.4.4'


@pytest.mark.asyncio
async def test_manual_mode_select_is_switched(page):
    await page.set_content("""
        <select id="dnsMode" name="dnsMode">
            <option value="auto">Automatic</option>
            <option value="static">Manual</option>
        </select>
        <input id="dnsMainPri">
    """)

    result = await _resolver(page).write('1.1.1.1')

    assert result.manual_mode == 'mode select'
    assert await page.input_value('#dnsMode') == 'static'


@pytest.mark.asyncio
async def test_manual_mode_missing_is_not_fatal(page):
    await page.set_content('<input id="dnsMainPri">')

    assert await _resolver(page).ensure_manual_mode() is None


@pytest.mark.asyncio
async def test_read_values(page):
    await page.set_content('<input id="dnsMainPri" value="1.1.1.1"><input id="dnsMainSec" value="1.0.0.1">')
    resolver = _resolver(page)

    assert await resolver.read_values() == ('1.1.1.1', '1.0.0.1')
    assert await resolver.read_values(want_secondary=False) == ('1.1.1.1', '')


@pytest.mark.asyncio
async def test_debug_helpers(page):
    await page.set_content('<label>Primary DNS</label><input id="dns1" name="dns1" value="x">')
    resolver = _resolver(page)

    inputs = await resolver.dump_inputs()
    assert inputs == [{'id': 'dns1', 'name': 'dns1', 'class': '', 'type': 'text', 'value': 'x'}]
    assert await resolver.label_presence() == {'primary': True, 'secondary': False}


@pytest.mark.asyncio
async def test_manual_mode_radio_toggle(page):
    await page.set_content("""
        <input type="radio" name="dnsSource" id="auto" value="auto" checked>
        <input type="radio" name="dnsSource" id="manual" value="manual">
        <input id="dnsMainPri">
    """)

    assert await _resolver(page).ensure_manual_mode() == 'toggle cascade'
    assert await page.is_checked('#manual') is True


@pytest.mark.asyncio
async def test_manual_mode_by_text(page):
    await page.set_content("""
        <a onclick="window.mode = 'manual'">Manual</a>
        <input id="dnsMainPri">
    """)

    assert await _resolver(page).ensure_manual_mode() == "text 'Manual'"
    assert await page.evaluate('window.mode') == 'manual'


@pytest.mark.asyncio
async def test_manual_mode_by_translated_text(page):
    await page.set_content("""
        <span onclick="window.mode = 'static'">Estático</span>
        <input id="dnsMainPri">
    """)

    assert await _resolver(page).ensure_manual_mode() == "text 'Estático'"
    assert await page.evaluate('window.mode') == 'static'
