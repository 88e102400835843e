#!/usr/bin/env python3
"""
Router UI Keyword Library
Selector tables and multilingual labels for the HS8247W web UI.
Extend these if your firmware's UI differs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class KeywordSet:
    """Container for keyword variations"""
    primary: Tuple[str, ...]  # Tried first
    secondary: Tuple[str, ...] = ()  # Fallback keywords (other languages, synonyms)

    def all_keywords(self) -> Tuple[str, ...]:
        """Get all keywords combined, in priority order"""
        return self.primary + self.secondary


class MenuState(Enum):
    """Where the menu navigation currently is"""
    START = 'start'
    TOP_MENU = 'top_menu'
    SUB_MENU = 'sub_menu'
    LEAF_PAGE = 'leaf_page'


@dataclass(frozen=True)
class MenuStep:
    """One click of the menu path: a fixed element id, then label text fallbacks"""
    state: MenuState  # State entered once the click succeeds
    selector: str
    labels: KeywordSet
    wait_for: str = ''  # Selector expected after the click (optional)

    @property
    def name(self) -> str:
        return self.state.name


# ============================================
# LOGIN STAGE
# ============================================

USERNAME_SELECTORS = (
    'input[name="Username"]',
    'input[name="username"]',
    'input#userName',
    'input#Username',
    'input#txt_Username',
    'input[name="usr"]',
    'input[type="text"][name="user"]',
)

PASSWORD_SELECTORS = (
    'input[name="Password"]',
    'input[name="password"]',
    'input#Password',
    'input#txt_Password',
    'input[type="password"]',
)

LOGIN_BUTTON_SELECTORS = (
    'button#loginBtn',
    'button#btn_Login',
    'button[type="submit"]',
    'input[type="submit"]',
    'input#login',
    'button[name="login"]',
    'button[onclick*="login"]',
)

LOGIN_BUTTON_KEYWORDS = KeywordSet(
    primary=('Log In', 'Login'),
    secondary=('Entrar', 'Iniciar sessão', 'Iniciar sesión'),
)


# ============================================
# NAVIGATION STAGE
# ============================================

MENU_PATH = (
    MenuStep(
        state=MenuState.TOP_MENU,
        selector='#addconfig',
        labels=KeywordSet(
            primary=('Advanced Configuration',),
            secondary=('Configuração Avançada', 'Configuración Avanzada'),
        ),
    ),
    MenuStep(
        state=MenuState.SUB_MENU,
        selector='#lanconfig',
        labels=KeywordSet(primary=('LAN',)),
        wait_for='#lanconfig_menu',
    ),
    MenuStep(
        state=MenuState.LEAF_PAGE,
        selector='#landhcp',
        labels=KeywordSet(
            primary=('DHCP Server',),
            secondary=('Servidor DHCP',),
        ),
    ),
)

# Content frame hosting the dynamically loaded configuration page
CONTENT_FRAME_SELECTORS = (
    'iframe#menuIframe',
    'iframe[src*="dhcp"]',
    'iframe[src*="bbsp"]',
    'iframe[src*="lan"]',
    'iframe',
)

LEAF_TITLE_SELECTOR = '#dhcp2title'
LEAF_TITLE_PATTERN = r'dhcp\s*server\s*configuration'


# ============================================
# DNS FIELD STAGE
# ============================================

PRIMARY_DNS_SELECTORS = (
    'input#dnsMainPri',
    'input[name="dnsMainPri"]',
    'input[id*="dnsMainPri" i]',
    'input[id*="dnspri" i]',
    'input[name*="dnspri" i]',
    'input#PrimaryDNSServer',
    'input[name="PrimaryDNSServer"]',
    'input#primary_dns',
    'input[name="primary_dns"]',
    'input[name="dns1"]',
    'input#dns1',
    'input[id*="primary" i]',
    'input[name*="primary" i]',
)

SECONDARY_DNS_SELECTORS = (
    'input#dnsMainSec',
    'input[name="dnsMainSec"]',
    'input[id*="dnsMainSec" i]',
    'input[id*="dnssec" i]',
    'input[name*="dnssec" i]',
    'input#SecondaryDNSServer',
    'input[name="SecondaryDNSServer"]',
    'input#secondary_dns',
    'input[name="secondary_dns"]',
    'input[name="dns2"]',
    'input#dns2',
    'input[id*="secondary" i]',
    'input[name*="secondary" i]',
)

PRIMARY_DNS_LABELS = KeywordSet(
    primary=('Primary DNS Server', 'Primary DNS'),
    secondary=('Servidor DNS primário', 'Preferred DNS'),
)

SECONDARY_DNS_LABELS = KeywordSet(
    primary=('Secondary DNS Server', 'Secondary DNS'),
    secondary=('Servidor DNS secundário', 'Alternate DNS'),
)

# Heuristic attribute scan: id/name/class patterns (JavaScript regex source)
PRIMARY_NAME_PATTERN = r'pri|primary|dns1|pref'
SECONDARY_NAME_PATTERN = r'sec|secondary|dns2|alt'

MANUAL_DNS_TOGGLES = (
    'input[type="radio"][value="manual"]',
    'input[type="checkbox"][name*="manual"]',
    'select[name*="dnsMode"]',
    'select[name*="dns_mode"]',
    'select#dns_mode',
)

MANUAL_DNS_KEYWORDS = KeywordSet(primary=('Manual',), secondary=('Estático',))


# ============================================
# APPLY STAGE
# ============================================

APPLY_BUTTON_ID = '#btnApply_ex'

SAVE_BUTTON_SELECTORS = (
    'button#btnApply_ex',
    'button[name="btnApply_ex"]',
    'button#btnApply',
    'button#btn_save',
    'input[type="submit"]',
    'button[type="submit"]',
)

APPLY_KEYWORDS = KeywordSet(
    primary=('Apply', 'Save'),
    secondary=('Guardar', 'Aplicar', 'Submit', 'OK'),
)

APPLY_FUNCTION_NAME = 'ApplyConfig'


@dataclass(frozen=True)
class SelectorTables:
    """All selector cascades and label lists, injected into each resolver"""
    username: Tuple[str, ...] = USERNAME_SELECTORS
    password: Tuple[str, ...] = PASSWORD_SELECTORS
    login_buttons: Tuple[str, ...] = LOGIN_BUTTON_SELECTORS
    login_keywords: KeywordSet = LOGIN_BUTTON_KEYWORDS
    menu_path: Tuple[MenuStep, ...] = MENU_PATH
    content_frames: Tuple[str, ...] = CONTENT_FRAME_SELECTORS
    leaf_title_selector: str = LEAF_TITLE_SELECTOR
    leaf_title_pattern: str = LEAF_TITLE_PATTERN
    primary_dns: Tuple[str, ...] = PRIMARY_DNS_SELECTORS
    secondary_dns: Tuple[str, ...] = SECONDARY_DNS_SELECTORS
    primary_labels: KeywordSet = PRIMARY_DNS_LABELS
    secondary_labels: KeywordSet = SECONDARY_DNS_LABELS
    primary_name_pattern: str = PRIMARY_NAME_PATTERN
    secondary_name_pattern: str = SECONDARY_NAME_PATTERN
    manual_toggles: Tuple[str, ...] = MANUAL_DNS_TOGGLES
    manual_keywords: KeywordSet = MANUAL_DNS_KEYWORDS
    apply_button: str = APPLY_BUTTON_ID
    save_buttons: Tuple[str, ...] = SAVE_BUTTON_SELECTORS
    apply_keywords: KeywordSet = APPLY_KEYWORDS
    apply_function: str = APPLY_FUNCTION_NAME


DEFAULT_SELECTORS = SelectorTables()
