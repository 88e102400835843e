"""
Router DNS
Automates the HS8247W web UI: login, menu navigation, DNS fields, apply, verify.
"""

from .core.config import RouterDnsConfig, RunParameters, Timings
from .core.errors import (
    ApplyControlNotFoundError,
    ConfigurationError,
    DnsFieldNotFoundError,
    LoginError,
    NavigationError,
    RouterDnsError,
)
from .main import DnsConfigurator, RunResult, configure_router_dns
from .utils.router_keywords import DEFAULT_SELECTORS, SelectorTables

__all__ = [
    'RouterDnsConfig',
    'RunParameters',
    'Timings',
    'RouterDnsError',
    'ConfigurationError',
    'LoginError',
    'NavigationError',
    'DnsFieldNotFoundError',
    'ApplyControlNotFoundError',
    'DnsConfigurator',
    'RunResult',
    'configure_router_dns',
    'DEFAULT_SELECTORS',
    'SelectorTables',
]

__version__ = '1.0.0'
