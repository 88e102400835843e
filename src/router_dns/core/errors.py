"""
Router DNS errors
Fatal conditions that abort a run. Everything else falls through to the next
strategy and is only logged.
"""


class RouterDnsError(Exception):
    """Base class for every condition that aborts a run"""


class ConfigurationError(RouterDnsError):
    """Run parameters are missing or malformed"""


class LoginError(RouterDnsError):
    """Login form could not be filled (password field not found)"""


class NavigationError(RouterDnsError):
    """Menu path to the DNS page was not reached"""


class DnsFieldNotFoundError(RouterDnsError):
    """Primary DNS input could not be resolved by any tier"""


class ApplyControlNotFoundError(RouterDnsError):
    """No Save/Apply control could be clicked or invoked"""
