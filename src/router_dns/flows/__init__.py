# Flows package
from .apply_verify import ApplyVerifyController, VerifyResult
from .dns_fields import DnsFieldResolver, DnsWriteResult, FieldResolution
from .login import login
from .menu_navigator import MenuNavigator, MenuState, NavigationResult

__all__ = [
    'login',
    'MenuNavigator',
    'MenuState',
    'NavigationResult',
    'DnsFieldResolver',
    'DnsWriteResult',
    'FieldResolution',
    'ApplyVerifyController',
    'VerifyResult',
]
