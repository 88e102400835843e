import ipaddress
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from router_dns.core.errors import ConfigurationError

# Load environment variables
load_dotenv()

DEFAULT_ROUTER_URL = "http://192.168.1.1"


class RouterDnsConfig:
    """
    Central configuration management for Router DNS.
    Reads defaults for the CLI from environment variables (and .env).
    """

    @staticmethod
    def get_router_url() -> str:
        return os.getenv("ROUTER_URL") or DEFAULT_ROUTER_URL

    @staticmethod
    def get_router_user() -> Optional[str]:
        return os.getenv("ROUTER_USER")

    @staticmethod
    def get_router_pass() -> Optional[str]:
        return os.getenv("ROUTER_PASS")

    @staticmethod
    def get_dns1() -> Optional[str]:
        return os.getenv("DNS1")

    @staticmethod
    def get_dns2() -> str:
        return os.getenv("DNS2") or ""


@dataclass(frozen=True)
class Timings:
    """Delays and timeouts (seconds unless noted) used while driving the UI"""
    settle_delay: float = 0.4
    submenu_wait: float = 3.0
    title_wait: float = 8.0
    post_login_settle: float = 0.8
    navigation_timeout: float = 15.0
    manual_mode_settle: float = 0.3
    post_apply_settle: float = 1.2
    verify_retries: int = 4
    verify_delay: float = 1.0
    final_settle: float = 1.0
    default_timeout: float = 15.0
    type_delay_ms: int = 20


DEFAULT_TIMINGS = Timings()


class RunParameters(BaseModel):
    """Immutable inputs for a single run"""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    url: str = DEFAULT_ROUTER_URL
    user: str = ""
    password: str
    dns1: str
    dns2: str = ""
    headful: bool = False
    debug: bool = False

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not value.lower().startswith(("http://", "https://")):
            raise ValueError("router URL must start with http:// or https://")
        return value

    @field_validator("password")
    @classmethod
    def _check_password(cls, value: str) -> str:
        if not value:
            raise ValueError("router password is required")
        return value

    @field_validator("dns1")
    @classmethod
    def _check_dns1(cls, value: str) -> str:
        if not value:
            raise ValueError("primary DNS server is required")
        ipaddress.ip_address(value)
        return value

    @field_validator("dns2")
    @classmethod
    def _check_dns2(cls, value: str) -> str:
        if value:
            ipaddress.ip_address(value)
        return value

    @classmethod
    def build(cls, **values) -> "RunParameters":
        """Validate raw values, raising ConfigurationError on any problem"""
        try:
            return cls(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'value'}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(f"Invalid run parameters: {problems}") from e
