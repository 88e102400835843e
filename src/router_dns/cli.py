#!/usr/bin/env python3
"""
Command line entry point

Examples:
  router-dns --url http://192.168.1.1 --user admin --pass secret --dns1 1.1.1.1 --dns2 1.0.0.1
  ROUTER_PASS=secret DNS1=9.9.9.9 python -m router_dns --headful --debug
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from router_dns.core.config import RouterDnsConfig, RunParameters
from router_dns.core.errors import RouterDnsError
from router_dns.main import DnsConfigurator
from router_dns.utils.logger_config import setup_logger

SUCCESS_GLYPH = '✔'
FAILURE_GLYPH = '✖'

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    user = RouterDnsConfig.get_router_user()
    password = RouterDnsConfig.get_router_pass()
    dns1 = RouterDnsConfig.get_dns1()

    parser = argparse.ArgumentParser(
        prog='router-dns',
        description='Set the DNS servers of an HS8247W router through its web UI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='Environment: ROUTER_URL, ROUTER_USER, ROUTER_PASS, DNS1, DNS2 (a .env file is read too)',
    )
    parser.add_argument('--url', default=RouterDnsConfig.get_router_url(), help='Router base URL')
    parser.add_argument('--user', default=user, required=not user, help='Router username')
    parser.add_argument('--pass', dest='password', default=password, required=not password,
                        help='Router password')
    parser.add_argument('--dns1', default=dns1, required=not dns1, help='Primary DNS server')
    parser.add_argument('--dns2', default=RouterDnsConfig.get_dns2(), help='Secondary DNS server (optional)')
    parser.add_argument('--headful', action='store_true', help='Run headed (visible browser)')
    parser.add_argument('--debug', action='store_true',
                        help='Verbose logging and a screenshot on failure')
    return parser


def _report_failure(error: Exception, configurator: Optional[DnsConfigurator]) -> int:
    print(f"{FAILURE_GLYPH} Failed: {error}", file=sys.stderr)
    if configurator and configurator.screenshot_path:
        print(f"Saved screenshot: {configurator.screenshot_path}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(debug=args.debug)

    configurator = None
    try:
        params = RunParameters.build(
            url=args.url,
            user=args.user or '',
            password=args.password,
            dns1=args.dns1,
            dns2=args.dns2 or '',
            headful=args.headful,
            debug=args.debug,
        )
        configurator = DnsConfigurator(params)
        asyncio.run(configurator.run())
    except RouterDnsError as e:
        return _report_failure(e, configurator)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        return _report_failure(e, configurator)

    print(f"{SUCCESS_GLYPH} DNS updated to {params.dns1}{f', {params.dns2}' if params.dns2 else ''}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
