import sys

from router_dns.cli import main

sys.exit(main())
