"""Allow running as ``python -m ipaddr_text``."""

from ipaddr_text.cli import main

main()
