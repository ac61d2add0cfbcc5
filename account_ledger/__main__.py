#!/usr/bin/env python3
"""Main entry point for the account ledger menu"""

import sys

from account_ledger.menu import main

if __name__ == "__main__":
    sys.exit(main())
