#!/usr/bin/env python3
"""Main entry point for the ledger demonstration"""

import sys

from bank_ledger.demo import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
