"""
Demonstration driver

Deposits into a checking account, moves part of it to savings and
prints the balances. Arguments are accepted and ignored.
"""

import sys
from decimal import Decimal
from typing import List, Optional

from .accounts import Account
from .config import get_config
from .currency import format_amount
from .exceptions import LedgerError
from .logging_config import setup_logging
from .transfers import TransferService


def run_demo(places: int = 2) -> List[str]:
    """Run the checking/savings scenario and return the output lines"""
    checking = Account(name="Checking")
    savings = Account(name="Savings")
    service = TransferService()

    lines = []
    checking.deposit(Decimal('1000.00'))
    lines.append(f"Checking balance: {format_amount(checking.get_balance(), places)}")

    service.transfer(checking, savings, Decimal('300.00'))
    lines.append(f"Checking balance after transfer: {format_amount(checking.get_balance(), places)}")
    lines.append(f"Savings balance: {format_amount(savings.get_balance(), places)}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    cfg = get_config()
    setup_logging(level=cfg.log_level, fmt=cfg.log_format, log_file=cfg.log_file)

    try:
        lines = run_demo(cfg.display_places)
    except LedgerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0
