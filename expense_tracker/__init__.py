"""
Expense Tracker - Source Package

A personal expense ledger driven from the command line.

DESIGN PRINCIPLES:
1. Load once, mutate in memory, save once
2. Fail early, fail visibly
3. Nothing invalid is ever written to the ledger file
4. Ledger operations are pure functions over a loaded snapshot
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
