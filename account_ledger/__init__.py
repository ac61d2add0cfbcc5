"""
Account Ledger

A single-account interactive ledger: one in-memory balance that can be
viewed, credited and debited, with Decimal money math and an overdraft guard.
"""

__version__ = "1.0.0"
