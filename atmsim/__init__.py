"""Terminal ATM simulator: accounts, PIN checks, deposits, withdrawals and history."""

__version__ = "0.1.0"