"""A bank account with a PIN, a balance and a transaction history."""

import sys
from collections import deque
from dataclasses import dataclass, field

_RULE = "-" * 40


@dataclass
class Account:
    """An account; its history is kept newest first."""

    account_number: str
    pin: str = field(repr=False)
    balance: float
    _history: deque = field(default_factory=deque, init=False, repr=False, compare=False)

    @property
    def transactions(self):
        """The recorded transactions, newest first."""
        return tuple(self._history)

    def verify_pin(self, pin):
        """Return True if ``pin`` matches the account's PIN."""
        return self.pin == pin

    def update_balance(self, amount):
        """Add ``amount`` (negative to take money out) to the balance."""
        self.balance += amount

    def add_transaction(self, transaction):
        """Record ``transaction`` as the newest in the history."""
        self._history.appendleft(transaction)

    def history_report(self):
        """Return the transaction history as printable text."""
        lines = [
            "",
            f"Transaction History for Account: {self.account_number}",
            _RULE,
            *(transaction.format_row() for transaction in self._history),
            _RULE,
        ]
        return "\n".join(lines) + "\n"

    def display_transaction_history(self, out=None):
        """Write the transaction history to ``out`` (standard output by default)."""
        (out if out is not None else sys.stdout).write(self.history_report())