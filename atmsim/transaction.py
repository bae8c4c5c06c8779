"""A single deposit or withdrawal record."""

import sys
import time
from dataclasses import dataclass, field

from atmsim.utils import DATE_TIME_FORMAT


@dataclass(frozen=True)
class Transaction:
    """A transaction of a given kind ("Deposit" or "Withdrawal")."""

    kind: str
    amount: float
    timestamp: float = field(default_factory=time.time)

    def timestamp_text(self):
        """Return the local time of the transaction as text."""
        return time.strftime(DATE_TIME_FORMAT, time.localtime(self.timestamp))

    def format_row(self):
        """Return the transaction as one left-aligned table row."""
        return f"{self.timestamp_text():<15}{self.kind:<12}{self.amount:<10g}"

    def display(self, out=None):
        """Write the table row to ``out`` (standard output by default)."""
        print(self.format_row(), file=out if out is not None else sys.stdout)