"""The ATM: a registry of accounts plus deposit and withdrawal queues."""

import sys
from collections import deque


class ATM:
    """Holds accounts and queues the deposits and withdrawals made on them."""

    def __init__(self, accounts=()):
        self._accounts = list(accounts)
        self._deposit_queue = deque()
        self._withdrawal_queue = deque()

    @property
    def accounts(self):
        """The registered accounts in the order they were added."""
        return tuple(self._accounts)

    @property
    def pending_deposits(self):
        """Number of deposits still waiting in the queue."""
        return len(self._deposit_queue)

    @property
    def pending_withdrawals(self):
        """Number of withdrawals still waiting in the queue."""
        return len(self._withdrawal_queue)

    def __len__(self):
        return len(self._accounts)

    def __iter__(self):
        return iter(self._accounts)

    def add_account(self, account):
        """Register ``account``."""
        self._accounts.append(account)

    def find_account(self, account_number):
        """Return the first account with ``account_number``, or None."""
        return next(
            (account for account in self._accounts if account.account_number == account_number),
            None,
        )

    def enqueue_deposit(self, account):
        """Queue a deposit on ``account`` and process the queue."""
        self._deposit_queue.append(account)
        self._process(self._deposit_queue)

    def enqueue_withdrawal(self, account):
        """Queue a withdrawal on ``account`` and process the queue."""
        self._withdrawal_queue.append(account)
        self._process(self._withdrawal_queue)

    @staticmethod
    def _process(queue):
        # Balances are already settled by the caller; processing drains the queue.
        while queue:
            queue.popleft()

    def accounts_report(self):
        """Return a listing of every account and its balance."""
        lines = ["", "All Accounts in ATM System:"]
        lines.extend(
            f"Account #{index}: {account.account_number}, Balance: {account.balance:g}"
            for index, account in enumerate(self._accounts, start=1)
        )
        return "\n".join(lines) + "\n"

    def display_all_accounts(self, out=None):
        """Write the account listing to ``out`` (standard output by default)."""
        (out if out is not None else sys.stdout).write(self.accounts_report())