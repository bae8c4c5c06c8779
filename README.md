# atmsim

A small ATM simulator that runs in the terminal. It keeps a set of accounts,
each with a PIN, a balance and a history of deposits and withdrawals, and
walks a user through a session at the machine.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running a session

    atmsim

The machine starts with two demonstration accounts. After the welcome screen
(press Enter to begin) you are asked for an account number and a PIN. You
have three attempts; after the third failure the card is retained and the
program exits with status 1. If the input ends before the session is over,
the program also exits with status 1.

Once signed in, the main menu offers:

1. Check account balance (the account number is shown masked, e.g. `****0000`)
2. Deposit funds
3. Withdraw funds
4. View transaction history (most recent first)
5. Exit

A menu choice outside 1–5 is asked for again. Deposits and withdrawals must
be greater than zero and at most $10,000; any other amount is asked for
again. A withdrawal larger than the current balance is refused. Each deposit
or withdrawal asks for confirmation (`Y`/`N`) before it is applied. Choosing
5 ends the session with status 0.

## Using it as a library

The building blocks are importable on their own:

- `atmsim.utils` — `format_currency`, `mask_account_number`,
  `is_valid_amount` and `get_current_date_time`
- `atmsim.transaction` — `Transaction(kind, amount, timestamp=...)`, a single
  timestamped deposit or withdrawal, with `timestamp_text()`,
  `format_row()` and `display(out)`
- `atmsim.account` — `Account(account_number, pin, balance)`, with
  `verify_pin`, `update_balance`, `add_transaction`, a `transactions`
  property (newest first), `history_report()` and
  `display_transaction_history(out)`
- `atmsim.atm` — `ATM`, which holds accounts, looks them up with
  `find_account` (returning `None` when there is no match), and lists them
  with `accounts_report()` and `display_all_accounts(out)`
- `atmsim.cli` — the interactive session; `build_default_atm()` returns a
  machine loaded with the demonstration accounts, and
  `run_session(atm, infile, outfile)` drives a session over any pair of text
  streams and returns the exit status

```python
from atmsim.utils import format_currency, is_valid_amount, mask_account_number

format_currency(1234.5)           # '$1234.50'
mask_account_number("ABCD0000")   # '****0000'
is_valid_amount(10000)            # True
is_valid_amount(0)                # False
```

## What it does not do

Accounts and their histories live only in memory for the length of one
session; nothing is saved to disk and there is no way to create accounts
from the command line. `ATM.enqueue_deposit` and `ATM.enqueue_withdrawal`
only queue and drain the request: the balance change itself is made on the
`Account` by the caller.