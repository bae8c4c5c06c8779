import io

import pytest

from atmsim.account import Account
from atmsim.transaction import Transaction

NUMBER = "000011112222"


@pytest.fixture
def account():
    pin = "secret"
    return Account(NUMBER, pin, 1000.0)


def test_verify_pin(account):
    assert account.verify_pin("secret") is True
    assert account.verify_pin("placeholder") is False
    assert account.verify_pin("") is False


def test_update_balance_both_ways(account):
    account.update_balance(250.0)
    assert account.balance == 1250.0
    account.update_balance(-1250.0)
    assert account.balance == 0.0


def test_history_starts_empty(account):
    assert account.transactions == ()


def test_add_transaction_newest_first(account):
    first = Transaction("Deposit", 10.0, timestamp=1_700_000_000)
    second = Transaction("Withdrawal", 5.0, timestamp=1_700_000_100)
    account.add_transaction(first)
    account.add_transaction(second)
    assert account.transactions == (second, first)


def test_empty_history_report(account):
    lines = account.history_report().split("\n")
    assert lines == [
        "",
        f"Transaction History for Account: {NUMBER}",
        "-" * 40,
        "-" * 40,
        "",
    ]


def test_history_report_rows_between_rules(account):
    first = Transaction("Deposit", 10.0, timestamp=1_700_000_000)
    second = Transaction("Withdrawal", 5.0, timestamp=1_700_000_100)
    account.add_transaction(first)
    account.add_transaction(second)
    lines = account.history_report().split("\n")
    assert lines[2] == lines[5] == "-" * 40
    assert lines[3:5] == [second.format_row(), first.format_row()]


def test_display_matches_report(account):
    account.add_transaction(Transaction("Deposit", 99.0, timestamp=1_700_000_000))
    out = io.StringIO()
    account.display_transaction_history(out)
    assert out.getvalue() == account.history_report()


def test_repr_hides_pin(account):
    text = repr(account)
    assert "secret" not in text
    assert NUMBER in text