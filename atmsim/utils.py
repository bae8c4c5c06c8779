"""Helpers for dates, amounts and account numbers."""

import time

MAX_AMOUNT = 10_000
DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_current_date_time():
    """Return the local date and time as ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime(DATE_TIME_FORMAT, time.localtime())


def is_valid_amount(amount):
    """Return True if ``amount`` is positive and no more than the limit."""
    return 0 < amount <= MAX_AMOUNT


def format_currency(amount):
    """Format ``amount`` as dollars with two decimal places."""
    return f"${amount:.2f}"


def mask_account_number(account_number):
    """Hide all but the last four characters of a long account number."""
    if len(account_number) > 4:
        return "****" + account_number[-4:]
    return account_number