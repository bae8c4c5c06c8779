"""Interactive ATM session on a text terminal."""

import argparse
import os
import subprocess
import sys

from atmsim.account import Account
from atmsim.atm import ATM
from atmsim.transaction import Transaction
from atmsim.utils import MAX_AMOUNT, format_currency, is_valid_amount, mask_account_number

PIN_ATTEMPTS = 3
EXIT_CHOICE = 5
MENU_CHOICES = range(1, EXIT_CHOICE + 1)

_RESET = "\033[0m"
_GREEN = "\033[1;32m"
_YELLOW = "\033[1;33m"
_BLUE = "\033[1;34m"
_MAGENTA = "\033[1;35m"
_CYAN = "\033[1;36m"
_WHITE = "\033[1;37m"
_BRIGHT_GREEN = "\033[1;92m"
_BRIGHT_YELLOW = "\033[1;93m"

_WIDTH = 94
_DOUBLE_RULE = "=" * _WIDTH
_SINGLE_RULE = "-" * _WIDTH


def _say(outfile, text="", color=None):
    if color:
        text = f"{color}{text}{_RESET}"
    print(text, file=outfile)


def _prompt(outfile, text):
    print(text, end="", file=outfile)
    outfile.flush()


def _read_line(infile):
    line = infile.readline()
    if not line:
        raise EOFError("input ended")
    return line.rstrip("\r\n")


def _read_token(infile):
    """Return the first whitespace-separated word, skipping blank lines."""
    while True:
        words = _read_line(infile).split()
        if words:
            return words[0]


def _read_choice(infile, outfile):
    while True:
        try:
            choice = int(_read_token(infile))
        except ValueError:
            choice = None
        if choice in MENU_CHOICES:
            return choice
        _say(outfile, "()" * (_WIDTH // 2), _MAGENTA)
        _say(
            outfile,
            f"    Invalid input. Please enter a number between {MENU_CHOICES[0]} and {MENU_CHOICES[-1]}",
            _BRIGHT_YELLOW,
        )
        _say(outfile, "()" * (_WIDTH // 2), _MAGENTA)


def _read_amount(infile, outfile, action):
    _prompt(outfile, f"\nEnter amount to {action} (max {format_currency(MAX_AMOUNT)[:-3]}): $")
    while True:
        try:
            amount = float(_read_token(infile))
        except ValueError:
            amount = None
        if amount is not None and is_valid_amount(amount):
            return amount
        _prompt(outfile, "Invalid amount. Please enter a positive amount up to $10,000: $")


def _confirm(infile, outfile):
    _prompt(outfile, "Confirm? (Y/N): ")
    return _read_token(infile)[0].upper() == "Y"


def _clear_screen(outfile):
    isatty = getattr(outfile, "isatty", None)
    if not (isatty and isatty()):
        return
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


def build_default_atm():
    """Return an ATM loaded with the two sample accounts."""
    atm = ATM()
    atm.add_account(Account("123456789", "1234", 1000.00))
    atm.add_account(Account("987654321", "4321", 500.00))
    return atm


def display_welcome_screen(infile, outfile):
    """Clear the terminal, show the welcome banner and wait for Enter."""
    _clear_screen(outfile)
    border = "||" + " " * (_WIDTH - 4) + "||"
    _say(outfile, "@" * _WIDTH, _BLUE)
    _say(outfile, border, _MAGENTA)
    _say(outfile, "||" + "WELCOME TO THE".center(_WIDTH - 4) + "||", _GREEN)
    _say(outfile, border, _CYAN)
    _say(outfile, "||" + "BANK ATM MANAGEMENT SYSTEM".center(_WIDTH - 4) + "||", _YELLOW)
    _say(outfile, border, _BLUE)
    _say(outfile, border, _BLUE)
    _say(outfile, "@" * _WIDTH, _BLUE)
    _say(outfile, _SINGLE_RULE, _BLUE)
    _say(outfile, "Press Enter to start your session".center(_WIDTH), _BRIGHT_YELLOW)
    outfile.flush()
    infile.readline()


def display_main_menu(outfile):
    """Show the list of menu options."""
    _say(outfile, "~~~~~~~ ATM MAIN MENU ~~~~~~~".center(_WIDTH), _CYAN)
    _say(outfile, _DOUBLE_RULE, _WHITE)
    for number, label in enumerate(
        (
            "Check Account Balance",
            "Deposit Funds",
            "Withdraw Funds",
            "View Transaction History",
            "Exit",
        ),
        start=1,
    ):
        _say(outfile, f"  [{number}] {label}", _CYAN)
    _say(outfile, _DOUBLE_RULE, _WHITE)


def authenticate_user(atm, infile, outfile):
    """Ask for account number and PIN; return the account, or None after too many failures."""
    attempts = PIN_ATTEMPTS
    while attempts > 0:
        _say(outfile, "kindly enter your account number below".center(_WIDTH), _BRIGHT_YELLOW)
        _say(outfile, _SINGLE_RULE, _BLUE)
        _prompt(outfile, "> ")
        account_number = _read_line(infile)
        _prompt(outfile, "Enter your PIN: ")
        pin = _read_line(infile)

        account = atm.find_account(account_number)
        if account is not None and account.verify_pin(pin):
            _say(outfile, " Authentication successful. Welcome! ".center(_WIDTH, "-"), _YELLOW)
            return account

        attempts -= 1
        if attempts > 0:
            _say(outfile, f"\nInvalid account number or PIN. {attempts} attempts remaining.")
    return None


def handle_balance_inquiry(account, outfile):
    """Show the masked account number and its balance."""
    _say(outfile, "\nACCOUNT BALANCE")
    _say(outfile, "----------------")
    _say(outfile, f"Account: {mask_account_number(account.account_number)}")
    _say(outfile, f"Available Balance: {format_currency(account.balance)}")


def handle_deposit(atm, account, infile, outfile):
    """Ask for an amount and, once confirmed, deposit it."""
    _say(outfile, "\nDEPOSIT FUNDS")
    _say(outfile, "--------------")
    _say(outfile, f"Current Balance: {format_currency(account.balance)}")

    amount = _read_amount(infile, outfile, "deposit")
    _say(outfile, f"\nYou are about to deposit {format_currency(amount)}")
    if _confirm(infile, outfile):
        account.update_balance(amount)
        account.add_transaction(Transaction("Deposit", amount))
        atm.enqueue_deposit(account)
        _say(outfile, "Deposit successful!".center(_WIDTH + 10, "-"), _BLUE)
        _say(outfile, f"New Balance: {format_currency(account.balance)}")
    else:
        _say(outfile, "Deposit canceled.")


def handle_withdrawal(atm, account, infile, outfile):
    """Ask for an amount and, if funds allow and it is confirmed, withdraw it."""
    _say(outfile, "\nWITHDRAW FUNDS")
    _say(outfile, "---------------")
    _say(outfile, f"Current Balance: {format_currency(account.balance)}")

    amount = _read_amount(infile, outfile, "withdraw")
    if amount > account.balance:
        _say(
            outfile,
            f"\nInsufficient funds:( Your current balance is {format_currency(account.balance)}",
        )
        return

    _say(outfile, f"\nYou are about to withdraw {format_currency(amount)}")
    if _confirm(infile, outfile):
        account.update_balance(-amount)
        account.add_transaction(Transaction("Withdrawal", amount))
        atm.enqueue_withdrawal(account)
        _say(outfile, "Withdrawal successful!".center(_WIDTH + 10, "-"), _BLUE)
        _say(outfile, "Please take your cash:)")
        _say(outfile, f"New Balance: {format_currency(account.balance)}")
    else:
        _say(outfile, "Withdrawal canceled:(")


def handle_transaction_history(account, outfile):
    """Show the account's transaction history."""
    account.display_transaction_history(outfile)


def _show_card_retained(outfile):
    _say(outfile, _SINGLE_RULE, _GREEN)
    _say(outfile, "TRANSACTION FAILED. Please try again later".center(_WIDTH), _BRIGHT_YELLOW)
    _say(
        outfile,
        "Your Card has been Temporarily Blocked due to Multiple Incorrect PIN attempts".center(_WIDTH),
        _BRIGHT_GREEN,
    )
    _say(outfile, "Card Retained(Take your Card)".center(_WIDTH), _BRIGHT_GREEN)
    _say(outfile, _SINGLE_RULE, _GREEN)
    _say(outfile, "<<  Contact your BANK  >>".center(_WIDTH), _BRIGHT_GREEN)
    _say(outfile, _SINGLE_RULE, _GREEN)


def run_session(atm, infile, outfile):
    """Authenticate and run the menu loop; return the process exit status."""
    account = authenticate_user(atm, infile, outfile)
    if account is None:
        _show_card_retained(outfile)
        return 1

    handlers = {
        1: lambda: handle_balance_inquiry(account, outfile),
        2: lambda: handle_deposit(atm, account, infile, outfile),
        3: lambda: handle_withdrawal(atm, account, infile, outfile),
        4: lambda: handle_transaction_history(account, outfile),
    }
    while True:
        display_main_menu(outfile)
        _say(outfile, f"Enter your choice (1-{EXIT_CHOICE}):".center(_WIDTH), _BRIGHT_YELLOW)
        _say(outfile, _DOUBLE_RULE, _WHITE)
        choice = _read_choice(infile, outfile)

        if choice == EXIT_CHOICE:
            _say(outfile, "$" * _WIDTH, _MAGENTA)
            _say(outfile, "Thank you for using our ATM. Goodbye!".center(_WIDTH), _BRIGHT_YELLOW)
            _say(outfile, "$" * _WIDTH, _MAGENTA)
            return 0

        handlers[choice]()
        _prompt(outfile, "\nPress Enter to continue...")
        _read_line(infile)


def main(argv=None):
    """Run an ATM session on standard input and output."""
    parser = argparse.ArgumentParser(prog="atmsim", description="Simulated bank ATM session.")
    parser.parse_args(argv)

    atm = build_default_atm()
    try:
        display_welcome_screen(sys.stdin, sys.stdout)
        return run_session(atm, sys.stdin, sys.stdout)
    except (EOFError, KeyboardInterrupt):
        print(file=sys.stdout)
        return 1


if __name__ == "__main__":
    sys.exit(main())