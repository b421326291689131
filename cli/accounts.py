#!/usr/bin/env python3

import argparse
from logger import get_logger
from services.accounts import get_available_types

logger = get_logger()

_OPERATIONS = ("deposit", "withdraw")


def parse_operation(value):
    """Parse an operation token of the form 'deposit:200' or 'withdraw:100'.

    Returns:
        Tuple of (operation name, amount).
    """
    name, sep, amount = value.partition(":")
    if not sep or name not in _OPERATIONS:
        raise argparse.ArgumentTypeError(
            f"Invalid operation '{value}'. Expected deposit:<amount> or withdraw:<amount>"
        )
    try:
        return name, float(amount)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid amount in operation '{value}'")


def cmd_types(args, services):
    """List the available account types."""
    logger.info("\nAccount types:")
    logger.info("=" * 80)
    for account_type in services.accounts.get_available_types():
        logger.info(account_type)


def cmd_simulate(args, services):
    """Open an account and apply the given operations in order."""
    account = services.accounts.open(args.type, args.holder, args.initial)

    for name, amount in args.operations:
        getattr(account, name)(amount)

    account.display_account_info()
    services.reporter.report(
        f"{account.account_type} Account Balance: {account.get_balance()}"
    )


def setup_parser(subparsers):
    """Setup accounts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "accounts",
        help="Inspect account types and simulate operations",
        description="List account types and run deposits/withdrawals against a new account",
    )

    accounts_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available account commands",
        dest="subcommand",
        required=True,
    )

    # accounts types
    types_parser = accounts_subparsers.add_parser(
        "types", help="List available account types"
    )
    types_parser.set_defaults(func=cmd_types)

    # accounts simulate
    simulate_parser = accounts_subparsers.add_parser(
        "simulate", help="Open an account and apply operations"
    )
    simulate_parser.add_argument(
        "type", choices=get_available_types(), help="Account type"
    )
    simulate_parser.add_argument("holder", help="Account holder name")
    simulate_parser.add_argument("initial", type=float, help="Initial deposit")
    simulate_parser.add_argument(
        "operations",
        nargs="*",
        type=parse_operation,
        metavar="OP",
        help="Operations such as deposit:200 or withdraw:100, applied in order",
    )
    simulate_parser.set_defaults(func=cmd_simulate)
