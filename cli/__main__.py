#!/usr/bin/env python3
"""
Teller CLI - Command-line interface for the savings/checking account simulation.

Usage:
    python -m cli <command> [subcommand] [options]

Commands:
    scenario     Run the savings/checking demonstration
    accounts     Inspect account types and simulate operations

Examples:
    python -m cli scenario
    python -m cli accounts types
    python -m cli accounts simulate savings Alice 1000 deposit:200 withdraw:100
"""

import sys
import argparse
from cli import accounts, scenario
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Teller - Savings and checking account simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    accounts.setup_parser(subparsers)
    scenario.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)
            services = Services(config)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
