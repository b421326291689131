#!/usr/bin/env python3

from tools.scenario import run_scenario


def cmd_run(args, services):
    """Run the savings/checking demonstration."""
    run_scenario(services)


def setup_parser(subparsers):
    """Setup scenario command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "scenario",
        help="Run the savings/checking demonstration",
        description="Open Alice's savings and Bob's checking account and exercise both",
    )
    parser.set_defaults(func=cmd_run)
