"""Driver scenario exercising both account variants."""

from typing import Dict, List

from models.account import Account, OperationResult


def _summarize(account: Account, operations: List[OperationResult]) -> Dict:
    return {
        "account_holder": account.account_holder,
        "account_type": account.account_type,
        "operations": operations,
        "balance": account.balance,
        "displayed_balance": account.get_balance(),
    }


def run_scenario(services) -> Dict[str, Dict]:
    """Run the savings/checking demonstration.

    Alice opens savings with 1000, deposits 200 and withdraws 100. Bob opens
    checking with 500, deposits 300 and withdraws 1000, which his overdraft
    allowance covers.

    Args:
        services: Services container with account service and reporter.

    Returns:
        Dictionary with "savings" and "checking" keys, each containing:
        - "account_holder": Owner name
        - "account_type": "Savings" or "Checking"
        - "operations": List of OperationResult, in call order
        - "balance": Raw balance at the end
        - "displayed_balance": get_balance() at the end

    Example:
        {
            "savings": {"balance": 1100.0, "displayed_balance": 1133.0, ...},
            "checking": {"balance": -200.0, "displayed_balance": -200.0, ...},
        }
    """
    reporter = services.reporter

    savings = services.accounts.open("savings", "Alice", 1000)
    checking = services.accounts.open("checking", "Bob", 500)

    reporter.report("Savings Account:")
    savings.display_account_info()
    savings_operations = [savings.deposit(200), savings.withdraw(100)]
    reporter.report(f"Savings Account Balance with Interest: {savings.get_balance()}")

    reporter.report("")

    reporter.report("Checking Account:")
    checking.display_account_info()
    # Exceeds the raw balance but stays within the overdraft limit
    checking_operations = [checking.deposit(300), checking.withdraw(1000)]
    reporter.report(f"Checking Account Balance: {checking.get_balance()}")

    return {
        "savings": _summarize(savings, savings_operations),
        "checking": _summarize(checking, checking_operations),
    }
