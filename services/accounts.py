"""Account service for opening accounts by type name."""

from typing import List

from logger import get_logger
from models.account import Account
from models.checking_account import CheckingAccount
from models.savings_account import SavingsAccount

logger = get_logger()

_ACCOUNT_TYPES = {
    "savings": SavingsAccount,
    "checking": CheckingAccount,
}


def get_account_class(account_type: str):
    """Get an account class by type name."""
    if account_type not in _ACCOUNT_TYPES:
        raise ValueError(f"Unknown account type: {account_type}")
    return _ACCOUNT_TYPES[account_type]


def get_available_types() -> List[str]:
    """Get list of available account type names."""
    return list(_ACCOUNT_TYPES.keys())


class AccountService:
    """Service for opening accounts."""

    def __init__(self, reporter=None):
        """Initialize the account service.

        Args:
            reporter: Reporter handed to every account this service opens.
        """
        self.reporter = reporter

    def open(
        self, account_type: str, account_holder: str, initial_deposit: float
    ) -> Account:
        """Open a new account.

        Args:
            account_type: Registry name, "savings" or "checking".
            account_holder: Owner name.
            initial_deposit: Opening balance.

        Returns:
            The new account, wired to this service's reporter.

        Raises:
            ValueError: If the account type is unknown.
        """
        account_class = get_account_class(account_type)
        account = account_class(account_holder, initial_deposit, reporter=self.reporter)
        logger.debug(f"Opened {account!r}")
        return account

    def get_available_types(self) -> List[str]:
        return get_available_types()
