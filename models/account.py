"""Account contract shared by the savings and checking variants."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from logger import get_logger

logger = get_logger()


class Rejection(Enum):
    """Reason a deposit or withdrawal was refused."""

    INVALID_AMOUNT = "invalid_amount"  # amount <= 0
    INSUFFICIENT_FUNDS = "insufficient_funds"  # savings: amount > balance
    OVER_LIMIT = "over_limit"  # checking: amount > balance + overdraft


@dataclass
class OperationResult:
    """Outcome of a single deposit or withdrawal.

    Attributes:
        accepted: True if the balance was changed.
        amount: The requested amount.
        balance: Raw balance after the operation.
        rejection: Why the operation was refused, None when accepted.
        message: Human-readable notice describing the outcome.
    """

    accepted: bool
    amount: float
    balance: float
    rejection: Optional[Rejection]
    message: str

    def to_dict(self) -> dict:
        """Convert the result to a plain dictionary."""
        return {
            "accepted": self.accepted,
            "amount": self.amount,
            "balance": self.balance,
            "rejection": self.rejection.value if self.rejection else None,
            "message": self.message,
        }


class Account(ABC):
    """Base class for all account variants.

    The balance is only changed by the variant's own deposit/withdraw rules.
    Invalid amounts never raise; they produce a rejected OperationResult and
    leave the balance untouched.

    Args:
        account_holder: Owner name. Not validated.
        initial_deposit: Opening balance. Not validated, may be negative.
        reporter: Optional object with a ``report(message)`` method that
            receives every notice.
    """

    account_type = "Generic"

    def __init__(self, account_holder: str, initial_deposit: float, reporter=None):
        self._account_holder = account_holder
        self._balance = float(initial_deposit)
        self.reporter = reporter

    @property
    def account_holder(self) -> str:
        return self._account_holder

    @property
    def balance(self) -> float:
        """Raw stored balance."""
        return self._balance

    @abstractmethod
    def deposit(self, amount: float) -> OperationResult:
        pass

    @abstractmethod
    def withdraw(self, amount: float) -> OperationResult:
        pass

    @abstractmethod
    def get_balance(self) -> float:
        """Balance as displayed for this variant."""
        pass

    def display_account_info(self) -> List[str]:
        """Report the holder and the raw balance.

        Returns:
            The reported lines.
        """
        lines = [
            f"Account Holder: {self._account_holder}",
            f"Current Balance: {self._balance}",
        ]
        for line in lines:
            self._report(line)
        return lines

    def _accept_deposit(self, amount: float) -> OperationResult:
        """Apply the deposit rule shared by every variant."""
        if amount > 0:
            self._balance += amount
            return self._accepted(
                amount,
                f"Deposited {float(amount)} into {self.account_type} Account. "
                f"New balance: {self._balance}",
            )
        return self._rejected(amount, Rejection.INVALID_AMOUNT, "Invalid deposit amount.")

    def _accepted(self, amount: float, message: str) -> OperationResult:
        logger.debug(
            f"{self.account_type} account '{self._account_holder}': {message}"
        )
        result = OperationResult(
            accepted=True,
            amount=float(amount),
            balance=self._balance,
            rejection=None,
            message=message,
        )
        self._report(message)
        return result

    def _rejected(
        self, amount: float, rejection: Rejection, message: str
    ) -> OperationResult:
        logger.debug(
            f"{self.account_type} account '{self._account_holder}': "
            f"rejected {amount} ({rejection.value})"
        )
        result = OperationResult(
            accepted=False,
            amount=float(amount),
            balance=self._balance,
            rejection=rejection,
            message=message,
        )
        self._report(message)
        return result

    def _report(self, message: str) -> None:
        if self.reporter is not None:
            self.reporter.report(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(account_holder={self._account_holder!r}, "
            f"balance={self._balance!r})"
        )
