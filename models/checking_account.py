from models.account import Account, OperationResult, Rejection


class CheckingAccount(Account):
    """Account that may go negative down to -OVERDRAFT_LIMIT."""

    account_type = "Checking"
    OVERDRAFT_LIMIT = 500

    def deposit(self, amount: float) -> OperationResult:
        return self._accept_deposit(amount)

    def withdraw(self, amount: float) -> OperationResult:
        if amount > 0 and (self._balance + self.OVERDRAFT_LIMIT) >= amount:
            self._balance -= amount
            return self._accepted(
                amount,
                f"Withdrew {float(amount)} from Checking Account. "
                f"New balance: {self._balance}",
            )

        # Both rejection reasons share the one notice
        rejection = Rejection.INVALID_AMOUNT if amount <= 0 else Rejection.OVER_LIMIT
        return self._rejected(
            amount, rejection, "Withdrawal amount exceeds overdraft limit."
        )

    def get_balance(self) -> float:
        return self._balance
