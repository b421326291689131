from models.account import Account, OperationResult, Rejection


class SavingsAccount(Account):
    """Account that shows a fixed interest on top of the stored balance.

    Interest is never added to the stored balance, so repeated calls to
    get_balance() do not compound.
    """

    account_type = "Savings"
    INTEREST_RATE = 0.03

    def deposit(self, amount: float) -> OperationResult:
        return self._accept_deposit(amount)

    def withdraw(self, amount: float) -> OperationResult:
        if amount > 0 and amount <= self._balance:
            self._balance -= amount
            return self._accepted(
                amount,
                f"Withdrew {float(amount)} from Savings Account. "
                f"New balance: {self._balance}",
            )

        rejection = (
            Rejection.INVALID_AMOUNT if amount <= 0 else Rejection.INSUFFICIENT_FUNDS
        )
        return self._rejected(
            amount, rejection, "Invalid or insufficient funds in Savings Account."
        )

    def get_balance(self) -> float:
        return self._balance + (self._balance * self.INTEREST_RATE)
