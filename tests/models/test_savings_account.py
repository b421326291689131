import pytest

from models.account import Rejection
from models.savings_account import SavingsAccount


class TestSavingsWithdraw:
    """Tests for SavingsAccount.withdraw."""

    def test_withdraw_within_balance(self):
        """Test that a withdrawal up to the balance is applied."""
        account = SavingsAccount("Alice", 1200)

        result = account.withdraw(100)

        assert result.accepted is True
        assert account.balance == 1100.0
        assert result.message == "Withdrew 100.0 from Savings Account. New balance: 1100.0"

    def test_withdraw_entire_balance(self):
        """Test that the whole balance can be withdrawn."""
        account = SavingsAccount("Alice", 300)

        result = account.withdraw(300)

        assert result.accepted is True
        assert account.balance == 0.0

    def test_withdraw_more_than_balance_rejected(self):
        """Test that savings cannot go negative."""
        account = SavingsAccount("Alice", 300)

        result = account.withdraw(300.01)

        assert result.accepted is False
        assert result.rejection == Rejection.INSUFFICIENT_FUNDS
        assert result.message == "Invalid or insufficient funds in Savings Account."
        assert account.balance == 300.0

    @pytest.mark.parametrize("amount", [0, -10])
    def test_withdraw_non_positive_rejected(self, amount):
        """Test that withdrawals of amount <= 0 are rejected as invalid."""
        account = SavingsAccount("Alice", 300)

        result = account.withdraw(amount)

        assert result.accepted is False
        assert result.rejection == Rejection.INVALID_AMOUNT
        assert result.message == "Invalid or insufficient funds in Savings Account."
        assert account.balance == 300.0


class TestSavingsGetBalance:
    """Tests for SavingsAccount.get_balance."""

    def test_interest_rate_is_class_constant(self):
        """Test that the interest rate is shared by all instances."""
        assert SavingsAccount.INTEREST_RATE == 0.03
        assert SavingsAccount("A", 1).INTEREST_RATE is SavingsAccount.INTEREST_RATE

    def test_get_balance_adds_interest(self):
        """Test that the displayed balance includes 3% interest."""
        account = SavingsAccount("Alice", 1100)

        assert account.get_balance() == pytest.approx(1133.0)

    def test_get_balance_does_not_compound(self):
        """Test that repeated calls neither mutate nor compound."""
        account = SavingsAccount("Alice", 1000)

        first = account.get_balance()
        second = account.get_balance()

        assert first == second == pytest.approx(1030.0)
        assert account.balance == 1000.0

    def test_get_balance_tracks_current_balance(self):
        """Test that the interest is computed on the balance at call time."""
        account = SavingsAccount("Alice", 1000)
        account.deposit(500)

        assert account.get_balance() == pytest.approx(1500 * 1.03)
