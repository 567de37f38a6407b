import pytest

from buy_vs_rent.loan import LoanAmortization
from buy_vs_rent.schemas import InputValidationError, IssueKind


def _loan(principal, annual_rate_pct, term_years):
    return LoanAmortization(
        loan_amount=principal,
        monthly_rate=annual_rate_pct / 100.0 / 12.0,
        num_payments=term_years * 12,
    )


class TestMonthlyPayment:
    def test_standard_mortgage(self):
        """$400K loan at 6.5% for 30 years."""
        assert _loan(400_000, 6.5, 30).monthly_payment() == pytest.approx(2528.27, abs=0.01)

    def test_zero_rate(self):
        assert _loan(360_000, 0, 30).monthly_payment() == 1000.0

    def test_zero_principal(self):
        assert _loan(0, 6.5, 30).monthly_payment() == 0.0

    @pytest.mark.parametrize("annual_rate_pct", [1e-15, 1e-12, 1e-9])
    def test_tiny_rate_behaves_like_zero_rate(self, annual_rate_pct):
        assert _loan(360_000, annual_rate_pct, 30).monthly_payment() == pytest.approx(1000.0)

    def test_zero_payments_is_a_configuration_error(self):
        loan = LoanAmortization(loan_amount=400_000, monthly_rate=0.005, num_payments=0)
        with pytest.raises(InputValidationError) as excinfo:
            loan.monthly_payment()
        issue = excinfo.value.issues[0]
        assert issue.kind is IssueKind.NON_POSITIVE
        assert issue.field == "mortgage_term"


class TestRemainingBalance:
    def test_nothing_paid_at_year_zero(self):
        assert _loan(400_000, 6.5, 30).remaining_balance(0) == pytest.approx(400_000)

    def test_zero_rate_decreases_linearly(self):
        loan = _loan(360_000, 0, 30)
        balances = [loan.remaining_balance(year) for year in range(31)]
        steps = {round(prev - cur, 6) for prev, cur in zip(balances, balances[1:])}
        assert steps == {12_000.0}
        assert loan.remaining_balance(10) == pytest.approx(240_000)
        assert loan.remaining_balance(30) == 0

    def test_tiny_rate_decreases_almost_linearly(self):
        loan = _loan(360_000, 1e-15, 30)
        assert loan.remaining_balance(10) == pytest.approx(240_000)

    @pytest.mark.parametrize("rate", [0, 2.5, 6.5, 12])
    def test_fully_paid_at_term(self, rate):
        loan = _loan(400_000, rate, 30)
        assert loan.remaining_balance(30) == 0
        assert loan.remaining_balance(45) == 0

    def test_balance_decreases(self):
        loan = _loan(400_000, 6.5, 30)
        balances = [loan.remaining_balance(year) for year in range(31)]
        for i in range(1, len(balances)):
            assert balances[i] < balances[i - 1]

    def test_early_years_mostly_interest(self):
        loan = _loan(400_000, 6.5, 30)
        # At 6.5% only about 4.5k of principal is repaid in the first year.
        assert loan.remaining_balance(1) == pytest.approx(395_529.10, abs=0.05)

    def test_balance_after_ten_years(self):
        assert _loan(400_000, 6.5, 30).remaining_balance(10) == pytest.approx(339_104.5, abs=0.1)

    def test_zero_length_term_has_no_balance(self):
        loan = LoanAmortization(loan_amount=400_000, monthly_rate=0.005, num_payments=0)
        assert loan.remaining_balance(0) == 0
        assert loan.remaining_balance(5) == 0
