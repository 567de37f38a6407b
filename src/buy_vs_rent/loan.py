from __future__ import annotations

import math
from dataclasses import dataclass

from .schemas import InputValidationError, IssueKind, ValidationIssue


@dataclass(frozen=True)
class LoanAmortization:
    """Fixed-rate, fully amortizing loan paid monthly.

    ``monthly_rate`` is a fraction (0.065 / 12 for a 6.5% mortgage), not a
    percentage.
    """

    loan_amount: float
    monthly_rate: float
    num_payments: int

    def monthly_payment(self) -> float:
        if self.num_payments <= 0:
            raise InputValidationError(
                [
                    ValidationIssue(
                        IssueKind.NON_POSITIVE,
                        "mortgage_term",
                        "cannot amortize a loan over zero payments",
                    )
                ]
            )
        if self.monthly_rate == 0:
            return self.loan_amount / self.num_payments
        interest_factor = self._compound_minus_one(self.num_payments)
        return self.loan_amount * self.monthly_rate * (1 + interest_factor) / interest_factor

    def remaining_balance(self, years_elapsed: int) -> float:
        """Outstanding principal after ``years_elapsed`` years of payments."""
        n = self.num_payments
        payments_made = max(0, years_elapsed * 12)
        if n <= 0 or payments_made >= n:
            return 0.0
        if self.monthly_rate == 0:
            return self.loan_amount * (1 - payments_made / n)
        full = self._compound_minus_one(n)
        paid = self._compound_minus_one(payments_made)
        return self.loan_amount * (full - paid) / full

    def _compound_minus_one(self, periods: int) -> float:
        # (1 + r) ** periods - 1 without losing tiny rates to rounding.
        return math.expm1(periods * math.log1p(self.monthly_rate))
