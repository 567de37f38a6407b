from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

STORE_KEY = "buyVsRentInputs"

WINNER_LABELS = {"buy": "Buy", "rent": "Rent & Invest"}

# Reference scenario: 400k loan at 6.5% over 30 years, 10 year horizon.
DEFAULT_INPUTS: Dict[str, Any] = {
    "home_price": 500_000.0,
    "down_payment": 100_000.0,
    "mortgage_rate": 6.5,
    "mortgage_term": 30,
    "home_appreciation_rate": 3.0,
    "initial_rent": 2_500.0,
    "rent_increase_rate": 3.0,
    "investment_return_rate": 7.0,
    "time_horizon": 10,
    "closing_costs_percent": 3.0,
    "selling_costs_percent": 6.0,
    "annual_ownership_cost_percent": 1.5,
}

# camelCase names used by the browser calculator's saved records.
FIELD_ALIASES: Dict[str, str] = {
    "homePrice": "home_price",
    "downPayment": "down_payment",
    "mortgageRate": "mortgage_rate",
    "mortgageTerm": "mortgage_term",
    "homeAppreciation": "home_appreciation_rate",
    "homeAppreciationRate": "home_appreciation_rate",
    "initialRent": "initial_rent",
    "rentIncrease": "rent_increase_rate",
    "rentIncreaseRate": "rent_increase_rate",
    "investmentReturn": "investment_return_rate",
    "investmentReturnRate": "investment_return_rate",
    "timeHorizon": "time_horizon",
    "closingCostsPercent": "closing_costs_percent",
    "sellingCostsPercent": "selling_costs_percent",
    "annualOwnershipPercent": "annual_ownership_cost_percent",
    "annualOwnershipCostPercent": "annual_ownership_cost_percent",
}

_ADVANCED_FIELDS = (
    "closing_costs_percent",
    "selling_costs_percent",
    "annual_ownership_cost_percent",
)
_INTEGER_FIELDS = ("mortgage_term", "time_horizon")
_NON_NEGATIVE_FIELDS = (
    "home_price",
    "down_payment",
    "mortgage_rate",
    "initial_rent",
    "time_horizon",
    "closing_costs_percent",
    "selling_costs_percent",
    "annual_ownership_cost_percent",
)


class IssueKind(str, Enum):
    MISSING = "missing"
    NOT_NUMERIC = "not_numeric"
    NOT_FINITE = "not_finite"
    NOT_INTEGER = "not_integer"
    NEGATIVE = "negative"
    NON_POSITIVE = "non_positive"
    DOWN_PAYMENT_EXCEEDS_PRICE = "down_payment_exceeds_price"


@dataclass(frozen=True)
class ValidationIssue:
    """One rejected input: what went wrong and on which field."""

    kind: IssueKind
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class InputValidationError(ValueError):
    """Raised when projection inputs cannot be used; carries every issue found."""

    def __init__(self, issues: List[ValidationIssue]):
        super().__init__("; ".join(str(issue) for issue in issues))
        self.issues = issues

    @property
    def fields(self) -> List[str]:
        return [issue.field for issue in self.issues]


@dataclass(frozen=True)
class ProjectionInputs:
    """Household assumptions for one buy-vs-rent projection.

    Rates are annual percentages (6.5 means 6.5%). Amounts are in whole
    currency units; ``initial_rent`` is monthly.
    """

    home_price: float
    down_payment: float
    mortgage_rate: float
    mortgage_term: int  # years
    home_appreciation_rate: float
    initial_rent: float
    rent_increase_rate: float
    investment_return_rate: float
    time_horizon: int  # years
    closing_costs_percent: float = 3.0
    selling_costs_percent: float = 6.0
    annual_ownership_cost_percent: float = 1.5

    def __post_init__(self) -> None:
        issues = collect_issues(self)
        if issues:
            raise InputValidationError(issues)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ProjectionInputs":
        """Build inputs from a plain dict; camelCase keys are accepted."""
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in values.items():
            name = FIELD_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
        missing = [
            f.name
            for f in fields(cls)
            if f.name not in kwargs and f.name not in _ADVANCED_FIELDS
        ]
        if missing:
            raise InputValidationError(
                [
                    ValidationIssue(IssueKind.MISSING, name, "value is required")
                    for name in missing
                ]
            )
        return cls(**kwargs)

    @property
    def loan_amount(self) -> float:
        return max(0.0, self.home_price - self.down_payment)

    @property
    def monthly_rate(self) -> float:
        return self.mortgage_rate / 100.0 / 12.0

    @property
    def num_payments(self) -> int:
        return self.mortgage_term * 12

    @property
    def closing_cost(self) -> float:
        return self.home_price * self.closing_costs_percent / 100.0


def collect_issues(inputs: ProjectionInputs) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    usable = set()
    for f in fields(inputs):
        value = getattr(inputs, f.name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            issues.append(
                ValidationIssue(IssueKind.NOT_NUMERIC, f.name, f"expected a number, got {value!r}")
            )
            continue
        if not math.isfinite(value):
            issues.append(ValidationIssue(IssueKind.NOT_FINITE, f.name, "must be finite"))
            continue
        if f.name in _INTEGER_FIELDS and not isinstance(value, int):
            issues.append(
                ValidationIssue(IssueKind.NOT_INTEGER, f.name, "must be a whole number of years")
            )
            continue
        usable.add(f.name)

    if "mortgage_term" in usable and inputs.mortgage_term <= 0:
        issues.append(
            ValidationIssue(IssueKind.NON_POSITIVE, "mortgage_term", "must be at least one year")
        )
    for name in _NON_NEGATIVE_FIELDS:
        if name in usable and getattr(inputs, name) < 0:
            issues.append(ValidationIssue(IssueKind.NEGATIVE, name, "must not be negative"))
    if (
        {"home_price", "down_payment"} <= usable
        and inputs.down_payment > inputs.home_price
    ):
        issues.append(
            ValidationIssue(
                IssueKind.DOWN_PAYMENT_EXCEEDS_PRICE,
                "down_payment",
                "must not exceed home_price",
            )
        )
    return issues


@dataclass(frozen=True)
class YearPoint:
    year: int
    buy_net_worth: int
    rent_net_worth: int
    home_value: int
    loan_balance: int


@dataclass(frozen=True)
class ProjectionResult:
    inputs: ProjectionInputs
    monthly_payment: float
    monthly_ownership_cost: float
    final_buy_net_worth: int
    final_rent_net_worth: int
    difference: int  # rent minus buy
    winner: str  # "buy" or "rent"
    timeline: Tuple[YearPoint, ...] = field(default_factory=tuple)

    @property
    def years(self) -> List[int]:
        return [point.year for point in self.timeline]

    @property
    def buy_series(self) -> List[int]:
        return [point.buy_net_worth for point in self.timeline]

    @property
    def rent_series(self) -> List[int]:
        return [point.rent_net_worth for point in self.timeline]

    @property
    def winner_label(self) -> str:
        return WINNER_LABELS[self.winner]

    @property
    def break_even_year(self) -> Optional[int]:
        """First year in which buying has caught up with renting, if ever."""
        for point in self.timeline:
            if point.buy_net_worth >= point.rent_net_worth:
                return point.year
        return None
