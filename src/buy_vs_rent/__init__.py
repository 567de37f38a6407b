"""
Buy vs. rent net worth projection.

Given a home purchase and a rent alternative, project year by year what a
household would be worth if it bought, or if it rented and invested the cash
buying would have tied up, and report which strategy comes out ahead.
"""

import logging

from .loan import LoanAmortization
from .model import compare_scenarios, monthly_ownership_cost
from .schemas import (
    DEFAULT_INPUTS,
    InputValidationError,
    IssueKind,
    ProjectionInputs,
    ProjectionResult,
    ValidationIssue,
    YearPoint,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_INPUTS",
    "InputValidationError",
    "IssueKind",
    "LoanAmortization",
    "ProjectionInputs",
    "ProjectionResult",
    "ValidationIssue",
    "YearPoint",
    "compare_scenarios",
    "monthly_ownership_cost",
]
