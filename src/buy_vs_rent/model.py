from __future__ import annotations

import logging
import math

from .loan import LoanAmortization
from .schemas import ProjectionInputs, ProjectionResult, YearPoint

logger = logging.getLogger(__name__)


def compare_scenarios(inputs: ProjectionInputs) -> ProjectionResult:
    """Project buy and rent-and-invest net worth for years 0..time_horizon.

    Buying: home value less the outstanding loan, the one-time closing cost,
    the recurring ownership costs paid so far, and (in the final year only)
    the cost of selling. Floored at zero.

    Renting: the down payment plus closing cost invested at year 0, plus each
    year's gap between the cost of owning and the rent actually paid,
    reinvested at the investment return. The gap is not floored, so a year
    where rent exceeds ownership cost draws the portfolio down.
    """
    horizon = inputs.time_horizon
    loan = LoanAmortization(
        loan_amount=inputs.loan_amount,
        monthly_rate=inputs.monthly_rate,
        num_payments=inputs.num_payments,
    )
    payment = loan.monthly_payment()
    owner_monthly_cost = monthly_ownership_cost(
        inputs.home_price, inputs.annual_ownership_cost_percent, payment
    )
    annual_extra_cost = inputs.home_price * inputs.annual_ownership_cost_percent / 100.0
    closing_cost = inputs.closing_cost
    investment_growth = 1 + inputs.investment_return_rate / 100.0

    balance = loan.loan_amount
    current_rent = inputs.initial_rent
    reinvested_savings = 0.0
    timeline = []

    for year in range(horizon + 1):
        home_value = appreciated_value(
            inputs.home_price, inputs.home_appreciation_rate, year
        )
        if year > 0:
            balance = loan.remaining_balance(year)

        selling_cost = 0.0
        if year == horizon and horizon > 0:
            selling_cost = home_value * inputs.selling_costs_percent / 100.0

        buy_net_worth = max(
            0.0,
            home_value
            - balance
            - selling_cost
            - closing_cost
            - annual_extra_cost * year,
        )

        invested_initial = (inputs.down_payment + closing_cost) * investment_growth**year
        if year > 0:
            yearly_savings = owner_monthly_cost * 12 - current_rent * 12
            reinvested_savings = (reinvested_savings + yearly_savings) * investment_growth
        if year < horizon:
            current_rent *= 1 + inputs.rent_increase_rate / 100.0

        timeline.append(
            YearPoint(
                year=year,
                buy_net_worth=round_currency(buy_net_worth),
                rent_net_worth=round_currency(invested_initial + reinvested_savings),
                home_value=round_currency(home_value),
                loan_balance=round_currency(balance),
            )
        )

    final_buy = timeline[-1].buy_net_worth
    final_rent = timeline[-1].rent_net_worth
    difference = final_rent - final_buy
    winner = "rent" if difference > 0 else "buy"
    logger.debug(
        "Projected %d years: buy=%d rent=%d winner=%s",
        horizon,
        final_buy,
        final_rent,
        winner,
    )

    return ProjectionResult(
        inputs=inputs,
        monthly_payment=payment,
        monthly_ownership_cost=owner_monthly_cost,
        final_buy_net_worth=final_buy,
        final_rent_net_worth=final_rent,
        difference=difference,
        winner=winner,
        timeline=tuple(timeline),
    )


def monthly_ownership_cost(
    home_price: float, annual_ownership_cost_percent: float, monthly_payment: float
) -> float:
    """Loan payment plus taxes, insurance and upkeep, all per month."""
    return monthly_payment + home_price * annual_ownership_cost_percent / 100.0 / 12.0


def appreciated_value(price: float, annual_rate_pct: float, years: int) -> float:
    return price * (1 + annual_rate_pct / 100.0) ** years


def round_currency(amount: float) -> int:
    # Half away from zero, like a spreadsheet ROUND.
    if amount < 0:
        return -math.floor(-amount + 0.5)
    return math.floor(amount + 0.5)
