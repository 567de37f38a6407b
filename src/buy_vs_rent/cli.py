from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

import typer

from .model import compare_scenarios
from .schemas import InputValidationError, ProjectionInputs
from .store import DEFAULT_STORE_PATH, InputStore

app = typer.Typer(help="Compare net worth from buying a home versus renting and investing.")


def _default_store_path() -> str:
    return os.environ.get("BUY_VS_RENT_STORE", str(DEFAULT_STORE_PATH))


@app.command()
def run(
    home_price: Optional[float] = typer.Option(None, help="Purchase price of the home."),
    down_payment: Optional[float] = typer.Option(None, help="Cash paid up front."),
    mortgage_rate: Optional[float] = typer.Option(
        None, help="Annual mortgage rate in percent (e.g., 6.5 for 6.5%)."
    ),
    mortgage_term: Optional[int] = typer.Option(None, help="Mortgage term in years."),
    home_appreciation_rate: Optional[float] = typer.Option(
        None, help="Annual home price appreciation in percent."
    ),
    initial_rent: Optional[float] = typer.Option(None, help="Monthly rent today."),
    rent_increase_rate: Optional[float] = typer.Option(
        None, help="Annual rent increase in percent."
    ),
    investment_return_rate: Optional[float] = typer.Option(
        None, help="Annual return on the renter's investments in percent."
    ),
    time_horizon: Optional[int] = typer.Option(None, help="Projection horizon in years."),
    closing_costs_percent: Optional[float] = typer.Option(
        None, help="Closing costs as a percent of the price (default 3)."
    ),
    selling_costs_percent: Optional[float] = typer.Option(
        None, help="Selling costs as a percent of the sale value (default 6)."
    ),
    annual_ownership_cost_percent: Optional[float] = typer.Option(
        None, help="Yearly taxes, insurance and upkeep as a percent of the price (default 1.5)."
    ),
    store_path: str = typer.Option(
        default_factory=_default_store_path,
        help="JSON file holding saved inputs (env BUY_VS_RENT_STORE if omitted).",
    ),
    save: bool = typer.Option(True, help="Remember these inputs for the next run."),
    show_timeline: bool = typer.Option(
        False, help="If set, dump the yearly net worth series as JSON."
    ),
    verbose: bool = typer.Option(False, help="Enable debug logging."),
) -> None:
    """
    Project both strategies year by year and report which builds more wealth.

    Options left out fall back to the inputs saved by the previous run.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    overrides: Dict[str, Any] = {
        "home_price": home_price,
        "down_payment": down_payment,
        "mortgage_rate": mortgage_rate,
        "mortgage_term": mortgage_term,
        "home_appreciation_rate": home_appreciation_rate,
        "initial_rent": initial_rent,
        "rent_increase_rate": rent_increase_rate,
        "investment_return_rate": investment_return_rate,
        "time_horizon": time_horizon,
        "closing_costs_percent": closing_costs_percent,
        "selling_costs_percent": selling_costs_percent,
        "annual_ownership_cost_percent": annual_ownership_cost_percent,
    }
    store = InputStore(store_path)
    values = store.load()
    values.update({name: value for name, value in overrides.items() if value is not None})

    try:
        inputs = ProjectionInputs.from_mapping(values)
    except InputValidationError as exc:
        for issue in exc.issues:
            typer.echo(f"Invalid input ({issue.kind.value}) {issue}", err=True)
        raise typer.Exit(code=2)

    if save:
        store.save(inputs)

    result = compare_scenarios(inputs)
    years = inputs.time_horizon

    typer.echo(f"Loan amount: ${inputs.loan_amount:,.0f}")
    typer.echo(f"Monthly mortgage payment: ${result.monthly_payment:,.0f}")
    typer.echo(
        f"Monthly ownership cost (payment+upkeep): ${result.monthly_ownership_cost:,.0f}"
    )
    typer.echo(f"Monthly rent: ${inputs.initial_rent:,.0f}")
    typer.echo("")
    typer.echo(f"If you buy: ${result.final_buy_net_worth:,} after {years} years")
    typer.echo(f"If you rent & invest: ${result.final_rent_net_worth:,} after {years} years")
    if result.difference == 0:
        typer.echo(f"Buying and renting break even over {years} years")
    else:
        typer.echo(
            f"{result.winner_label} builds more wealth by "
            f"${abs(result.difference):,} over {years} years"
        )
    if result.break_even_year is not None:
        typer.echo(f"Buying catches up in year {result.break_even_year}")

    if show_timeline:
        payload = [
            {
                "year": point.year,
                "buy_net_worth": point.buy_net_worth,
                "rent_net_worth": point.rent_net_worth,
                "home_value": point.home_value,
                "loan_balance": point.loan_balance,
            }
            for point in result.timeline
        ]
        typer.echo(json.dumps(payload, indent=2))


@app.command()
def reset(
    store_path: str = typer.Option(
        default_factory=_default_store_path,
        help="JSON file holding saved inputs (env BUY_VS_RENT_STORE if omitted).",
    ),
) -> None:
    """Forget saved inputs so the next run starts from the defaults."""
    if InputStore(store_path).clear():
        typer.echo("Saved inputs cleared.")
    else:
        typer.echo("No saved inputs to clear.")


if __name__ == "__main__":
    app()
