"""
Portfolio API Routes
List, add/merge and delete holdings

Invalid upserts (schema or ledger validation) are turned into
400 {"error": "Invalid payload"} by the handlers registered in main.
"""

from fastapi import APIRouter, Depends

from portfolio_tracker.api.dependencies import get_ledger
from portfolio_tracker.domain.schemas.portfolio import (
    HoldingUpsertRequest,
    PortfolioMutationResponse,
    PortfolioResponse,
)
from portfolio_tracker.domain.services.ledger import PortfolioLedger

router = APIRouter()


@router.get("", response_model=PortfolioResponse)
def get_portfolio(ledger: PortfolioLedger = Depends(get_ledger)):
    """
    Get holdings, mock prices and summary
    """
    return PortfolioResponse.from_view(ledger.list_holdings())


@router.post("", response_model=PortfolioMutationResponse)
def upsert_holding(
    payload: HoldingUpsertRequest,
    ledger: PortfolioLedger = Depends(get_ledger),
):
    """
    Add a holding, or merge a buy into an existing one
    (weighted-average cost basis)
    """
    view = ledger.upsert_holding(payload.ticker, payload.shares, payload.buy_price)
    return PortfolioMutationResponse.from_view(view)


@router.delete("/{ticker}", response_model=PortfolioMutationResponse)
def delete_holding(ticker: str, ledger: PortfolioLedger = Depends(get_ledger)):
    """
    Delete a holding. Deleting an unknown ticker is not an error.
    """
    return PortfolioMutationResponse.from_view(ledger.delete_holding(ticker))
