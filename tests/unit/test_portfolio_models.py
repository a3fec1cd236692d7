import pytest

from portfolio_tracker.domain.models import Position, PortfolioView, Summary
from portfolio_tracker.domain.schemas.portfolio import (
    HoldingUpsertRequest,
    PortfolioResponse,
)


@pytest.mark.unit
def test_position_is_immutable():
    position = Position(ticker="AAPL", shares=10, average_cost=100)
    with pytest.raises(AttributeError):
        position.shares = 20


@pytest.mark.unit
def test_position_invested_amount():
    assert Position(ticker="AAPL", shares=12, average_cost=180).invested_amount == 2160


@pytest.mark.unit
def test_upsert_request_accepts_camel_case():
    req = HoldingUpsertRequest.model_validate({"ticker": "aapl", "shares": 3, "buyPrice": 12.5})
    assert req.ticker == "aapl"
    assert req.shares == 3.0
    assert req.buy_price == 12.5


@pytest.mark.unit
def test_portfolio_response_serializes_camel_case():
    view = PortfolioView(
        holdings=[Position(ticker="AAPL", shares=2, average_cost=10)],
        prices={"AAPL": 11.0},
        summary=Summary(total_invested=20.0, current_value=22.0, total_pl=2.0),
    )

    data = PortfolioResponse.from_view(view).model_dump(by_alias=True)

    assert data == {
        "holdings": [{"ticker": "AAPL", "shares": 2.0, "averageCost": 10.0}],
        "prices": {"AAPL": 11.0},
        "summary": {"totalInvested": 20.0, "currentValue": 22.0, "totalPL": 2.0},
    }
