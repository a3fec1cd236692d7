from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Dict, List

from portfolio_tracker.domain.models import PortfolioView, Position, Summary


# shares / buyPrice: JSON numbers only (no numeric strings, no booleans),
# finite and strictly positive
PositiveNumber = Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False)]


class HoldingUpsertRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ticker: str = Field(strict=True, min_length=1)
    shares: PositiveNumber
    buy_price: PositiveNumber = Field(alias="buyPrice")


class PositionSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ticker: str
    shares: float
    average_cost: float = Field(alias="averageCost")

    @classmethod
    def from_domain(cls, position: Position) -> "PositionSchema":
        return cls(
            ticker=position.ticker,
            shares=position.shares,
            average_cost=position.average_cost,
        )


class SummarySchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_invested: float = Field(alias="totalInvested")
    current_value: float = Field(alias="currentValue")
    total_pl: float = Field(alias="totalPL")

    @classmethod
    def from_domain(cls, summary: Summary) -> "SummarySchema":
        return cls(
            total_invested=summary.total_invested,
            current_value=summary.current_value,
            total_pl=summary.total_pl,
        )


class PortfolioResponse(BaseModel):
    holdings: List[PositionSchema]
    prices: Dict[str, float]
    summary: SummarySchema

    @classmethod
    def from_view(cls, view: PortfolioView) -> "PortfolioResponse":
        return cls(
            holdings=[PositionSchema.from_domain(p) for p in view.holdings],
            prices=view.prices,
            summary=SummarySchema.from_domain(view.summary),
        )


class PortfolioMutationResponse(BaseModel):
    ok: bool = True
    portfolio: List[PositionSchema]
    summary: SummarySchema

    @classmethod
    def from_view(cls, view: PortfolioView) -> "PortfolioMutationResponse":
        return cls(
            portfolio=[PositionSchema.from_domain(p) for p in view.holdings],
            summary=SummarySchema.from_domain(view.summary),
        )


class HealthResponse(BaseModel):
    status: str = "ok"
