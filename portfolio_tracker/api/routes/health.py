
from fastapi import APIRouter

from portfolio_tracker.domain.schemas.portfolio import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")
