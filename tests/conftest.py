from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from portfolio_tracker.config import Settings
from portfolio_tracker.domain.services.ledger import PortfolioLedger
from portfolio_tracker.main import create_app


@pytest.fixture()
def ledger() -> PortfolioLedger:
    """Fresh, empty ledger per test"""
    return PortfolioLedger()


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(APP_ENV="test", SEED_DEMO_DATA=False)


@pytest.fixture()
def app(test_settings: Settings, ledger: PortfolioLedger) -> FastAPI:
    return create_app(settings=test_settings, ledger=ledger)


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
