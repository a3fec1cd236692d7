from fastapi import Request

from portfolio_tracker.domain.services.ledger import PortfolioLedger


def get_ledger(request: Request) -> PortfolioLedger:
    """Ledger owned by the running application (set in create_app)."""
    return request.app.state.ledger
