"""
Web API Router - health and reference data for the frontend
"""
from fastapi import APIRouter, Depends

from fintracker.deps import get_currency_service
from fintracker.services.currency_service import CurrencyService

router = APIRouter(prefix="/api", tags=["web"])


@router.get("/health")
def health():
    """Health check endpoint"""
    return {"status": "ok", "service": "fintracker API"}


@router.get("/v1/currencies")
def currencies(currency: CurrencyService = Depends(get_currency_service)):
    """Currencies with a known exchange rate"""
    return {"currencies": currency.supported_currencies()}
