"""
Currency Service - exchange rates and conversion
"""
import time
import logging
from typing import Callable, Dict, List, Optional

import requests

from fintracker.core.config import EXCHANGE_RATE_API_KEY, EXCHANGE_RATE_TTL_SECONDS
from fintracker.core.exceptions import CurrencyConversionError
from fintracker.models.base import CamelModel

logger = logging.getLogger(__name__)

API_URL = "https://v6.exchangerate-api.com/v6/{api_key}/latest/USD"

# Rates relative to USD, used when the API is unavailable
FALLBACK_RATES: Dict[str, float] = {
    "USD": 1,
    "INR": 74.5,
    "EUR": 0.85,
    "GBP": 0.73,
    "JPY": 110.2,
    "CAD": 1.25,
    "AUD": 1.36,
}


class ConversionResult(CamelModel):
    """Result of a conversion; `error` is set when the amount passed through unchanged"""
    original_amount: float
    converted_amount: float
    exchange_rate: float
    error: Optional[str] = None


class ExchangeRateCache:
    """Last fetched rate table and the time it was stored"""

    def __init__(self, ttl: float = EXCHANGE_RATE_TTL_SECONDS, clock: Callable[[], float] = time.time):
        self.ttl = ttl
        self.clock = clock
        self.rates: Optional[Dict[str, float]] = None
        self.last_updated: Optional[float] = None

    def get(self) -> Optional[Dict[str, float]]:
        """Returns the cached rates while they are fresh, else None"""
        if self.rates is None or self.last_updated is None:
            return None
        if self.clock() - self.last_updated >= self.ttl:
            return None
        return self.rates

    def store(self, rates: Dict[str, float]) -> Dict[str, float]:
        self.rates = rates
        self.last_updated = self.clock()
        return rates


class CurrencyService:
    """Exchange-rate lookup with a TTL cache and a static fallback table"""

    def __init__(
        self,
        api_key: Optional[str] = EXCHANGE_RATE_API_KEY,
        cache: Optional[ExchangeRateCache] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 5,
    ):
        self.api_key = api_key
        self.cache = cache or ExchangeRateCache()
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_exchange_rates(self) -> Dict[str, float]:
        """
        Returns the current rate table (relative to USD).
        Never raises: any failure stores and returns FALLBACK_RATES.
        """
        cached = self.cache.get()
        if cached is not None:
            return cached

        if not self.api_key:
            logger.warning("No exchange rate API key found, using fallback rates")
            return self.cache.store(dict(FALLBACK_RATES))

        try:
            response = self.session.get(API_URL.format(api_key=self.api_key), timeout=self.timeout)
            response.raise_for_status()
            rates = response.json().get("conversion_rates")
            if not rates:
                raise CurrencyConversionError("Invalid response from exchange rate API")
            return self.cache.store(rates)
        except Exception as e:
            logger.error(f"Error fetching exchange rates: {e}", exc_info=True)
            logger.warning("Using fallback exchange rates")
            return self.cache.store(dict(FALLBACK_RATES))

    def convert(self, amount: float, from_currency: str, to_currency: str) -> ConversionResult:
        """
        Converts `amount` between currencies.
        On failure returns the original amount with rate 1 and logs the error.
        """
        if from_currency == to_currency:
            return ConversionResult(original_amount=amount, converted_amount=amount, exchange_rate=1)

        try:
            rates = self.fetch_exchange_rates()
            from_rate = rates.get(from_currency)
            to_rate = rates.get(to_currency)

            if not from_rate or not to_rate:
                raise CurrencyConversionError(
                    f"Exchange rate not available for {from_currency} or {to_currency}"
                )

            exchange_rate = to_rate / from_rate
            return ConversionResult(
                original_amount=amount,
                converted_amount=amount * exchange_rate,
                exchange_rate=exchange_rate,
            )
        except CurrencyConversionError as e:
            logger.error(f"Currency conversion error: {e}")
            return ConversionResult(
                original_amount=amount, converted_amount=amount, exchange_rate=1, error=str(e)
            )

    def supported_currencies(self) -> List[str]:
        return list(self.fetch_exchange_rates().keys())
