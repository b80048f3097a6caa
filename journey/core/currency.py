"""Currency normalization against a USD-based rate snapshot.

A snapshot maps a currency code to the number of units of that currency one
US dollar buys (``{"USD": 1, "EUR": 0.92, ...}``). Fetching and caching live
rates is somebody else's job; these helpers only read a snapshot.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Union

import structlog

from journey.models import BASE_CURRENCY, Currency

logger = structlog.get_logger(__name__)

ExchangeRates = Mapping[str, float]
CurrencyLike = Union[Currency, str]

# Last-resort defaults used only when no snapshot is supplied at all.
# Illustrative magnitudes, never a live quote.
FALLBACK_RATES: ExchangeRates = MappingProxyType(
    {
        "USD": 1.0,
        "CZK": 20.63,
        "EUR": 0.85,
        "GBP": 0.79,
        "JPY": 149.5,
        "CHF": 0.88,
        "CAD": 1.36,
        "AUD": 1.53,
    }
)


def _code(currency: CurrencyLike) -> str:
    return currency.value if isinstance(currency, Currency) else str(currency).upper()


def _active_rates(rates: Optional[ExchangeRates]) -> ExchangeRates:
    if rates is None:
        logger.debug("exchange_rates_missing", fallback=True)
        return FALLBACK_RATES
    return rates


def _rate(rates: ExchangeRates, code: str) -> Optional[float]:
    # Currency members hash like their codes, so either key style resolves
    rate = rates.get(code)
    if rate is None and code == BASE_CURRENCY.value:
        return 1.0
    return rate or None


def convert_currency(
    amount: float,
    source: CurrencyLike,
    target: CurrencyLike,
    rates: Optional[ExchangeRates] = None,
) -> float:
    """
    Convert ``amount`` from ``source`` to ``target`` through the base currency.

    A currency absent (or zero) in a supplied snapshot leaves ``amount``
    unconverted and logs a warning.
    """
    source_code, target_code = _code(source), _code(target)
    if source_code == target_code:
        return amount

    active = _active_rates(rates)
    source_rate = _rate(active, source_code)
    target_rate = _rate(active, target_code)
    if source_rate is None or target_rate is None:
        logger.warning(
            "exchange_rate_missing",
            source=source_code,
            target=target_code,
            amount=amount,
            action="returning unconverted amount",
        )
        return amount

    return amount / source_rate * target_rate


def to_base(amount: float, source: CurrencyLike, rates: Optional[ExchangeRates] = None) -> float:
    """Express ``amount`` of ``source`` in the base currency (USD)."""
    return convert_currency(amount, source, BASE_CURRENCY, rates)


def from_base(amount: float, target: CurrencyLike, rates: Optional[ExchangeRates] = None) -> float:
    return convert_currency(amount, BASE_CURRENCY, target, rates)


def exchange_rate(
    source: CurrencyLike,
    target: CurrencyLike,
    rates: Optional[ExchangeRates] = None,
) -> Optional[float]:
    """Units of ``target`` bought by one unit of ``source``; None if either rate is unknown."""
    source_code, target_code = _code(source), _code(target)
    if source_code == target_code:
        return 1.0

    active = _active_rates(rates)
    source_rate = _rate(active, source_code)
    target_rate = _rate(active, target_code)
    if source_rate is None or target_rate is None:
        return None
    return target_rate / source_rate
