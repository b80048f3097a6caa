"""Roll account balances up into base-currency subtotals."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from journey.core.currency import ExchangeRates, from_base, to_base
from journey.models import Account, Currency, Holdings


def aggregate_holdings(accounts: Iterable[Account], rates: Optional[ExchangeRates] = None) -> Holdings:
    """Split current balances into investments and cash, in USD, unrounded."""
    investments = 0.0
    cash = 0.0

    for account in accounts:
        balance_usd = to_base(account.balance, account.currency, rates)
        if account.is_investment:
            investments += balance_usd
        else:
            cash += balance_usd

    return Holdings(total=investments + cash, investments=investments, cash=cash)


def net_worth_by_currency(
    accounts: Iterable[Account], rates: Optional[ExchangeRates] = None
) -> Dict[Currency, float]:
    total = aggregate_holdings(accounts, rates).total
    return {currency: from_base(total, currency, rates) for currency in Currency}
