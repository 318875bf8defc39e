from typing import Iterable, List, Optional
from loguru import logger
from ..schemas.ticker import TickerQuote
from ..schemas.opportunity import ArbitrageOpportunity, OpportunityLeg

# Spreads below this are quoting/rounding noise, not opportunities.
MIN_SPREAD_PERCENT = 0.1

def valid_quotes(quotes: Iterable[TickerQuote]) -> List[TickerQuote]:
    return [q for q in quotes if q.is_valid]

def _leg(q: TickerQuote) -> OpportunityLeg:
    return OpportunityLeg(
        exchange_name=q.exchange_name,
        exchange_logo_url=q.exchange_logo_url,
        pair_label=q.pair_label,
        price=q.price_usd,
    )

def find_best_opportunity(quotes: Iterable[TickerQuote]) -> Optional[ArbitrageOpportunity]:
    """
    Cheapest valid quote is the buy leg, dearest is the sell leg.

    On equal prices the first quote in input order wins (min/max are stable).
    Returns None when there are fewer than two valid quotes, when both legs are
    the same exchange and target currency, or when the rounded spread is below
    MIN_SPREAD_PERCENT.
    """
    valid = valid_quotes(quotes)
    if len(valid) < 2:
        return None

    buy = min(valid, key=lambda q: q.price_usd)
    sell = max(valid, key=lambda q: q.price_usd)

    if buy.exchange_name == sell.exchange_name and buy.target_symbol == sell.target_symbol:
        return None

    spread = round((sell.price_usd - buy.price_usd) / buy.price_usd * 100, 2)
    if spread < MIN_SPREAD_PERCENT:
        logger.debug(f"[arbitrage] spread {spread}% below {MIN_SPREAD_PERCENT}% ({len(valid)} quotes)")
        return None

    return ArbitrageOpportunity(buy=_leg(buy), sell=_leg(sell), spread_percent=spread)

def leg_role(quote: TickerQuote, opportunity: Optional[ArbitrageOpportunity]) -> Optional[str]:
    """'buy' / 'sell' when the quote is one of the opportunity's legs (exact name and price match)."""
    if opportunity is None:
        return None
    if quote.exchange_name == opportunity.buy.exchange_name and quote.price_usd == opportunity.buy.price:
        return "buy"
    if quote.exchange_name == opportunity.sell.exchange_name and quote.price_usd == opportunity.sell.price:
        return "sell"
    return None
