"""
Deal Stats & Facets

Headline numbers over the whole catalog and the distinct values each
filter can choose from.
"""

# Python Packages
import math
from dataclasses import dataclass, field
from typing import Iterable, List

# Models
from ..models.deal import Deal





@dataclass
class DealStats:
    total_companies: int = 0
    closed_deals: int = 0
    total_investment: float = 0
    success_rate: int = 0



@dataclass
class DealFacets:
    seasons: List[int] = field(default_factory = list)
    categories: List[str] = field(default_factory = list)
    participants: List[str] = field(default_factory = list)
    investors: List[str] = field(default_factory = list)



def summarize(deals: Iterable[Deal]) -> DealStats:
    """
    Stats for the stats bar

    total_investment sums what was negotiated on closed deals;
    success_rate is the closed share as a whole percentage, rounded
    half up.
    """

    deals = list(deals)
    closed = [deal for deal in deals if deal.closed_deal]

    total = len(deals)
    rate = math.floor(len(closed) / total * 100 + 0.5) if total else 0

    return DealStats(
        total_companies = total,
        closed_deals = len(closed),
        total_investment = sum(deal.amount_negotiated or 0 for deal in closed),
        success_rate = rate
    )



def facets(deals: Iterable[Deal]) -> DealFacets:
    deals = list(deals)

    return DealFacets(
        seasons = sorted({deal.season for deal in deals}),
        categories = sorted({deal.category for deal in deals}),
        participants = sorted({name for deal in deals for name in deal.participants}),
        investors = sorted({name for deal in deals for name in deal.investors})
    )
