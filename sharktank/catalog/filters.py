"""
Filter / Sort Engine

apply() narrows the full deal list to what the current filter state
selects and orders it by the chosen sort. It never mutates its input.

Filter dimensions combine with AND; a dimension with nothing
selected does not filter.
"""

# Python Packages
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Set

# Models
from ..models.deal import Deal

# Exceptions
from ..util.exceptions import InvalidSortFieldError

DESC_SUFFIX = "-desc"





@dataclass
class FilterState:
    search: str = ""
    seasons: Set[int] = field(default_factory = set)
    categories: Set[str] = field(default_factory = set)
    status: Set[bool] = field(default_factory = set)
    participants: Set[str] = field(default_factory = set)
    investors: Set[str] = field(default_factory = set)
    min_investment: Optional[float] = None
    max_investment: Optional[float] = None


    def clear(self):
        """ Back to 'everything selected'... """

        self.search = ""
        self.seasons = set()
        self.categories = set()
        self.status = set()
        self.participants = set()
        self.investors = set()
        self.min_investment = None
        self.max_investment = None


    def copy(self) -> "FilterState":
        """ Independent copy, sets included... """

        return replace(
            self,
            seasons = set(self.seasons),
            categories = set(self.categories),
            status = set(self.status),
            participants = set(self.participants),
            investors = set(self.investors)
        )


    def is_empty(self) -> bool:
        return not (
            self.search
            or self.seasons
            or self.categories
            or self.status
            or self.participants
            or self.investors
            or self.min_investment is not None
            or self.max_investment is not None
        )



@dataclass(frozen = True)
class SortSpec:
    field: str
    descending: bool = False


    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SortSpec"]:
        """
        Parse a sort selector

        'amount_requested' sorts ascending, 'amount_requested-desc'
        descending. Empty means no sort.

        Raises:
            InvalidSortFieldError: field is not a Deal field
        """

        if not value:
            return None

        descending = value.endswith(DESC_SUFFIX)
        name = value[: -len(DESC_SUFFIX)] if descending else value

        if name not in Deal.field_names():
            raise InvalidSortFieldError(name)

        return cls(name, descending)


    def __str__(self):
        return f"{self.field}{DESC_SUFFIX}" if self.descending else self.field





def apply(
    deals: Iterable[Deal],
    filter_state: FilterState = None,
    sort_spec: SortSpec = None
) -> List[Deal]:
    """
    Filter, then sort

    Args:
        deals: full deal list
        filter_state: selections; None filters nothing
        sort_spec: ordering; None keeps input order

    Returns:
        list: new list of the matching deals
    """

    result = list(deals)

    if filter_state is not None:
        result = [deal for deal in result if matches(deal, filter_state)]

    if sort_spec is not None:
        result = sort_deals(result, sort_spec)

    return result



def matches(deal: Deal, state: FilterState) -> bool:
    """ True when the deal passes every active dimension... """

    if state.search and not matches_search(deal, state.search):
        return False

    if state.seasons and deal.season not in state.seasons:
        return False

    if state.categories and deal.category not in state.categories:
        return False

    if state.status and deal.closed_deal not in state.status:
        return False

    if state.participants and state.participants.isdisjoint(deal.participants):
        return False

    if state.investors and state.investors.isdisjoint(deal.investors):
        return False

    if state.min_investment is not None and not _at_least(deal.amount_requested, state.min_investment):
        return False

    if state.max_investment is not None and not _at_most(deal.amount_requested, state.max_investment):
        return False

    return True



def matches_search(deal: Deal, term: str) -> bool:
    """
    Case-insensitive substring over company, category, participants,
    investors and description
    """

    term = term.lower()

    return (
        term in deal.company.lower()
        or term in deal.category.lower()
        or any(term in participant.lower() for participant in deal.participants)
        or any(term in investor.lower() for investor in deal.investors)
        or term in deal.description.lower()
    )



def sort_deals(deals: List[Deal], sort_spec: SortSpec) -> List[Deal]:
    """
    Stable sort on one field

    Equal keys keep their input order in both directions. Deals without
    a value for the field go last, in input order.
    """

    present = [deal for deal in deals if getattr(deal, sort_spec.field) is not None]
    missing = [deal for deal in deals if getattr(deal, sort_spec.field) is None]

    present.sort(
        key = lambda deal: _sort_key(getattr(deal, sort_spec.field)),
        reverse = sort_spec.descending
    )

    return present + missing



def _sort_key(value):
    if isinstance(value, str):
        return value.lower()

    if isinstance(value, (list, tuple)):
        return tuple(_sort_key(v) for v in value)

    return value



def _at_least(amount, bound) -> bool:
    return amount is not None and amount >= bound



def _at_most(amount, bound) -> bool:
    return amount is not None and amount <= bound
