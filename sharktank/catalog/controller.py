"""
Catalog Controller

Handles:
    - Owning the session state (deals, filters, sort, current page)
    - Re-running filter -> sort -> paginate after each change
    - Handing the resulting view-model to the render callback
"""

# Python Packages
import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

# Models
from ..models.deal import Deal

# Catalog
from .fetcher import DealFetcher
from .filters import FilterState, SortSpec, apply
from .pagination import PageWindow, paginate
from .stats import DealFacets, DealStats, facets, summarize

# Constants
from ..base import constants

# Exceptions
from ..util.exceptions import PageOutOfRangeError

logger = logging.getLogger(__name__)





@dataclass
class CatalogView:
    """ Everything the presentation layer needs for one render... """

    items: List[Deal]
    window: PageWindow
    stats: DealStats
    facets: DealFacets
    result_count: int
    source: Optional[str] = None
    loading: bool = False
    sort: Optional[str] = None
    filters: FilterState = field(default_factory = FilterState)

    @property
    def is_empty(self) -> bool:
        return self.result_count == 0



class CatalogController:

    def __init__(
        self,
        fetcher: DealFetcher = None,
        items_per_page: int = None,
        on_render: Callable[[CatalogView], None] = None
    ):
        self.fetcher = fetcher or DealFetcher()
        self.items_per_page = items_per_page or constants.ITEMS_PER_PAGE
        self.on_render = on_render

        self.deals: List[Deal] = []
        self.filtered: List[Deal] = []
        self.filters = FilterState()
        self.sort: Optional[SortSpec] = None
        self.current_page = 1
        self.source: Optional[str] = None
        self.loading = False

        self._generation = 0
        self._lock = threading.Lock()


    # ---------------------------------------------------------
    # 🔹 Loading
    # ---------------------------------------------------------
    def load(self) -> bool:
        """
        Load (or reload) every deal

        Each call takes a new generation; if another load starts before
        this one returns, this result is dropped.

        Returns:
            bool: True when this call's result was applied
        """

        with self._lock:
            self._generation += 1
            generation = self._generation
            self.loading = True

        result = self.fetcher.load()

        with self._lock:
            if generation != self._generation:
                logger.info("Dropping superseded deal load (generation %d)", generation)
                return False

            self.deals = result.deals
            self.source = result.source
            self.loading = False

        self._apply()
        return True


    # ---------------------------------------------------------
    # 🔹 Filters & Sort
    # ---------------------------------------------------------
    def set_search(self, term: str):
        self.filters.search = term or ""
        self._apply()


    def set_seasons(self, seasons: Iterable[int]):
        self.filters.seasons = {int(season) for season in seasons}
        self._apply()


    def set_categories(self, categories: Iterable[str]):
        self.filters.categories = set(categories)
        self._apply()


    def set_status(self, status: Iterable[bool]):
        self.filters.status = {bool(closed) for closed in status}
        self._apply()


    def set_participants(self, participants: Iterable[str]):
        self.filters.participants = set(participants)
        self._apply()


    def set_investors(self, investors: Iterable[str]):
        self.filters.investors = set(investors)
        self._apply()


    def set_investment_range(self, minimum: float = None, maximum: float = None):
        """ Inclusive bounds on amount requested; None leaves a side open... """

        self.filters.min_investment = minimum
        self.filters.max_investment = maximum
        self._apply()


    def set_sort(self, selector: Optional[str]):
        """
        Args:
            selector: '<field>' or '<field>-desc', empty for input order
        """

        self.sort = SortSpec.parse(selector)
        self._apply()


    def clear_filters(self):
        self.filters.clear()
        self.sort = None
        self._apply()


    # ---------------------------------------------------------
    # 🔹 Paging
    # ---------------------------------------------------------
    def change_page(self, page: int) -> bool:
        """
        Move to another page; out of range is ignored

        Returns:
            bool: True when the page changed
        """

        try:
            paginate(self.filtered, self.items_per_page, page)

        except PageOutOfRangeError:
            return False

        if not self.filtered:
            return False

        self.current_page = page
        self._render()
        return True


    # ---------------------------------------------------------
    # 🔹 View
    # ---------------------------------------------------------
    def view(self) -> CatalogView:
        items, window = paginate(self.filtered, self.items_per_page, self.current_page)

        return CatalogView(
            items = items,
            window = window,
            stats = summarize(self.deals),
            facets = facets(self.deals),
            result_count = len(self.filtered),
            source = self.source,
            loading = self.loading,
            sort = str(self.sort) if self.sort else None,
            filters = self.filters.copy()
        )


    def find(self, deal_id: str) -> Optional[Deal]:
        """ Deal for the detail view, over the whole catalog... """

        return next((deal for deal in self.deals if deal.id == deal_id), None)


    def _apply(self):
        self.filtered = apply(self.deals, self.filters, self.sort)
        self.current_page = 1
        self._render()


    def _render(self):
        if self.on_render is not None:
            self.on_render(self.view())
