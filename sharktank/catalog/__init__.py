"""
Catalog Package
Client side of the deals catalog: cached loading, filtering, sorting,
pagination and the view-model handed to the presentation layer.
"""

from .cache_store import CacheStore, FileKeyValueStore, MemoryKeyValueStore
from .controller import CatalogController, CatalogView
from .fetcher import DealFetcher, FetchResult
from .filters import FilterState, SortSpec, apply
from .pagination import PageWindow, paginate
from .stats import DealFacets, DealStats, facets, summarize

__all__ = [
    "CacheStore",
    "FileKeyValueStore",
    "MemoryKeyValueStore",
    "CatalogController",
    "CatalogView",
    "DealFetcher",
    "FetchResult",
    "FilterState",
    "SortSpec",
    "apply",
    "PageWindow",
    "paginate",
    "DealFacets",
    "DealStats",
    "facets",
    "summarize",
]
