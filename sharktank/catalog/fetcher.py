"""
Deal Fetcher

Handles:
    - Serve deals from the cache while it is fresh
    - Otherwise fetch the full list from the deals API and re-cache it

Load failures are logged and swallowed: the caller gets an empty
result with no source. A failed cache write only loses the cache.
"""

# Python Packages
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import httpx

# Models
from ..models.deal import Deal

# Cache
from .cache_store import CacheStore

# Constants
from ..base import constants

# Messages
from ..util import messages

logger = logging.getLogger(__name__)

SOURCE_CACHE = "cache"
SOURCE_API = "api"





@dataclass
class FetchResult:
    deals: List[Deal] = field(default_factory = list)
    source: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.source is not None



class DealFetcher:

    def __init__(
        self,
        cache: CacheStore = None,
        api_url: str = None,
        client: httpx.Client = None,
        timeout: Optional[float] = None
    ):
        self.cache = cache or CacheStore()
        self.api_url = api_url or constants.DEALS_API_URL
        self.client = client
        self.timeout = constants.DEALS_API_TIMEOUT if timeout is None else timeout


    def load(self) -> FetchResult:
        """
        Load every deal, cache first

        Returns:
            FetchResult: deals plus where they came from ("cache"/"api"),
                or an empty result with source None on any failure
        """

        try:
            cached = self.cache.read()
            if cached is not None:
                deals, age_ms = cached
                logger.info("%s (%d deals, %d ms old)", messages.SUCCESS["DEALS_FROM_CACHE"], len(deals), age_ms)
                return FetchResult(deals, SOURCE_CACHE)

            deals = self.parse(self.fetch_raw())

        except Exception as error:
            logger.warning("Deal load failed: %s", error)
            return FetchResult()

        # Deals already fetched are kept even if the snapshot cannot be saved
        try:
            self.cache.write(deals)

        except Exception as error:
            logger.warning("Deal cache write failed: %s", error)

        logger.info("%s (%d deals)", messages.SUCCESS["DEALS_FROM_API"], len(deals))
        return FetchResult(deals, SOURCE_API)


    def fetch_raw(self) -> list:
        """
        GET the raw deal list; non-2xx raises httpx.HTTPStatusError

        An injected client keeps its own timeout settings.
        """

        if self.client is not None:
            response = self.client.get(self.api_url)
        else:
            with httpx.Client(timeout = self.timeout) as client:
                response = client.get(self.api_url)

        response.raise_for_status()
        return response.json()


    def parse(self, items: list) -> List[Deal]:
        """
        Turn raw items into Deals, splitting each 'season#episode#company' id

        Items with a malformed id are skipped and logged; the rest of the
        snapshot is kept.
        """

        deals = []
        for item in items:
            try:
                deals.append(Deal.from_raw(item))

            except ValueError as error:
                logger.warning("Skipping deal: %s", error)

        return deals
