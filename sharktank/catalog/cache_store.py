"""
Cache Store

Handles:
    - Persist the last fetched deal snapshot with its fetch time
    - Serve it back while younger than CACHE_DURATION_MS

The snapshot is all-or-nothing: there is no per-record expiry.
"""

# Python Packages
import json
import logging
import os
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Protocol, Tuple

# Models
from ..models.deal import Deal

# Constants
from ..base import constants

logger = logging.getLogger(__name__)





def now_ms() -> int:
    return int(time.time() * 1000)



class KeyValueStore(Protocol):
    """ Local persistent string store the cache writes into... """

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...



class MemoryKeyValueStore:
    """ Dict backed store, lives as long as the process... """

    def __init__(self, initial: Dict[str, str] = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value



class FileKeyValueStore:
    """ One file per key under a directory, survives restarts... """

    def __init__(self, directory: str = None):
        self.directory = Path(directory or constants.CACHE_DIR)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding = "utf-8")

    def set(self, key: str, value: str) -> None:
        """ Write to a temp file, then rename over the old one... """

        self.directory.mkdir(parents = True, exist_ok = True)
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(value, encoding = "utf-8")
        os.replace(tmp_path, path)





class CacheStore:

    def __init__(
        self,
        store: KeyValueStore = None,
        clock: Callable[[], int] = now_ms,
        max_age_ms: int = None
    ):
        """
        Args:
            store: key-value area holding the two cache entries
            clock: returns the current time in epoch milliseconds
            max_age_ms: snapshot lifetime (default CACHE_DURATION_MS)
        """

        self.store = store if store is not None else FileKeyValueStore()
        self.clock = clock
        self.max_age_ms = constants.CACHE_DURATION_MS if max_age_ms is None else max_age_ms


    def read(self) -> Optional[Tuple[List[Deal], int]]:
        """
        Return the cached snapshot if still valid

        Returns:
            tuple: (deals, age in ms), or None when missing, expired or corrupt
        """

        cached = self.store.get(constants.CACHE_KEY)
        cached_time = self.store.get(constants.CACHE_TIME_KEY)

        if not cached or not cached_time:
            return None

        try:
            age_ms = self.clock() - int(cached_time)
            if age_ms >= self.max_age_ms:
                logger.info("Deal cache expired (%d ms old)", age_ms)
                return None

            deals = [Deal.from_raw(item) for item in json.loads(cached)]

        except (ValueError, TypeError, AttributeError) as error:
            logger.warning("Ignoring unreadable deal cache: %s", error)
            return None

        return deals, age_ms


    def write(self, deals: List[Deal], timestamp: int = None):
        """
        Replace the snapshot

        Args:
            deals: parsed deals
            timestamp: fetch time in epoch ms (default: now)
        """

        timestamp = self.clock() if timestamp is None else timestamp

        # Snapshot is unreadable until the new timestamp lands
        self.store.set(constants.CACHE_TIME_KEY, "")
        self.store.set(constants.CACHE_KEY, json.dumps([deal.to_dict() for deal in deals]))
        self.store.set(constants.CACHE_TIME_KEY, str(int(timestamp)))
