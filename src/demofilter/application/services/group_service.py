"""Demographic group service: reference groups through a TTL cache."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from demofilter.domain.exceptions import GroupFetchError
from demofilter.domain.model.config import FilterConfig
from demofilter.infrastructure.adapters.ttl_cache import TTLCache
from demofilter.infrastructure.group_loader import load_groups

if TYPE_CHECKING:
    from demofilter.domain.model.group import DemographicGroup
    from demofilter.domain.ports.group_source import GroupSourcePort

logger = logging.getLogger(__name__)


class DemographicGroupService:
    """Loads reference groups for the configured data source.

    Results are cached per data source for config.cache_ttl seconds
    unless caching is disabled. Pass one instance to every call site
    that should share the cache.
    """

    def __init__(
        self,
        source: GroupSourcePort,
        config: FilterConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize service.

        Args:
            source: Raw reference row source.
            config: Filter configuration. Uses defaults if None.
            clock: Time source for cache expiry.

        Raises:
            TypeError: If source is None
        """
        if source is None:
            raise TypeError("source must not be None")
        self._source = source
        self._config = config or FilterConfig()
        self._cache: TTLCache[tuple[DemographicGroup, ...]] = TTLCache(
            ttl=self._config.cache_ttl, clock=clock
        )

    @property
    def data_source(self) -> str:
        """Configured data source name."""
        return self._config.data_source

    def fetch_groups(self) -> tuple[DemographicGroup, ...]:
        """Return reference groups, from cache when fresh.

        Returns:
            Groups in source row order.

        Raises:
            GroupFetchError: If the source fails. Original error is __cause__.
        """
        key = self._config.data_source
        if self._config.enable_caching:
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug("Group cache hit for %s", key)
                return cached
            logger.debug("Group cache miss for %s", key)

        try:
            groups = load_groups(self._source.fetch_rows(key))
        except Exception as e:
            logger.exception("Error fetching demographic data from %s", key)
            raise GroupFetchError(key) from e

        if self._config.enable_caching:
            self._cache.put(key, groups)
        return groups

    def clear_cache(self) -> None:
        """Drop all cached groups."""
        self._cache.clear()
