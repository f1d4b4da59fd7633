"""Adapters: cache and reference-data sources."""

from demofilter.infrastructure.adapters.json_source import JsonFileGroupSource
from demofilter.infrastructure.adapters.memory_source import InMemoryGroupSource
from demofilter.infrastructure.adapters.ttl_cache import CacheEntry, TTLCache

__all__ = ["CacheEntry", "InMemoryGroupSource", "JsonFileGroupSource", "TTLCache"]
