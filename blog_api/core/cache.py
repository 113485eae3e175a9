"""
Response cache

Best-effort key/value cache for read responses. Every backend swallows its
own failures: a failed read is a miss and a failed write or delete is logged
and ignored, so the cache can never fail a request.
"""

import json
import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Optional

import redis

logger = logging.getLogger(__name__)

DEFAULT_TTL = 3600

POSTS_PATH = "/posts"
COMMENTS_PATH = "/comments"
TAGS_PATH = "/tags"
SITEMAP_PATH = "/sitemap"


def generate_cache_key(path: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Build a cache key from a request path and its query parameters.

    Parameters are sorted by name so ``?page=0&size=10`` and
    ``?size=10&page=0`` share one entry. ``None`` values are dropped.
    """
    items = sorted((k, v) for k, v in (params or {}).items() if v is not None)
    if not items:
        return path
    return path + "?" + "&".join(f"{k}={v}" for k, v in items)


class CacheBackend(ABC):
    """Contract every cache backend implements"""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None on a miss"""

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def delete_by_prefix(self, prefix: str) -> None:
        ...

    def get_or_set(self, key: str, fetch: Callable[[], Any], ttl: int = DEFAULT_TTL) -> Any:
        """Return the cached value for key, populating it from fetch on a miss"""
        cached = self.get(key)
        if cached is not None:
            logger.debug(f"Cache hit: {key}")
            return cached

        logger.debug(f"Cache miss: {key}")
        value = fetch()
        self.set(key, value, ttl)
        return value


class NullCache(CacheBackend):
    """Cache that never stores anything"""

    def get(self, key: str) -> Optional[Any]:
        return None

    def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL) -> None:
        pass

    def delete(self, key: str) -> None:
        pass

    def delete_by_prefix(self, prefix: str) -> None:
        pass


class InMemoryCache(CacheBackend):
    """
    Process-local cache with per-entry expiry.

    Values are stored as JSON text so a hit returns a fresh copy, exactly
    like a round trip through a remote store would.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            payload, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
        return json.loads(payload)

    def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL) -> None:
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.warning(f"Cache write error for key '{key}': {e}")
            return
        with self._lock:
            self._entries[key] = (payload, self._clock() + ttl)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def delete_by_prefix(self, prefix: str) -> None:
        with self._lock:
            for key in [k for k in self._entries if k.startswith(prefix)]:
                del self._entries[key]

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._entries)


def _escape_glob(pattern: str) -> str:
    """Escape characters Redis MATCH treats as glob syntax"""
    return "".join("\\" + ch if ch in "*?[]\\" else ch for ch in pattern)


class RedisCache(CacheBackend):
    """Redis-backed cache; values are stored as JSON with SETEX"""

    def __init__(self, client: redis.Redis) -> None:
        self.client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisCache":
        return cls(redis.Redis.from_url(url, decode_responses=True))

    def get(self, key: str) -> Optional[Any]:
        try:
            payload = self.client.get(key)
        except redis.RedisError as e:
            logger.warning(f"Cache read error for key '{key}': {e}")
            return None
        if payload is None:
            return None
        try:
            return json.loads(payload)
        except ValueError as e:
            logger.warning(f"Cache entry '{key}' is not valid JSON: {e}")
            return None

    def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL) -> None:
        try:
            self.client.setex(key, ttl, json.dumps(value))
        except (redis.RedisError, TypeError, ValueError) as e:
            logger.warning(f"Cache write error for key '{key}': {e}")

    def delete(self, key: str) -> None:
        try:
            self.client.delete(key)
        except redis.RedisError as e:
            logger.warning(f"Cache invalidation error for key '{key}': {e}")

    def delete_by_prefix(self, prefix: str) -> None:
        try:
            keys = list(self.client.scan_iter(match=_escape_glob(prefix) + "*"))
            if keys:
                self.client.delete(*keys)
        except redis.RedisError as e:
            logger.warning(f"Cache prefix invalidation error for '{prefix}': {e}")


# ---------- invalidation conventions (shared with the admin service) ----------

def invalidate_post_cache(cache: CacheBackend, *ids_or_slugs: Any) -> None:
    """Drop the detail entries of one post and every cached post list"""
    for ident in ids_or_slugs:
        if ident is not None:
            cache.delete(f"{POSTS_PATH}/{ident}")
    cache.delete_by_prefix(f"{POSTS_PATH}?")
    logger.info(f"Invalidated post caches for {list(ids_or_slugs)}")


def invalidate_comment_cache(cache: CacheBackend, post_id: int) -> None:
    cache.delete(f"{COMMENTS_PATH}/{post_id}")
    logger.info(f"Invalidated comment cache for post {post_id}")


def invalidate_tag_cache(cache: CacheBackend) -> None:
    """Called by the admin service after tag or post-tag writes"""
    cache.delete(TAGS_PATH)


def invalidate_sitemap_cache(cache: CacheBackend) -> None:
    """Called by the admin service whenever the set of published slugs changes"""
    cache.delete(SITEMAP_PATH)
