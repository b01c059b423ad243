"""
Redis cache client configuration
"""
from django.core.cache import caches
from typing import Any, Optional
import logging

logger = logging.getLogger(__name__)


class RedisClient:
    """
    Wrapper for namespaced cache operations.

    Backed by django-redis when REDIS_URL is configured, otherwise by the
    local-memory cache. A timeout of None keeps the entry until deleted.
    Errors are logged and swallowed unless raise_errors is set.
    """

    def __init__(self, namespace: str = '', alias: str = 'default', raise_errors: bool = False):
        self.namespace = namespace
        self.alias = alias
        self.raise_errors = raise_errors

    @property
    def cache(self):
        return caches[self.alias]

    def make_key(self, key: str) -> str:
        return f"{self.namespace}:{key}" if self.namespace else key

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache

        Args:
            key: Cache key (without namespace)

        Returns:
            Cached value or None
        """
        try:
            return self.cache.get(self.make_key(key))
        except Exception as e:
            logger.error(f"Error getting from cache: {str(e)}")
            if self.raise_errors:
                raise
            return None

    def set(self, key: str, value: Any, timeout: Optional[int] = None) -> bool:
        """
        Set value in cache

        Args:
            key: Cache key (without namespace)
            value: Value to cache
            timeout: Timeout in seconds, None for no expiry

        Returns:
            True if successful, False otherwise
        """
        try:
            self.cache.set(self.make_key(key), value, timeout)
            return True
        except Exception as e:
            logger.error(f"Error setting cache: {str(e)}")
            if self.raise_errors:
                raise
            return False

    def delete(self, key: str) -> bool:
        """
        Delete value from cache

        Returns:
            True if successful, False otherwise
        """
        try:
            self.cache.delete(self.make_key(key))
            return True
        except Exception as e:
            logger.error(f"Error deleting from cache: {str(e)}")
            if self.raise_errors:
                raise
            return False
