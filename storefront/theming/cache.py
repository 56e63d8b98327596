"""
Shared cache for resolved themes and template locations.

Values live in both tiers of edx-django-utils' TieredCache: the request cache of the current
thread and the django cache shared by all workers. Expiry is left to the django cache timeout.

Computations of missing values are serialised per lock stripe, and the cache is checked again once
the lock is held. Callers racing on a key that is not cached yet therefore compute it once per
process in the common case. This is not a hard guarantee, other processes compute it on their own.
"""


import threading

from django.core.cache.backends.base import DEFAULT_TIMEOUT
from edx_django_utils.cache import TieredCache

LOCK_STRIPES = 64


class ResolutionCache:
    """
    Memoizes theme and template location lookups in the tiered cache.
    """

    def __init__(self, timeout=DEFAULT_TIMEOUT, stripes=LOCK_STRIPES):
        """
        Args:
            timeout (int): django cache timeout of stored values, None caches forever and
                DEFAULT_TIMEOUT uses the timeout of the django cache.
            stripes (int): number of locks shared by all keys.
        """
        self.timeout = timeout
        self._locks = [threading.Lock() for __ in range(stripes)]

    def lock(self, key):
        """
        Returns the lock guarding computations of the given key.
        """
        return self._locks[hash(key) % len(self._locks)]

    def get_cached_response(self, key):
        """
        Retrieves a CachedResponse with hit/miss status and value for the provided key.
        """
        return TieredCache.get_cached_response(key)

    def set(self, key, value):
        TieredCache.set_all_tiers(key, value, self.timeout)

    def get_or_compute(self, key, compute):
        """
        Returns the cached value of key, computing and caching it on a miss.

        Args:
            key (str): cache key
            compute (callable): called without arguments to produce the value of a missing key

        Returns:
            cached or computed value
        """
        cached_response = self.get_cached_response(key)
        if cached_response.is_found:
            return cached_response.value

        with self.lock(key):
            cached_response = self.get_cached_response(key)
            if cached_response.is_found:
                return cached_response.value

            value = compute()
            self.set(key, value)
            return value
