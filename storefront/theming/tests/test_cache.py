"""
Tests for the resolution cache.
"""


import threading

from django.core.cache.backends.base import DEFAULT_TIMEOUT
from edx_django_utils.cache import TieredCache
from mock import Mock, patch

from storefront.tests.testcases import TestCase
from storefront.theming.cache import ResolutionCache


class ResolutionCacheTests(TestCase):

    def setUp(self):
        super(ResolutionCacheTests, self).setUp()
        self.cache = ResolutionCache(timeout=60)

    def test_get_or_compute_miss(self):
        """ Verify a missing value is computed and stored in all tiers. """
        compute = Mock(return_value='Acme')

        self.assertEqual(self.cache.get_or_compute('theme_for_example.com', compute), 'Acme')
        compute.assert_called_once_with()
        self.assertEqual(TieredCache.get_cached_response('theme_for_example.com').value, 'Acme')

    def test_get_or_compute_hit(self):
        """ Verify a cached value is returned without computing it. """
        self.cache.set('theme_for_example.com', 'Acme')
        compute = Mock(return_value='Globex')

        self.assertEqual(self.cache.get_or_compute('theme_for_example.com', compute), 'Acme')
        self.assertFalse(compute.called)

    def test_empty_value_is_a_hit(self):
        """ Verify an empty string is cached like any other value. """
        self.cache.set('View:~/Missing.html::Default', '')

        cached_response = self.cache.get_cached_response('View:~/Missing.html::Default')
        self.assertTrue(cached_response.is_found)
        self.assertEqual(cached_response.value, '')

    def test_timeout_none_caches_forever(self):
        """ Verify a None timeout reaches the django cache unchanged, so values never expire. """
        cache = ResolutionCache(timeout=None)
        self.assertIsNone(cache.timeout)

        with patch('storefront.theming.cache.TieredCache.set_all_tiers') as mock_set_all_tiers:
            cache.set('theme_for_example.com', 'Acme')
            mock_set_all_tiers.assert_called_once_with('theme_for_example.com', 'Acme', None)

    def test_default_timeout(self):
        self.assertIs(ResolutionCache().timeout, DEFAULT_TIMEOUT)
        self.assertEqual(self.cache.timeout, 60)

    def test_lock_is_stable_per_key(self):
        self.assertIs(self.cache.lock('a'), self.cache.lock('a'))

    def test_concurrent_get_or_compute(self):
        """ Verify threads racing on a missing key compute it once and all see the same value. """
        calls = []
        started = threading.Event()

        def compute():
            calls.append(1)
            # hold the lock until every thread had a chance to queue up behind it
            started.wait(0.2)
            return 'Acme'

        results = []

        def worker():
            results.append(self.cache.get_or_compute('theme_for_example.com', compute))

        threads = [threading.Thread(target=worker) for __ in range(8)]
        for thread in threads:
            thread.start()
        started.set()
        for thread in threads:
            thread.join()

        self.assertEqual(results, ['Acme'] * 8)
        self.assertEqual(len(calls), 1)
