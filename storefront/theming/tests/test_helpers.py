"""
Tests for theming helpers.
"""


from django.test import RequestFactory, override_settings
from django.urls import ResolverMatch
from mock import patch
from threadlocals.threadlocals import set_thread_variable
from waffle.testutils import override_switch

from storefront.tests.testcases import TestCase
from storefront.theming.helpers import (
    get_current_theme,
    get_resolution_context,
    get_view_engine,
    is_theming_enabled
)
from storefront.theming.test_utils import with_reseller_theme


class TestHelpers(TestCase):
    """
    Test theming helper functions.
    """

    def tearDown(self):
        set_thread_variable('request', None)
        super(TestHelpers, self).tearDown()

    def test_is_theming_enabled(self):
        self.assertTrue(is_theming_enabled())

    @override_settings(ENABLE_THEMING=False)
    def test_is_theming_enabled_disabled_in_settings(self):
        self.assertFalse(is_theming_enabled())

    @override_switch('disable_theming_on_runtime', active=True)
    def test_runtime_switch(self):
        """
        Tests the runtime switch disables theming during requests only.
        """
        self.assertTrue(is_theming_enabled())
        self.assertFalse(is_theming_enabled(RequestFactory().get('/')))

    def test_get_resolution_context(self):
        request = RequestFactory().get('/', HTTP_HOST='www.acme.com:8000')
        request.resolver_match = ResolverMatch(lambda request: None, (), {}, app_names=['Home'])

        context = get_resolution_context(request)
        self.assertEqual(context.host, 'www.acme.com:8000')
        self.assertEqual(context.controller, 'Home')
        self.assertIsNone(context.theme)

    @override_settings(ENABLE_THEMING=False)
    def test_get_resolution_context_theming_disabled(self):
        request = RequestFactory().get('/', HTTP_HOST='www.acme.com')
        context = get_resolution_context(request)
        self.assertEqual(context.controller, '')
        self.assertEqual(context.theme, 'Default')

    def test_get_current_theme_outside_of_request(self):
        with patch('storefront.theming.helpers.get_current_request', return_value=None):
            self.assertIsNone(get_current_theme())

    def test_get_current_theme_from_request(self):
        request = RequestFactory().get('/', HTTP_HOST='www.acme.com')
        request.theme = 'Acme'
        set_thread_variable('request', request)
        self.assertEqual(get_current_theme(), 'Acme')

    @with_reseller_theme('acme.com', 'Acme')
    def test_get_current_theme_resolved(self):
        """
        Tests the theme is resolved when the middleware did not set it.
        """
        set_thread_variable('request', RequestFactory().get('/', HTTP_HOST='www.acme.com'))
        self.assertEqual(get_current_theme(), 'Acme')

    def test_view_engine_rebuilt_on_setting_change(self):
        engine = get_view_engine()
        self.assertIs(get_view_engine(), engine)

        with override_settings(THEME_DEFAULT_MASTER_NAME='Layout'):
            self.assertEqual(get_view_engine().config.default_master_name, 'Layout')

        self.assertEqual(get_view_engine().config.default_master_name, 'Site')
