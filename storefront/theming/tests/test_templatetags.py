"""
Tests for theming template tags.
"""


from django.template import Context, Template, TemplateSyntaxError
from django.test import RequestFactory

from storefront.tests.testcases import TestCase
from storefront.theming.context import ResolutionContext
from storefront.theming.helpers import get_stylesheet_resolver, get_theme_resolver
from storefront.theming.test_utils import with_reseller_theme


class ThemedStylesheetTagTests(TestCase):

    def setUp(self):
        super(ThemedStylesheetTagTests, self).setUp()
        self.template = Template('{% load theming %}<link rel="stylesheet" href={% themed_stylesheet %}>')

    @with_reseller_theme('acme.com', 'Acme')
    def test_themed_stylesheet(self):
        get_theme_resolver().cached_theme_for_domain('acme.com')
        request = RequestFactory().get('/', HTTP_HOST='www.acme.com')

        self.assertEqual(
            self.template.render(Context({'request': request})),
            '<link rel="stylesheet" href=\'/static/Themes/Acme/Content/Site.css\'>'
        )

    def test_default_stylesheet(self):
        request = RequestFactory().get('/', HTTP_HOST='www.unknown.com')
        self.assertEqual(
            self.template.render(Context({'request': request})),
            '<link rel="stylesheet" href=\'/static/Themes/Default/Content/Site.css\'>'
        )

    def test_without_request(self):
        with self.assertRaises(TemplateSyntaxError):
            self.template.render(Context({}))

    @with_reseller_theme('acme.com', 'Acme')
    def test_matches_stylesheet_resolver(self):
        """ Verify the tag renders the same quoted url as StylesheetResolver.get_themed_stylesheet. """
        get_theme_resolver().cached_theme_for_domain('acme.com')
        request = RequestFactory().get('/', HTTP_HOST='www.acme.com')
        expected = get_stylesheet_resolver().get_themed_stylesheet(ResolutionContext('www.acme.com'))

        self.assertEqual(
            Template('{% load theming %}{% themed_stylesheet %}').render(Context({'request': request})),
            expected
        )
