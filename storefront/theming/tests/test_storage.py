"""
Tests for the theme file storage.
"""


from django.conf import settings
from mock import patch

from storefront.tests.testcases import TestCase
from storefront.theming.storage import ThemeFileStorage


class ThemeFileStorageTests(TestCase):

    def setUp(self):
        super(ThemeFileStorageTests, self).setUp()
        self.storage = ThemeFileStorage(location=settings.THEME_ROOT, base_url='/static/')

    def test_get_name(self):
        self.assertEqual(ThemeFileStorage.get_name('~/Themes/Acme/Content/Site.css'), 'Themes/Acme/Content/Site.css')
        self.assertEqual(ThemeFileStorage.get_name('/Views/Standalone.html'), 'Views/Standalone.html')
        self.assertEqual(ThemeFileStorage.get_name('Views/Standalone.html'), 'Views/Standalone.html')

    def test_map_path(self):
        """ Verify virtual paths are mapped below the theme root. """
        self.assertEqual(
            self.storage.map_path('~/Themes/Acme/Content/Site.css'),
            settings.THEME_ROOT / 'Themes' / 'Acme' / 'Content' / 'Site.css',
        )

    def test_exists(self):
        self.assertTrue(self.storage.exists('~/Themes/Acme/Content/Site.css'))
        self.assertTrue(self.storage.exists('/Views/Standalone.html'))
        self.assertFalse(self.storage.exists('~/Themes/Globex/Content/Site.css'))

    def test_directories_do_not_exist(self):
        """ Verify only files are reported as existing. """
        self.assertFalse(self.storage.exists('~/Themes/Acme'))

    def test_file_as_directory(self):
        self.assertFalse(self.storage.exists('~/Themes/Acme/Content/Site.css/Site.css'))

    def test_path_outside_of_root(self):
        """ Verify paths escaping the theme root are reported as missing instead of being checked. """
        self.assertFalse(self.storage.exists('~/../settings/base.py'))

    def test_permission_denied(self):
        with patch('storefront.theming.storage.os.stat', side_effect=PermissionError):
            self.assertFalse(self.storage.exists('~/Themes/Acme/Content/Site.css'))

    def test_unexpected_errors_are_raised(self):
        """ Verify errors other than missing or forbidden files are not swallowed. """
        with patch('storefront.theming.storage.os.stat', side_effect=OSError('I/O error')):
            with self.assertRaises(OSError):
                self.storage.exists('~/Themes/Acme/Content/Site.css')

    def test_url(self):
        self.assertEqual(self.storage.url('~/Themes/Acme/Content/Site.css'), '/static/Themes/Acme/Content/Site.css')
