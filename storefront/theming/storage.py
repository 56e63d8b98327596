"""
File system access for themed templates and assets.

Themed files are addressed with virtual paths rooted at THEME_ROOT, e.g. '~/Themes/Acme/Views/Home/Index.html'.
"""


import os
import stat

from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import FileSystemStorage
from path import Path


class ThemeFileStorage(FileSystemStorage):
    """
    Maps virtual theme paths to files below the theme root.
    """

    def __init__(self, location=None, base_url=None):
        super(ThemeFileStorage, self).__init__(location=location, base_url=base_url)

    @staticmethod
    def get_name(virtual_path):
        """
        Returns the storage name of the given virtual path.

        Example:
            >> ThemeFileStorage.get_name('~/Themes/Acme/Content/Site.css')
            'Themes/Acme/Content/Site.css'
        """
        name = virtual_path[1:] if virtual_path.startswith('~') else virtual_path
        return name.lstrip('/')

    def map_path(self, virtual_path):
        """
        Returns the absolute file system path of the given virtual path.

        Raises:
            SuspiciousFileOperation: if the path points outside of the theme root.
        """
        return Path(self.path(self.get_name(virtual_path)))

    def exists(self, name):
        """
        Returns True if a file exists at the given virtual path.

        Missing files, paths outside of the theme root and files we are not allowed to see are reported
        as not existing. Any other error is raised.
        """
        try:
            return stat.S_ISREG(os.stat(self.map_path(name)).st_mode)
        except (FileNotFoundError, NotADirectoryError, PermissionError, SuspiciousFileOperation):
            return False

    def url(self, name):
        """
        Returns the url of the file at the given virtual path, e.g. '/Themes/Acme/Content/Site.css'.
        """
        return super(ThemeFileStorage, self).url(self.get_name(name))
