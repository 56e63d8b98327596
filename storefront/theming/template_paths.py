"""
Resolves logical template names to themed file locations.
"""


import logging

from storefront.theming.constants import DEFAULT_THEME
from storefront.theming.exceptions import MisconfigurationError

logger = logging.getLogger(__name__)

# Stored for specific paths that do not exist
NOT_FOUND = ''


def is_specific_path(name):
    """
    Returns True if the given name is rooted (starts with '~' or '/') and therefore names a file
    instead of a template to search for.
    """
    return name[0] in ('~', '/')


def create_cache_key(prefix, name, controller, theme):
    return '{prefix}:{name}:{controller}:{theme}'.format(
        prefix=prefix, name=name, controller=controller, theme=theme,
    )


def expand_location(location_format, name, controller, theme):
    """
    Expand a location format with the given name, controller and theme.

    Example:
        >> expand_location('~/Themes/{2}/Views/{1}/{0}.html', 'Index', 'Home', 'Acme')
        '~/Themes/Acme/Views/Home/Index.html'
    """
    return location_format.format(name, controller, theme, name=name, controller=controller, theme=theme)


class TemplatePathResolver:
    """
    Finds the first existing file for a template on a list of location formats.

    A theme that does not provide a template inherits it from the default theme.
    """

    def __init__(self, file_exists, cache, default_theme=DEFAULT_THEME):
        """
        Args:
            file_exists (callable): returns True if a file exists at the given virtual path
                (e.g. storefront.theming.storage.ThemeFileStorage.exists).
            cache (storefront.theming.cache.ResolutionCache): cache shared by all requests.
            default_theme (str): theme providing templates missing in other themes.
        """
        self.file_exists = file_exists
        self.cache = cache
        self.default_theme = default_theme

    def resolve(self, locations, name, theme, controller, cache_key_prefix, use_cache=True):
        """
        Resolve a template name to the virtual path of an existing file.

        Args:
            locations (list): location formats to search, in order of precedence.
            name (str): template name, e.g. 'Index', or a rooted path, e.g. '~/Views/Index.html'.
            theme (str): theme of the current request.
            controller (str): controller (url namespace) of the current request.
            cache_key_prefix (str): kind of template, e.g. 'View', 'Master' or 'Partial'.
            use_cache (bool): whether a previously cached location may be returned.

        Returns:
            tuple of the path ('' if nothing was found) and the list of paths searched without success.

        Raises:
            MisconfigurationError: if locations is empty.
        """
        if not name:
            return NOT_FOUND, []
        if not locations:
            raise MisconfigurationError('No locations configured to search for [{}].'.format(name))

        theme = theme or self.default_theme
        specific = is_specific_path(name)
        cache_key = create_cache_key(cache_key_prefix, name, '' if specific else controller, theme)

        if not use_cache:
            return self._find(locations, name, theme, controller, cache_key, specific)

        cached_response = self.cache.get_cached_response(cache_key)
        if cached_response.is_found:
            return cached_response.value, []

        with self.cache.lock(cache_key):
            cached_response = self.cache.get_cached_response(cache_key)
            if cached_response.is_found:
                return cached_response.value, []

            return self._find(locations, name, theme, controller, cache_key, specific)

    def _find(self, locations, name, theme, controller, cache_key, specific):
        if specific:
            return self._find_specific(name, cache_key)

        path, searched_locations = self._find_general(locations, name, controller, theme, cache_key)
        # Searching the default theme again would only repeat the same locations.
        if path or theme == self.default_theme:
            return path, searched_locations

        path, default_searched_locations = self._find_general(
            locations, name, controller, self.default_theme, cache_key,
        )
        if path:
            logger.info(
                'Theme [%s] does not provide [%s] for [%s], using [%s] from the default theme.',
                theme, name, controller, path,
            )
            return path, []
        return NOT_FOUND, searched_locations + default_searched_locations

    def _find_general(self, locations, name, controller, theme, cache_key):
        searched_locations = []
        for location_format in locations:
            path = expand_location(location_format, name, controller, theme)
            if self.file_exists(path):
                self.cache.set(cache_key, path)
                return path, []
            searched_locations.append(path)
        return NOT_FOUND, searched_locations

    def _find_specific(self, name, cache_key):
        if self.file_exists(name):
            self.cache.set(cache_key, name)
            return name, []

        self.cache.set(cache_key, NOT_FOUND)
        return NOT_FOUND, [name]
