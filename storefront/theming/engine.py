"""
Themed view engine.

Finds the view, master and partial view templates of a request in the theme of the request's domain.
The engine does not render anything, django reaches it through ThemedTemplateLoader.
"""


import logging

from storefront.theming.constants import (
    MASTER_CACHE_KEY_PREFIX,
    PARTIAL_VIEW_CACHE_KEY_PREFIX,
    VIEW_CACHE_KEY_PREFIX
)
from storefront.theming.domains import get_domain
from storefront.theming.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class ViewEngineResult:
    """
    Result of a view lookup: either the located view (and master) paths, or the locations searched in vain.
    """

    def __init__(self, view_path='', master_path='', searched_locations=None):
        self.view_path = view_path
        self.master_path = master_path
        self.searched_locations = searched_locations or []

    @classmethod
    def found(cls, view_path, master_path=''):
        return cls(view_path=view_path, master_path=master_path)

    @classmethod
    def not_found(cls, searched_locations):
        return cls(searched_locations=searched_locations)

    @property
    def is_found(self):
        return bool(self.view_path)

    def __repr__(self):
        if self.is_found:
            return '<ViewEngineResult: view={} master={}>'.format(self.view_path, self.master_path)
        return '<ViewEngineResult: not found, searched {}>'.format(self.searched_locations)


def _union(*location_lists):
    union = []
    for locations in location_lists:
        union.extend(location for location in locations if location not in union)
    return union


class ThemedViewEngine:
    """
    Resolves views, masters and partial views for the theme of the current request.
    """

    def __init__(self, theme_resolver, path_resolver, config):
        """
        Args:
            theme_resolver (storefront.theming.themes.ThemeResolver)
            path_resolver (storefront.theming.template_paths.TemplatePathResolver)
            config (storefront.theming.config.ThemingConfig)
        """
        self.theme_resolver = theme_resolver
        self.path_resolver = path_resolver
        self.config = config

    def get_theme(self, context):
        if context.theme:
            return context.theme
        return self.theme_resolver.cached_theme_for_domain(get_domain(context.host))

    def _check_context(self, context):
        if context is None:
            raise InvalidArgumentError('context must not be None.')
        if not context.controller:
            raise InvalidArgumentError('context.controller must not be empty.')

    def find_view(self, context, view_name, master_name=None, use_cache=True):
        """
        Find a view and its master.

        Args:
            context (storefront.theming.context.ResolutionContext): context of the current request.
            view_name (str): name of the view, e.g. 'Index'.
            master_name (str): name of the master, the configured default master (e.g. 'Site') when empty.
            use_cache (bool): whether cached locations may be used.

        Returns:
            ViewEngineResult: found if the view and (unless no master is configured) the master exist.
        """
        self._check_context(context)
        if not view_name:
            raise InvalidArgumentError('view_name must not be empty.')

        theme = self.get_theme(context)
        view_path, view_searched_locations = self.path_resolver.resolve(
            self.config.view_location_formats, view_name, theme, context.controller,
            VIEW_CACHE_KEY_PREFIX, use_cache,
        )

        master_name = master_name or self.config.default_master_name
        master_path, master_searched_locations = self.path_resolver.resolve(
            self.config.master_location_formats, master_name, theme, context.controller,
            MASTER_CACHE_KEY_PREFIX, use_cache,
        )

        if view_path and (master_path or not master_name):
            return ViewEngineResult.found(view_path, master_path)

        logger.info('View [%s] with master [%s] not found for theme [%s].', view_name, master_name, theme)
        return ViewEngineResult.not_found(_union(view_searched_locations, master_searched_locations))

    def find_partial_view(self, context, partial_view_name, use_cache=True):
        """
        Find a partial view, partial views have no master.
        """
        self._check_context(context)
        if not partial_view_name:
            raise InvalidArgumentError('partial_view_name must not be empty.')

        theme = self.get_theme(context)
        partial_view_path, searched_locations = self.path_resolver.resolve(
            self.config.partial_view_location_formats, partial_view_name, theme, context.controller,
            PARTIAL_VIEW_CACHE_KEY_PREFIX, use_cache,
        )
        if partial_view_path:
            return ViewEngineResult.found(partial_view_path)
        return ViewEngineResult.not_found(searched_locations)
