import logging

from storefront.theming.constants import DEFAULT_THEME
from storefront.theming.domains import get_domain

logger = logging.getLogger(__name__)

STYLESHEET_QUOTE_FORMAT = "'{}'"


class StylesheetResolver:
    """
    Picks the stylesheet of the theme of the current request, or the default stylesheet when the theme has none.

    The theme is read from the cache filled by ThemeResolver.cached_theme_for_domain (see CurrentThemeMiddleware),
    it is never looked up here.
    """

    def __init__(self, theme_resolver, storage, config):
        self.theme_resolver = theme_resolver
        self.storage = storage
        self.config = config

    def get_theme(self, context):
        if context.theme:
            return context.theme
        return self.theme_resolver.get_cached_theme(get_domain(context.host))

    def get_stylesheet_path(self, context):
        """
        Returns the virtual path of the stylesheet for the given request context.
        """
        default_stylesheet = self.config.stylesheet_location_format.format(DEFAULT_THEME, theme=DEFAULT_THEME)

        theme = self.get_theme(context)
        if not theme or theme == DEFAULT_THEME:
            return default_stylesheet

        stylesheet = self.config.stylesheet_location_format.format(theme, theme=theme)
        if not self.storage.exists(stylesheet):
            logger.debug('Theme [%s] has no stylesheet at [%s], using the default stylesheet.', theme, stylesheet)
            return default_stylesheet
        return stylesheet

    def get_stylesheet_url(self, context):
        return self.storage.url(self.get_stylesheet_path(context))

    def get_themed_stylesheet(self, context):
        """
        Returns the url of the stylesheet, single quoted for embedding into a page.

        Example:
            >> resolver.get_themed_stylesheet(context)
            "'/Themes/Acme/Content/Site.css'"
        """
        return STYLESHEET_QUOTE_FORMAT.format(self.get_stylesheet_url(context))
