"""
Theme of a reseller domain.
"""


import logging

from storefront.theming.constants import DEFAULT_THEME, THEME_CACHE_KEY_FORMAT

logger = logging.getLogger(__name__)


def get_theme_cache_key(domain):
    return THEME_CACHE_KEY_FORMAT.format(domain=domain)


class ThemeResolver:
    """
    Maps a canonical domain to the name of its theme.

    Every domain resolves to exactly one theme, domains without a reseller or with a blank
    reseller theme use the default theme.
    """

    def __init__(self, find_theme, cache, default_theme=DEFAULT_THEME):
        """
        Args:
            find_theme (callable): returns the theme registered for a domain, or None
                (e.g. storefront.resellers.models.Reseller.find_theme). Must be free of side effects.
            cache (storefront.theming.cache.ResolutionCache): cache shared by all requests.
            default_theme (str): theme used for domains without a theme of their own.
        """
        self.find_theme = find_theme
        self.cache = cache
        self.default_theme = default_theme

    def theme_for_domain(self, domain):
        """
        Look up the theme of the given domain, without using the cache.

        Example:
            >> resolver.theme_for_domain('example.com')
            'Acme'
            >> resolver.theme_for_domain('unknown.com')
            'Default'
        """
        theme = self.find_theme(domain)
        if theme:
            return theme

        logger.debug('No theme registered for domain [%s], using [%s].', domain, self.default_theme)
        return self.default_theme

    def cached_theme_for_domain(self, domain):
        """
        Return the theme of the given domain, looking it up and caching it on a cache miss.

        Args:
            domain (str): canonical domain, None when the request host is not a domain name.

        Returns:
            (str) theme name
        """
        if not domain:
            return self.default_theme

        return self.cache.get_or_compute(get_theme_cache_key(domain), lambda: self.theme_for_domain(domain))

    def get_cached_theme(self, domain):
        """
        Return the theme cached for the given domain by `cached_theme_for_domain`, None if nothing is cached.
        """
        if not domain:
            return None

        cached_response = self.cache.get_cached_response(get_theme_cache_key(domain))
        return cached_response.value if cached_response.is_found else None
