"""
Middleware for theming app

Note:
    This middleware reads the current request from thread locals, so
    "threadlocals.middleware.ThreadLocalMiddleware" must be added before it in django settings files.
"""
from django.utils.deprecation import MiddlewareMixin

from storefront.theming.constants import DEFAULT_THEME
from storefront.theming.domains import get_domain
from storefront.theming.helpers import get_theme_resolver, is_theming_enabled


class CurrentThemeMiddleware(MiddlewareMixin):
    """
    Middleware that resolves the theme of the request's domain, caches it and sets it as `theme` attribute
    on the request object.
    """

    def process_request(self, request):
        if not is_theming_enabled(request):
            request.theme = DEFAULT_THEME
            return

        request.theme = get_theme_resolver().cached_theme_for_domain(get_domain(request.get_host()))
