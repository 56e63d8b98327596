"""
    Helpers wiring the theming components to django settings and the current request.
"""


import logging
from functools import lru_cache

import waffle
from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver
from threadlocals.threadlocals import get_current_request

from storefront.resellers.models import Reseller
from storefront.theming.cache import ResolutionCache
from storefront.theming.config import ThemingConfig
from storefront.theming.constants import DEFAULT_THEME
from storefront.theming.context import ResolutionContext
from storefront.theming.engine import ThemedViewEngine
from storefront.theming.storage import ThemeFileStorage
from storefront.theming.stylesheets import StylesheetResolver
from storefront.theming.template_paths import TemplatePathResolver
from storefront.theming.themes import ThemeResolver

logger = logging.getLogger(__name__)


def is_theming_enabled(request=None):
    """
    Returns boolean indicating whether theming is enabled or disabled.

    Example:
        >> is_theming_enabled()
        True

    Returns:
         (bool): True if theming is enabled else False
    """

    # Return False if theming is disabled via Django settings
    if not settings.ENABLE_THEMING:
        return False

    # Return False if we're currently processing a request and theming is disabled via runtime switch
    request = request or get_current_request()
    if bool(request) and waffle.switch_is_active(settings.DISABLE_THEMING_ON_RUNTIME_SWITCH):
        return False

    # Return True indicating theming is enabled
    return True


@lru_cache()
def get_theming_config():
    return ThemingConfig.from_settings()


@lru_cache()
def get_resolution_cache():
    return ResolutionCache(timeout=get_theming_config().cache_timeout)


@lru_cache()
def get_theme_storage():
    config = get_theming_config()
    return ThemeFileStorage(location=config.theme_root, base_url=config.theme_url)


@lru_cache()
def get_theme_resolver():
    return ThemeResolver(find_theme=Reseller.find_theme, cache=get_resolution_cache())


@lru_cache()
def get_view_engine():
    """
    Return the view engine built from the theming settings.
    """
    path_resolver = TemplatePathResolver(file_exists=get_theme_storage().exists, cache=get_resolution_cache())
    return ThemedViewEngine(get_theme_resolver(), path_resolver, get_theming_config())


@lru_cache()
def get_stylesheet_resolver():
    return StylesheetResolver(get_theme_resolver(), get_theme_storage(), get_theming_config())


@receiver(setting_changed)
def reset_theming_components(setting, **kwargs):  # pylint: disable=unused-argument
    """
    Rebuild the theming components with the new value when a theming setting is overridden.
    """
    if setting.startswith('THEME_'):
        for factory in (get_theming_config, get_resolution_cache, get_theme_storage, get_theme_resolver,
                        get_view_engine, get_stylesheet_resolver):
            factory.cache_clear()


def get_resolution_context(request):
    """
    Return the resolution context of the given request, pinned to the default theme if theming is disabled.
    """
    theme = None if is_theming_enabled(request) else DEFAULT_THEME
    return ResolutionContext.from_request(request, theme=theme)


def get_current_theme():
    """
    Return the theme of the current request. Returns None outside of a request.

    Returns:
         (str): theme name, e.g. 'Acme'
    """
    request = get_current_request()
    if not request:
        return None

    theme = getattr(request, 'theme', None)
    if theme:
        return theme

    context = get_resolution_context(request)
    return context.theme or get_view_engine().get_theme(context)
