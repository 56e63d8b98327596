"""
Theming configuration, read once from django settings and passed to the resolvers.
"""


from django.conf import settings

from storefront.theming.exceptions import MisconfigurationError


def _location_formats(setting_name, value):
    if not isinstance(value, (list, tuple)):
        raise MisconfigurationError("{} must be a list.".format(setting_name))
    if not value:
        raise MisconfigurationError("{} must not be empty.".format(setting_name))
    if not all(isinstance(location, str) and location for location in value):
        raise MisconfigurationError("{} must contain only non-empty strings.".format(setting_name))
    return tuple(value)


class ThemingConfig:
    """
    Search locations and paths used to resolve themed templates and assets.

    Location formats take the view name as {0} (or {name}), the controller as {1} (or {controller})
    and the theme as {2} (or {theme}). The stylesheet location format takes the theme as {0} (or {theme}).
    """

    def __init__(self, view_location_formats, master_location_formats, partial_view_location_formats,
                 stylesheet_location_format, theme_root, theme_url='/', default_master_name='Site',
                 cache_timeout=None):
        self.view_location_formats = _location_formats('THEME_VIEW_LOCATION_FORMATS', view_location_formats)
        self.master_location_formats = _location_formats('THEME_MASTER_LOCATION_FORMATS', master_location_formats)
        self.partial_view_location_formats = _location_formats(
            'THEME_PARTIAL_VIEW_LOCATION_FORMATS', partial_view_location_formats,
        )

        if not isinstance(stylesheet_location_format, str) or not stylesheet_location_format:
            raise MisconfigurationError("THEME_STYLESHEET_LOCATION_FORMAT must be a non-empty string.")
        if not isinstance(theme_root, str) or not theme_root.startswith('/'):
            raise MisconfigurationError("THEME_ROOT must be an absolute path.")
        if default_master_name is not None and not isinstance(default_master_name, str):
            raise MisconfigurationError("THEME_DEFAULT_MASTER_NAME must be a string or None.")

        self.stylesheet_location_format = stylesheet_location_format
        self.theme_root = theme_root
        self.theme_url = theme_url
        self.default_master_name = default_master_name or ''
        self.cache_timeout = cache_timeout

    @classmethod
    def from_settings(cls):
        """
        Build the configuration from django settings.

        Raises:
            MisconfigurationError: if any of the theming settings has an invalid value.
        """
        return cls(
            view_location_formats=settings.THEME_VIEW_LOCATION_FORMATS,
            master_location_formats=settings.THEME_MASTER_LOCATION_FORMATS,
            partial_view_location_formats=settings.THEME_PARTIAL_VIEW_LOCATION_FORMATS,
            stylesheet_location_format=settings.THEME_STYLESHEET_LOCATION_FORMAT,
            theme_root=str(settings.THEME_ROOT),
            theme_url=settings.THEME_URL,
            default_master_name=settings.THEME_DEFAULT_MASTER_NAME,
            cache_timeout=settings.THEME_CACHE_TIMEOUT,
        )
