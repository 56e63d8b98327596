from django.core.exceptions import ImproperlyConfigured


class ThemeResolutionError(Exception):
    """ Base class for errors raised while resolving themes and template locations. """


class InvalidArgumentError(ThemeResolutionError, ValueError):
    """ Raised when a required argument of a resolution call is missing or empty. """


class MisconfigurationError(ImproperlyConfigured):
    """ Raised when the theming settings can not be used to resolve templates. """
