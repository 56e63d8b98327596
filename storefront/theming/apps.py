"""
Module for code that should run during application startup
"""


import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ThemeAppConfig(AppConfig):
    """
    App Configurations for Theming.
    """
    name = 'storefront.theming'
    verbose_name = 'Theming'

    def ready(self):
        """
        startup run method, this method is called after the application has successfully initialized.
        Theming settings are validated here so that misconfiguration fails at startup instead of on
        the first request.
        """
        # pylint: disable=import-outside-toplevel
        from storefront.theming.helpers import get_theming_config, is_theming_enabled

        if not is_theming_enabled():
            logger.warning('Theming is disabled, all requests use the default theme.')
            return

        get_theming_config()
