import logging

from django.db import models

logger = logging.getLogger(__name__)


class Reseller(models.Model):
    """
    A reseller serves the storefront under its own domain with its own theme.

    Fields:
        domain (CharField): Canonical domain the reseller is served from (e.g. 'example.com')
        name (CharField): Display name of the reseller
        theme (CharField): Name of the theme directory applied to the domain (e.g. 'Acme'),
            blank means the default theme
    """
    domain = models.CharField(max_length=255, unique=True)
    name = models.CharField(max_length=255, blank=True, default='')
    theme = models.CharField(max_length=255, blank=True, default='')

    class Meta:
        ordering = ('domain',)

    def __str__(self):
        return self.domain

    @staticmethod
    def find_theme(domain):
        """
        Get the theme configured for the given domain.

        Args:
            domain (str): canonical domain of the current request, e.g. 'example.com'.

        Returns:
            (str) theme name, or None if no reseller is registered for the domain.
        """
        if not domain:
            return None

        theme = Reseller.objects.filter(domain=domain).values_list('theme', flat=True).first()
        logger.debug('Reseller theme lookup for domain [%s] returned [%s].', domain, theme)
        return theme
