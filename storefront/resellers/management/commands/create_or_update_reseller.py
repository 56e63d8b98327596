"""
Creates or updates a Reseller and the theme applied to its domain.
"""
import logging

from django.core.management import BaseCommand

from storefront.resellers.models import Reseller

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Create or update a Reseller and its theme'

    def add_arguments(self, parser):
        parser.add_argument('--domain',
                            action='store',
                            dest='domain',
                            type=str,
                            required=True,
                            help='Domain of the Reseller to create or update.')
        parser.add_argument('--name',
                            action='store',
                            dest='name',
                            type=str,
                            default='',
                            help='Name of the Reseller to create or update.')
        parser.add_argument('--theme',
                            action='store',
                            dest='theme',
                            type=str,
                            required=True,
                            help='Name of the theme to apply to the domain.')

    def handle(self, *args, **options):
        domain = options.get('domain')
        name = options.get('name')
        theme = options.get('theme')

        defaults = {'theme': theme}
        if name:
            defaults['name'] = name

        _, created = Reseller.objects.update_or_create(domain=domain, defaults=defaults)
        logger.info('Reseller %s for domain %s with theme "%s"', "created" if created else "updated", domain, theme)
