from django.apps import AppConfig


class ResellersAppConfig(AppConfig):
    """
    App Configurations for Resellers.
    """
    name = 'storefront.resellers'
    verbose_name = 'Resellers'
