"""
Theming aware template loaders.
"""


from django.template import Origin
from django.template.loaders.filesystem import Loader
from threadlocals.threadlocals import get_current_request

from storefront.theming.helpers import get_current_theme, get_resolution_context, get_theme_storage, get_view_engine


class ThemedTemplateLoader(Loader):
    """
    Filesystem template loader that picks up templates from the theme of the current site.

    Template names are resolved like partial views: the controller (url namespace) and shared
    locations of the current theme are searched first, then those of the default theme.
    """

    def get_template_sources(self, template_name):
        request = get_current_request()
        if not request:
            # Outside of a request there is no theme, leave the template to other loaders.
            return

        context = get_resolution_context(request)
        if not context.controller:
            return
        if not context.theme:
            # Reuse the theme the middleware has already resolved for this request.
            context = context._replace(theme=get_current_theme())

        result = get_view_engine().find_partial_view(context, template_name)
        if result.is_found:
            yield Origin(
                name=get_theme_storage().map_path(result.view_path),
                template_name=template_name,
                loader=self,
            )
