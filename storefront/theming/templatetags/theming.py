from django import template
from django.utils.html import format_html
from threadlocals.threadlocals import get_current_request

from storefront.theming.helpers import get_resolution_context, get_stylesheet_resolver
from storefront.theming.stylesheets import STYLESHEET_QUOTE_FORMAT

register = template.Library()


@register.simple_tag(takes_context=True)
def themed_stylesheet(context):
    """
    Render the single quoted url of the current theme's stylesheet.

    Example:
        <link rel="stylesheet" href={% themed_stylesheet %}>
    """
    request = context.get('request') or get_current_request()
    if request is None:
        raise template.TemplateSyntaxError("'themed_stylesheet' requires a request in the template context.")

    url = get_stylesheet_resolver().get_stylesheet_url(get_resolution_context(request))
    return format_html(STYLESHEET_QUOTE_FORMAT, url)
