from collections import namedtuple


class ResolutionContext(namedtuple('ResolutionContext', ['host', 'controller', 'theme'])):
    """
    Request data needed to resolve themed templates.

    Fields:
        host (str): host of the request, e.g. 'www.example.com:8000'
        controller (str): url namespace of the view handling the request, e.g. 'basket'
        theme (str): theme to use instead of the theme of the host's domain, None to use the domain's theme
    """
    __slots__ = ()

    def __new__(cls, host, controller='', theme=None):
        return super(ResolutionContext, cls).__new__(cls, host, controller, theme)

    @classmethod
    def from_request(cls, request, theme=None):
        """
        Build the context of a django request. The controller is the application namespace of the
        resolved url, empty if the url has not been resolved yet.
        """
        resolver_match = getattr(request, 'resolver_match', None)
        controller = resolver_match.app_name if resolver_match else ''
        return cls(host=request.get_host(), controller=controller, theme=theme)
