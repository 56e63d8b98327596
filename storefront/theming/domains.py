"""
Canonical domain of a request host, used as the key to find the reseller theme.
"""


import ipaddress

from django.http.request import split_domain_port


def is_dns_name(host):
    """
    Returns True if given host is a DNS style host name and not an IP address literal.

    Example:
        >> is_dns_name('www.example.com')
        True
        >> is_dns_name('127.0.0.1')
        False
    """
    if not host:
        return False

    try:
        ipaddress.ip_address(host.strip('[]'))
    except ValueError:
        return True
    return False


def get_domain(host):
    """
    Return the canonical domain for a request host.

    Hosts with more than two labels lose exactly their first label, shorter hosts are returned as is.
    Only one label is stripped, 'a.b.example.com' becomes 'b.example.com'.

    Example:
        >> get_domain('www.example.com')
        'example.com'
        >> get_domain('example.com:8000')
        'example.com'

    Args:
        host (str): host of the request, optionally with a port (e.g. request.get_host()).

    Returns:
        (str) canonical domain, or None if host is empty or an IP address.
    """
    if not host:
        return None

    if host.startswith("[") or not is_dns_name(host):
        # IPv6 literal with an optional port, e.g. [::1]:8000, or an IP address without a port
        return None

    # split_domain_port lower cases the host and returns an empty domain for malformed hosts
    domain, __ = split_domain_port(host)
    if not is_dns_name(domain):
        return None

    labels = domain.split('.')
    if len(labels) > 2:
        return domain[domain.index('.') + 1:]
    return domain
