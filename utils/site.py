"""
Helpers for building absolute URLs of the running site.
"""
from django.conf import settings


def get_site_url(path=''):
    """
    Return the site's base URL, optionally joined with `path`.

    The base URL is read from the SITE_URL setting on every call so a
    changed setting is picked up immediately. A trailing slash is removed.

    Parameters
    ----------
    path : str, optional
        Path appended to the base URL. A leading slash is added if missing.

    Returns
    -------
    str
        The absolute URL, e.g. ``https://example.com/robots.txt``.

    Example
    -------
    >>> get_site_url('robots.txt')  # with SITE_URL = 'https://example.com/'
    'https://example.com/robots.txt'
    """
    base = settings.SITE_URL.rstrip('/')
    if path:
        return f"{base}/{path.lstrip('/')}"
    return base
