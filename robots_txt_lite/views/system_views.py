"""System views for robots_txt_lite"""

from django.conf import settings
from django.http import HttpResponse

from ..hooks import hooks


def robots_txt(request):
    """
    Serve the robots.txt file.

    The generated content depends on the site's indexability setting; it is
    then passed through the `robots_txt` filter together with that setting,
    and whatever the filter returns is served verbatim.
    """
    public = settings.INDEXABLE
    if public:
        content = "User-agent: *\nDisallow:"
    else:
        content = "User-agent: *\nDisallow: /"
    content = hooks.apply_filters('robots_txt', content, public)
    return HttpResponse(content, content_type="text/plain; charset=utf-8")
