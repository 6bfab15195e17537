"""Template tags for settings pages."""

from django import template
from django.middleware.csrf import get_token
from django.utils.html import format_html

register = template.Library()


@register.simple_tag(takes_context=True)
def settings_fields(context, option_group):
    """
    Render the hidden fields the options-save view expects.

    Outputs the CSRF token, the options group and the URL to return to after
    saving (the current page).
    """
    request = context['request']
    return format_html(
        '<input type="hidden" name="csrfmiddlewaretoken" value="{}">'
        '<input type="hidden" name="option_page" value="{}">'
        '<input type="hidden" name="next" value="{}">',
        get_token(request),
        option_group,
        request.get_full_path(),
    )
