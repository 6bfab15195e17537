"""Forms for the robots_txt_lite settings page."""

from django import forms
from django.utils.translation import gettext_lazy as _


class RobotsTxtForm(forms.Form):
    """
    Edit form for the robots.txt option.

    Only used to render the textarea; submissions go to the generic
    options-save view, which applies the option's registered sanitizer.
    """
    irt_robots_txt = forms.CharField(
        label=_('Robots.txt content'),
        required=False,
        strip=False,
        widget=forms.Textarea(attrs={
            'id': 'robots-txt-content',
            'rows': 15,
            'class': 'large-text code',
        }),
    )
