"""
Models for robots_txt_lite: the key/value table holding site options.
"""

from django.db import models


class Option(models.Model):
    """
    A single named site setting.

    Values are stored as text; the code that registers a setting owns its
    sanitization and default.
    """
    name = models.CharField(
        max_length=191,
        unique=True,
        help_text='Unique option name, e.g. irt_robots_txt.'
    )
    value = models.TextField(
        blank=True,
        default='',
        help_text='The stored (sanitized) option value.'
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Options are listed by name; the manage_options permission gates settings pages."""
        ordering = ['name']
        permissions = [
            ('manage_options', 'Can manage site settings'),
        ]

    def __str__(self):
        """Return the option's name as its string representation."""
        return f'{self.name}'
