"""
Utility functions for sanitizing user-supplied text before it is stored as
an option value.

Sanitization never rejects input: it only transforms it. The result is
idempotent, so re-saving a stored value leaves it unchanged.
"""
import re

from django.utils.html import escape, strip_tags

# Whitespace trimmed from both ends; str.strip() without arguments would also
# eat other unicode whitespace.
TRIM_CHARS = ' \t\n\r\0\x0b'

_LESS_THAN_RE = re.compile(r'<[^>]*?((?=<)|>|$)')
_SCRIPT_STYLE_RE = re.compile(r'<(script|style)[^>]*?>.*?</\1>', re.IGNORECASE | re.DOTALL)
_PERCENT_OCTET_RE = re.compile(r'%[a-f0-9]{2}', re.IGNORECASE)
_SPACES_RE = re.compile(r' +')


def normalize_line_endings(text):
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace('\r\n', '\n').replace('\r', '\n')


def escape_lone_less_than(text):
    """
    HTML-escape every `<` that does not start a tag.

    A `<` that is never closed by `>` (before the next `<` or the end of the
    text) would otherwise swallow the rest of the text when tags are
    stripped.

    Example
    -------
    >>> escape_lone_less_than("a < b <b>c</b>")
    'a &lt; b <b>c</b>'
    """
    def _replace(match):
        segment = match.group(0)
        if '>' in segment:
            return segment
        return escape(segment)

    return _LESS_THAN_RE.sub(_replace, text)


def strip_all_tags(text):
    """
    Remove all HTML tags, including the content of script and style elements.
    """
    text = _SCRIPT_STYLE_RE.sub('', text)
    return strip_tags(text).strip(TRIM_CHARS)


def _sanitize_once(text):
    filtered = normalize_line_endings(text)

    if '<' in filtered:
        filtered = escape_lone_less_than(filtered)
        filtered = strip_all_tags(filtered)
        # A "<" left before a newline must not pair up with a later ">".
        filtered = filtered.replace('<\n', '&lt;\n')

    filtered = filtered.strip(TRIM_CHARS)

    found = False
    match = _PERCENT_OCTET_RE.search(filtered)
    while match:
        filtered = filtered.replace(match.group(0), '')
        found = True
        match = _PERCENT_OCTET_RE.search(filtered)

    if found:
        filtered = _SPACES_RE.sub(' ', filtered).strip(TRIM_CHARS)

    return filtered


def sanitize_textarea_field(value):
    """
    Sanitize a multi-line text value.

    Strips tags (script and style elements with their content), escapes a
    `<` that does not open a tag, normalizes line breaks to ``\\n``, trims
    the result and removes percent-encoded octets. Used for free-form
    settings such as the robots.txt body: directives are not validated, any
    input is accepted.

    Removing an octet can turn text into a tag (``<%41b>`` becomes ``<b>``),
    so the steps are repeated until the value no longer changes. Each pass
    only removes characters or replaces a ``<``, so this terminates.

    Parameters
    ----------
    value : str
        Raw user input, typically a submitted textarea. ``None`` and
        containers sanitize to ``''``.

    Returns
    -------
    str
        The sanitized value. May be empty.

    Example
    -------
    >>> sanitize_textarea_field("User-agent: *\\r\\nDisallow: /private/<br>")
    'User-agent: *\\nDisallow: /private/'
    """
    if value is None or isinstance(value, (list, tuple, dict)):
        return ''
    filtered = str(value)
    while True:
        sanitized = _sanitize_once(filtered)
        if sanitized == filtered:
            return sanitized
        filtered = sanitized
