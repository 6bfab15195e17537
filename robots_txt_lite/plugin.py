"""
Robots.txt Lite: edit the site's robots.txt from the admin Settings menu.

The stored `irt_robots_txt` option is the single source of truth for the
served robots.txt: the `robots_txt` filter returns it verbatim, ignoring the
output the site would otherwise generate from its INDEXABLE setting.

`init()` is called once from `RobotsTxtLiteConfig.ready()`; it builds the
plugin with its option store and subscribes its callbacks.
"""

import logging

from django.core.exceptions import PermissionDenied
from django.shortcuts import render
from django.utils.translation import gettext as _, gettext_noop

from utils.sanitize import sanitize_textarea_field
from utils.site import get_site_url

from . import VERSION
from .forms import RobotsTxtForm
from .options import MANAGE_OPTIONS

logger = logging.getLogger(__name__)

OPTION_GROUP = 'robots_txt_lite_options'
OPTION_NAME = 'irt_robots_txt'
MENU_SLUG = 'robots-txt-lite'
SETTINGS_PAGE_HOOK = f'settings_page_{MENU_SLUG}'
STYLE_HANDLE = 'robots-txt-lite-admin'
STYLE_PATH = 'robots_txt_lite/css/admin.css'

USEFUL_LINKS = (
    ('https://developers.google.com/search/docs/crawling-indexing/robots/intro',
     gettext_noop('Learn more about robots.txt')),
    ('https://www.realrobotstxt.com/', gettext_noop('Test your robots.txt')),
    (None, gettext_noop('View live robots.txt')),
    ('https://search.google.com/search-console/about', gettext_noop('Set up search console')),
)


def default_content(site_base_url):
    """
    Return the robots.txt served before an administrator saves anything.

    Args:
        site_base_url (str): Base URL of the site, without trailing slash.

    Returns:
        str: The default robots.txt body, without a trailing newline.
    """
    return (
        "User-agent: *\n"
        "Disallow: /wp-admin/\n"
        "Allow: /wp-admin/admin-ajax.php\n"
        "\n"
        f"Sitemap: {site_base_url}/wp-sitemap.xml"
    )


class RobotsTxtLite:
    """
    Settings page, settings registration and robots.txt filter.

    Args:
        store: The option store to read and write the robots.txt content
            through. Anything providing `registry`, `get_option()` and
            `update_option()` works.
    """

    def __init__(self, store):
        self.store = store

    def register(self, hooks):
        """Subscribe the plugin's callbacks to `hooks`."""
        hooks.add_action('admin_init', self.register_settings)
        hooks.add_action('admin_menu', self.add_menu)
        hooks.add_action('admin_enqueue_scripts', self.enqueue_admin_assets, accepted_args=2)
        hooks.add_filter('robots_txt', self.filter_robots_txt, 10, 2)

    def register_settings(self):
        """Register the robots.txt option with its sanitizer and default."""
        self.store.registry.register_setting(
            OPTION_GROUP,
            OPTION_NAME,
            type='string',
            description='Contents served as the site robots.txt.',
            sanitize_callback=self.sanitize_robots_txt,
            default=self.get_default_robots_txt,
        )

    def add_menu(self, options_site):
        """Add the Robots.txt Lite page to the Settings submenu."""
        options_site.add_options_page(
            _('Robots.txt Lite'),
            _('Robots.txt Lite'),
            MANAGE_OPTIONS,
            MENU_SLUG,
            self.settings_page,
        )

    def enqueue_admin_assets(self, hook, assets):
        """Queue the admin stylesheet, on the plugin's settings page only."""
        if hook != SETTINGS_PAGE_HOOK:
            return
        assets.enqueue_style(STYLE_HANDLE, STYLE_PATH, (), VERSION)

    def get_default_robots_txt(self):
        """Default robots.txt for the site URL as currently configured."""
        return default_content(get_site_url())

    def sanitize_robots_txt(self, content):
        """Sanitize submitted robots.txt content. Never fails."""
        return sanitize_textarea_field(content)

    def get_robots_txt(self):
        """The stored robots.txt content, or the default if never saved."""
        return self.store.get_option(OPTION_NAME, self.get_default_robots_txt)

    def settings_page(self, request, context):
        """
        Render the settings page.

        Raises:
            PermissionDenied: If the user lacks the manage options permission.
        """
        if not request.user.has_perm(MANAGE_OPTIONS):
            logger.warning(
                "User '%s' denied access to the robots.txt settings page",
                request.user.get_username()
            )
            raise PermissionDenied(_('You do not have sufficient permissions to access this page.'))

        live_url = get_site_url('robots.txt')
        context.update({
            'form': RobotsTxtForm(initial={OPTION_NAME: self.get_robots_txt()}),
            'option_group': OPTION_GROUP,
            'useful_links': [
                (url or live_url, _(label)) for url, label in USEFUL_LINKS
            ],
        })
        return render(request, 'robots_txt_lite/admin/settings_page.html', context)

    def filter_robots_txt(self, output, public):  # pylint: disable=unused-argument
        """
        Replace the generated robots.txt with the stored content.

        Both the generated `output` and the site's `public` flag are ignored,
        so the stored content is served even when the site is not indexable.
        """
        return self.get_robots_txt()


def init(hooks, store):
    """
    Build the plugin and subscribe it to `hooks`.

    Returns:
        RobotsTxtLite: The registered plugin.
    """
    plugin = RobotsTxtLite(store)
    plugin.register(hooks)
    logger.debug("Robots.txt Lite %s initialised", VERSION)
    return plugin
