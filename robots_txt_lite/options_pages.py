"""
The "Settings" submenu of the admin.

`OptionsPageSite` plays the same role for settings pages that
`django.contrib.admin.AdminSite` plays for model admins: code registers pages
on it with `add_options_page()` and the project includes its `urls` before
`admin.site.urls`.

Every page is served behind the admin's staff gate. Before a page callback
runs, the site fires the `admin_enqueue_scripts` action with the page's hook
name and a fresh `AssetQueue`, so subscribers can add stylesheets for that
page only. Settings forms post to the generic options-save view, which
sanitizes and stores every option registered in the submitted group.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from django.contrib import admin, messages
from django.core.exceptions import PermissionDenied
from django.http import Http404, HttpResponseRedirect
from django.templatetags.static import static
from django.urls import path, reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils.translation import gettext as _
from django.views.decorators.http import require_POST

from .hooks import hooks as default_hooks
from .options import MANAGE_OPTIONS, option_store as default_store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnqueuedStyle:
    """A stylesheet queued for the current admin page."""
    handle: str
    src: str
    deps: tuple = ()
    ver: str = ''
    media: str = 'all'

    @property
    def url(self):
        """The stylesheet URL with its cache-busting version query."""
        src = self.src if '://' in self.src or self.src.startswith('/') else static(self.src)
        if self.ver:
            separator = '&' if '?' in src else '?'
            return f'{src}{separator}ver={self.ver}'
        return src


@dataclass
class AssetQueue:
    """Stylesheets requested for a single admin page render."""
    styles: list = field(default_factory=list)

    def enqueue_style(self, handle, src, deps=(), ver='', media='all'):
        """Queue a stylesheet. A handle is only queued once."""
        if self.is_enqueued(handle):
            return
        self.styles.append(EnqueuedStyle(handle, src, tuple(deps), ver, media))

    def is_enqueued(self, handle):
        """True if a stylesheet with `handle` is queued."""
        return any(style.handle == handle for style in self.styles)


@dataclass(frozen=True)
class OptionsPage:
    """A settings page registered in the Settings submenu."""
    page_title: str
    menu_title: str
    capability: str
    menu_slug: str
    callback: Callable
    parent_slug: str = 'options-general'

    @property
    def hook_suffix(self):
        """Name passed to `admin_enqueue_scripts` when this page renders."""
        return f'settings_page_{self.menu_slug}'

    def get_absolute_url(self):
        """Return the admin URL of this page."""
        return reverse('options:page', kwargs={'menu_slug': self.menu_slug})


class OptionsPageSite:
    """
    Registry and views for admin settings pages.

    Args:
        hooks: The `HookRegistry` fired while rendering and saving.
        store: The `OptionStore` the save view writes to.
        admin_site: The `AdminSite` providing the staff gate and the shared
            admin template context.
    """

    def __init__(self, hooks=None, store=None, admin_site=None):
        self.hooks = hooks if hooks is not None else default_hooks
        self.store = store if store is not None else default_store
        self.admin_site = admin_site if admin_site is not None else admin.site
        self._pages: dict[str, OptionsPage] = {}

    def add_options_page(self, page_title, menu_title, capability, menu_slug, callback):
        """
        Register a page in the Settings submenu.

        Args:
            page_title (str): Title shown in the browser and page header.
            menu_title (str): Label of the menu entry.
            capability (str): Permission a user needs to see the menu entry.
            menu_slug (str): URL slug, unique across settings pages.
            callback: Callable `(request, context) -> HttpResponse` rendering
                the page. `context` is the shared admin template context.

        Returns:
            str: The page's hook name, e.g. ``settings_page_<menu_slug>``.
        """
        page = OptionsPage(page_title, menu_title, capability, menu_slug, callback)
        self._pages[menu_slug] = page
        logger.debug("Registered settings page '%s'", menu_slug)
        return page.hook_suffix

    def get_page(self, menu_slug):
        """Return the registered page for `menu_slug`, or None."""
        return self._pages.get(menu_slug)

    def get_menu(self, request):
        """Settings pages the requesting user may see, sorted by menu title."""
        pages = [
            page for page in self._pages.values()
            if request.user.has_perm(page.capability)
        ]
        return sorted(pages, key=lambda page: str(page.menu_title))

    def each_context(self, request, page, assets):
        """
        Return the template context shared by every settings page.

        Builds on the admin site's own context so the pages render inside the
        regular admin chrome (header, user tools, messages).
        """
        context = self.admin_site.each_context(request)
        context.update({
            'title': page.page_title,
            'options_page': page,
            'options_menu': self.get_menu(request),
            'enqueued_styles': assets.styles,
        })
        return context

    def page_view(self, request, menu_slug):
        """Render a registered settings page."""
        page = self.get_page(menu_slug)
        if page is None:
            raise Http404(_('Settings page not found.'))

        assets = AssetQueue()
        self.hooks.do_action('admin_enqueue_scripts', page.hook_suffix, assets)
        return page.callback(request, self.each_context(request, page, assets))

    def save_view(self, request):
        """
        Store every option registered in the submitted options group.

        The form must post `option_page` (the options group) and may post
        `next` (where to go afterwards). Options of the group that are
        missing from the submission are stored as empty strings.
        """
        option_group = request.POST.get('option_page', '')
        if not self.store.registry.is_registered_group(option_group):
            logger.warning("Rejected options save for unknown group '%s'", option_group)
            raise PermissionDenied(
                _('The %(group)s options page is not in the allowed options list.')
                % {'group': option_group}
            )

        capability = self.hooks.apply_filters(
            f'option_page_capability_{option_group}', MANAGE_OPTIONS
        )
        if not request.user.has_perm(capability):
            logger.warning(
                "User '%s' lacks '%s' to save group '%s'",
                request.user.get_username(), capability, option_group
            )
            raise PermissionDenied(_('Sorry, you are not allowed to manage options for this site.'))

        for setting in self.store.registry.registered_settings(option_group):
            self.store.update_option(setting.option_name, request.POST.get(setting.option_name, ''))

        messages.success(request, _('Settings saved.'))

        redirect_to = request.POST.get('next', '')
        if not url_has_allowed_host_and_scheme(
            redirect_to,
            allowed_hosts={request.get_host()},
            require_https=request.is_secure(),
        ):
            redirect_to = reverse('admin:index')
        return HttpResponseRedirect(redirect_to)

    def get_urls(self):
        """URL patterns for the settings pages and the save endpoint."""
        return [
            path('', self.admin_site.admin_view(require_POST(self.save_view)), name='save'),
            path('<slug:menu_slug>/', self.admin_site.admin_view(self.page_view), name='page'),
        ]

    @property
    def urls(self):
        """Tuple for `include()`, namespaced as ``options``."""
        return self.get_urls(), 'options', 'options'


# The settings pages of the running site.
site = OptionsPageSite()
