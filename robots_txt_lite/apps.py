"""App configuration for the robots_txt_lite app."""

from django.apps import AppConfig


class RobotsTxtLiteConfig(AppConfig):
    """Configuration class for the robots_txt_lite app."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'robots_txt_lite'
    verbose_name = 'Robots.txt Lite'

    def ready(self):
        """Initialise the plugin and run the admin registration hooks once."""
        # pylint: disable=import-outside-toplevel
        from . import plugin
        from .hooks import hooks
        from .options import option_store
        from .options_pages import site

        plugin.init(hooks, option_store)
        hooks.do_action('admin_init')
        hooks.do_action('admin_menu', site)
