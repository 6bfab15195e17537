"""
Registered settings and their persistence.

`SettingsRegistry` records which options exist, which options group (settings
page) each belongs to, how submitted values are sanitized and what default a
never-saved option reads as. `OptionStore` reads and writes the values
through the `Option` model.

Defaults may be callables; they are evaluated on every read of an unsaved
option and never cached, so values derived from other settings (such as the
site URL) stay current.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .models import Option

logger = logging.getLogger(__name__)

# Permission required to change options unless a group overrides it.
MANAGE_OPTIONS = 'robots_txt_lite.manage_options'


@dataclass(frozen=True)
class RegisteredSetting:
    """Metadata of a setting registered by `SettingsRegistry.register_setting`."""
    option_group: str
    option_name: str
    type: str = 'string'
    description: str = ''
    sanitize_callback: Optional[Callable[[Any], Any]] = None
    default: Any = None


def _resolve(default):
    return default() if callable(default) else default


class SettingsRegistry:
    """In-process record of the settings the site knows about."""

    def __init__(self):
        self._settings: dict[str, RegisteredSetting] = {}

    def register_setting(self, option_group, option_name, type='string',  # pylint: disable=redefined-builtin
                         description='', sanitize_callback=None, default=None):
        """
        Register an option so the options-save endpoint will accept it.

        Registering the same name again replaces the earlier registration.
        """
        setting = RegisteredSetting(
            option_group=option_group,
            option_name=option_name,
            type=type,
            description=description,
            sanitize_callback=sanitize_callback,
            default=default,
        )
        self._settings[option_name] = setting
        logger.debug("Registered setting '%s' in group '%s'", option_name, option_group)
        return setting

    def get(self, option_name):
        """Return the registration for `option_name`, or None."""
        return self._settings.get(option_name)

    def registered_settings(self, option_group=None):
        """Return registered settings, optionally only those of one group."""
        return [
            setting for setting in self._settings.values()
            if option_group is None or setting.option_group == option_group
        ]

    def is_registered_group(self, option_group):
        """True if at least one setting belongs to `option_group`."""
        return any(s.option_group == option_group for s in self._settings.values())

    def sanitize_option(self, option_name, value):
        """Run the registered sanitizer for `option_name`, if any."""
        setting = self._settings.get(option_name)
        if setting is None or setting.sanitize_callback is None:
            return value
        return setting.sanitize_callback(value)

    def get_default(self, option_name):
        """Return the registered default for `option_name`, evaluated now."""
        setting = self._settings.get(option_name)
        if setting is None:
            return None
        return _resolve(setting.default)


class OptionStore:
    """
    Read and write option values.

    Every read goes to the database; concurrent writers follow
    last-write-wins.
    """

    def __init__(self, registry):
        self.registry = registry

    def get_option(self, option_name, default=None):
        """
        Return the stored value of `option_name`.

        If the option was never saved, `default` is returned when given
        (called first if it is callable), otherwise the registered default.
        An empty stored value is returned as is.
        """
        value = (
            Option.objects
            .filter(name=option_name)
            .values_list('value', flat=True)
            .first()
        )
        if value is not None:
            return value
        if default is not None:
            return _resolve(default)
        return self.registry.get_default(option_name)

    def update_option(self, option_name, value):
        """
        Sanitize `value` and store it under `option_name`.

        Returns:
            bool: False if the stored value was already equal to the
            sanitized value, True if it was written.
        """
        value = self.registry.sanitize_option(option_name, value)
        if value is None:
            value = ''
        value = str(value)

        current = Option.objects.filter(name=option_name).first()
        if current is not None and current.value == value:
            return False

        Option.objects.update_or_create(name=option_name, defaults={'value': value})
        logger.info("Updated option '%s' (%d characters)", option_name, len(value))
        return True


# The settings registry and option store used by the running site.
settings_registry = SettingsRegistry()
option_store = OptionStore(settings_registry)
