"""
Named extension points for the robots_txt_lite app.

Code subscribes callbacks to a named hook at startup and the request
pipeline calls back into them at defined points:

- Actions (`do_action`) notify subscribers; return values are ignored. Each
  action name is backed by a `django.dispatch.Signal`, so receivers run in
  subscription order and exceptions propagate to the caller.
- Filters (`apply_filters`) pass a value through every subscriber in turn;
  each subscriber returns the (possibly replaced) value. Filters run in
  ascending priority order; equal priorities keep registration order.

`accepted_args` limits how many positional arguments a callback receives, so
a callback can subscribe without caring about extra arguments passed by the
caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from django.dispatch import Signal

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


@dataclass(frozen=True)
class Subscription:
    """A single callback registered against a filter."""
    callback: Callable[..., Any]
    priority: int = DEFAULT_PRIORITY
    accepted_args: int = 1


class HookRegistry:
    """Registry of action signals and filter subscriptions keyed by hook name."""

    def __init__(self):
        self._actions: dict[str, Signal] = {}
        self._filters: dict[str, list[Subscription]] = {}

    def add_action(self, hook_name, callback, accepted_args=1):
        """Connect `callback` to the signal behind the action `hook_name`."""
        def receiver(sender, args=(), **kwargs):  # pylint: disable=unused-argument
            callback(*args[:accepted_args])

        # The registry owns the receiver, so it must not be weakly referenced.
        self._actions.setdefault(hook_name, Signal()).connect(receiver, weak=False)
        logger.debug("Registered %r on action '%s'", callback, hook_name)

    def do_action(self, hook_name, *args):
        """Call every callback subscribed to `hook_name`."""
        signal = self._actions.get(hook_name)
        if signal is not None:
            signal.send(sender=self.__class__, args=args)

    def add_filter(self, hook_name, callback, priority=DEFAULT_PRIORITY, accepted_args=1):
        """Subscribe `callback` to the filter `hook_name`."""
        subscriptions = self._filters.setdefault(hook_name, [])
        subscriptions.append(Subscription(callback, priority, accepted_args))
        subscriptions.sort(key=lambda s: s.priority)
        logger.debug("Registered %r on filter '%s' (priority %d)", callback, hook_name, priority)

    def remove_filter(self, hook_name, callback, priority=DEFAULT_PRIORITY):
        """
        Remove a filter subscription.

        Returns:
            bool: True if a matching subscription was found and removed.
        """
        subscriptions = self._filters.get(hook_name, [])
        for subscription in subscriptions:
            if subscription.callback == callback and subscription.priority == priority:
                subscriptions.remove(subscription)
                return True
        return False

    def has_filter(self, hook_name, callback=None):
        """
        Check whether anything is subscribed to the filter `hook_name`.

        When `callback` is given, returns the priority it is registered
        with, or False if it is not registered.
        """
        subscriptions = self._filters.get(hook_name, [])
        if callback is None:
            return bool(subscriptions)
        for subscription in subscriptions:
            if subscription.callback == callback:
                return subscription.priority
        return False

    def apply_filters(self, hook_name, value, *args):
        """
        Pass `value` through every callback subscribed to `hook_name`.

        Args:
            hook_name (str): The filter name.
            value: The value to filter.
            *args: Extra arguments handed to callbacks that accept them.

        Returns:
            The filtered value (unchanged if nothing is subscribed).
        """
        for subscription in list(self._filters.get(hook_name, [])):
            call_args = (value, *args)[:max(subscription.accepted_args, 1)]
            value = subscription.callback(*call_args)
        return value


# The hook registry used by the running site.
hooks = HookRegistry()
