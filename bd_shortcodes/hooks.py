"""Named filter chains for shortcode output.

A filter chain is an ordered list of callbacks registered under a hook name.
Applying the chain folds a value through every callback, each one receiving
the previous callback's output. Shortcodes use this so outside code can adjust
what they render without touching the renderers.

Key classes:
- FilterRegistry: Owns the chains and applies them.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

HOOK_PREFIX = "bd_wordpress_shortcode/"

DEFAULT_PRIORITY = 10

FilterCallback = Callable[..., Any]


def hook_name(name: str) -> str:
    """Return the fully qualified hook name.

    Args:
        name: Short hook name like ``logo/id`` or an already prefixed name.

    Returns:
        Hook name carrying the ``bd_wordpress_shortcode/`` prefix.

    Examples:
        >>> hook_name("admin_email")
        'bd_wordpress_shortcode/admin_email'
    """
    if name.startswith(HOOK_PREFIX):
        return name
    return f"{HOOK_PREFIX}{name}"


class FilterRegistry:
    """Registry of named filter chains.

    Callbacks run in ascending priority. Callbacks sharing a priority run in
    the order they were added.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._filters: dict[str, list[tuple[int, int, FilterCallback]]] = {}
        self._counter = 0

    def add_filter(
        self, hook: str, callback: FilterCallback, priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Add a callback to a filter chain.

        Args:
            hook: Hook name, short or fully qualified.
            callback: Callable receiving the current value (plus any extra
                arguments) and returning the new value.
            priority: Lower numbers run earlier.
        """
        name = hook_name(hook)
        self._counter += 1
        chain = self._filters.setdefault(name, [])
        chain.append((priority, self._counter, callback))
        chain.sort(key=lambda entry: (entry[0], entry[1]))
        logger.debug("Added filter %r to %s at priority %d", callback, name, priority)

    def remove_filter(
        self, hook: str, callback: FilterCallback, priority: int = DEFAULT_PRIORITY
    ) -> bool:
        """Remove a callback from a filter chain.

        Returns:
            True if the callback was registered at that priority and removed.
        """
        chain = self._filters.get(hook_name(hook), [])
        for index, (entry_priority, _, entry_callback) in enumerate(chain):
            if entry_priority == priority and entry_callback == callback:
                del chain[index]
                return True
        return False

    def remove_all_filters(self, hook: str) -> None:
        self._filters.pop(hook_name(hook), None)

    def has_filter(self, hook: str) -> bool:
        return bool(self._filters.get(hook_name(hook)))

    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        """Pass a value through every callback registered for a hook.

        Args:
            hook: Hook name, short or fully qualified.
            value: Initial value.
            *args: Extra arguments handed to every callback unchanged.

        Returns:
            The value returned by the last callback, or ``value`` when the
            chain is empty.
        """
        name = hook_name(hook)
        chain = list(self._filters.get(name, []))
        if not chain:
            return value
        logger.debug("Applying %d filter(s) to %s", len(chain), name)
        return functools.reduce(
            lambda current, entry: entry[2](current, *args), chain, value
        )
