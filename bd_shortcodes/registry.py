"""Shortcode tag registry.

The registry maps tag names to renderer functions and invokes them with a
shared render context. Build it once at startup with create_default_registry()
and hand it to whatever renders content.

Key classes:
- ShortcodeRegistry: Tag name to renderer mapping.
- UnknownShortcodeError: Raised when rendering a tag nobody registered.
"""

from __future__ import annotations

import logging
from typing import IO

from . import shortcodes
from .attributes import Attributes
from .context import Renderer, ShortcodeContext
from .hooks import FilterRegistry
from .protocols import Host

logger = logging.getLogger(__name__)


class ShortcodeError(Exception):
    """Base class for shortcode errors."""


class UnknownShortcodeError(ShortcodeError, KeyError):
    """Error raised when no renderer is registered for a tag.

    Attributes:
        tag: The tag name that was requested.
    """

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No shortcode registered for tag '{tag}'")

    def __str__(self) -> str:
        return self.args[0]


class ShortcodeRegistry:
    """Registry of shortcode renderers.

    The same renderer may be registered under several tag names. Registering
    a tag again replaces the previous renderer.

    Attributes:
        context: Render context handed to every renderer.
    """

    def __init__(self, context: ShortcodeContext):
        """Initialize an empty registry.

        Args:
            context: Render context handed to every renderer.
        """
        self.context = context
        self._renderers: dict[str, Renderer] = {}

    def register(self, tag: str, renderer: Renderer) -> None:
        """Register a renderer under a tag name.

        Args:
            tag: Tag name as written in content, e.g. ``site-name``.
            renderer: Renderer function.
        """
        if tag in self._renderers:
            logger.debug("Replacing renderer for shortcode [%s]", tag)
        self._renderers[tag] = renderer

    def remove(self, tag: str) -> None:
        self._renderers.pop(tag, None)

    def get(self, tag: str) -> Renderer | None:
        """Return the renderer registered for a tag, or None."""
        return self._renderers.get(tag)

    def tags(self) -> list[str]:
        return sorted(self._renderers)

    def __contains__(self, tag: object) -> bool:
        return tag in self._renderers

    def __len__(self) -> int:
        return len(self._renderers)

    def render(
        self, tag: str, atts: Attributes | None = None, content: str | None = None
    ) -> str:
        """Render one tag occurrence.

        Args:
            tag: Tag name.
            atts: Attributes of the occurrence.
            content: Enclosed content, if any.

        Returns:
            Rendered text. A renderer returning None renders as "".

        Raises:
            UnknownShortcodeError: If nothing is registered for ``tag``.
        """
        renderer = self.get(tag)
        if renderer is None:
            raise UnknownShortcodeError(tag)
        result = renderer(self.context, dict(atts or {}), content)
        return "" if result is None else str(result)

    def __repr__(self) -> str:  # pragma: no cover - for debugging
        return f"ShortcodeRegistry({len(self._renderers)} tags)"


def create_default_registry(
    host: Host,
    filters: FilterRegistry | None = None,
    output: IO[str] | None = None,
) -> ShortcodeRegistry:
    """Create a registry with the built-in shortcodes.

    Args:
        host: Host platform the shortcodes query.
        filters: Filter chains to use; a new empty registry if omitted.
        output: Stream for echoing shortcodes; the current stdout if omitted.

    Returns:
        Configured ShortcodeRegistry.
    """
    context = ShortcodeContext(
        host=host, filters=filters or FilterRegistry(), output=output
    )

    registry = ShortcodeRegistry(context)
    registry.register("date", shortcodes.shortcode_date)
    registry.register("site-name", shortcodes.shortcode_site_name)
    registry.register("admin_email", shortcodes.shortcode_admin_email)
    registry.register("admin-email", shortcodes.shortcode_admin_email)
    registry.register("archives", shortcodes.shortcode_archives)
    registry.register("menu", shortcodes.shortcode_menu)
    registry.register("logo", shortcodes.shortcode_logo)
    registry.register("title", shortcodes.shortcode_title)
    registry.register("archive-title", shortcodes.shortcode_archive_title)
    logger.debug("Registered %d shortcodes", len(registry))
    return registry
