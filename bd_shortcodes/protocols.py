"""Protocol definitions for bd-shortcodes.

Shortcodes never look data up themselves. Everything they need comes from the
host platform, described here as a protocol so renderers stay decoupled from
any particular CMS.

These protocols enable:
- Rendering against a real CMS adapter or the YAML-backed SiteHost
- Easy testing through fake hosts
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Host(Protocol):
    """Protocol for the host platform that shortcodes query.

    Method names follow the host APIs the shortcodes were written against so
    that adapters stay a thin layer.
    """

    @abstractmethod
    def current_date(self, fmt: str) -> str:
        """Format the current date.

        Args:
            fmt: PHP-style date format string.

        Returns:
            The current date in the host's configured time zone.
        """
        ...

    @abstractmethod
    def get_bloginfo(self, key: str) -> Any:
        """Return site metadata such as ``name`` or ``admin_email``."""
        ...

    @abstractmethod
    def get_option(self, key: str) -> Any:
        """Return a stored site option such as ``blogname``."""
        ...

    @abstractmethod
    def get_archives(self, args: str) -> str:
        """Render an archive listing.

        Args:
            args: Query string style options, e.g. ``type=monthly``.

        Returns:
            Rendered archive fragment.
        """
        ...

    @abstractmethod
    def nav_menu(self, args: Mapping[str, Any]) -> str | None:
        """Render a navigation menu.

        Args:
            args: Full menu attribute mapping.

        Returns:
            Rendered menu, or None when the host printed it itself.
        """
        ...

    @abstractmethod
    def get_theme_mod(self, key: str) -> Any:
        """Return a theme customization value such as ``custom_logo``."""
        ...

    @abstractmethod
    def get_attachment_image(
        self,
        attachment_id: Any,
        size: str,
        icon: bool,
        attrs: Mapping[str, str],
    ) -> str:
        """Render an image element for an attachment.

        Args:
            attachment_id: Attachment identifier.
            size: Registered image size name.
            icon: Whether to fall back to a media icon.
            attrs: Extra attributes for the image element.

        Returns:
            Rendered image fragment, or an empty string.
        """
        ...

    @abstractmethod
    def get_the_title(self) -> str | None:
        """Return the title of the current content item, if any."""
        ...

    @abstractmethod
    def get_the_archive_title(self) -> str | None:
        """Return the title of the current archive listing, if any."""
        ...
