"""Configuration-backed host for bd-shortcodes.

SiteHost implements the Host protocol from a plain mapping, usually loaded
from ``shortcodes.yaml``. It lets the shortcodes run outside a CMS, e.g. from
the command line or inside Jinja2 templates.

Example configuration:

    name: My Site
    admin_email: admin@example.com
    url: https://example.com
    timezone: Europe/Berlin
    theme_mods:
      custom_logo: 42
    attachments:
      42:
        src: /uploads/logo.png
        width: 200
        height: 80
        sizes:
          thumbnail: {src: /uploads/logo-150x60.png, width: 150, height: 60}
    menus:
      primary:
        - {title: Home, url: /}
        - title: Blog
          url: /blog/
          children:
            - {title: News, url: /blog/news/}
    posts:
      - {title: Hello, url: /hello/, date: 2024-01-05}
    current:
      title: Hello
      archive_title: "Month: January 2024"
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime, tzinfo
from typing import IO, Any
from urllib.parse import parse_qsl
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from markupsafe import escape

from .phpdate import MONTH_NAMES, format_date
from .utils import join_root_url, slugify

logger = logging.getLogger(__name__)

MENU_CONTAINERS = ("div", "nav")

Clock = Callable[[Any], datetime]


def _truthy(value: Any) -> bool:
    """Loose flag check for attributes that may arrive as strings."""
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "no", "off")
    return bool(value)


def _as_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            logger.warning("Ignoring post with unparseable date %r", value)
            return None
    if value is not None:
        logger.warning("Ignoring post with non-date value %r", value)
    return None


class SiteHost:
    """Host implementation backed by a configuration mapping.

    Attributes:
        data: Site configuration.
        clock: Callable returning the current time for a tzinfo (or None for
            local time). Defaults to ``datetime.now``.
        output: Stream used when the navigation menu is asked to echo.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        clock: Clock | None = None,
        output: IO[str] | None = None,
    ):
        """Initialize the host.

        Args:
            data: Site configuration mapping.
            clock: Optional replacement for ``datetime.now``.
            output: Optional stream for echoed menus; stdout if omitted.
        """
        self.data = data
        self.clock = clock or datetime.now
        self.output = output

    # -- Dates -----------------------------------------------------------

    @property
    def timezone(self) -> tzinfo | None:
        name = self.data.get("timezone")
        if not name:
            return None
        try:
            return ZoneInfo(str(name))
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r; using local time", name)
            return None

    def current_date(self, fmt: str) -> str:
        return format_date(fmt, self.clock(self.timezone))

    # -- Site metadata ---------------------------------------------------

    def get_bloginfo(self, key: str) -> Any:
        if key == "name":
            return self.data.get("name", "")
        if key == "admin_email":
            return self.data.get("admin_email", "")
        return self.data.get(key, "")

    def get_option(self, key: str) -> Any:
        if key == "blogname":
            return self.data.get("blogname") or self.data.get("name", "")
        return self.data.get(key)

    def get_theme_mod(self, key: str) -> Any:
        theme_mods = self.data.get("theme_mods") or {}
        return theme_mods.get(key, self.data.get(key))

    # -- Archives --------------------------------------------------------

    def get_archives(self, args: str) -> str:
        """Render an archive list.

        Only ``type=monthly`` and ``type=yearly`` are understood; anything
        else renders nothing.

        Args:
            args: Query string style options.

        Returns:
            One ``<li>`` line per period with posts, newest first.
        """
        options = dict(parse_qsl(args))
        archive_type = options.get("type", "monthly")
        dates = [d for d in (_as_date(p.get("date")) for p in self._posts()) if d]

        if archive_type == "monthly":
            periods = sorted({(d.year, d.month) for d in dates}, reverse=True)
            links = [
                (f"/{year}/{month:02d}/", f"{MONTH_NAMES[month - 1]} {year}")
                for year, month in periods
            ]
        elif archive_type == "yearly":
            years = sorted({d.year for d in dates}, reverse=True)
            links = [(f"/{year}/", str(year)) for year in years]
        else:
            logger.debug("Unsupported archive type %r", archive_type)
            return ""

        return "".join(
            f"\t<li><a href='{escape(self._url(path))}'>{escape(text)}</a></li>\n"
            for path, text in links
        )

    def _posts(self) -> list[Mapping[str, Any]]:
        posts = self.data.get("posts") or []
        return [p for p in posts if isinstance(p, Mapping)]

    def _url(self, path: str) -> str:
        return join_root_url(str(self.data.get("url") or ""), path)

    # -- Navigation ------------------------------------------------------

    def nav_menu(self, args: Mapping[str, Any]) -> str | None:
        """Render a navigation menu as nested lists.

        Args:
            args: Resolved menu attributes (``menu``, ``menu_id``,
                ``menu_class``, ``container``, ``echo``, ``fallback_cb``).

        Returns:
            The menu markup, or None when ``echo`` is set and the markup was
            written to the output stream instead.
        """
        name, items = self._find_menu(args.get("menu"))
        if items is None:
            fallback = args.get("fallback_cb")
            if callable(fallback):
                return fallback(args)
            return ""

        menu_class = args.get("menu_class") or "menu"
        menu_id = args.get("menu_id") or f"menu-{slugify(name)}"
        html = (
            f'<ul id="{escape(menu_id)}" class="{escape(menu_class)}">'
            f"{self._render_items(items)}</ul>"
        )

        container = args.get("container")
        if isinstance(container, str) and container in MENU_CONTAINERS:
            html = (
                f'<{container} class="menu-{slugify(name)}-container">'
                f"{html}</{container}>"
            )

        if _truthy(args.get("echo")):
            (self.output or sys.stdout).write(html)
            return None
        return html

    def _find_menu(self, menu: Any) -> tuple[str, list | None]:
        menus = self.data.get("menus") or {}
        if not isinstance(menus, Mapping):
            logger.warning(
                "Ignoring menus: expected a mapping, got %s", type(menus).__name__
            )
            return "", None
        if not menus:
            return "", None
        if menu is None or menu is False or menu == "":
            first = next(iter(menus))
            return str(first), menus[first]
        for key, items in menus.items():
            if str(key) == str(menu) or slugify(str(key)) == str(menu):
                return str(key), items
        return str(menu), None

    def _render_items(self, items: Iterable[Mapping[str, Any]]) -> str:
        parts = []
        for item in items:
            title = escape(item.get("title", ""))
            url = escape(item.get("url", "#"))
            children = item.get("children") or []
            classes = "menu-item"
            if children:
                classes += " menu-item-has-children"
            parts.append(f'<li class="{classes}"><a href="{url}">{title}</a>')
            if children:
                parts.append(f'<ul class="sub-menu">{self._render_items(children)}</ul>')
            parts.append("</li>")
        return "".join(parts)

    # -- Attachments -----------------------------------------------------

    def get_attachment_image(
        self,
        attachment_id: Any,
        size: str,
        icon: bool,
        attrs: Mapping[str, str],
    ) -> str:
        """Render an ``<img>`` element for a configured attachment.

        Empty ``class`` and ``alt`` values fall back to the size classes and
        the attachment's own alt text.

        Returns:
            Image markup, or an empty string for an unknown attachment.
        """
        attachment = self._find_attachment(attachment_id)
        if attachment is None:
            return ""

        image = attachment
        sizes = attachment.get("sizes") or {}
        if size in sizes:
            image = sizes[size]
            if isinstance(image, str):
                image = {"src": image}

        attributes = {
            "src": image.get("src", ""),
            "width": image.get("width"),
            "height": image.get("height"),
            "class": attrs.get("class") or f"attachment-{size} size-{size}",
            "alt": attrs.get("alt") or attachment.get("alt", ""),
        }
        rendered = " ".join(
            f'{key}="{escape(value)}"'
            for key, value in attributes.items()
            if value is not None
        )
        return f"<img {rendered} />"

    def _find_attachment(self, attachment_id: Any) -> Mapping[str, Any] | None:
        attachments = self.data.get("attachments") or {}
        if not isinstance(attachments, Mapping):
            logger.warning(
                "Ignoring attachments: expected a mapping, got %s",
                type(attachments).__name__,
            )
            return None
        for key, attachment in attachments.items():
            if str(key) == str(attachment_id) and isinstance(attachment, Mapping):
                return attachment
        return None

    # -- Current context -------------------------------------------------

    def get_the_title(self) -> str | None:
        return (self.data.get("current") or {}).get("title")

    def get_the_archive_title(self) -> str | None:
        return (self.data.get("current") or {}).get("archive_title")
