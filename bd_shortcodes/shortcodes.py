"""Shortcode renderers.

Each renderer takes the render context, the tag's attributes and optional
inner content, and returns the text that replaces the tag. Renderers keep no
state between calls; all data comes from the host.

Usage inside content:

    [date format="Y-m-d"]
    [site-name]
    [admin-email]
    [archives]
    [menu name="primary" container="nav" menu_class="menu"]
    [logo size="medium" class="brand"]
    [title]
    [archive-title]
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .attributes import Attributes, DateAttributes, LogoAttributes, MenuAttributes
from .context import ShortcodeContext

LOGO_WRAPPER = '<div class="site-logo">{}</div>'


def shortcode_date(
    context: ShortcodeContext, atts: Attributes, content: str | None = None
) -> str:
    """Return the current date in the given format (default ``m/d/Y``).

    Examples:
        [date format="m/d/Y"]
        [date format="F j, Y"]
    """
    attributes = DateAttributes.from_atts(atts)
    return context.host.current_date(attributes.format)


def shortcode_site_name(
    context: ShortcodeContext, atts: Attributes, content: str | None = None
) -> str:
    """Return the site name."""
    return context.host.get_bloginfo("name")


def shortcode_admin_email(
    context: ShortcodeContext, atts: Attributes, content: str | None = None
) -> Any:
    """Return the admin email, passed through the ``admin_email`` filter."""
    email = context.host.get_bloginfo("admin_email")
    return context.filters.apply_filters("admin_email", email)


def shortcode_archives(
    context: ShortcodeContext, atts: Attributes, content: str | None = None
) -> str:
    """Return the monthly archive listing."""
    return context.host.get_archives("type=monthly")


def shortcode_menu(
    context: ShortcodeContext, atts: Attributes, content: str | None = None
) -> str | None:
    """Render a navigation menu.

    ``name`` may be used in place of ``menu`` and ``id`` in place of
    ``menu_id``; when both spellings are given the alias wins. The resolved
    attributes are handed to the host unchanged, including ``echo``.

    Examples:
        [menu name="primary"]
        [menu id="123"]
        [menu menu="primary" container="nav" menu_class="menu"]
    """
    attributes = MenuAttributes.from_atts(atts)
    return context.host.nav_menu(attributes.as_args())


def _logo_id(logo: Any) -> Any:
    if isinstance(logo, Mapping):
        return logo.get("ID")
    return logo


def shortcode_logo(
    context: ShortcodeContext, atts: Attributes, content: str | None = None
) -> str:
    """Render the site logo.

    Falls back to the blog name as plain text when no logo is configured.
    The id passes through the ``logo/id`` filter and the finished markup
    through the ``logo`` filter. With ``echo`` set to boolean True the markup
    is also written to the context output.
    """
    attributes = LogoAttributes.from_atts(atts)

    logo_id = _logo_id(context.host.get_theme_mod("custom_logo"))
    logo_id = context.filters.apply_filters(
        "logo/id", logo_id if logo_id is not None else False
    )

    if logo_id:
        logo_html = context.host.get_attachment_image(
            logo_id,
            attributes.size,
            False,
            {"class": attributes.css_class, "alt": attributes.alt},
        )
    else:
        logo_html = context.host.get_option("blogname")

    logo_html = LOGO_WRAPPER.format("" if logo_html is None else logo_html)
    logo_html = context.filters.apply_filters("logo", logo_html)

    # The markup is printed and still returned; callers see it twice if they
    # also print the return value.
    if attributes.echo:
        context.echo(logo_html)

    return logo_html


def shortcode_title(
    context: ShortcodeContext, atts: Attributes, content: str | None = None
) -> str | None:
    """Return the title of the current post, which may be None outside one."""
    return context.host.get_the_title()


def shortcode_archive_title(
    context: ShortcodeContext, atts: Attributes, content: str | None = None
) -> str | None:
    """Return the title of the current archive listing."""
    return context.host.get_the_archive_title()
