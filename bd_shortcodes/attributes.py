"""Attribute handling for shortcodes.

Shortcode attributes arrive as a loose mapping of string keys to strings,
booleans or nothing at all. This module merges them over per-shortcode
defaults and turns the result into small typed records that renderers read.

Key functions:
- shortcode_atts: Merge supplied attributes over declared defaults.
- resolve_aliases: Copy alias keys onto their canonical names.
- is_true: Strict boolean check used for flags such as ``echo``.

Key classes:
- DateAttributes, MenuAttributes, LogoAttributes: Normalized records.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

AttributeValue = str | bool | None
Attributes = Mapping[str, AttributeValue]

DATE_DEFAULTS: dict[str, AttributeValue] = {
    "format": "m/d/Y",
}

MENU_DEFAULTS: dict[str, AttributeValue] = {
    "name": None,
    "menu": None,
    "id": None,
    "menu_id": None,
    "menu_class": None,
    "container": False,
    "walker": "",
    "echo": False,
    "fallback_cb": False,
}

# Older navigation APIs spelled these differently; accept both at the call site.
MENU_ALIASES: tuple[tuple[str, str], ...] = (
    ("name", "menu"),
    ("id", "menu_id"),
)

LOGO_DEFAULTS: dict[str, AttributeValue] = {
    "size": "full",
    "class": "",
    "alt": "",
    "echo": False,
}


def shortcode_atts(
    defaults: Mapping[str, Any], atts: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Merge supplied attributes over a set of declared defaults.

    Every key in ``defaults`` ends up in the result, holding the supplied
    value when one is present and not None. Supplied keys that have no
    default are kept as they are so later alias resolution can see them.

    Args:
        defaults: Declared default attributes for a shortcode.
        atts: Attributes supplied by the tag occurrence, or None.

    Returns:
        A new dictionary with the merged attributes.

    Examples:
        >>> shortcode_atts({"size": "full"}, {"size": None, "x": "1"})
        {'size': 'full', 'x': '1'}
    """
    supplied = dict(atts or {})
    merged = {}
    for key, default in defaults.items():
        value = supplied.pop(key, None)
        merged[key] = default if value is None else value
    merged.update(supplied)
    return merged


def resolve_aliases(
    atts: Mapping[str, Any], aliases: Iterable[tuple[str, str]]
) -> dict[str, Any]:
    """Copy aliased attribute values onto their canonical keys.

    Args:
        atts: Merged attributes.
        aliases: Pairs of (alias, canonical key).

    Returns:
        A new dictionary where each alias that is set overwrites its target.
    """
    resolved = dict(atts)
    for alias, target in aliases:
        if resolved.get(alias) is not None:
            resolved[target] = resolved[alias]
    return resolved


def is_true(value: AttributeValue) -> bool:
    """Return True only for the boolean True, never for strings like "true"."""
    return value is True


@dataclass(frozen=True)
class DateAttributes:
    """Normalized attributes of the ``date`` shortcode.

    Attributes:
        format: PHP-style date format string.
    """

    format: str = "m/d/Y"

    @classmethod
    def from_atts(cls, atts: Attributes | None) -> DateAttributes:
        merged = shortcode_atts(DATE_DEFAULTS, atts)
        # An empty format behaves like a missing one.
        fmt = merged["format"] or DATE_DEFAULTS["format"]
        return cls(format=str(fmt))


@dataclass(frozen=True)
class MenuAttributes:
    """Normalized attributes of the ``menu`` shortcode.

    Attributes:
        menu: Menu name or identifier to render.
        menu_id: ID attribute for the rendered list.
        menu_class: CSS class for the rendered list.
        container: Wrapping element name, or False for none.
        walker: Custom walker reference, passed through untouched.
        echo: Whether the navigation query should print instead of return.
        fallback_cb: Callback used when the menu does not exist.
        extra: Every other attribute, passed through untouched.
    """

    menu: AttributeValue = None
    menu_id: AttributeValue = None
    menu_class: AttributeValue = None
    container: AttributeValue = False
    walker: Any = ""
    echo: AttributeValue = False
    fallback_cb: Any = False
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_atts(cls, atts: Attributes | None) -> MenuAttributes:
        merged = resolve_aliases(shortcode_atts(MENU_DEFAULTS, atts), MENU_ALIASES)
        known = {
            "menu",
            "menu_id",
            "menu_class",
            "container",
            "walker",
            "echo",
            "fallback_cb",
        }
        extra = {key: value for key, value in merged.items() if key not in known}
        return cls(extra=extra, **{key: merged[key] for key in known})

    def as_args(self) -> dict[str, Any]:
        """Return the full resolved attribute mapping for the navigation query."""
        args = dict(self.extra)
        args.update(
            menu=self.menu,
            menu_id=self.menu_id,
            menu_class=self.menu_class,
            container=self.container,
            walker=self.walker,
            echo=self.echo,
            fallback_cb=self.fallback_cb,
        )
        return args


@dataclass(frozen=True)
class LogoAttributes:
    """Normalized attributes of the ``logo`` shortcode.

    Attributes:
        size: Registered image size name.
        css_class: Value of the ``class`` attribute on the image.
        alt: Alternative text for the image.
        echo: Print the markup as well as returning it.
    """

    size: str = "full"
    css_class: str = ""
    alt: str = ""
    echo: bool = False

    @classmethod
    def from_atts(cls, atts: Attributes | None) -> LogoAttributes:
        merged = shortcode_atts(LOGO_DEFAULTS, atts)
        return cls(
            size=str(merged["size"]),
            css_class=str(merged["class"]),
            alt=str(merged["alt"]),
            echo=is_true(merged["echo"]),
        )
