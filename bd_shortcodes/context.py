"""Render context shared by all shortcodes."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import IO

from .attributes import Attributes
from .hooks import FilterRegistry
from .protocols import Host


@dataclass
class ShortcodeContext:
    """Collaborators a renderer may use.

    Attributes:
        host: Host platform queried for data.
        filters: Filter chains applied to renderer output.
        output: Stream that echoing renderers write to. When None, echoes go
            to whatever ``sys.stdout`` is at the time of writing.
    """

    host: Host
    filters: FilterRegistry = field(default_factory=FilterRegistry)
    output: IO[str] | None = None

    def echo(self, text: str) -> None:
        (self.output or sys.stdout).write(text)


Renderer = Callable[[ShortcodeContext, Attributes, str | None], str | None]
