"""Terminal styling for the parts of a reformatted line.

Each `Role` is a plain string enum value naming a yachalk style, so the
processor only names what a piece of text *is* and `Styler` decides whether
it gets decorated.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, TextIO

from yachalk import chalk
from yachalk.types import ColorMode

Colorizer = Callable[..., str]


class Role(str, Enum):
    """Semantic role of a piece of output text, with the chalk style it uses."""

    _value_: str
    _style: str

    PATH = ("path", "yellow")
    ROW = ("row", "blue")
    COLUMN = ("column", "green")
    MATCH = ("match", "red")

    def __new__(cls, text: str, style: str) -> Role:
        obj = str.__new__(cls, text)
        obj._value_ = text
        obj._style = style
        return obj

    @property
    def color(self) -> Colorizer:
        # Looked up per call so a later chalk.set_color_mode() applies
        return getattr(chalk, self._style)


def resolve_color(mode: str, stream: TextIO | None = None) -> bool:
    """Decide whether to colorize output written to 'stream'.

    'always' and 'never' are final. For 'auto', FORCE_COLOR (set and not "0")
    enables and NO_COLOR disables; otherwise color follows 'stream.isatty()'.
    """
    if mode == "always":
        return True
    if mode == "never":
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    stream = stream if stream is not None else sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def set_color_output(enabled: bool) -> None:
    """Switch yachalk's process-wide color mode to match the run's decision."""
    # yachalk picks its mode from the real stdout; an explicit request wins
    chalk.set_color_mode(ColorMode.Basic16 if enabled else ColorMode.AllOff)


@dataclass(frozen=True)
class Styler:
    enabled: bool = False

    def paint(self, role: Role, text: str) -> str:
        if not self.enabled or not text:
            return text
        return role.color(text)
