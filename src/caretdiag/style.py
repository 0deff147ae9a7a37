"""Styling adapters and width measurement.

Layout never emits escape sequences itself. It tags each piece of output with
a semantic `Role` and leaves the decoration to a `Styler`:

- `ChalkStyler` decorates with yachalk builders (ANSI escapes).
- `PlainStyler` returns text unchanged.

Width measurement always runs on the stripped view of a string, so column
alignment does not depend on whether styling is enabled, nor on escapes the
caller embedded in label messages.
"""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Protocol

from wcwidth import wcwidth
from yachalk import ChalkFactory, ColorMode


ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


class Role(str, Enum):
    HEADING = "heading"
    EMPHASIS = "emphasis"
    MUTED = "muted"


class Styler(Protocol):
    def __call__(self, text: str, role: Role | None) -> str: ...


class PlainStyler:
    def __call__(self, text: str, role: Role | None) -> str:
        return text


class ChalkStyler:
    """Styles roles with yachalk builders.

    Defaults: bold heading, bold red carets and connectors, gray gutter.
    Pass `styles` to override any of them.

    The chalk is built with an explicit `mode` instead of the global
    `yachalk.chalk`, whose mode is fixed from stdout at import time.
    """

    def __init__(
        self,
        styles: Mapping[Role, Callable[[str], str]] | None = None,
        *,
        mode: ColorMode = ColorMode.Basic16,
    ) -> None:
        chalk = ChalkFactory(mode)
        self._styles: dict[Role, Callable[[str], str]] = {
            Role.HEADING: chalk.bold,
            Role.EMPHASIS: chalk.bold.red,
            Role.MUTED: chalk.bold.gray,
        }
        if styles:
            self._styles.update(styles)

    def __call__(self, text: str, role: Role | None) -> str:
        if role is None or not text:
            return text
        builder = self._styles.get(role)
        if builder is None:
            return text
        return builder(text)


def strip_styles(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def char_width(ch: str) -> int:
    w = wcwidth(ch)
    # Control characters report -1; they still occupy a column in the source echo.
    return 1 if w < 0 else w


def display_width(text: str) -> int:
    """Terminal columns taken by `text`, ignoring styling escapes."""
    return sum(char_width(ch) for ch in strip_styles(text))


def resolve_styler(color: bool | None = None, *, stdout_isatty: bool | None = None) -> Styler:
    """Pick an output adapter.

    Precedence: explicit `color`, then `FORCE_COLOR` (set and not "0"), then
    `NO_COLOR` (set to anything), then whether stdout is a terminal.
    """
    if color is None:
        color = _color_from_environment(stdout_isatty)
    return ChalkStyler() if color else PlainStyler()


def _color_from_environment(stdout_isatty: bool | None) -> bool:
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
