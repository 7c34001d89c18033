# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""ANSI escape sequences for colorizing text output."""


# standard libs
import functools
from enum import Enum

# public interface
__all__ = ['Ansi', 'colorize', 'red', 'green', ]


class Ansi(Enum):
    """ANSI escape sequences for formatting and foreground colors."""

    NULL = ''
    RESET = '\033[0m'
    BOLD = '\033[1m'
    FAINT = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'


def colorize(text: str, color: str) -> str:
    """Apply a foreground `color` code to the given `text`."""
    return Ansi[color.upper()].value + text + Ansi.RESET.value


# named color formats
red = functools.partial(colorize, color='red')
green = functools.partial(colorize, color='green')
