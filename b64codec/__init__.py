# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""
Base64 encoding and decoding for buffers and files.

This package provides the codec engine along with the `b64codec`
command-line application built on top of it.
"""


# standard libs
import sys

# external libs
from rich.traceback import install as enable_rich_tracebacks

# internal libs (forced initialization)
from b64codec.__meta__ import (__appname__, __version__, __authors__, __developer__, __contact__,
                               __license__, __website__, __copyright__, __description__, __keywords__)
from b64codec.core.config import config
from b64codec.core import logging

# public interface
__all__ = ['__appname__', '__version__', '__authors__', '__developer__', '__contact__',
           '__license__', '__website__', '__copyright__', '__description__',
           '__keywords__', ]


# Enable rich tracebacks for interactive shells
if sys.stdout.isatty() and hasattr(sys, 'ps1'):
    enable_rich_tracebacks()
