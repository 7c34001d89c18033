# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""
Runtime configuration.

Files:
         /etc/b64codec.toml    System
    ~/.b64codec/config.toml    User
      .b64codec/config.toml    Local

Environment variables prefixed with `B64CODEC_` take precedence
(e.g., `B64CODEC_LOGGING_LEVEL=debug`).
"""


# type annotations
from __future__ import annotations
from typing import Optional

# standard libs
import os
import sys
import functools

# external libs
from cmdkit.app import exit_status
from cmdkit.config import Namespace, Environ, Configuration, ConfigurationError

# internal libs
from b64codec.core.platform import path
from b64codec.core.exceptions import write_traceback

# public interface
__all__ = ['config', 'default', 'ConfigurationError', 'Namespace', 'blame',
           'load', 'load_file', 'load_env',
           'get_newline', 'get_line_size', 'NEWLINES',
           'DEFAULT_LOGGING_STYLE', 'LOGGING_STYLES', ]


DEFAULT_LOGGING_STYLE = 'default'
LOGGING_STYLES = {
    'default': {
        'datefmt': '%Y-%m-%d %H:%M:%S',
        'format': ('%(ansi_bold)s%(ansi_level)s%(levelname)8s%(ansi_reset)s %(ansi_faint)s[%(name)s]%(ansi_reset)s'
                   ' %(message)s'),
    },
    'system': {
        'datefmt': '%Y-%m-%d %H:%M:%S',
        'format': '%(asctime)s.%(msecs)03d %(hostname)s %(levelname)8s [%(app_id)s] [%(name)s] %(message)s',
    },
    'detailed': {
        'datefmt': '%Y-%m-%d %H:%M:%S',
        'format': ('%(ansi_faint)s%(asctime)s.%(msecs)03d %(hostname)s %(ansi_reset)s'
                   '%(ansi_level)s%(ansi_bold)s%(levelname)8s%(ansi_reset)s '
                   '%(ansi_faint)s[%(name)s]%(ansi_reset)s %(message)s'),
    }
}


# Named line endings for encoded files
NEWLINES = {
    'crlf': '\r\n',
    'lf': '\n',
}


# Environment variables and configuration files are automatically merged with defaults
default = Namespace({

    'logging': {
        'level': 'warning',
        # NOTE: If a 'style' is defined than other parameters can be overridden
        'style': DEFAULT_LOGGING_STYLE,
        **LOGGING_STYLES.get(DEFAULT_LOGGING_STYLE),
    },

    'codec': {
        'newline': 'crlf',  # Line ending written between encoded lines
        'linesize': 76,     # Characters per encoded line (multiple of 4)
    },
})


@functools.lru_cache(maxsize=None)
def load_file(filepath: str) -> Namespace:
    """Load configuration file (empty if missing)."""
    if not os.path.exists(filepath):
        return Namespace({})
    try:
        return Namespace.from_toml(filepath)
    except Exception as err:
        raise ConfigurationError(f'(from file: {filepath}) {err.__class__.__name__}: {err}')


@functools.lru_cache(maxsize=None)
def load_env() -> Environ:
    """Load environment variables and expand hierarchy as namespace."""
    return Environ(prefix='B64CODEC').expand()


def partial_load(**preload: Namespace) -> Configuration:
    """Load configuration from files and merge environment variables."""
    return Configuration(**{
        'default': default, **preload,
        'system': load_file(path.system.config),
        'user': load_file(path.user.config),
        'local': load_file(path.local.config),
        'env': load_env(),
    })


def blame(base: Configuration, *varpath: str) -> Optional[str]:
    """Construct filename or variable assignment string based on precedent of `varpath`"""
    source = base.which(*varpath)
    if not source:
        return None
    if source in ('system', 'user', 'local'):
        return f'from: {path.get(source).config}'
    elif source == 'env':
        return 'from: B64CODEC_' + '_'.join([node.upper() for node in varpath])
    else:
        return f'from: <{source}>'


def get_logging_style(base: Configuration) -> str:
    """Get and check valid on `config.logging.style`."""
    style = base.logging.style
    label = blame(base, 'logging', 'style')
    if not isinstance(style, str):
        raise ConfigurationError(f'Expected string for `logging.style` ({label})')
    style = style.lower()
    if style in LOGGING_STYLES:
        return style
    else:
        raise ConfigurationError(f'Unrecognized `logging.style` \'{style}\' ({label})')


def get_newline(base: Configuration) -> str:
    """Get line ending characters named by `config.codec.newline`."""
    name = base.codec.newline
    label = blame(base, 'codec', 'newline')
    if not isinstance(name, str) or name.lower() not in NEWLINES:
        raise ConfigurationError(f'Expected one of {", ".join(NEWLINES)} for `codec.newline`, '
                                 f'given \'{name}\' ({label})')
    return NEWLINES[name.lower()]


def get_line_size(base: Configuration) -> int:
    """Get and check valid on `config.codec.linesize`."""
    value = base.codec.linesize
    label = blame(base, 'codec', 'linesize')
    try:
        # environment variables arrive as strings
        size = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f'Expected integer for `codec.linesize`, given \'{value}\' ({label})')
    if size <= 0 or size % 4:
        raise ConfigurationError(f'Expected positive multiple of 4 for `codec.linesize`, '
                                 f'given {size} ({label})')
    return size


def build_preloads(base: Configuration) -> Namespace:
    """Build 'preload' namespace from base configuration."""
    return Namespace({'logging': LOGGING_STYLES.get(get_logging_style(base))})


def load() -> Configuration:
    """Load configuration from files and merge environment variables."""
    return partial_load(preload=build_preloads(base=partial_load()))


try:
    config = load()
except Exception as error:
    write_traceback(error, module=__name__)
    sys.exit(exit_status.bad_config)
