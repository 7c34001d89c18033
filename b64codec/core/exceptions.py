# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Common exception handling and early (pre-logging) error reporting."""


# type annotations
from __future__ import annotations
from typing import Callable, Optional

# standard libs
import os
import sys
import logging
import functools
import traceback
from datetime import datetime

# external libs
from cmdkit.app import exit_status

# internal libs
from b64codec.core.ansi import Ansi
from b64codec.core.platform import default_path

# public interface
__all__ = ['log_exception', 'write_traceback', 'display_critical', ]


def display_critical(message: str, module: Optional[str] = None) -> None:
    """Report a critical error to stderr before logging has been configured."""
    name = module or 'b64codec'
    print(f'{Ansi.BOLD.value}{Ansi.MAGENTA.value}CRITICAL{Ansi.RESET.value} '
          f'{Ansi.FAINT.value}[{name}]{Ansi.RESET.value} {message}', file=sys.stderr)


def log_exception(exc: Exception, logger: Callable[[str], None], status: int) -> int:
    """Log the exception and exit with `status`."""
    logger(str(exc))
    return status


def write_traceback(exc: Exception, module: Optional[str] = None,
                    logger: Optional[logging.Logger] = None) -> int:
    """Write traceback of `exc` to a file in the log directory and return exit code."""
    report = logger.critical if logger is not None else functools.partial(display_critical, module=module)
    msg = str(exc).replace('\n', ' - ')
    report(f'{exc.__class__.__name__}: {msg}')
    try:
        os.makedirs(default_path.log, exist_ok=True)
        time = datetime.now().strftime('%Y%m%d-%H%M%S')
        filepath = os.path.join(default_path.log, f'exception-{time}.log')
        with open(filepath, mode='w') as stream:
            print(''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)), file=stream)
    except OSError as error:
        report(f'Could not write traceback ({error})')
    else:
        report(f'Exception traceback written to {filepath}')
    return exit_status.uncaught_exception

