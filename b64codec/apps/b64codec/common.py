# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Exception handling shared by the command-line applications."""


# type annotations
from typing import Callable, Dict, Type

# standard libs
import logging
from functools import partial

# external libs
from cmdkit.app import exit_status
from cmdkit.config import ConfigurationError

# internal libs
from b64codec.core.exceptions import log_exception
from b64codec.codec.errors import Base64Error, InvalidConfiguration

# public interface
__all__ = ['codec_exceptions', ]


def codec_exceptions(log: logging.Logger) -> Dict[Type[Exception], Callable[[Exception], int]]:
    """
    Map exception types to handlers that log and return an exit status.

    Handlers are matched in order, so `InvalidConfiguration` must come
    before its base class `Base64Error`.
    """
    return {
        InvalidConfiguration: partial(log_exception, logger=log.critical, status=exit_status.bad_argument),
        ConfigurationError: partial(log_exception, logger=log.critical, status=exit_status.bad_config),
        Base64Error: partial(log_exception, logger=log.critical, status=exit_status.runtime_error),
        RuntimeError: partial(log_exception, logger=log.critical, status=exit_status.runtime_error),
        OSError: partial(log_exception, logger=log.critical, status=exit_status.runtime_error),
    }
