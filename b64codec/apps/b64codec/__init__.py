# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Entry-point for b64codec command-line interface."""


# standard libs
import sys

# external libs
from cmdkit.app import Application, ApplicationGroup
from cmdkit.cli import Interface

# internal libs
from b64codec.__meta__ import __version__, __description__, __copyright__, __developer__, __contact__, __website__
from b64codec.core.logging import Logger
from b64codec.apps.b64codec import encode, decode, check

# public interface
__all__ = ['B64CodecApp', 'main', ]


PROGRAM = 'b64codec'
USAGE = f"""\
usage: {PROGRAM} [-h] [-v] <command> [<args>...]
{__description__}\
"""

EPILOG = f"""\
Documentation and issue tracking at:
{__website__}

Copyright {__copyright__}
{__developer__} <{__contact__}>\
"""

HELP = f"""\
{USAGE}

commands:
encode                 {encode.__doc__}
decode                 {decode.__doc__}
check                  {check.__doc__}

options:
-h, --help             Show this message and exit.
-v, --version          Show the version and exit.

The forms `/encode` and `/decode` are accepted as well.
Use the -h/--help flag with the above commands to
learn more about their usage.

{EPILOG}\
"""


# initialize application logger
log = Logger.with_name('b64codec')


# logging setup for command-line interface
Application.log_critical = log.critical
Application.log_exception = log.exception


class B64CodecApp(ApplicationGroup):
    """Top-level application class for b64codec."""

    interface = Interface(PROGRAM, USAGE, HELP)
    interface.add_argument('command')
    interface.add_argument('-v', '--version', action='version', version=__version__)

    command = None
    commands = {'encode': encode.EncodeApp,
                'decode': decode.DecodeApp,
                'check': check.CheckApp,
                '/encode': encode.EncodeApp,
                '/decode': decode.DecodeApp,
                }


def main() -> int:
    """Entry-point for `b64codec` console application."""
    return B64CodecApp.main(sys.argv[1:])
