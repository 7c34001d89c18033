# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Check base64-encoded files for invalid lines."""


# type annotations
from typing import List

# standard libs
import sys

# external libs
from cmdkit.app import Application
from cmdkit.cli import Interface

# internal libs
from b64codec.core import ansi
from b64codec.core.logging import Logger
from b64codec.codec.file import check_file
from b64codec.apps.b64codec.common import codec_exceptions

# public interface
__all__ = ['CheckApp', ]

# application logger
log = Logger.with_name('b64codec')


PROGRAM = 'b64codec check'
USAGE = f"""\
usage: {PROGRAM} [-h] FILE [FILE ...]
{__doc__}\
"""

HELP = f"""\
{USAGE}

arguments:
FILE...                  Paths to base64-encoded files.

options:
-h, --help               Show this message and exit.\
"""


class CheckApp(Application):
    """Application class for checking encoded files."""

    interface = Interface(PROGRAM, USAGE, HELP)

    sources: List[str] = []
    interface.add_argument('sources', nargs='+')

    exceptions = codec_exceptions(log)

    def run(self) -> None:
        """Check each file and report invalid lines."""
        failed = [source for source in self.sources if not self.check(source)]
        if failed:
            raise RuntimeError(f'Invalid lines found in {len(failed)} of {len(self.sources)} files')

    @staticmethod
    def check(source: str) -> bool:
        """Print status of `source` and return True if every line is valid."""
        invalid = check_file(source)
        if not invalid:
            status = 'ok'
        else:
            status = 'invalid (lines ' + ', '.join(map(str, invalid)) + ')'
        if sys.stdout.isatty():
            status = ansi.red(status) if invalid else ansi.green(status)
        print(f'{source}: {status}')
        return not invalid
