# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Encode a file in base64."""


# external libs
from cmdkit.app import Application
from cmdkit.cli import Interface

# internal libs
from b64codec.core.config import config, get_newline, get_line_size, NEWLINES
from b64codec.core.logging import Logger
from b64codec.codec.file import encode_file
from b64codec.apps.b64codec.common import codec_exceptions

# public interface
__all__ = ['EncodeApp', ]

# application logger
log = Logger.with_name('b64codec')


PROGRAM = 'b64codec encode'
USAGE = f"""\
usage: {PROGRAM} [-h] FILE OUTPUT [--newline NAME] [--line-size SIZE]
{__doc__}\
"""

HELP = f"""\
{USAGE}

arguments:
FILE                     Path to file to encode.
OUTPUT                   Path to write encoded lines.

options:
    --newline  NAME      Line ending ({', '.join(NEWLINES)}; default from `codec.newline`).
-l, --line-size SIZE     Characters per line, a multiple of 4 (default from `codec.linesize`).
-h, --help               Show this message and exit.\
"""


class EncodeApp(Application):
    """Application class for file encoding."""

    interface = Interface(PROGRAM, USAGE, HELP)

    input_path: str
    interface.add_argument('input_path')

    output_path: str
    interface.add_argument('output_path')

    newline: str = None
    interface.add_argument('--newline', choices=list(NEWLINES), default=newline)

    line_size: int = None
    interface.add_argument('-l', '--line-size', type=int, default=line_size)

    exceptions = codec_exceptions(log)

    def run(self) -> None:
        """Encode input file to output file."""
        newline = NEWLINES[self.newline] if self.newline else get_newline(config)
        line_size = self.line_size if self.line_size is not None else get_line_size(config)
        log.info(f'Encoding {self.input_path} ({line_size} characters per line)')
        encode_file(self.input_path, self.output_path, newline=newline, line_size=line_size)
