# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Decode a base64-encoded file."""


# external libs
from cmdkit.app import Application
from cmdkit.cli import Interface

# internal libs
from b64codec.core.logging import Logger
from b64codec.codec.file import decode_file
from b64codec.apps.b64codec.common import codec_exceptions

# public interface
__all__ = ['DecodeApp', ]

# application logger
log = Logger.with_name('b64codec')


PROGRAM = 'b64codec decode'
USAGE = f"""\
usage: {PROGRAM} [-h] FILE OUTPUT
{__doc__}\
"""

HELP = f"""\
{USAGE}

arguments:
FILE                     Path to base64-encoded file.
OUTPUT                   Path to write decoded data.

options:
-h, --help               Show this message and exit.\
"""


class DecodeApp(Application):
    """Application class for file decoding."""

    interface = Interface(PROGRAM, USAGE, HELP)

    input_path: str
    interface.add_argument('input_path')

    output_path: str
    interface.add_argument('output_path')

    exceptions = codec_exceptions(log)

    def run(self) -> None:
        """Decode input file to output file."""
        log.info(f'Decoding {self.input_path}')
        decode_file(self.input_path, self.output_path)
