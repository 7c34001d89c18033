# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""
Line-oriented encoding and decoding of files.

Encoding splits the input file into chunks of `line_size * 3 / 4` bytes and
writes each encoded chunk as one line. Decoding reads the encoded file line
by line, so lines of varying length are tolerated.
"""


# type annotations
from __future__ import annotations
from typing import IO, Iterator, Tuple, List

# standard libs
import os
import functools

# internal libs
from b64codec.core.logging import Logger
from b64codec.codec.buffer import encode_buffer, decode_into, decoded_size
from b64codec.codec.errors import Base64Error, MalformedLine, InvalidConfiguration, EmptyInput

# public interface
__all__ = ['encode_file', 'decode_file', 'check_file', ]

# module level logger
log = Logger.with_name(__name__)


DEFAULT_NEWLINE = '\r\n'
DEFAULT_LINE_SIZE = 76


def _is_empty(stream: IO[bytes]) -> bool:
    """Check if the open file `stream` has no content."""
    return os.fstat(stream.fileno()).st_size == 0


def _iter_lines(stream: IO[bytes]) -> Iterator[Tuple[int, str]]:
    """Yield line number and content of non-empty lines without line endings."""
    for lineno, line in enumerate(stream, start=1):
        if line.endswith(b'\n'):
            line = line[:-1]
        if line.endswith(b'\r'):
            line = line[:-1]
        if line:
            yield lineno, line.decode('latin-1')


def encode_file(input_path: str, output_path: str,
                newline: str = DEFAULT_NEWLINE, line_size: int = DEFAULT_LINE_SIZE) -> None:
    """
    Encode the file at `input_path` and write the lines to `output_path`.

    Each line holds `line_size` characters (the last line may be shorter)
    and is terminated by `newline`.

    Raises:
        InvalidConfiguration: `line_size` is not a positive multiple of 4.
        EmptyInput: the input file is empty.
        OSError: a file cannot be opened, read, or written.
    """
    if line_size <= 0 or line_size % 4:
        raise InvalidConfiguration(line_size)

    chunk_size = line_size * 3 // 4
    terminator = newline.encode('ascii')
    count = 0
    with open(input_path, mode='rb') as source:
        if _is_empty(source):
            raise EmptyInput(input_path, 'encode')
        with open(output_path, mode='wb') as destination:
            for chunk in iter(functools.partial(source.read, chunk_size), b''):
                destination.write(encode_buffer(chunk).encode('ascii') + terminator)
                count += 1
    log.debug(f'Encoded {count} lines from {input_path} to {output_path}')


def decode_file(input_path: str, output_path: str) -> None:
    """
    Decode the base64-encoded file at `input_path` and write it to `output_path`.

    Empty lines are skipped and a trailing carriage-return is ignored.

    Raises:
        EmptyInput: the input file is empty.
        MalformedLine: a line's length is not a multiple of 4.
        InvalidEncoding: a line is not a valid base64 encoding.
        InvalidPadding: a non-padding character follows padding within a line.
        OSError: a file cannot be opened, read, or written.
    """
    count = 0
    with open(input_path, mode='rb') as source:
        if _is_empty(source):
            raise EmptyInput(input_path, 'decode')
        with open(output_path, mode='wb') as destination:
            scratch = bytearray(decoded_size(DEFAULT_LINE_SIZE))
            for lineno, line in _iter_lines(source):
                size = len(line)
                if size % 4:
                    raise MalformedLine(lineno, input_path)
                if decoded_size(size) > len(scratch):
                    log.trace(f'Growing buffer to {decoded_size(size)} bytes for line #{lineno}')
                    scratch = bytearray(decoded_size(size))
                length = decode_into(line, scratch)
                destination.write(scratch[:length])
                count += 1
    log.debug(f'Decoded {count} lines from {input_path} to {output_path}')


def check_file(input_path: str) -> List[int]:
    """
    Line numbers of lines in `input_path` that would fail to decode.

    Raises:
        EmptyInput: the input file is empty.
        OSError: the file cannot be opened or read.
    """
    invalid = []
    with open(input_path, mode='rb') as source:
        if _is_empty(source):
            raise EmptyInput(input_path, 'decode')
        scratch = bytearray(decoded_size(DEFAULT_LINE_SIZE))
        for lineno, line in _iter_lines(source):
            if decoded_size(len(line)) > len(scratch):
                scratch = bytearray(decoded_size(len(line)))
            try:
                if len(line) % 4:
                    raise MalformedLine(lineno, input_path)
                decode_into(line, scratch)
            except Base64Error as error:
                log.trace(f'Line #{lineno}: {error}')
                invalid.append(lineno)
    log.debug(f'Found {len(invalid)} invalid lines in {input_path}')
    return invalid
