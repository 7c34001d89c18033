# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by the codec."""


# type annotations
from __future__ import annotations

# public interface
__all__ = ['Base64Error', 'InvalidCharacter', 'InvalidPadding', 'MalformedLength',
           'InvalidEncoding', 'MalformedLine', 'InvalidConfiguration', 'EmptyInput', ]


class Base64Error(Exception):
    """Base class for all codec errors."""


class InvalidCharacter(Base64Error):
    """A character outside the base64 alphabet was encountered while decoding."""

    def __init__(self: InvalidCharacter, char: str) -> None:
        self.char = char
        super().__init__(f'Invalid character detected in the base64-encoded input: '
                         f'{char!r} (ASCII code: {ord(char)})')


class InvalidPadding(Base64Error):
    """A non-padding character follows a padding character."""

    def __init__(self: InvalidPadding, char: str) -> None:
        self.char = char
        super().__init__(f'Non-padding character encountered immediately after padding character: '
                         f'{char!r} (ASCII code: {ord(char)})')


class MalformedLength(Base64Error):
    """The length of an encoded buffer is not a multiple of 4."""

    def __init__(self: MalformedLength, length: int) -> None:
        self.length = length
        super().__init__(f'The length of the base64-encoded input ({length}) is not a multiple of 4')


class InvalidEncoding(Base64Error):
    """The encoded buffer fails validation."""

    def __init__(self: InvalidEncoding, message: str = 'The input string is not a valid base64 encoding') -> None:
        super().__init__(message)


class MalformedLine(Base64Error):
    """A line in an encoded file does not have a length divisible by 4."""

    def __init__(self: MalformedLine, lineno: int, filepath: str) -> None:
        self.lineno = lineno
        self.filepath = filepath
        super().__init__(f'Line #{lineno} needs to have the size divisible by 4 in file \'{filepath}\'')


class InvalidConfiguration(Base64Error):
    """The requested encoded line size is not a positive multiple of 4."""

    def __init__(self: InvalidConfiguration, line_size: int) -> None:
        self.line_size = line_size
        super().__init__(f'The output file line size must be a positive multiple of 4, given {line_size}')


class EmptyInput(Base64Error):
    """The input file has no content."""

    def __init__(self: EmptyInput, filepath: str, action: str = 'encode') -> None:
        self.filepath = filepath
        super().__init__(f'Cannot base64 {action} an empty file: \'{filepath}\'')
