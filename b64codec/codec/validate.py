# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Syntax checks for base64-encoded buffers."""


# type annotations
from typing import Union

# internal libs
from b64codec.codec.alphabet import ALPHABET, PADDING

# public interface
__all__ = ['is_valid_encoding', 'as_text', 'EncodedData', ]


EncodedData = Union[str, bytes, bytearray, memoryview]


# Characters allowed anywhere in an encoded buffer
VALID_CHARS = frozenset(ALPHABET + PADDING)


def as_text(data: EncodedData) -> str:
    """Encoded `data` as text (bytes map one-to-one onto characters)."""
    if isinstance(data, str):
        return data
    return bytes(data).decode('latin-1')


def is_valid_encoding(data: EncodedData) -> bool:
    """
    True if `data` is a syntactically valid base64 encoding.

    The check treats `data` as one complete encoded unit (a message or a
    single line): padding may only occupy the final two positions of the
    whole buffer, not the end of every 4-character block.
    """
    data = as_text(data)
    length = len(data)
    if length % 4:
        return False
    if not VALID_CHARS.issuperset(data):
        return False
    if length == 0:
        return True
    if PADDING in data[:length - 2]:
        return False
    if data[-2] == PADDING and data[-1] != PADDING:
        return False
    return True
