# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""The base64 alphabet and its reverse mapping."""


# internal libs
from b64codec.codec.errors import InvalidCharacter

# public interface
__all__ = ['ALPHABET', 'PADDING', 'value_to_char', 'char_to_value', ]


# Maps every 6-bit value (0 through 63) to its character
ALPHABET = ('ABCDEFGHIJKLMNOPQRSTUVWXYZ'  # 0-25
            'abcdefghijklmnopqrstuvwxyz'  # 26-51
            '0123456789'                  # 52-61
            '+/')                         # 62-63


# Fills the encoded block when fewer than 3 bytes remain
PADDING = '='


def value_to_char(value: int) -> str:
    """
    The alphabet character for the 6-bit `value`.

    Raises:
        ValueError: `value` is outside 0 through 63.
    """
    if not 0 <= value < 64:
        raise ValueError(f'Expected 6-bit value (0 to 63), given {value}')
    return ALPHABET[value]


def char_to_value(char: str) -> int:
    """
    The 6-bit value of `char` in the alphabet.

    Raises:
        InvalidCharacter: `char` is not one of the 64 alphabet characters.
    """
    if char == '+':
        return 62
    elif char == '/':
        return 63
    elif '0' <= char <= '9':
        return 52 + (ord(char) - ord('0'))
    elif 'A' <= char <= 'Z':
        return ord(char) - ord('A')
    elif 'a' <= char <= 'z':
        return 26 + (ord(char) - ord('a'))
    else:
        raise InvalidCharacter(char)
