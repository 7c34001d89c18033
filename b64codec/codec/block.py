# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""
Block transform between 3 raw bytes and 4 encoded characters.

The 24 bits of a 3-byte block are split into four 6-bit values, each
mapped through the alphabet. A final block of 1 or 2 bytes is zero-filled
and the characters with no corresponding input are replaced by padding.
"""


# internal libs
from b64codec.codec.alphabet import PADDING, value_to_char, char_to_value
from b64codec.codec.validate import as_text, EncodedData
from b64codec.codec.errors import InvalidPadding

# public interface
__all__ = ['encode_block', 'decode_block', ]


def encode_block(data: bytes) -> str:
    """Encode 1 to 3 bytes of `data` into 4 characters."""
    size = len(data)
    if not 1 <= size <= 3:
        raise ValueError(f'Block must have 1 to 3 bytes, given {size}')

    first = data[0]
    second = data[1] if size > 1 else 0
    third = data[2] if size > 2 else 0

    out = [value_to_char(first >> 2),
           value_to_char(((first & 0x03) << 4) | ((second & 0xF0) >> 4)),
           PADDING,
           PADDING]
    if size >= 2:
        out[2] = value_to_char(((second & 0x0F) << 2) | ((third & 0xC0) >> 6))
        if size == 3:
            out[3] = value_to_char(third & 0x3F)
    return ''.join(out)


def decode_block(chars: EncodedData) -> bytes:
    """
    Decode a 4-character block into the 1 to 3 bytes it carries.

    Encoded bytes are read as Latin-1 text.

    Raises:
        InvalidPadding: the third character is padding but the fourth is not.
        InvalidCharacter: a character is outside the alphabet (and is not
            padding in the third or fourth position).
    """
    chars = as_text(chars)
    if len(chars) != 4:
        raise ValueError(f'Block must have 4 characters, given {len(chars)}')

    first = char_to_value(chars[0])
    second = char_to_value(chars[1])
    out = bytearray(((first << 2) | ((second & 0x30) >> 4),
                     (second & 0x0F) << 4))

    if chars[2] != PADDING:
        third = char_to_value(chars[2])
        out[1] |= (third & 0x3C) >> 2
        if chars[3] != PADDING:
            out.append(((third & 0x03) << 6) | char_to_value(chars[3]))
        return bytes(out)

    if chars[3] != PADDING:
        raise InvalidPadding(chars[3])
    return bytes(out[:1])
