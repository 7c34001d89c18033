# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Encode and decode whole in-memory buffers."""


# type annotations
from typing import Union

# internal libs
from b64codec.codec.block import encode_block, decode_block
from b64codec.codec.validate import is_valid_encoding, as_text, EncodedData
from b64codec.codec.errors import MalformedLength, InvalidEncoding

# public interface
__all__ = ['encoded_size', 'decoded_size', 'encode_buffer', 'decode_buffer', 'decode_into',
           'encode', 'decode', 'encode_string', 'decode_string', ]


RawData = Union[bytes, bytearray, memoryview]


def encoded_size(size: int) -> int:
    """Number of characters needed to encode `size` bytes."""
    return (size // 3) * 4 + (4 if size % 3 > 0 else 0)


def decoded_size(size: int) -> int:
    """Upper bound on the number of bytes decoded from `size` characters."""
    return (size // 4) * 3


def encode_buffer(data: RawData) -> str:
    """Encode raw bytes in `data` into a base64 string."""
    data = bytes(data)
    size = len(data)
    full = size - size % 3
    out = [encode_block(data[i:i + 3]) for i in range(0, full, 3)]
    if full < size:
        out.append(encode_block(data[full:]))
    return ''.join(out)


def decode_into(data: EncodedData, destination: bytearray) -> int:
    """
    Decode base64 `data` into `destination` and return the decoded length.

    The `destination` must hold at least `decoded_size(len(data))` bytes;
    bytes past the returned length are left untouched.

    Raises:
        MalformedLength: length of `data` is not a multiple of 4.
        InvalidEncoding: `data` is not a valid base64 encoding.
    """
    data = as_text(data)
    size = len(data)
    if size % 4:
        raise MalformedLength(size)
    if not is_valid_encoding(data):
        raise InvalidEncoding()
    if len(destination) < decoded_size(size):
        raise ValueError(f'Destination too small ({len(destination)} < {decoded_size(size)})')

    length = 0
    for i in range(0, size, 4):
        block = decode_block(data[i:i + 4])
        destination[length:length + len(block)] = block
        length += len(block)
    return length


def decode_buffer(data: EncodedData) -> bytes:
    """
    Decode base64 `data` back to raw bytes.

    Raises:
        MalformedLength: length of `data` is not a multiple of 4.
        InvalidEncoding: `data` is not a valid base64 encoding.
    """
    data = as_text(data)
    out = bytearray(decoded_size(len(data)))
    length = decode_into(data, out)
    return bytes(out[:length])


# Short names for the common case
encode = encode_buffer
decode = decode_buffer


def encode_string(text: str, encoding: str = 'utf-8') -> str:
    """Encode `text` (as `encoding`) into a base64 string."""
    return encode_buffer(text.encode(encoding))


def decode_string(data: EncodedData, encoding: str = 'utf-8') -> str:
    """Decode base64 `data` into text (as `encoding`)."""
    return decode_buffer(data).decode(encoding)
