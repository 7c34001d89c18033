# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""
Base64 codec engine.

Encodes arbitrary bytes into the 64-character alphabet (`A-Z`, `a-z`,
`0-9`, `+`, `/`) with `=` padding, and decodes them back. Whole buffers
are handled in memory; files are handled one line at a time.
"""


# internal libs
from b64codec.codec.errors import (Base64Error, InvalidCharacter, InvalidPadding, MalformedLength,
                                   InvalidEncoding, MalformedLine, InvalidConfiguration, EmptyInput)
from b64codec.codec.alphabet import ALPHABET, PADDING, value_to_char, char_to_value
from b64codec.codec.validate import is_valid_encoding
from b64codec.codec.block import encode_block, decode_block
from b64codec.codec.buffer import (encoded_size, decoded_size, encode_buffer, decode_buffer, decode_into,
                                   encode, decode, encode_string, decode_string)
from b64codec.codec.file import encode_file, decode_file, check_file

# public interface
__all__ = ['Base64Error', 'InvalidCharacter', 'InvalidPadding', 'MalformedLength', 'InvalidEncoding',
           'MalformedLine', 'InvalidConfiguration', 'EmptyInput',
           'ALPHABET', 'PADDING', 'value_to_char', 'char_to_value', 'is_valid_encoding',
           'encode_block', 'decode_block',
           'encoded_size', 'decoded_size', 'encode_buffer', 'decode_buffer', 'decode_into',
           'encode', 'decode', 'encode_string', 'decode_string',
           'encode_file', 'decode_file', 'check_file', ]
