# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Integration tests for file encoding and decoding."""


# type annotations
from __future__ import annotations

# standard libs
import os

# external libs
from pytest import mark, raises

# internal libs
from b64codec.codec.buffer import encode_buffer
from b64codec.codec.file import encode_file, decode_file, check_file
from b64codec.codec.errors import (MalformedLine, InvalidConfiguration, EmptyInput,
                                   InvalidEncoding)

# testing libs
from tests.integration.helpers import write_lines, read


@mark.integration
class TestEncodeFile:
    """Encode files into lines."""

    @staticmethod
    def test_default_lines(tmp_path, sample_file: str, sample_data: bytes) -> None:
        output = os.path.join(tmp_path, 'sample.b64')
        encode_file(sample_file, output)
        lines = read(output).split(b'\r\n')
        assert lines[-1] == b''
        lines = lines[:-1]
        assert len(lines) == 18  # 17 full lines of 57 bytes, one line of 31 bytes
        assert all(len(line) == 76 for line in lines[:-1])
        assert lines[-1] == encode_buffer(sample_data[17 * 57:]).encode()
        assert lines[0] == encode_buffer(sample_data[:57]).encode()

    @staticmethod
    def test_known_content(tmp_path) -> None:
        source = os.path.join(tmp_path, 'basic.txt')
        with open(source, mode='wb') as stream:
            stream.write(b'basic viability test')
        output = os.path.join(tmp_path, 'basic.b64')
        encode_file(source, output, newline='\n', line_size=8)
        assert read(output) == b'YmFzaWMg\ndmlhYmls\naXR5IHRl\nc3Q=\n'

    @staticmethod
    @mark.parametrize('line_size', [0, -4, 2, 30, 77])
    def test_invalid_line_size(tmp_path, sample_file: str, line_size: int) -> None:
        output = os.path.join(tmp_path, 'sample.b64')
        with raises(InvalidConfiguration) as exc_info:
            encode_file(sample_file, output, line_size=line_size)
        assert exc_info.value.line_size == line_size
        assert not os.path.exists(output)

    @staticmethod
    def test_empty_input(tmp_path, empty_file: str) -> None:
        output = os.path.join(tmp_path, 'empty.b64')
        with raises(EmptyInput) as exc_info:
            encode_file(empty_file, output)
        assert exc_info.value.filepath == empty_file
        assert not os.path.exists(output)

    @staticmethod
    def test_missing_input(tmp_path) -> None:
        with raises(FileNotFoundError):
            encode_file(os.path.join(tmp_path, 'missing.bin'), os.path.join(tmp_path, 'out.b64'))

    @staticmethod
    def test_unwritable_output(tmp_path, sample_file: str) -> None:
        with raises(OSError):
            encode_file(sample_file, os.path.join(tmp_path, 'missing', 'out.b64'))


@mark.integration
class TestDecodeFile:
    """Decode files line by line."""

    @staticmethod
    @mark.parametrize('newline', ['\r\n', '\n'])
    @mark.parametrize('line_size', [4, 8, 64, 76, 120, 1024])
    def test_round_trip(tmp_path, sample_file: str, sample_data: bytes, newline: str, line_size: int) -> None:
        encoded = os.path.join(tmp_path, 'sample.b64')
        decoded = os.path.join(tmp_path, 'sample.out')
        encode_file(sample_file, encoded, newline=newline, line_size=line_size)
        decode_file(encoded, decoded)
        assert read(decoded) == sample_data

    @staticmethod
    def test_varying_line_lengths(tmp_path) -> None:
        source = write_lines(os.path.join(tmp_path, 'lines.b64'),
                             b'U2VuZCByZWluZm9yY2VtZW50cw==',
                             b'',
                             b'UnVieQ==',
                             b'VGhpcyBpcyBsaW5lIG9uZQpUaGlzIGlzIGxpbmUgdHdvClRoaXMgaXMgbGluZSB0aHJlZQpBbmQgc28gb24uLi4K'
                             b'VGhpcyBpcyBsaW5lIG9uZQpUaGlzIGlzIGxpbmUgdHdvClRoaXMgaXMgbGluZSB0aHJlZQpBbmQgc28gb24uLi4K',
                             newline=b'\n')
        output = os.path.join(tmp_path, 'lines.txt')
        decode_file(source, output)
        assert read(output) == (b'Send reinforcements' + b'Ruby' +
                                b'This is line one\nThis is line two\nThis is line three\nAnd so on...\n' * 2)

    @staticmethod
    def test_last_line_without_newline(tmp_path) -> None:
        source = os.path.join(tmp_path, 'ruby.b64')
        with open(source, mode='wb') as stream:
            stream.write(b'UnVi\r\neQ==')
        output = os.path.join(tmp_path, 'ruby.txt')
        decode_file(source, output)
        assert read(output) == b'Ruby'

    @staticmethod
    def test_malformed_line(tmp_path) -> None:
        source = write_lines(os.path.join(tmp_path, 'bad.b64'), b'UnVi', b'', b'eQ=')
        with raises(MalformedLine) as exc_info:
            decode_file(source, os.path.join(tmp_path, 'bad.txt'))
        assert exc_info.value.lineno == 3
        assert exc_info.value.filepath == source
        assert 'Line #3' in str(exc_info.value)

    @staticmethod
    @mark.parametrize('line', [b'a=bc', b'ab=c', b'UnV)', b'UnVi\xe9Q=='])
    def test_invalid_line(tmp_path, line: bytes) -> None:
        source = write_lines(os.path.join(tmp_path, 'bad.b64'), b'UnVi', line)
        with raises(InvalidEncoding):
            decode_file(source, os.path.join(tmp_path, 'bad.txt'))

    @staticmethod
    def test_empty_input(tmp_path, empty_file: str) -> None:
        with raises(EmptyInput):
            decode_file(empty_file, os.path.join(tmp_path, 'empty.txt'))

    @staticmethod
    def test_missing_input(tmp_path) -> None:
        with raises(FileNotFoundError):
            decode_file(os.path.join(tmp_path, 'missing.b64'), os.path.join(tmp_path, 'out.txt'))

    @staticmethod
    def test_unwritable_output(tmp_path) -> None:
        source = write_lines(os.path.join(tmp_path, 'good.b64'), b'UnVieQ==')
        with raises(OSError):
            decode_file(source, os.path.join(tmp_path, 'missing', 'out.txt'))
        assert not os.path.exists(os.path.join(tmp_path, 'missing'))


@mark.integration
class TestCheckFile:
    """Find invalid lines in encoded files."""

    @staticmethod
    def test_valid(tmp_path, sample_file: str) -> None:
        encoded = os.path.join(tmp_path, 'sample.b64')
        encode_file(sample_file, encoded)
        assert check_file(encoded) == []

    @staticmethod
    def test_invalid_lines(tmp_path) -> None:
        source = write_lines(os.path.join(tmp_path, 'bad.b64'),
                             b'UnVi', b'eQ=', b'', b'a=bc', b'UnVieQ==', b'UnVieQ==UnVieQ==')
        assert check_file(source) == [2, 4, 6]

    @staticmethod
    def test_empty_input(empty_file: str) -> None:
        with raises(EmptyInput):
            check_file(empty_file)
