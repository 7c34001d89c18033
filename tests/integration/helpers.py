# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""File helpers for integration tests."""


def write_lines(filepath: str, *lines: bytes, newline: bytes = b'\r\n') -> str:
    """Write `lines` to `filepath` and return the path."""
    with open(filepath, mode='wb') as stream:
        stream.write(b''.join(line + newline for line in lines))
    return filepath


def read(filepath: str) -> bytes:
    """Raw content of `filepath`."""
    with open(filepath, mode='rb') as stream:
        return stream.read()
