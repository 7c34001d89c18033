# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Fixtures for integration tests."""


# standard libs
import os
import random

# external libs
import pytest


@pytest.fixture
def sample_data() -> bytes:
    """Random binary content spanning several encoded lines."""
    rng = random.Random(76)
    return rng.getrandbits(8 * 1000).to_bytes(1000, 'little')


@pytest.fixture
def sample_file(tmp_path, sample_data: bytes) -> str:
    """Path to a file with `sample_data` as content."""
    filepath = os.path.join(tmp_path, 'sample.bin')
    with open(filepath, mode='wb') as stream:
        stream.write(sample_data)
    return filepath


@pytest.fixture
def empty_file(tmp_path) -> str:
    """Path to an empty file."""
    filepath = os.path.join(tmp_path, 'empty.bin')
    open(filepath, mode='wb').close()
    return filepath

