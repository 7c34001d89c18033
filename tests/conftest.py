# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Shared test configuration."""


def pytest_configure(config) -> None:
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: tests that read and write files')
