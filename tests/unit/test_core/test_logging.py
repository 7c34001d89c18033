# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for logging configuration."""


# standard libs
import io
import logging

# external libs
from pytest import mark, raises

# internal libs
from b64codec.core.config import ConfigurationError, LOGGING_STYLES
from b64codec.core.logging import Logger, TRACE, HOSTNAME, INSTANCE, level_from_name, build_handler


class TestLevelFromName:
    """Unit tests for `level_from_name`."""

    @staticmethod
    @mark.parametrize('name, level', [('trace', TRACE), ('debug', logging.DEBUG), ('Info', logging.INFO),
                                      ('WARNING', logging.WARNING), ('error', logging.ERROR),
                                      ('critical', logging.CRITICAL)])
    def test_known(name: str, level: int) -> None:
        assert level_from_name(name) == level

    @staticmethod
    @mark.parametrize('name', ['verbose', 10, None])
    def test_invalid(name) -> None:
        with raises(ConfigurationError):
            level_from_name(name)


class TestLogger:
    """Unit tests for the TRACE-capable `Logger`."""

    @staticmethod
    def test_trace_level() -> None:
        assert TRACE < logging.DEBUG
        assert logging.getLevelName(TRACE) == 'TRACE'

    @staticmethod
    def test_with_name() -> None:
        log = Logger.with_name('b64codec.tests')
        assert isinstance(log, Logger)
        assert log.name == 'b64codec.tests'

    @staticmethod
    def test_trace_emitted(caplog) -> None:
        log = Logger.with_name('b64codec.tests')
        with caplog.at_level(TRACE, logger='b64codec'):
            log.trace('fine detail')
        assert [record.levelname for record in caplog.records if record.name == 'b64codec.tests'] == ['TRACE']


class TestLogRecord:
    """Unit tests for the extra `LogRecord` fields."""

    @staticmethod
    def test_attributes(caplog) -> None:
        log = Logger.with_name('b64codec.tests')
        with caplog.at_level(logging.INFO, logger='b64codec'):
            log.info('hello')
        record, = [record for record in caplog.records if record.name == 'b64codec.tests']
        assert record.hostname == HOSTNAME
        assert record.app_id == INSTANCE
        assert record.ansi_level == '\033[32m'
        assert record.ansi_reset == '\033[0m'
        assert record.ansi_bold == '\033[1m'
        assert record.ansi_faint == '\033[2m'

    @staticmethod
    @mark.parametrize('style', list(LOGGING_STYLES))
    def test_styles_format(style: str) -> None:
        stream = io.StringIO()
        handler = build_handler(LOGGING_STYLES[style]['format'], LOGGING_STYLES[style]['datefmt'], stream=stream)
        log = logging.getLogger(f'b64codec.tests.{style}')
        log.addHandler(handler)
        log.propagate = False
        log.setLevel(logging.WARNING)
        try:
            log.warning('formatted')
        finally:
            log.removeHandler(handler)
        output = stream.getvalue()
        assert 'formatted' in output
        assert 'WARNING' in output
        assert f'[b64codec.tests.{style}]' in output
