"""Unit tests for logging setup and record formatting."""

from kink import di
from loguru import logger

from stringkit.core.config import Configuration
from stringkit.core.configs import LogConfiguration
from stringkit.core.container import wire_dependencies
from stringkit.core.logging import format_log_record, setup_logging


def _record(message: str, **extra) -> dict:
    return {'message': message, 'extra': extra, 'exception': None}


def test_format_redacts_message_and_extra():
    record = _record('card 4111 1111 1111 1111', password='hunter2')

    fmt = format_log_record(record)

    assert record['message'] == 'card <REDACTED_CC>'
    assert record['extra'] == {'password': '<REDACTED>'}
    assert '{extra}' in fmt
    assert fmt.endswith('\n')


def test_format_without_extra():
    fmt = format_log_record(_record('plain'))

    assert '{extra}' not in fmt
    assert '{exception}' not in fmt


def test_format_includes_pattern_column():
    fmt = format_log_record(_record('x', pattern='email', length=3))
    assert '{extra[pattern]:<24}' in fmt


def test_setup_logging_writes_redacted_files(
    tmp_path, monkeypatch, library_logging
):
    log_file = tmp_path / 'logs' / 'stringkit.log'
    monkeypatch.setattr('stringkit.core.logging.ROOT_PATH', tmp_path)
    di[Configuration] = Configuration(
        log=LogConfiguration(to_file=True, file_path='logs/stringkit.log')
    )

    setup_logging()
    logger.error('paid with 4111 1111 1111 1111')
    logger.complete()
    logger.remove()

    assert 'paid with <REDACTED_CC>' in log_file.read_text()
    assert (tmp_path / 'logs' / 'error.log').exists()


def _capture() -> tuple[list[dict], int]:
    records: list[dict] = []
    return records, logger.add(
        lambda message: records.append(message.record), level='DEBUG'
    )


def test_library_records_are_silent_by_default():
    records, handler_id = _capture()

    wire_dependencies(Configuration())
    logger.remove(handler_id)

    assert records == []


def test_setup_logging_enables_library_records(library_logging):
    di[Configuration] = Configuration()
    setup_logging()
    records, handler_id = _capture()

    wire_dependencies(Configuration())
    logger.remove(handler_id)

    assert [record['message'] for record in records] == ['pattern registry wired']
    assert records[0]['name'] == 'stringkit.core.container'
