import sys
from typing import Any

from kink import di
from loguru import logger

from stringkit.core.config import Configuration
from stringkit.core.container import wire_dependencies
from stringkit.core.paths import ROOT_PATH
from stringkit.domain.common.utils import DataSanitizer


def format_log_record(record: dict[str, Any]) -> str:
    """Custom formatter for loguru records with sensitive data sanitization."""
    record['message'] = DataSanitizer.sanitize(record['message'])
    extra = record.get('extra', {})

    fmt = (
        '<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | '
        '<level>{level: <8}</level> | '
        '<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>'
    )

    if 'pattern' in extra:
        fmt += ' | <yellow>[{extra[pattern]:<24}]</yellow>'

    fmt += ' | <level>{message}</level>'

    if extra:
        record['extra'] = DataSanitizer.sanitize(extra)
        fmt += '\n<white>{extra}</white>'

    if record.get('exception'):
        fmt += '\n{exception}'

    return fmt + '\n'


# noinspection PyTypeChecker
def setup_logging() -> None:
    """Setup Loguru logging with configuration."""
    if Configuration not in di:
        wire_dependencies()

    config = di[Configuration]
    log_config = config.log

    # Remove default handler
    logger.remove()
    logger.enable('stringkit')

    # dev logging
    if config.app_debug:
        logger.add(
            sys.stderr,
            level='DEBUG' if config.app_environment == 'local' else log_config.level,
            format=format_log_record,  # type: ignore [arg-type]
            colorize=True,
            backtrace=True,
            diagnose=True,
        )

    # file logging
    if log_config.to_file:
        log_file_path = ROOT_PATH / log_config.file_path
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file_path,
            level=log_config.level,
            format=format_log_record,  # type: ignore [arg-type]
            rotation='100 MB',
            retention='30 days',
            compression='gz',
            backtrace=True,
            diagnose=False,
            enqueue=True,
        )

        logger.add(
            log_file_path.with_name('error.log'),
            level='ERROR',
            format=format_log_record,  # type: ignore [arg-type]
            rotation='100 MB',
            retention='30 days',
            compression='gz',
            backtrace=True,
            diagnose=False,
            enqueue=True,
        )
