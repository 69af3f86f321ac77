"""Logging for gitclone components, built on loguru.

Components log through :func:`get_logger`, which binds a ``component``
name. :func:`setup_logging` installs sinks that only show those records,
so calling it never touches sinks the host application has added.
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

CONSOLE_FORMAT = (
    '<green>{time:HH:mm:ss}</green> '
    '<level>{level: <7}</level> '
    '<cyan>gitclone.{extra[component]}</cyan> '
    '{message}'
)
FILE_FORMAT = (
    '{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <7} gitclone.{extra[component]} {message}'
)

_handler_ids: List[int] = []


def _is_component_record(record) -> bool:
    return 'component' in record['extra']


def get_logger(component: str):
    """Get a logger bound to a gitclone component.

    Args:
        component: Component name, e.g. ``'Git'``

    Returns:
        Bound loguru logger
    """
    return logger.bind(component=component)


def reset_logging() -> None:
    """Remove the sinks installed by :func:`setup_logging`."""
    while _handler_ids:
        logger.remove(_handler_ids.pop())


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
) -> List[int]:
    """Install stderr and optional file sinks for gitclone records.

    Earlier gitclone sinks are replaced.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        log_format: Console format, defaults to CONSOLE_FORMAT

    Returns:
        Loguru handler ids of the installed sinks
    """
    reset_logging()

    _handler_ids.append(
        logger.add(
            sys.stderr,
            format=log_format or CONSOLE_FORMAT,
            level=level,
            filter=_is_component_record,
            colorize=True,
        )
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        _handler_ids.append(
            logger.add(
                log_path,
                format=FILE_FORMAT,
                level=level,
                filter=_is_component_record,
                rotation='5 MB',
                retention=3,
                encoding='utf-8',
            )
        )

    get_logger('logging').debug(f'Logging to stderr at {level}, file: {log_file}')
    return list(_handler_ids)


def setup_logging_from_config(logging_config) -> List[int]:
    """Apply the logging section of a Config.

    Args:
        logging_config: LoggingConfig instance
    """
    return setup_logging(
        level=logging_config.level,
        log_file=logging_config.file,
        log_format=logging_config.format,
    )
