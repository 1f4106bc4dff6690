# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import os
import sys
from enum import Enum
from typing import Any, Optional

from loguru import logger as _logger

from coreason_logger.renderer import HumanStyleSink
from coreason_logger.utils.logger import logger

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LEVEL = "INFO"

DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level> | {extra}"
)


class LogFormat(str, Enum):
    """
    Output modes.

    HUMAN is meant for local development and log viewers read by people,
    DEBUG shows full record metadata, JSON is for machines.
    """

    HUMAN = "human"
    DEBUG = "debug"
    JSON = "json"


def resolve_level(value: Optional[str] = None) -> str:
    """
    Returns the minimum level name, read from LOG_LEVEL unless given.
    Unknown names fall back to INFO.
    """
    if value is None:
        value = os.getenv(LOG_LEVEL_ENV, DEFAULT_LEVEL)
    name = value.strip().upper()
    try:
        _logger.level(name)
    except ValueError:
        return DEFAULT_LEVEL
    return name


def init_logging(log_format: LogFormat = LogFormat.HUMAN, sink: Optional[Any] = None) -> int:
    """
    Replaces all loguru handlers with a single one for the given format.

    HUMAN lines carry only service, function and message: tracebacks attached
    with logger.exception() are not printed in that mode.

    Args:
        log_format: The output mode.
        sink: Text stream to write to. Defaults to stdout.

    Returns:
        The loguru handler id.
    """
    stream = sink if sink is not None else sys.stdout
    level = resolve_level()

    # Remove default handler
    _logger.remove()

    if log_format == LogFormat.HUMAN:
        handler_id = _logger.add(HumanStyleSink(stream), level=level, format="{message}", colorize=False)
    elif log_format == LogFormat.DEBUG:
        handler_id = _logger.add(
            stream,
            level=level,
            format=DEBUG_FORMAT,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )
    else:
        handler_id = _logger.add(stream, level=level, serialize=True, colorize=False)

    logger.bind(function="init_logging").debug(f"Logging initialized with {log_format.value} format at {level}")
    return handler_id
