# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from enum import Enum

from coreason_logger.models import Severity


class Color(str, Enum):
    """
    ANSI escape sequences used by the human style output.
    """

    ERROR = "\x1b[31m"  # red
    WARNING = "\x1b[33m"  # yellow
    INFO = "\x1b[34m"  # blue
    SUCCESS = "\x1b[32m"  # green
    METADATA = "\x1b[37m"  # gray
    RESET = "\x1b[0m"


# "succe" covers success, successful and succeeded
SUCCESS_KEYWORDS = (
    "succe",
    "created",
    "complete",
    "finished",
    "done",
    "ready",
    "initialized",
    "connected",
    "deployed",
    "started",
)


def is_success_message(message: str) -> bool:
    lowered = message.lower()
    return any(keyword in lowered for keyword in SUCCESS_KEYWORDS)


def classify(severity: Severity, message: str) -> Color:
    """
    Picks the color of the message segment.

    A success keyword anywhere in the message wins over the severity, so
    "Failed to mark task as done" is shown as a success even at ERROR.
    """
    if is_success_message(message):
        return Color.SUCCESS
    if severity == Severity.ERROR:
        return Color.ERROR
    if severity == Severity.WARN:
        return Color.WARNING
    return Color.INFO
