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
from typing import Any, List, Mapping, Tuple

from pydantic import BaseModel, Field

from coreason_logger.interfaces import FieldVisitor


class Severity(str, Enum):
    """
    Urgency of a log event, most urgent first.
    """

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"
    TRACE = "TRACE"

    @classmethod
    def from_level_no(cls, no: int) -> "Severity":
        """
        Maps a loguru level number onto a Severity.
        CRITICAL folds into ERROR and SUCCESS into INFO.
        """
        if no >= 40:
            return cls.ERROR
        if no >= 30:
            return cls.WARN
        if no >= 20:
            return cls.INFO
        if no >= 10:
            return cls.DEBUG
        return cls.TRACE


class ExtractedFields(BaseModel):
    """
    The three recognized values of a single event. Empty until visited.
    """

    service: str = ""
    function: str = ""
    message: str = ""


class LogEvent(BaseModel):
    """
    A structured log event: a severity and its named fields in recording order.

    Field names may repeat. Values are either plain strings or arbitrary objects.
    """

    severity: Severity
    fields: List[Tuple[str, Any]] = Field(default_factory=list)

    def record(self, visitor: FieldVisitor) -> None:
        """Visits every (name, value) pair once, in recording order."""
        for name, value in self.fields:
            if isinstance(value, str):
                visitor.record_str(name, value)
            else:
                visitor.record_debug(name, value)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "LogEvent":
        """
        Creates a LogEvent from a loguru record dict.
        The record's own message comes first, followed by the bound extra items.
        """
        fields: List[Tuple[str, Any]] = [("message", record["message"])]
        fields.extend(record["extra"].items())
        return cls(severity=Severity.from_level_no(record["level"].no), fields=fields)
