# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from typing import Any

from coreason_logger.models import ExtractedFields, LogEvent

QUOTE_CHARS = ('"', "'")


def _strip_quotes(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in QUOTE_CHARS:
        return text[1:-1]
    return text


class HumanStyleVisitor:
    """
    Extracts service, function and message from an event's fields.

    service and function keep the last value seen, message keeps the first
    non-empty one. Every other field name is ignored.
    """

    def __init__(self, fields: ExtractedFields):
        self.fields = fields

    def record_debug(self, name: str, value: Any) -> None:
        self._assign(name, _strip_quotes(repr(value)))

    def record_str(self, name: str, value: str) -> None:
        # Plain str of the value, so str subclasses such as str enums keep their text
        self._assign(name, str.__str__(value))

    def _assign(self, name: str, text: str) -> None:
        if name == "service":
            self.fields.service = text
        elif name == "function":
            self.fields.function = text
        elif name == "message":
            # Only the first message counts
            if not self.fields.message:
                self.fields.message = text


def extract_fields(event: LogEvent) -> ExtractedFields:
    """
    Visits all fields of the event and returns the recognized values.
    Absent fields stay empty.
    """
    fields = ExtractedFields()
    event.record(HumanStyleVisitor(fields))
    return fields
