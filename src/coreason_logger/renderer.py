# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from datetime import datetime
from typing import Any, Callable, Optional

from coreason_logger.colors import Color, classify
from coreason_logger.fields import extract_fields
from coreason_logger.interfaces import Writer
from coreason_logger.models import ExtractedFields, LogEvent, Severity

DEFAULT_SERVICE = "unknown"
DEFAULT_FUNCTION = "unknown"
DEFAULT_MESSAGE = "<no message>"
TIMESTAMP_FORMAT = "%b %d %H:%M:%S"


class RenderError(RuntimeError):
    """Raised when a rendered line cannot be written to its sink."""


class HumanStyleFormatter:
    """
    Formats events as `[SERVICE][FUNCTION][TIMESTAMP] message` with ANSI colors.

    The timestamp is the local time at render time, not at capture time.
    Holds no per-event state, so one instance can be shared across threads.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def render(self, fields: ExtractedFields, severity: Severity) -> str:
        """
        Builds the colored line (newline included) for already extracted fields.
        Missing values are replaced by their defaults.
        """
        service = fields.service or DEFAULT_SERVICE
        function = fields.function or DEFAULT_FUNCTION
        message = fields.message or DEFAULT_MESSAGE

        timestamp = self.clock().strftime(TIMESTAMP_FORMAT)
        msg_color = classify(severity, message)

        return (
            f"{Color.METADATA.value}[{service.upper()}][{function}][{timestamp}]{Color.RESET.value}"
            f"{msg_color.value} {message}{Color.RESET.value}\n"
        )

    def format_event(self, event: LogEvent, writer: Writer) -> None:
        """
        Renders the event and writes it to the writer.

        Raises:
            RenderError: If the writer fails.
        """
        line = self.render(extract_fields(event), event.severity)
        try:
            writer.write(line)
        except Exception as e:
            raise RenderError(f"Failed to write log line: {e}") from e


class HumanStyleSink:
    """
    loguru sink that renders each record in the human style onto a text stream.
    """

    def __init__(self, stream: Any, formatter: Optional[HumanStyleFormatter] = None):
        self.stream = stream
        self.formatter = formatter or HumanStyleFormatter()

    def write(self, message: Any) -> None:
        # loguru hands over a str subclass carrying the raw record
        event = LogEvent.from_record(message.record)
        self.formatter.format_event(event, self.stream)

    def flush(self) -> None:
        flush = getattr(self.stream, "flush", None)
        if callable(flush):
            flush()
