# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from typing import Any, Protocol


class FieldVisitor(Protocol):
    """
    Protocol for consumers of an event's named fields.
    """

    def record_str(self, name: str, value: str) -> None:
        """
        Receives a field whose value is a plain string.
        """
        ...

    def record_debug(self, name: str, value: Any) -> None:
        """
        Receives a field whose value is any other printable object.
        """
        ...


class Writer(Protocol):
    """
    Protocol for text sinks that rendered lines are written to.
    """

    def write(self, text: str) -> Any: ...
