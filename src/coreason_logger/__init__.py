# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-logger

"""
coreason-logger
"""

__version__ = "0.1.0"
__author__ = "CoReason, Inc."

from .colors import SUCCESS_KEYWORDS, Color, classify
from .config import LogFormat, init_logging
from .fields import HumanStyleVisitor, extract_fields
from .models import ExtractedFields, LogEvent, Severity
from .renderer import HumanStyleFormatter, HumanStyleSink, RenderError

__all__ = [
    "Color",
    "SUCCESS_KEYWORDS",
    "classify",
    "LogFormat",
    "init_logging",
    "HumanStyleVisitor",
    "extract_fields",
    "ExtractedFields",
    "LogEvent",
    "Severity",
    "HumanStyleFormatter",
    "HumanStyleSink",
    "RenderError",
]
