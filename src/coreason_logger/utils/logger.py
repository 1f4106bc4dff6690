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

from loguru import logger as _logger

__all__ = ["logger"]

# No handler is installed here: the application chooses one through init_logging.
# Records from this package carry their own service name so they render like any other.
logger: Any = _logger.bind(service="coreason_logger")
