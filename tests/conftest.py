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
from typing import Callable, Generator

import pytest
from loguru import logger

FIXED_NOW = datetime(2025, 1, 5, 9, 7, 3)


@pytest.fixture(autouse=True)
def reset_loguru() -> Generator[None, None, None]:
    """Drops every loguru handler a test installed."""
    yield
    logger.remove()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW
