# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from typing import Any, Dict, List

from loguru import logger as root_logger

from coreason_logger.utils.logger import logger


def test_logger_carries_service_name() -> None:
    records: List[Dict[str, Any]] = []
    root_logger.add(lambda m: records.append(m.record))

    logger.info("Verification")

    assert records[0]["extra"] == {"service": "coreason_logger"}
    assert records[0]["message"] == "Verification"
