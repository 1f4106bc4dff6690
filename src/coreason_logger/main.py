# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from typing import Annotated

import typer
from loguru import logger

from coreason_logger import __version__
from coreason_logger.config import LogFormat, init_logging

app = typer.Typer(
    name="coreason-logger",
    help="CLI for coreason-logger: human-style structured log output.",
    add_completion=False,
)


def emit_samples() -> None:
    """Emits one event of each kind the human style distinguishes."""
    log = logger.bind(service="service_name", function="function_name")

    log.info("Starting service creation")

    customer_id = "789021"
    log.info(f"Creating service for customer with id {customer_id}")

    log.info("Service created successfully")
    log.warning("Connection pool running low")
    log.error("Failed to authenticate user")

    # Only shown with LOG_LEVEL=debug
    log.debug("Cache miss for key user:123")

    logger.info("Log with only message field")


@app.command()
def demo(
    log_format: Annotated[
        LogFormat, typer.Option("--format", "-f", help="Output format", case_sensitive=False)
    ] = LogFormat.HUMAN,
) -> None:
    """
    Print sample log lines in the chosen format.
    """
    init_logging(log_format)
    emit_samples()


@app.command()
def version() -> None:
    """Print the version of coreason-logger."""
    typer.echo(f"coreason-logger v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
