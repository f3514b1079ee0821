"""Server configuration: identity, protocol version, and limits."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from twosum_mcp import __version__

DEFAULT_MAX_RECORD_SIZE = 10 * 1024 * 1024

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServerConfig(BaseModel):
    """Settings for one server process.

    ``max_record_size`` bounds a single input line (excluding the terminator);
    exceeding it ends the session.
    """

    server_name: str = "two-sum-mcp"
    server_version: str = __version__
    protocol_version: str = "2025-03-26"
    instructions: str = (
        "This server provides a two-sum tool: pass an array of integers and a "
        "target, and it returns the two indices whose values sum to the target."
    )
    max_record_size: int = Field(default=DEFAULT_MAX_RECORD_SIZE, gt=0)
    log_level: LogLevel = "WARNING"
