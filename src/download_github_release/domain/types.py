"""Domain types for business logic.

This module contains pure domain types used in business logic without
any IO or infrastructure dependencies.
"""

from enum import Enum
from typing import TypedDict


class FailureKind(Enum):
    """Categories of failure a single invocation can end with."""

    INVALID_INPUT = "invalid_input"
    RESOLUTION_FAILURE = "resolution_failure"
    NO_MATCHING_ASSET = "no_matching_asset"
    UNKNOWN_FILE_NAME = "unknown_file_name"
    IO_FAILURE = "io_failure"


class NetworkConfig(TypedDict):
    """Network configuration section."""

    timeout_seconds: int
    api_url: str
    chunk_size: int


class GlobalConfig(TypedDict):
    """Global configuration loaded from settings.conf."""

    log_level: str
    console_log_level: str
    log_to_file: bool
    network: NetworkConfig
