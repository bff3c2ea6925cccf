"""Configuration constants and .env loading.

WHY: Centralizes the few tunable values so they are easy to find and
override. The line grouping is part of the output contract with downstream
assemblers and stays fixed; the read chunk size only affects memory and
syscall count, so it can be tuned from the environment.

HOW: python-dotenv loads the .env file on import. Constants are defined as
module-level values. load_chunk_size() and load_log_level() validate the
environment overrides and give a clear error when they are unusable.

RULES:
- ELEMS_PER_LINE is fixed at 8 (compatibility contract, never overridden)
- BTOA_READ_CHUNK_SIZE must be a positive integer (checked when the CLI runs)
- BTOA_LOG_LEVEL must be a standard logging level name (checked when the CLI runs)
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the directory the tool is run from
load_dotenv()

PROGRAM_NAME = "btoa"

BANNER = "Binary file to assembly language converter."

ELEMS_PER_LINE = 8
"""Number of byte literals per data-definition line."""

DEFAULT_READ_CHUNK_SIZE = 4096

DEFAULT_LOG_LEVEL = "WARNING"


def load_chunk_size(raw: str | None = None) -> int:
    """Resolve the input read chunk size.

    WHY: The transcoder reads the input in bounded chunks. A broken
    override should fail loudly instead of silently falling back.

    RULES:
    - raw=None reads BTOA_READ_CHUNK_SIZE from the environment
    - Missing or empty value returns DEFAULT_READ_CHUNK_SIZE
    - Raises ValueError for non-integer or non-positive values
    """
    if raw is None:
        raw = os.getenv("BTOA_READ_CHUNK_SIZE", "")
    raw = raw.strip()
    if not raw:
        return DEFAULT_READ_CHUNK_SIZE
    try:
        size = int(raw)
    except ValueError:
        raise ValueError(
            "BTOA_READ_CHUNK_SIZE must be an integer, got '{}'".format(raw)
        ) from None
    if size <= 0:
        raise ValueError(
            "BTOA_READ_CHUNK_SIZE must be positive, got {}".format(size)
        )
    return size


def load_log_level(raw: str | None = None) -> str:
    """Resolve the logging level name.

    RULES:
    - raw=None reads BTOA_LOG_LEVEL from the environment
    - Missing or empty value returns DEFAULT_LOG_LEVEL
    - Names are case-insensitive and returned upper-case
    - Raises ValueError for names the logging module does not know
    """
    if raw is None:
        raw = os.getenv("BTOA_LOG_LEVEL", "")
    name = raw.strip().upper()
    if not name:
        return DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(
            "BTOA_LOG_LEVEL must be a logging level name, got '{}'".format(raw.strip())
        )
    return name
