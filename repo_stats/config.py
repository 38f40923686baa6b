#!/usr/bin/env python3
"""
Configuration loading.

Credentials live in a plain two-line file: the GitHub username on the first
line and a personal access token on the second. A couple of optional settings
are read from the environment.
"""

import logging
import os
from typing import List, Tuple

from .exceptions import ConfigError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def read_config(config_path: str) -> List[str]:
    """
    Read the config file and return its lines.

    Line terminators are removed; nothing else is trimmed or validated.

    Args:
        config_path: Path to the config file.

    Returns:
        The file's lines, in order.

    Raises:
        ConfigError: If the file cannot be opened or is not valid UTF-8.
    """
    try:
        with open(config_path, "rb") as config_file:
            raw = config_file.read()
    except OSError as e:
        raise ConfigError(f"Error opening config file {config_path}: {e}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {config_path} is not valid UTF-8: {e}") from e

    # Only \n and \r\n end a line.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    logger.debug(f"Read {len(lines)} lines from {config_path}")
    return lines


def load_credentials(config_path: str) -> Tuple[str, str]:
    """Return the (username, token) pair stored in the config file."""
    lines = read_config(config_path)
    if len(lines) < 2:
        raise ConfigError(
            f"Config file {config_path} must contain your GitHub username and token "
            f"on separate lines (found {len(lines)} line(s))"
        )
    return lines[0], lines[1]


def get_api_url() -> str:
    """GitHub API base URL, overridable with GITHUB_API_URL."""
    return os.environ.get('GITHUB_API_URL', DEFAULT_API_URL).rstrip('/')


def get_log_level() -> str:
    return os.environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
