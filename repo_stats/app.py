#!/usr/bin/env python3
"""
GitHub Repository Statistics

Fetches the public repositories of a GitHub user and prints their language,
key dates, fork count and star count as a table.
"""

import logging
from typing import Optional, TextIO

from .config import get_log_level, load_credentials
from .fetcher import fetch_repositories_json
from .render import parse_repositories, render_table


def setup_logging(level: Optional[str] = None) -> None:
    """Configure stderr logging for a command-line run."""
    logging.basicConfig(
        level=level or get_log_level(),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def run(target_user: str, config_path: str, out: Optional[TextIO] = None,
        api_url: Optional[str] = None) -> int:
    """
    Print the repository statistics table for target_user.

    Each step raises its own RepoStatsError subclass; nothing is retried.

    Args:
        target_user: GitHub account to report on
        config_path: Path to the two-line credentials file
        out: Stream for the table (stdout if None)
        api_url: API base URL override

    Returns:
        Number of repositories printed
    """
    logger = logging.getLogger(__name__)

    username, token = load_credentials(config_path)
    logger.info(f"Loaded credentials for {username}")

    body = fetch_repositories_json(username, token, target_user, api_url=api_url)
    entries = parse_repositories(body)
    logger.info(f"Received {len(entries)} repositories for {target_user}")

    return render_table(entries, out=out, username=target_user)
