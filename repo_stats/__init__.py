"""
GitHub Repository Statistics

A small command-line tool that lists a GitHub user's public repositories with
their language, creation/push/update dates, forks and stars.
"""

__version__ = "1.0.0"

from .app import run
from .exceptions import ConfigError, FetchError, RepoStatsError, ResponseFormatError
from .fetcher import RepoFetcher
from .models import RepoRecord

__all__ = [
    "run",
    "RepoFetcher",
    "RepoRecord",
    "RepoStatsError",
    "ConfigError",
    "FetchError",
    "ResponseFormatError",
]
