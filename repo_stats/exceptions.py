#!/usr/bin/env python3
"""
Exception types raised by the repository statistics tool.

Every step of a run raises its own error type; the command line turns any of
them into a diagnostic and a non-zero exit status.
"""


class RepoStatsError(Exception):
    """Base class for all fatal errors of a run."""
    pass


class ConfigError(RepoStatsError):
    """Raised when the credentials file cannot be read or is incomplete."""
    pass


class FetchError(RepoStatsError):
    """Raised when the GitHub API request fails or its body is not text."""
    pass


class ResponseFormatError(RepoStatsError):
    """Raised when the API response is not the expected repository list."""
    pass
