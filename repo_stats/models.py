#!/usr/bin/env python3
"""
Data models for GitHub repository statistics.

Contains the repository record built from the GitHub "list repositories for
a user" response.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import ResponseFormatError

DATE_LENGTH = 10


def _require(entry: Dict[str, Any], field: str, expected: type) -> Any:
    """Return entry[field], failing if it is missing or of the wrong JSON type."""
    if field not in entry:
        raise ResponseFormatError(f"Repository entry is missing field '{field}'")
    value = entry[field]
    # bool is an int subclass but never a valid count
    if not isinstance(value, expected) or isinstance(value, bool):
        raise ResponseFormatError(
            f"Repository field '{field}' should be {expected.__name__}, "
            f"got {type(value).__name__}: {value!r}"
        )
    return value


def _require_date(entry: Dict[str, Any], field: str) -> str:
    value = _require(entry, field, str)
    if len(value) < DATE_LENGTH:
        raise ResponseFormatError(
            f"Repository field '{field}' is too short to hold a date: {value!r}"
        )
    return value


@dataclass
class RepoRecord:
    """Represents the statistics shown for one public repository."""
    name: str
    language: Optional[str]
    created_at: str
    pushed_at: str
    updated_at: str
    forks_count: int
    stargazers_count: int

    def __str__(self) -> str:
        return f"{self.name} {self.language} {self.forks_count} {self.stargazers_count}"

    @property
    def created_date(self) -> str:
        return self.created_at[:DATE_LENGTH]

    @property
    def pushed_date(self) -> str:
        return self.pushed_at[:DATE_LENGTH]

    @property
    def updated_date(self) -> str:
        return self.updated_at[:DATE_LENGTH]

    @classmethod
    def from_github_entry(cls, entry: Dict[str, Any]) -> 'RepoRecord':
        """Create a RepoRecord from GitHub API response entry."""
        if not isinstance(entry, dict):
            raise ResponseFormatError(
                f"Repository entry should be an object, got {type(entry).__name__}"
            )

        language = entry.get("language")
        if language is not None and not isinstance(language, str):
            language = None

        return cls(
            name=_require(entry, "name", str),
            language=language,
            created_at=_require_date(entry, "created_at"),
            pushed_at=_require_date(entry, "pushed_at"),
            updated_at=_require_date(entry, "updated_at"),
            forks_count=_require(entry, "forks_count", int),
            stargazers_count=_require(entry, "stargazers_count", int),
        )
