#!/usr/bin/env python3
"""
Fixed-width table output for repository statistics.
"""

import json
import sys
from typing import Any, Iterable, List, Optional, TextIO

from .exceptions import ResponseFormatError
from .models import RepoRecord

ROW_FORMAT = "{0:<30} | {1:^12} | {2:>12} | {3:>12} | {4:>12} | {5:^6} | {6:^6} |"
SEPARATOR_FORMAT = "{0:-<30} | {0:-^12} | {0:->12} | {0:->12} | {0:->12} | {0:-^6} | {0:-^6} |"
HEADER_TITLES = ("Repo Name", "Language", "Created at", "Last push", "Last update", "Forks", "Stars")
UNKNOWN_LANGUAGE = "Unknown"


def parse_repositories(json_text: str) -> List[Any]:
    """
    Parse the API response body into the list of repository entries.

    Raises:
        ResponseFormatError: If the body is not JSON or not a JSON array.
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise ResponseFormatError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, list):
        detail = ""
        if isinstance(data, dict) and "message" in data:
            detail = f": {data['message']}"
        raise ResponseFormatError(f"Expected a list of repositories from GitHub{detail}")
    return data


def format_header() -> str:
    return ROW_FORMAT.format(*HEADER_TITLES)


def format_separator() -> str:
    return SEPARATOR_FORMAT.format("")


def format_row(record: RepoRecord) -> str:
    """Format one repository as a table row."""
    return ROW_FORMAT.format(
        record.name,
        record.language or UNKNOWN_LANGUAGE,
        record.created_date,
        record.pushed_date,
        record.updated_date,
        record.forks_count,
        record.stargazers_count,
    )


def render_table(entries: Iterable[Any], out: Optional[TextIO] = None,
                 username: Optional[str] = None) -> int:
    """
    Write the statistics table for the given repository entries.

    Entries are validated one at a time as their rows are written, so a bad
    entry stops the table after the rows before it.

    Args:
        entries: Parsed repository objects from the GitHub API
        out: Stream to write to (stdout if None)
        username: When given, a title line naming the user comes first

    Returns:
        Number of repository rows written
    """
    if out is None:
        out = sys.stdout
    if username is not None:
        print(f"Public repo statistics for user {username}:", file=out)
    print(format_header(), file=out)
    print(format_separator(), file=out)

    rows = 0
    for entry in entries:
        print(format_row(RepoRecord.from_github_entry(entry)), file=out)
        rows += 1
    return rows
