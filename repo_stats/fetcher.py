#!/usr/bin/env python3
"""
GitHub REST API client for listing a user's public repositories.

Issues a single authenticated request per run. There is no pagination,
retry or timeout: the first page of results is all that is reported.
"""

import logging
from typing import Optional

import requests
from requests.auth import HTTPBasicAuth

from .config import get_api_url
from .exceptions import FetchError

USER_AGENT = "request"


class RepoFetcher:
    """Fetches the raw repository listing for GitHub users."""

    def __init__(self, username: str, token: str, api_url: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the fetcher.

        Args:
            username: GitHub username used for Basic authentication
            token: GitHub Personal Access Token used as the password
            api_url: API base URL (from GITHUB_API_URL if None)
            session: Pre-built session, mostly useful for tests
        """
        self.api_url = (api_url or get_api_url()).rstrip('/')
        self.session = session or requests.Session()
        self.session.auth = HTTPBasicAuth(username, token)
        self.session.headers.update({
            "User-Agent": USER_AGENT,
        })
        self.logger = logging.getLogger(__name__)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.session.close()

    def repos_url(self, target_user: str) -> str:
        return f"{self.api_url}/users/{target_user}/repos"

    def fetch_raw(self, target_user: str) -> bytes:
        """
        Fetch the complete response body for a user's repository listing.

        The status code is not checked; error bodies are returned as-is and
        fail later when they do not parse as a repository list.
        """
        url = self.repos_url(target_user)
        self.logger.info(f"Fetching repositories from {url}")

        try:
            response = self.session.get(url)
        except requests.RequestException as e:
            self.logger.error(f"Error fetching repositories for {target_user}: {e}")
            raise FetchError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            self.logger.warning(
                f"GitHub API returned HTTP {response.status_code} for {target_user}"
            )
        self.logger.debug(f"Received {len(response.content)} bytes")
        return response.content

    def fetch_text(self, target_user: str) -> str:
        """Fetch the repository listing and decode it as UTF-8."""
        body = self.fetch_raw(target_user)
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FetchError(f"Response body is not valid UTF-8: {e}") from e


def fetch_repositories_json(username: str, token: str, target_user: str,
                            api_url: Optional[str] = None) -> str:
    """Fetch the JSON text listing target_user's repositories."""
    with RepoFetcher(username, token, api_url=api_url) as fetcher:
        return fetcher.fetch_text(target_user)
