"""
Thin client for the two GitHub REST endpoints the stats page needs.

Both calls are unauthenticated and therefore subject to GitHub's
unauthenticated rate limit. Failures are never retried.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Tuple

import requests

from models import Repository, UserProfile

logger = logging.getLogger(__name__)

# -----------------------------
# Config
# -----------------------------
GITHUB_API_BASE = os.getenv("GITHUB_API_BASE", "https://api.github.com").rstrip("/")
API_VERSION = os.getenv("GITHUB_API_VERSION", "2022-11-28")
REQUEST_TIMEOUT = int(os.getenv("GITHUB_TIMEOUT_SECONDS", "20"))

REPOS_PER_PAGE = 100


# -----------------------------
# HTTP helpers
# -----------------------------
class GitHubAPIError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _headers() -> Dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "User-Agent": "github-user-stats-flask",
        "X-GitHub-Api-Version": API_VERSION,
    }


def _user_url(username: str, *parts: str) -> str:
    quoted = requests.utils.quote(username, safe="")
    return "/".join([GITHUB_API_BASE, "users", quoted, *parts])


def _request_json(method: str, url: str, *, params: Optional[dict] = None, timeout: int = REQUEST_TIMEOUT) -> Any:
    """
    Perform one request and decode the JSON body.

    Transport errors, non-2xx responses and undecodable bodies all raise
    GitHubAPIError.
    """
    try:
        resp = requests.request(method, url, headers=_headers(), params=params, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"GitHub request to {url} failed: {e}")
        raise GitHubAPIError(f"GitHub request failed: {e}") from e

    if resp.status_code >= 400:
        logger.error(f"GitHub REST error {resp.status_code} for {url}: {(resp.text or '')[:600]}")
        raise GitHubAPIError(f"GitHub REST error {resp.status_code}", status_code=resp.status_code)

    try:
        return resp.json()
    except ValueError as e:
        logger.error(f"GitHub returned malformed JSON for {url}: {e}")
        raise GitHubAPIError("GitHub returned malformed JSON", status_code=resp.status_code) from e


# -----------------------------
# Fetchers
# -----------------------------
def fetch_profile(username: str) -> Optional[UserProfile]:
    """Return the user's profile, or None if the payload is not a JSON object."""
    payload = _request_json("GET", _user_url(username))
    if not isinstance(payload, dict):
        logger.warning(f"Profile payload for {username!r} is {type(payload).__name__}, not an object")
        return None
    return UserProfile.from_github(payload)


def fetch_repositories(username: str) -> List[Repository]:
    """
    Return the first page of public repositories, most starred first.

    A payload that is not a JSON array degrades to an empty list.
    """
    payload = _request_json(
        "GET",
        _user_url(username, "repos"),
        params={"sort": "stars", "order": "desc", "per_page": REPOS_PER_PAGE},
    )
    if not isinstance(payload, list):
        logger.warning(f"Repository payload for {username!r} is not a list; using an empty list")
        return []
    return [Repository.from_github(r) for r in payload[:REPOS_PER_PAGE] if isinstance(r, dict)]


def fetch_user_data(username: str) -> Tuple[Optional[UserProfile], List[Repository]]:
    """
    Fetch profile and repositories concurrently and wait for both.

    Raises GitHubAPIError if either call fails.
    """
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="github") as pool:
        profile_future = pool.submit(fetch_profile, username)
        repos_future = pool.submit(fetch_repositories, username)
        profile = profile_future.result()
        repos = repos_future.result()
    return profile, repos
