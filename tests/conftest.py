"""Shared fixtures for the test suite."""

from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from models import Repository, UserProfile


def make_response(payload: Any = None, status_code: int = 200, text: str = "") -> MagicMock:
    """Build a fake requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


def repo_payload(name: str, language: Any = None, stars: int = 0, **extra: Any) -> Dict[str, Any]:
    payload = {
        "id": abs(hash(name)) % 100000,
        "name": name,
        "description": f"{name} description",
        "html_url": f"https://github.com/someone/{name}",
        "stargazers_count": stars,
        "language": language,
        "created_at": "2020-01-01T00:00:00Z",
    }
    payload.update(extra)
    return payload


@pytest.fixture
def profile_payload() -> Dict[str, Any]:
    return {
        "login": "torvalds",
        "name": "Linus Torvalds",
        "avatar_url": "https://avatars.githubusercontent.com/u/1024025",
        "bio": None,
        "followers": 5,
        "following": 1,
        "public_repos": 10,
        "html_url": "https://github.com/torvalds",
        "blog": "",
        "location": "Portland, OR",
    }


@pytest.fixture
def repos_payload() -> List[Dict[str, Any]]:
    return [
        repo_payload("linux", "C", 180000),
        repo_payload("subsurface", "C", 2500),
        repo_payload("tool", "Go", 10),
    ]


@pytest.fixture
def profile(profile_payload: Dict[str, Any]) -> UserProfile:
    return UserProfile.from_github(profile_payload)


@pytest.fixture
def repos(repos_payload: List[Dict[str, Any]]) -> List[Repository]:
    return [Repository.from_github(r) for r in repos_payload]
