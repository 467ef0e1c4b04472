"""
Data models for GitHub profiles, repositories and derived language counts.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class UserProfile:
    """Public account metadata, taken verbatim from GET /users/{username}."""
    login: Optional[str]
    name: Optional[str]
    avatar_url: Optional[str]
    bio: Optional[str]
    followers: Optional[int]
    following: Optional[int]
    public_repos: Optional[int]
    html_url: Optional[str]
    blog: Optional[str] = None
    location: Optional[str] = None

    @classmethod
    def from_github(cls, payload: Dict[str, Any]) -> "UserProfile":
        return cls(
            login=payload.get("login"),
            name=payload.get("name"),
            avatar_url=payload.get("avatar_url"),
            bio=payload.get("bio"),
            followers=payload.get("followers"),
            following=payload.get("following"),
            public_repos=payload.get("public_repos"),
            html_url=payload.get("html_url"),
            blog=payload.get("blog"),
            location=payload.get("location"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Repository:
    """One entry of GET /users/{username}/repos."""
    id: Optional[int]
    name: Optional[str]
    description: Optional[str]
    html_url: Optional[str]
    stargazers_count: Optional[int]
    language: Optional[str]
    created_at: Optional[str]

    @classmethod
    def from_github(cls, payload: Dict[str, Any]) -> "Repository":
        return cls(
            id=payload.get("id"),
            name=payload.get("name"),
            description=payload.get("description"),
            html_url=payload.get("html_url"),
            stargazers_count=payload.get("stargazers_count"),
            language=payload.get("language"),
            created_at=payload.get("created_at"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LanguageStat:
    language: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"language": self.language, "count": self.count}
