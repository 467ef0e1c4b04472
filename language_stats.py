"""
Derived view data: language-frequency table and top repository slice.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from models import LanguageStat, Repository

TOP_LANGUAGES = 8
TOP_REPOSITORIES = 6


def language_frequency(repos: Sequence[Repository], limit: int = TOP_LANGUAGES) -> List[LanguageStat]:
    """
    Count repositories per primary language, most used first.

    Repositories without a language are not counted. Equal counts keep the
    order in which the language was first seen, i.e. the upstream
    star-descending order, because the sort is stable.
    """
    counts: Dict[str, int] = {}
    for repo in repos:
        if repo.language:
            counts[repo.language] = counts.get(repo.language, 0) + 1

    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:limit]
    return [LanguageStat(language, count) for language, count in ranked]


def top_repositories(repos: Sequence[Repository], limit: int = TOP_REPOSITORIES) -> List[Repository]:
    # Upstream already sorts by stars; keep its order.
    return list(repos[:limit])
