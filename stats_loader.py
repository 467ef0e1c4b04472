"""
Data acquisition for the stats page.

StatsLoader drives one fetch cycle per username and derives the view state
the renderer consumes. Each cycle takes a new epoch; a finished cycle only
updates the view if no newer cycle (or reset) started in the meantime.
"""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from github_api import GitHubAPIError, fetch_user_data
from language_stats import language_frequency
from models import LanguageStat, Repository, UserProfile

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch GitHub data"

Fetcher = Callable[[str], Tuple[Optional[UserProfile], List[Repository]]]


class ViewState(enum.Enum):
    NO_USERNAME = "no-username"
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass
class StatsView:
    state: ViewState
    username: Optional[str] = None
    profile: Optional[UserProfile] = None
    repositories: List[Repository] = field(default_factory=list)
    languages: List[LanguageStat] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "username": self.username,
            "profile": self.profile.to_dict() if self.profile else None,
            "repositories": [r.to_dict() for r in self.repositories],
            "languages": [s.to_dict() for s in self.languages],
            "error": self.error,
        }


def build_view(username: str, profile: Optional[UserProfile], repos: List[Repository]) -> StatsView:
    return StatsView(
        state=ViewState.READY,
        username=username,
        profile=profile,
        repositories=list(repos),
        languages=language_frequency(repos),
    )


class StatsLoader:
    """Holds the stats view for one viewer and refreshes it when the username changes."""

    def __init__(self, fetcher: Optional[Fetcher] = None):
        self._fetcher = fetcher or fetch_user_data
        self._lock = threading.Lock()
        self._epoch = 0
        self._view = StatsView(ViewState.NO_USERNAME)

    @property
    def view(self) -> StatsView:
        return self._view

    @property
    def epoch(self) -> int:
        return self._epoch

    def load(self, username: Optional[str]) -> StatsView:
        """
        Run one fetch cycle for username and return the resulting view.

        An empty username yields the no-username state without any network
        call. Asking again for the username of the current view returns it
        unchanged.
        """
        with self._lock:
            if not username:
                self._epoch += 1
                self._view = StatsView(ViewState.NO_USERNAME)
                return self._view
            if self._view.username == username:
                return self._view
            self._epoch += 1
            epoch = self._epoch
            self._view = StatsView(ViewState.LOADING, username=username)

        try:
            profile, repos = self._fetcher(username)
        except GitHubAPIError as e:
            logger.error(f"Fetching stats for {username!r} failed: {e}")
            result = StatsView(ViewState.ERROR, username=username, error=FETCH_ERROR_MESSAGE)
        else:
            result = build_view(username, profile, repos)

        self._apply(epoch, result)
        return self._view

    def reset(self) -> None:
        with self._lock:
            self._epoch += 1
            self._view = StatsView(ViewState.NO_USERNAME)

    def _apply(self, epoch: int, result: StatsView) -> bool:
        with self._lock:
            if epoch != self._epoch:
                logger.debug(f"Dropping stale result for {result.username!r} (epoch {epoch}, current {self._epoch})")
                return False
            self._view = result
            return True
