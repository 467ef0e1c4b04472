"""
Render-to-string entry point.

render(path, view) turns a route and a stats view into an HTML document. It
uses its own Jinja2 environment, so it works without a Flask application or
request context.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from chart import bar_chart
from language_stats import top_repositories
from stats_loader import StatsView, ViewState

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

HOME_PATH = "/"
STATS_PATH = "/userStat"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _blank(value: Any) -> Any:
    # Absent profile fields show as nothing rather than "None".
    return "" if value is None else value


_env.filters["blank"] = _blank


def _render_home() -> str:
    return _env.get_template("home.html").render(home_path=HOME_PATH)


def _render_stats(view: StatsView) -> str:
    ctx = {"view": view, "state": view.state.value, "home_path": HOME_PATH}
    if view.state is ViewState.READY and view.profile is not None:
        ctx["repositories"] = top_repositories(view.repositories)
        ctx["chart"] = bar_chart(view.languages) if view.languages else None
    return _env.get_template("user_stat.html").render(**ctx)


def render(path: str, view: Optional[StatsView] = None) -> str:
    """
    Render the page for path.

    The stats page defaults to the no-username state when no view is given.
    Paths that match no route render as an empty string.
    """
    route = path.split("?", 1)[0]
    if route == HOME_PATH:
        return _render_home()
    if route == STATS_PATH:
        return _render_stats(view or StatsView(ViewState.NO_USERNAME))
    return ""
