"""
GitHub User Stats (Flask)

What it does:
- Asks for a GitHub username and keeps it in the session under "githubId"
- Fetches the user's public profile and first 100 repositories (most starred first)
- Renders a profile card, the top 6 repositories and a bar chart of the 8 most used languages

Setup:
  pip install -e .

Run:
  export SECRET_KEY="..."   # signs the session cookie
  python app.py
  open http://localhost:5000

Endpoints:
  GET  /              -> username entry page
  POST /              -> stores form field "githubid", redirects to /userStat
  GET  /userStat      -> stats page for the stored username
  POST /reset         -> forgets the stored username, redirects to /
  GET  /api/userStat  -> the stats view as JSON
  GET  /healthz       -> liveness
"""

from __future__ import annotations

import logging
import os
from typing import MutableMapping, Optional

from flask import Flask, jsonify, redirect, request, session

from github_api import fetch_user_data
from render import HOME_PATH, STATS_PATH, render
from stats_loader import StatsLoader, StatsView

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# -----------------------------
# Flask app
# -----------------------------
app = Flask(__name__)

# -----------------------------
# Config
# -----------------------------
app.secret_key = os.getenv("SECRET_KEY", "dev-secret-change-me")

USERNAME_KEY = "githubId"

HTML = {"Content-Type": "text/html; charset=utf-8"}


# -----------------------------
# Persisted username slot
# -----------------------------
def store_username(store: MutableMapping, username: str) -> None:
    # Stored verbatim; an empty string is a valid value.
    store[USERNAME_KEY] = username


def read_username(store: MutableMapping) -> Optional[str]:
    return store.get(USERNAME_KEY)


def clear_username(store: MutableMapping) -> None:
    store.pop(USERNAME_KEY, None)


def _load_view() -> StatsView:
    username = read_username(session)
    return StatsLoader(fetch_user_data).load(username)


# -----------------------------
# Flask routes
# -----------------------------
@app.route(HOME_PATH, methods=["GET"])
def home():
    return render(HOME_PATH), 200, HTML


@app.route(HOME_PATH, methods=["POST"])
def submit_username():
    username = request.form.get("githubid", "")
    store_username(session, username)
    logger.info(f"Stored username {username!r}")
    return redirect(STATS_PATH)


@app.route(STATS_PATH, methods=["GET"])
def user_stat():
    return render(STATS_PATH, _load_view()), 200, HTML


@app.route("/reset", methods=["POST"])
def reset():
    clear_username(session)
    return redirect(HOME_PATH)


@app.route("/api/userStat", methods=["GET"])
def api_user_stat():
    return jsonify(_load_view().to_dict())


@app.route("/healthz", methods=["GET"])
def healthz():
    return jsonify({"ok": True})


def main() -> None:
    port = int(os.getenv("PORT", "5000"))
    debug = os.getenv("FLASK_DEBUG", "").lower() in ("1", "true", "yes")
    app.run(host="0.0.0.0", port=port, debug=debug)


if __name__ == "__main__":
    main()
