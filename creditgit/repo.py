"""Thin helpers for opening a repo and resolving where its history starts."""

from __future__ import annotations

import logging
from pathlib import Path

from git import Commit, InvalidGitRepositoryError, NoSuchPathError, Repo
from git.exc import BadName, GitCommandError

logger = logging.getLogger(__name__)


class HistoryReadError(Exception):
    """The repository could not be opened, resolved or walked."""


def open_repo(path: str | Path = ".") -> Repo:
    """Open a git repository at *path* (or any of its parents)."""
    try:
        repo = Repo(str(path), search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as exc:
        raise HistoryReadError(f"No git repository found at or above: {path}") from exc
    logger.debug("Opened repository %s", repo.working_dir)
    return repo


def get_head(repo: Repo, rev: str | None = None) -> Commit:
    """Return the commit the history walk starts from.

    Without *rev* this is the tip of the currently checked out branch (or the
    detached ``HEAD``). An unborn branch or an unknown revision is reported as
    :class:`HistoryReadError`.
    """
    try:
        if rev is None:
            return repo.head.commit
        return repo.commit(rev)
    except (BadName, GitCommandError, ValueError) as exc:
        raise HistoryReadError(f"Unable to resolve {rev or 'HEAD'!r}: {exc}") from exc


def current_branch(repo: Repo) -> str | None:
    """Return the checked out branch name, or None for a detached HEAD."""
    if repo.head.is_detached:
        return None
    return repo.active_branch.name
