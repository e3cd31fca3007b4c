"""Materialize the commit history reachable from a start commit."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from git import Commit
from git.exc import BadName, GitCommandError

from creditgit.models import CommitRecord, to_json
from creditgit.repo import HistoryReadError, get_head, open_repo

logger = logging.getLogger(__name__)

# Anything exposing ``author.name`` and ``author.email`` per yielded commit
Walker = Callable[[Any], Iterable[Any]]


def walk_commits(start: Commit) -> Iterable[Commit]:
    """Yield *start* and all its ancestors, newest first (``git rev-list`` order)."""
    return start.repo.iter_commits(start.hexsha)


def load_history(start: Any, walker: Walker = walk_commits) -> list[CommitRecord]:
    """Return one :class:`CommitRecord` per commit *walker* yields from *start*.

    The walk is exhausted before returning, so a read failure half way through
    never leaves a partial history behind.

    Parameters
    ----------
    start:
        Commit the walk begins at, usually the current branch tip.
    walker:
        Callable producing the commits reachable from *start* in walk order.
        Defaults to :func:`walk_commits`.
    """
    results: list[CommitRecord] = []
    try:
        for position, commit in enumerate(walker(start)):
            results.append(
                CommitRecord(
                    author_name=commit.author.name or "",
                    author_email=commit.author.email or "",
                    position=position,
                )
            )
    except (BadName, GitCommandError, OSError, ValueError) as exc:
        raise HistoryReadError(f"Unable to read contributors from Git: {exc}") from exc

    logger.debug("Walked %d commit(s) from %s", len(results), getattr(start, "hexsha", start))
    return results


if __name__ == "__main__":
    repo_path = sys.argv[1] if len(sys.argv) > 1 else "."
    rev_arg = sys.argv[2] if len(sys.argv) > 2 else None

    r = open_repo(Path(repo_path))
    history = load_history(get_head(r, rev_arg))
    print(f"Walked {len(history)} commits from '{rev_arg or 'HEAD'}':\n")
    print(to_json(history[:20]))
