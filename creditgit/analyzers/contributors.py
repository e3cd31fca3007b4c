"""Deduplicate commit authors into contributors and order them."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from creditgit.models import CommitRecord, ContributorRecord, SortMode, to_json
from creditgit.repo import get_head, open_repo

logger = logging.getLogger(__name__)


def parse_sort_mode(value: str | None) -> SortMode:
    """Map a configured sort value onto a :class:`SortMode`.

    Matching is case-insensitive. A missing or unrecognized value falls back
    to :attr:`SortMode.COUNT` instead of failing the run.
    """
    if value is not None:
        lowered = value.lower()
        if lowered in (SortMode.DATE.value, SortMode.NAME.value):
            return SortMode(lowered)
        if lowered != SortMode.COUNT.value:
            logger.debug("Unknown sort mode %r, sorting by count", value)
    return SortMode.COUNT


def count_commits(commits: list[CommitRecord]) -> dict[str, int]:
    """Return author email → number of commits, keyed in first-seen order."""
    counts: dict[str, int] = {}
    for commit in commits:
        counts[commit.author_email] = counts.get(commit.author_email, 0) + 1
    return counts


def first_names(commits: list[CommitRecord]) -> dict[str, str]:
    """Return author email → the author name on the first commit seen for it."""
    names: dict[str, str] = {}
    for commit in commits:
        names.setdefault(commit.author_email, commit.author_name)
    return names


def aggregate_contributors(commits: list[CommitRecord]) -> list[ContributorRecord]:
    """Return one :class:`ContributorRecord` per distinct author email.

    Records come back in the order their email first appears in *commits*.
    """
    counts = count_commits(commits)
    names = first_names(commits)
    contributors = [
        ContributorRecord(email=email, name=names[email], commit_count=count)
        for email, count in counts.items()
    ]
    logger.debug("Found %d contributor(s) in %d commit(s)", len(contributors), len(commits))
    return contributors


def order_contributors(
    contributors: list[ContributorRecord],
    commits: list[CommitRecord],
    mode: SortMode,
) -> list[ContributorRecord]:
    """Return *contributors* ordered for display.

    Parameters
    ----------
    contributors:
        Output of :func:`aggregate_contributors` for *commits*.
    commits:
        The history in walk order; ``DATE`` ordering is derived from it.
    mode:
        ``COUNT`` sorts by descending commit count, ``NAME`` by display name
        (ordinal comparison) and ``DATE`` lists contributors by their oldest
        commit, taken as the first occurrence in the reversed walk. Both sorts
        are stable, so ties keep first-seen order.
    """
    logger.debug("Sorting contributors by %s", mode.value)
    if mode is SortMode.DATE:
        by_email = {c.email: c for c in contributors}
        oldest_first = dict.fromkeys(c.author_email for c in reversed(commits))
        return [by_email[email] for email in oldest_first]
    if mode is SortMode.NAME:
        return sorted(contributors, key=lambda c: c.name)
    return sorted(contributors, key=lambda c: c.commit_count, reverse=True)


if __name__ == "__main__":
    repo_path = sys.argv[1] if len(sys.argv) > 1 else "."
    sort_arg = sys.argv[2] if len(sys.argv) > 2 else None

    from creditgit.analyzers.history import load_history

    history = load_history(get_head(open_repo(Path(repo_path))))
    mode = parse_sort_mode(sort_arg)
    ordered = order_contributors(aggregate_contributors(history), history, mode)
    print(f"{len(ordered)} contributor(s), sorted by {mode.value}:\n")
    print(to_json(ordered))
