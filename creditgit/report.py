"""Render the contributor list as text."""

from __future__ import annotations

from typing import Any, TextIO

from creditgit.analyzers import aggregate_contributors, load_history, order_contributors, parse_sort_mode
from creditgit.analyzers.history import Walker, walk_commits
from creditgit.config import ReportConfig
from creditgit.models import ContributorRecord


def render_line(contributor: ContributorRecord, config: ReportConfig) -> str:
    line = config.contributor_prefix + contributor.name
    if config.show_email:
        line += f" ({contributor.email})"
    if config.show_counts:
        line += f" ({contributor.commit_count})"
    return line


def render_report(contributors: list[ContributorRecord], config: ReportConfig) -> str:
    """Return the header followed by one line per contributor, in the given order."""
    lines = [config.header]
    lines.extend(render_line(c, config) for c in contributors)
    return "\n".join(lines) + "\n"


def build_contributors(
    start: Any,
    walker: Walker = walk_commits,
    sort: str | None = None,
) -> list[ContributorRecord]:
    """Walk the history from *start* and return its contributors in display order."""
    commits = load_history(start, walker)
    contributors = aggregate_contributors(commits)
    return order_contributors(contributors, commits, parse_sort_mode(sort))


def generate_report(start: Any, walker: Walker, config: ReportConfig) -> str:
    """Return the rendered contributor report for the history reachable from *start*.

    Raises :class:`~creditgit.repo.HistoryReadError` before anything is
    rendered if the history cannot be read.
    """
    return render_report(build_contributors(start, walker, config.sort), config)


def write_report(text: str, out: TextIO) -> None:
    """Append *text* to the caller-owned stream *out*; it is left open."""
    out.write(text)
