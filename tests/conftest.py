"""Shared pytest fixtures for creditgit tests.

- Fake commits and walkers for exercising the aggregation without git
- Throwaway git repositories built with GitPython for end-to-end runs
"""

from pathlib import Path
from types import SimpleNamespace

import pytest
from git import Actor, Repo

from creditgit.models import CommitRecord

# Example history, newest commit first
EXAMPLE_AUTHORS = [
    ("A", "a@x"),
    ("B", "b@y"),
    ("A", "a@x"),
    ("C", "c@z"),
]


def fake_commit(name: str, email: str) -> SimpleNamespace:
    """Return an object shaped like a GitPython commit as far as authors go."""
    return SimpleNamespace(author=SimpleNamespace(name=name, email=email))


def fake_walker(authors):
    """Return a walker that ignores its start point and yields *authors* as commits."""
    commits = [fake_commit(name, email) for name, email in authors]
    return lambda start: iter(commits)


def records(authors) -> list[CommitRecord]:
    return [
        CommitRecord(author_name=name, author_email=email, position=i)
        for i, (name, email) in enumerate(authors)
    ]


@pytest.fixture
def example_commits() -> list[CommitRecord]:
    return records(EXAMPLE_AUTHORS)


@pytest.fixture
def make_repo(tmp_path: Path):
    """Build a linear git repository from ``(name, email)`` pairs, oldest first."""

    def _make(authors) -> Repo:
        repo_dir = tmp_path / "repo"
        repo = Repo.init(repo_dir)
        committer = Actor("Build Bot", "bot@example.com")
        for i, (name, email) in enumerate(authors):
            changes = repo_dir / "CHANGES.txt"
            changes.write_text(f"change {i}\n")
            repo.index.add([str(changes)])
            date = f"2020-01-{i + 1:02d}T12:00:00"
            repo.index.commit(
                f"change {i}",
                author=Actor(name, email),
                committer=committer,
                author_date=date,
                commit_date=date,
            )
        return repo

    return _make


@pytest.fixture
def example_repo(make_repo) -> Repo:
    return make_repo(list(reversed(EXAMPLE_AUTHORS)))
