"""Shared dataclasses for the history walk and the contributor report."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


def to_json(data: Any, indent: int = 2) -> str:
    if isinstance(data, list):
        serializable = [asdict(item) if hasattr(item, "__dataclass_fields__") else item for item in data]
    elif hasattr(data, "__dataclass_fields__"):
        serializable = asdict(data)
    else:
        serializable = data
    return json.dumps(serializable, indent=indent)


@dataclass(frozen=True)
class CommitRecord:
    author_name: str
    author_email: str
    position: int  # index in walk order, 0 = start commit


@dataclass(frozen=True)
class ContributorRecord:
    email: str  # identity key, compared verbatim
    name: str  # display name from the first commit seen for this email
    commit_count: int


class SortMode(Enum):
    COUNT = "count"
    DATE = "date"
    NAME = "name"
