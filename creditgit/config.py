"""Report configuration as handed over by the command line."""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_PREFIX = " * "
DEFAULT_HEADER = "Contributors\n============\n"

# A literal backslash-n that is not itself escaped by a preceding backslash
_ESCAPED_NEWLINE_RE = re.compile(r"(?<!\\)\\n")


def unescape_newlines(text: str) -> str:
    r"""Turn literal ``\n`` sequences typed on a command line into line breaks."""
    return _ESCAPED_NEWLINE_RE.sub("\n", text)


@dataclass
class ReportConfig:
    contributor_prefix: str = DEFAULT_PREFIX
    header: str = DEFAULT_HEADER
    show_counts: bool = True
    show_email: bool = False
    sort: str | None = None  # parsed leniently, see parse_sort_mode
