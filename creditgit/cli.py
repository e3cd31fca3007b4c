"""CLI entrypoint for creditgit.

Usage:
    creditgit contributors [--repo PATH] [--rev REV] [--output FILE] [options]

Commands:
    contributors   List the authors of every commit on the current branch

Options:
    --repo PATH                Path to the git repository (default: current directory)
    --rev REV                  Revision to start from (default: tip of the checked out branch)
    --prefix TEXT              String put in front of every contributor (default: " * ")
    --header TEXT              Text printed above the list
    --footer TEXT              Text printed after the list
    --show-counts/--no-show-counts
                               List the number of commits per contributor (default: on)
    --show-email/--no-show-email
                               List contributor email addresses (default: off)
    --sort MODE                count, date or name (anything else sorts by count)
    --output FILE              Write the report to FILE (default: print to stdout)
    --json                     Emit the ordered contributors as JSON
    -v, --verbose              Log debug output to stderr

Literal "\\n" sequences in --prefix, --header and --footer become line breaks.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from creditgit.analyzers.history import walk_commits
from creditgit.config import DEFAULT_HEADER, DEFAULT_PREFIX, ReportConfig, unescape_newlines
from creditgit.models import to_json
from creditgit.repo import HistoryReadError, current_branch, get_head, open_repo
from creditgit.report import build_contributors, generate_report, write_report

logger = logging.getLogger("creditgit")


def _config_from_args(args: argparse.Namespace) -> ReportConfig:
    return ReportConfig(
        contributor_prefix=unescape_newlines(args.prefix),
        header=unescape_newlines(args.header),
        show_counts=args.show_counts,
        show_email=args.show_email,
        sort=args.sort,
    )


def cmd_contributors(args: argparse.Namespace) -> None:
    config = _config_from_args(args)
    repo = open_repo(args.repo)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Listing contributors of %s", args.rev or current_branch(repo) or "detached HEAD")

    # The whole history is read before the destination is touched
    start = get_head(repo, args.rev)
    if args.json:
        text = to_json(build_contributors(start, sort=config.sort)) + "\n"
    else:
        text = generate_report(start, walk_commits, config)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            _emit(text, args.footer, f)
        print(f"Output written to: {args.output}")
    else:
        _emit(text, args.footer, sys.stdout)


def _emit(text: str, footer: str | None, out: TextIO) -> None:
    write_report(text, out)
    if footer:
        out.write(unescape_newlines(footer) + "\n")


def build_parser() -> argparse.ArgumentParser:
    # Shared flags, accepted after the subcommand name
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--repo", default=".", metavar="PATH", help="Path to the git repo (default: current directory)")
    common.add_argument("--rev", default=None, metavar="REV", help="Revision to start from (default: HEAD)")
    common.add_argument("--output", default=None, metavar="FILE", help="Write output to FILE")
    common.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    common.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    parser = argparse.ArgumentParser(
        prog="creditgit",
        description="Generate a contributors list from a git repository's history.",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    contributors = sub.add_parser("contributors", parents=[common], help="List the contributors of a branch")
    contributors.add_argument("--prefix", default=DEFAULT_PREFIX, metavar="TEXT", help="Prefix for every contributor line")
    contributors.add_argument("--header", default=DEFAULT_HEADER, metavar="TEXT", help="Header printed above the list")
    contributors.add_argument("--footer", default=None, metavar="TEXT", help="Text printed after the list")
    contributors.add_argument(
        "--show-counts",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="List the number of commits per contributor",
    )
    contributors.add_argument(
        "--show-email",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="List contributor email addresses",
    )
    contributors.add_argument(
        "--sort",
        default=None,
        metavar="MODE",
        help="count (default), date or name; unknown values sort by count",
    )

    return parser


_COMMANDS = {
    "contributors": cmd_contributors,
}


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        _COMMANDS[args.command](args)
    except HistoryReadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
