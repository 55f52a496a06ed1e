"""urlshort CLI: inspect and validate redirect rule files.

Entry point registered as ``urlshort`` in ``pyproject.toml``::

    [project.scripts]
    urlshort = "urlshort.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``urlshort`` command."""
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="urlshort: path-to-URL redirects from a YAML rule file.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- urlshort check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a rule file")
    check_parser.add_argument("file", help="Path to a YAML rule file")
    check_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Accept records with a missing path or url",
    )

    # -- urlshort rules ---------------------------------------------------
    rules_parser = subparsers.add_parser("rules", help="List the effective redirect rules")
    rules_parser.add_argument("file", help="Path to a YAML rule file")
    rules_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Accept records with a missing path or url",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from urlshort.cli._check import run_check

        run_check(args)
    elif args.command == "rules":
        from urlshort.cli._rules import run_rules

        run_rules(args)
