"""Rule file loading shared by ``urlshort check`` and ``urlshort rules``."""

import argparse
import sys

from urlshort.errors import RuleParseError
from urlshort.rules import RuleTable, load_rules


def load_table(args: argparse.Namespace) -> RuleTable:
    """Load ``args.file``, exiting with code 1 on any read or parse error."""
    try:
        return load_rules(args.file, strict=not args.lenient)
    except (OSError, RuleParseError) as exc:
        print(f"Error: {args.file}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
