"""``urlshort rules``: list the effective redirect rules.

Prints one row per distinct path, after duplicates have been resolved
(the last record for a path wins).
"""

import argparse

from urlshort.cli._load import load_table


def run_rules(args: argparse.Namespace) -> None:
    """Print a PATH / URL table for ``args.file``."""
    table = load_table(args)
    if not table:
        print("No rules defined.")
        return

    width = max(4, *(len(path) for path in table))  # "PATH" header
    fmt = f"{{:<{width}}}  {{}}"
    print(fmt.format("PATH", "URL"))
    print("-" * min(width + 2 + max(len(url) for url in table.values()), 80))
    for rule in table.rules:
        print(fmt.format(rule.path, rule.url))
