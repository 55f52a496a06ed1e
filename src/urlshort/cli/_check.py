"""``urlshort check``: rule file validation command.

Parses the file and reports how many paths it redirects. Exits with
code 1 if the file cannot be read or is not a valid rule document.
"""

import argparse

from urlshort.cli._load import load_table


def run_check(args: argparse.Namespace) -> None:
    table = load_table(args)
    noun = "rule" if len(table) == 1 else "rules"
    print(f"OK: {len(table)} {noun}")
