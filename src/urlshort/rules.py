"""Redirect rules and the rule table.

A rule file is a YAML sequence of ``{path, url}`` records::

    - path: /some-path
      url: https://www.some-url.com/demo
    - path: /another-path
      url: https://www.another-url.com/demo

Records are folded into a :class:`RuleTable` in document order. When two
records share a path the later one wins. Extra keys on a record are
ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from urlshort.errors import RuleParseError

logger = logging.getLogger("urlshort.rules")


@dataclass(frozen=True, slots=True)
class Rule:
    """A single redirect: requests for ``path`` go to ``url``."""

    path: str
    url: str


class RuleTable(Mapping[str, str]):
    """Immutable mapping from request path to redirect URL.

    Keys are compared verbatim: ``/foo``, ``/foo/`` and ``/Foo`` are three
    different paths. The table is safe to share between concurrent
    requests since nothing can change it after construction.
    """

    __slots__ = ("_urls",)

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        urls: dict[str, str] = {}
        for rule in rules:
            urls[rule.path] = rule.url
        self._urls = urls

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> RuleTable:
        """Build a table from rules; later rules overwrite earlier ones."""
        return cls(rules)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> RuleTable:
        """Copy *mapping* into a table. Returns *mapping* if already one."""
        if isinstance(mapping, RuleTable):
            return mapping
        return cls(Rule(path, url) for path, url in mapping.items())

    def __getitem__(self, path: str) -> str:
        return self._urls[path]

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and path in self._urls

    def __iter__(self) -> Iterator[str]:
        return iter(self._urls)

    def __len__(self) -> int:
        return len(self._urls)

    def __repr__(self) -> str:
        return f"RuleTable({self._urls!r})"

    @property
    def rules(self) -> tuple[Rule, ...]:
        """The effective rules, one per distinct path."""
        return tuple(Rule(path, url) for path, url in self._urls.items())


def parse_rules(yml: bytes | str, *, strict: bool = True) -> RuleTable:
    """Decode a YAML rule document into a :class:`RuleTable`.

    An empty document yields an empty table.

    Args:
        yml: The YAML document, as bytes or text.
        strict: Reject records with a missing or empty ``path`` or
            ``url``. When false, a missing field reads as ``""``.

    Raises:
        RuleParseError: If the document is not valid YAML, is not a
            sequence of mappings, or a ``path``/``url`` value is not a
            string (or, in strict mode, is missing or empty).
    """
    try:
        data = yaml.safe_load(yml)
    except yaml.YAMLError as exc:
        raise RuleParseError(f"invalid YAML: {exc}") from exc

    if data is None:
        data = []
    if not isinstance(data, list):
        msg = f"expected a sequence of rules, got {type(data).__name__}"
        raise RuleParseError(msg)

    table = RuleTable(
        _decode_rule(index, record, strict=strict) for index, record in enumerate(data)
    )
    logger.debug("Parsed %d rule(s) into %d path(s): %r", len(data), len(table), table)
    return table


def load_rules(path: str | Path, *, strict: bool = True) -> RuleTable:
    """Read and parse a YAML rule file.

    ``OSError`` from reading the file propagates as-is; only decoding
    problems become :class:`RuleParseError`.
    """
    return parse_rules(Path(path).read_bytes(), strict=strict)


def _decode_rule(index: int, record: Any, *, strict: bool) -> Rule:
    if not isinstance(record, dict):
        msg = f"expected a mapping with 'path' and 'url', got {type(record).__name__}"
        raise RuleParseError(msg, index=index)
    return Rule(
        path=_field(index, record, "path", strict=strict),
        url=_field(index, record, "url", strict=strict),
    )


def _field(index: int, record: dict[Any, Any], name: str, *, strict: bool) -> str:
    value = record.get(name, "")
    if value is None:
        # `path:` with nothing after it
        value = ""
    if not isinstance(value, str):
        msg = f"{name!r} must be a string, got {type(value).__name__}"
        raise RuleParseError(msg, index=index)
    if strict and not value:
        raise RuleParseError(f"{name!r} is required", index=index)
    return value
