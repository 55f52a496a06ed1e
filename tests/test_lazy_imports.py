"""Tests for the lazy top-level ``urlshort`` namespace."""

import pytest

import urlshort


class TestPublicApi:
    @pytest.mark.parametrize("name", urlshort.__all__)
    def test_every_export_resolves(self, name: str) -> None:
        assert getattr(urlshort, name) is not None

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="no_such_thing"):
            urlshort.no_such_thing  # noqa: B018

    def test_exports_are_the_real_objects(self) -> None:
        from urlshort.handler import map_handler
        from urlshort.rules import RuleTable

        assert urlshort.map_handler is map_handler
        assert urlshort.RuleTable is RuleTable
