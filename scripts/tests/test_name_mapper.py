"""Tests for name_mapper.py — canonical property name lookup."""

import pytest

from bom_versions.errors import NamePatternError
from bom_versions.name_mapper import NameMapper


class TestConstruction:
    def test_empty_configuration(self):
        assert NameMapper({}).names == ()

    def test_names_sorted(self):
        mapper = NameMapper({"zeta": "a", "alpha": "b", "mid": "c"})
        assert mapper.names == ("alpha", "mid", "zeta")

    def test_invalid_pattern_raises(self):
        with pytest.raises(NamePatternError) as exc_info:
            NameMapper({"version.broken": "version\\.ok, version.(unclosed"})
        assert exc_info.value.name == "version.broken"
        assert exc_info.value.pattern == "version.(unclosed"
        assert "version.(unclosed" in str(exc_info.value)

    def test_fragments_are_trimmed(self):
        mapper = NameMapper({"version.logging": "  version\\.org\\.jboss\\.logging  ,\tversion\\.org\\.slf4j "})
        assert mapper.map_name("version.org.jboss.logging") == "version.logging"
        assert mapper.map_name("version.org.slf4j") == "version.logging"

    def test_trailing_comma_ignored(self):
        mapper = NameMapper({"version.x": "version\\.a,"})
        assert mapper.map_name("version.a") == "version.x"
        assert mapper.map_name("") == ""


class TestMapName:
    def test_unconfigured_name_passes_through(self):
        assert NameMapper({}).map_name("version.com.acme") == "version.com.acme"

    def test_regex_match(self):
        mapper = NameMapper({"version.undertow": "version\\.io\\.undertow.*"})
        assert mapper.map_name("version.io.undertow") == "version.undertow"
        assert mapper.map_name("version.io.undertow.undertow-core") == "version.undertow"

    def test_whole_string_match_only(self):
        mapper = NameMapper({"merged": "foo"})
        assert mapper.map_name("foo") == "merged"
        assert mapper.map_name("foobar") == "foobar"
        assert mapper.map_name("barfoo") == "barfoo"

    def test_first_name_in_sorted_order_wins(self):
        mapper = NameMapper({"version.b": "version\\..*", "version.a": "version\\.com\\..*"})
        assert mapper.map_name("version.com.acme") == "version.a"
        assert mapper.map_name("version.org.acme") == "version.b"

    def test_canonical_name_is_stable(self):
        mapper = NameMapper({"version.netty": "version\\.io\\.netty"})
        once = mapper.map_name("version.com.acme")
        assert mapper.map_name(once) == once

    def test_no_side_effects(self):
        config = {"version.netty": "version\\.io\\.netty"}
        mapper = NameMapper(config)
        mapper.map_name("version.io.netty")
        assert config == {"version.netty": "version\\.io\\.netty"}
        assert mapper.names == ("version.netty",)
