"""Tests for config file parsing."""

import logging

import pytest
from ezredirect.lib.config_file import ConfigEntry, load_config_file, parse_config_lines
from ezredirect.lib.errors import ConfigError
from ezredirect.lib.resolver import Redirected, Resolver
from ezredirect.lib.ruleset import load_ruleset


class TestParseConfigLines:
    """Test line parsing."""
    
    def test_entries_in_file_order(self, config_text):
        entries = parse_config_lines(config_text.splitlines())
        
        assert [e.key for e in entries] == ["m", "npm", "_"]
        assert entries[1] == ConfigEntry("npm", "https://npmjs.com/search?q={ARGS}", 3)
    
    def test_blank_and_comment_lines_skipped(self):
        lines = ["", "# comment", "   ", "  # indented comment", "m = https://gmail.com/"]
        entries = parse_config_lines(lines)
        
        assert entries == [ConfigEntry("m", "https://gmail.com/", 5)]
    
    def test_surrounding_whitespace_ignored(self):
        entries = parse_config_lines(["   m = https://gmail.com/   "])
        assert entries[0].template == "https://gmail.com/"
    
    def test_value_may_contain_equals(self):
        entries = parse_config_lines(["s = https://x.com/s?q={ARGS}&lang=en"])
        assert entries[0].template == "https://x.com/s?q={ARGS}&lang=en"
    
    @pytest.mark.parametrize(
        "line",
        [
            "m=https://gmail.com/",
            "m  =  https://gmail.com/",
            "m =https://gmail.com/",
            "two words = https://x.com/",
            "just-a-key",
            "m = ",
        ],
    )
    def test_malformed_line_strict(self, line):
        with pytest.raises(ConfigError, match="line 1"):
            parse_config_lines([line])
    
    def test_malformed_line_skipped_when_not_strict(self, caplog):
        lines = ["m=https://gmail.com/", "npm = https://npmjs.com/"]
        
        with caplog.at_level(logging.WARNING):
            entries = parse_config_lines(lines, strict=False)
        
        assert [e.key for e in entries] == ["npm"]
        assert "Malformed config line 1" in caplog.text
    
    def test_duplicates_are_kept_for_the_builder(self):
        """The parser reports duplicates as-is; the rule set builder rejects them."""
        entries = parse_config_lines(["m = https://a.com/", "m = https://b.com/"])
        assert len(entries) == 2


class TestLoadConfigFile:
    """Test reading config files from disk."""
    
    def test_load(self, config_file):
        entries = load_config_file(config_file)
        assert [e.key for e in entries] == ["m", "npm", "_"]
    
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Could not read config file"):
            load_config_file(tmp_path / "missing.txt")
    
    def test_utf8(self, tmp_path):
        path = tmp_path / "config.txt"
        path.write_text("wiki = https://de.wikipedia.org/wiki/{ARGS}\n# Größe\n", encoding="utf-8")
        
        entries = load_config_file(path)
        assert entries == [ConfigEntry("wiki", "https://de.wikipedia.org/wiki/{ARGS}", 1)]
    
    def test_byte_order_mark(self, tmp_path):
        """Files saved by editors that prepend a BOM keep their first key."""
        path = tmp_path / "config.txt"
        path.write_bytes(b"\xef\xbb\xbfm = https://gmail.com/\n_ = https://g.com/?q={ALL}\n")
        
        entries = load_config_file(path)
        assert [e.key for e in entries] == ["m", "_"]
        
        resolver = Resolver(load_ruleset(path))
        assert resolver.handle("m") == Redirected(target="https://gmail.com/", key="m", fallback=False)
