"""Tests for rule set construction and lookup."""

import pytest
from ezredirect.lib.code_rules import GmailRule, builtin_code_rules
from ezredirect.lib.config_file import ConfigEntry
from ezredirect.lib.errors import ConfigError, NoFallbackError
from ezredirect.lib.rules import FunctionRule, TemplateRule
from ezredirect.lib.ruleset import FALLBACK_KEY, RuleSet, build_ruleset, load_ruleset


class TestBuildRuleset:
    """Test building the rule set."""
    
    def test_build_from_config(self, ruleset):
        assert set(ruleset) == {"m", "npm", "_"}
        assert isinstance(ruleset["m"], TemplateRule)
        assert ruleset.fallback is ruleset[FALLBACK_KEY]
    
    def test_code_rules_registered(self):
        ruleset = build_ruleset(
            [ConfigEntry("m", "https://gmail.com/", 1)],
            [("cal", FunctionRule(lambda command, args: "https://calendar.google.com/"))],
        )
        assert set(ruleset) == {"m", "cal"}
        assert ruleset.fallback is None
    
    def test_duplicate_config_keys_rejected(self):
        entries = [
            ConfigEntry("m", "https://a.com/", 1),
            ConfigEntry("m", "https://b.com/", 2),
        ]
        with pytest.raises(ConfigError, match="Duplicate shortcut 'm'"):
            build_ruleset(entries)
    
    def test_duplicate_between_config_and_code_rejected(self):
        with pytest.raises(ConfigError, match="Duplicate shortcut 'gmail'"):
            build_ruleset(
                [ConfigEntry("gmail", "https://gmail.com/", 1)],
                [("gmail", GmailRule())],
            )
    
    def test_duplicate_code_rules_rejected(self):
        with pytest.raises(ConfigError, match="Duplicate"):
            build_ruleset(code_rules=[("g", GmailRule()), ("g", GmailRule())])
    
    def test_invalid_template_fails_build(self):
        with pytest.raises(ConfigError, match="config line 2"):
            build_ruleset([
                ConfigEntry("m", "https://gmail.com/", 1),
                ConfigEntry("bad", "not a url {ARGS}", 2),
            ])
    
    @pytest.mark.parametrize("key", ["", "two words"])
    def test_invalid_keys(self, key):
        with pytest.raises(ConfigError):
            build_ruleset(code_rules=[(key, GmailRule())])
    
    def test_non_rule_rejected(self):
        with pytest.raises(ConfigError, match="does not implement Rule"):
            build_ruleset(code_rules=[("x", "https://x.com/")])
    
    def test_immutable(self, ruleset):
        with pytest.raises(TypeError):
            ruleset["new"] = TemplateRule("https://x.com/")
        with pytest.raises(TypeError):
            ruleset._rules["new"] = TemplateRule("https://x.com/")


class TestLookup:
    """Test rule lookup and fallback."""
    
    def test_exact_match(self, ruleset):
        key, rule = ruleset.lookup("m")
        assert key == "m"
        assert rule is ruleset["m"]
    
    def test_fallback(self, ruleset):
        key, rule = ruleset.lookup("anything")
        assert key == FALLBACK_KEY
        assert rule is ruleset.fallback
    
    def test_case_sensitive(self, ruleset):
        key, _ = ruleset.lookup("M")
        assert key == FALLBACK_KEY
    
    def test_no_prefix_matching(self, ruleset):
        key, _ = ruleset.lookup("np")
        assert key == FALLBACK_KEY
    
    def test_no_fallback(self):
        ruleset = RuleSet({"m": TemplateRule("https://gmail.com/")})
        with pytest.raises(NoFallbackError, match="no default given"):
            ruleset.lookup("other")


class TestLoadRuleset:
    """Test loading a rule set from disk."""
    
    def test_load(self, config_file):
        ruleset = load_ruleset(config_file)
        assert len(ruleset) == 3
    
    def test_load_with_builtin_rules(self, tmp_path):
        path = tmp_path / "config.txt"
        path.write_text("_ = https://duckduckgo.com/?q={ALL}\n", encoding="utf-8")
        
        ruleset = load_ruleset(path, code_rules=builtin_code_rules())
        assert set(ruleset) == {"_", "g", "gmail", "cal", "npm", "yt"}
    
    def test_nothing_to_load(self):
        with pytest.raises(ConfigError, match="No config file"):
            load_ruleset(None)
