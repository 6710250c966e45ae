"""Tests for query tokenization."""

import pytest
from ezredirect.lib.tokenizer import tokenize


class TestTokenize:
    """Test splitting raw input into command and args."""
    
    def test_command_and_args(self):
        """First token is the command, the rest are args."""
        query = tokenize("npm file finder")
        
        assert query.command == "npm"
        assert query.args == ("file", "finder")
        assert query.all == "npm file finder"
    
    def test_command_only(self):
        query = tokenize("m")
        assert query.command == "m"
        assert query.args == ()
    
    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_blank_input(self, raw):
        """Blank input gives an empty command and no args."""
        query = tokenize(raw)
        
        assert query.command == ""
        assert query.args == ()
        assert query.all == raw
    
    def test_whitespace_runs(self):
        """Runs of whitespace separate tokens; ``all`` keeps the original spacing."""
        raw = "  tf   keras.layers.GRU\tdocs "
        query = tokenize(raw)
        
        assert query.command == "tf"
        assert query.args == ("keras.layers.GRU", "docs")
        assert query.all == raw
        assert query.args_text == "keras.layers.GRU docs"
    
    def test_no_case_normalization(self):
        query = tokenize("NPM Left-Pad")
        assert query.command == "NPM"
        assert query.args == ("Left-Pad",)
    
    @pytest.mark.parametrize("raw", ["npm file finder", "  a  b   c ", "x", "", "é  ü\tß"])
    def test_retokenizing_all_is_stable(self, raw):
        """Re-tokenizing ``all`` gives back command followed by args."""
        query = tokenize(raw)
        again = tokenize(" ".join(query.all.split()))
        
        assert again.command == query.command
        assert again.args == query.args
        tokens = [query.command, *query.args] if query.command else []
        assert " ".join(query.all.split()).split() == tokens
