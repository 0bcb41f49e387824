"""
Tests for the Command-Line Interface
"""

import json

import pytest
from inequality_chains import __version__
from inequality_chains.cli import main, parse_tokens


class TestParseTokens:
    """Test token splitting."""

    def test_pairs(self):
        """Test TERM SYM TERM SYM TERM."""
        first, pairs = parse_tokens(["1", "<", "2", "=", "2"], int)
        assert first == 1
        assert pairs == [("<", 2), ("=", 2)]

    @pytest.mark.parametrize("tokens", [["1"], ["1", "<"], ["1", "<", "2", "<"]])
    def test_malformed(self, tokens):
        """Test wrong token counts."""
        with pytest.raises(ValueError):
            parse_tokens(tokens, int)


class TestCommands:
    """Test sub-commands end to end."""

    def test_statements(self, capsys):
        """Test the example chain."""
        code = main(["statements", "3", "<=", "4", "<", "7", "=", "7", "<", "8", "--check"])
        out = capsys.readouterr().out
        assert code == 0
        assert "3 ≤ 4 < 7 = 7 < 8" in out
        assert "Relation flow: <" in out
        assert "Global:        3 < 8  [holds]" in out
        assert "Weak global:   3 ≤ 8  [holds]" in out
        assert "3 ≤ 4 ∧ 4 < 7 ∧ 7 = 7 ∧ 7 < 8" in out

    def test_statements_json(self, capsys):
        """Test canonical JSON output."""
        code = main(["statements", "5", ">", "3", "--json", "--check"])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["relation_flow"] == ">"
        assert data["chain"]["shape"] == "descending"
        assert data["holds"] == {"global": True, "weak_global": True, "total": True}
        assert len(data["fingerprint"]) == 64

    def test_auto_domain(self, capsys):
        """Test mixed-type terms are promoted."""
        code = main(["statements", "1", "<", "3/2", "<", "2.5", "--domain", "auto", "--check"])
        out = capsys.readouterr().out
        assert code == 0
        assert "[fails]" not in out

    def test_cross_family(self, capsys):
        """Test mixing families is a usage error."""
        code = main(["statements", "1", "<", "2", ">", "0"])
        out = capsys.readouterr().out
        assert code == 2
        assert out.startswith("Error:")
        assert "AscendingChain" in out

    def test_bad_term(self, capsys):
        """Test a term outside the domain."""
        code = main(["statements", "1", "<", "x"])
        assert code == 2
        assert "Error:" in capsys.readouterr().out

    def test_unknown_symbol(self, capsys):
        """Test an unknown relation symbol."""
        code = main(["statements", "1", "!=", "2"])
        assert code == 2

    @pytest.mark.parametrize("domain", ["integer", "rational", "real", "auto"])
    def test_laws(self, capsys, domain):
        """Test reference instances pass the law check."""
        code = main(["laws", "--domain", domain])
        assert code == 0
        assert "All order laws hold" in capsys.readouterr().out

    def test_version(self, capsys):
        """Test version output."""
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command(self, capsys):
        """Test help is printed without a command."""
        assert main([]) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
