"""Tests for the Moore curve L-system grammar."""

import pytest

from moorecurve.core.grammar import (
    AXIOM,
    PRODUCTION_RULES,
    axiom_length,
    commands_count,
    expand_axiom,
    expand_production,
)
from moorecurve.domain import Production


class TestCommandsCount:
    """Tests for commands_count function."""

    def test_non_positive_degree(self):
        """Test that empty productions have no commands."""
        assert commands_count(0) == 0
        assert commands_count(-3) == 0

    def test_small_degrees(self):
        """Test closed form (4^d - 1) / 3 * 7."""
        assert commands_count(1) == 7
        assert commands_count(2) == 35
        assert commands_count(3) == 147

    @pytest.mark.parametrize("degree", range(1, 15))
    def test_recurrence(self, degree):
        """Test c(d) = 4 * c(d - 1) + 7."""
        assert commands_count(degree) == 4 * commands_count(degree - 1) + 7

    @pytest.mark.parametrize("degree", range(0, 5))
    def test_matches_expansion(self, degree):
        """Test that the closed form matches the naive expansion length."""
        assert len(expand_production(Production.L, degree)) == commands_count(degree)
        assert len(expand_production(Production.R, degree)) == commands_count(degree)


class TestExpansion:
    """Tests for naive production expansion."""

    def test_degree_zero_is_empty(self):
        """Test base case L(0) = R(0) = ''."""
        assert expand_production(Production.L, 0) == ""
        assert expand_production(Production.R, 0) == ""

    def test_degree_one(self):
        """Test L(1) and R(1) with empty sub-productions."""
        assert expand_production(Production.L, 1) == "-F+F+F-"
        assert expand_production(Production.R, 1) == "+F-F-F+"

    def test_degree_two_starts_with_mirror(self):
        """Test that L(2) starts with -R(1) and R(2) with +L(1)."""
        assert expand_production(Production.L, 2).startswith("-+F-F-F+F+")
        assert expand_production(Production.R, 2).startswith("+-F+F+F-F-")

    def test_axiom_degree_one(self):
        """Test that the degree 1 axiom reduces to F+F+F."""
        assert expand_axiom(1) == "F+F+F"

    def test_axiom_degree_two(self):
        """Test the degree 2 axiom LFL+F+LFL."""
        lhs = "-F+F+F-"
        assert expand_axiom(2) == f"{lhs}F{lhs}+F+{lhs}F{lhs}"

    @pytest.mark.parametrize("degree", range(1, 6))
    def test_axiom_length(self, degree):
        """Test the axiom length formula 4 * c(d - 1) + 5."""
        assert len(expand_axiom(degree)) == axiom_length(degree)

    @pytest.mark.parametrize("degree", range(1, 6))
    def test_forward_count(self, degree):
        """Test that the axiom moves 4^d - 1 times."""
        assert expand_axiom(degree).count("F") == 4**degree - 1


class TestRules:
    """Tests for the rule tables."""

    def test_rule_bodies(self):
        """Test the symbols of both productions."""
        bodies = {
            production: "".join(symbol.value for symbol in symbols)
            for production, symbols in PRODUCTION_RULES.items()
        }
        assert bodies == {Production.L: "-RF+LFL+FR-", Production.R: "+LF-RFR-FL+"}

    def test_axiom_uses_only_l(self):
        """Test that the axiom references L four times and never R."""
        assert AXIOM.count(Production.L) == 4
        assert Production.R not in AXIOM
