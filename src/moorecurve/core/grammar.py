"""L-system grammar of the Moore curve.

The curve is described by two productions and an axiom over the symbols
'-' (turn left), '+' (turn right) and 'F' (forward):

    L(i) = -R(i-1)F+L(i-1)FL(i-1)+FR(i-1)-
    R(i) = +L(i-1)F-R(i-1)FR(i-1)-FL(i-1)+
    L(0) = R(0) = ""

    axiom(N) = L(N-1) F L(N-1) + F + L(N-1) F L(N-1)

The rule tables below are shared by every generator that walks the grammar.
"""

from moorecurve.domain import Command, Production

Symbol = Command | Production

_L_RULE: tuple[Symbol, ...] = (
    Command.TURN_LEFT,
    Production.R,
    Command.FORWARD,
    Command.TURN_RIGHT,
    Production.L,
    Command.FORWARD,
    Production.L,
    Command.TURN_RIGHT,
    Command.FORWARD,
    Production.R,
    Command.TURN_LEFT,
)

# R is L with the productions and the turns exchanged
PRODUCTION_RULES: dict[Production, tuple[Symbol, ...]] = {
    Production.L: _L_RULE,
    Production.R: tuple(symbol.mirror for symbol in _L_RULE),
}

AXIOM: tuple[Symbol, ...] = (
    Production.L,
    Command.FORWARD,
    Production.L,
    Command.TURN_RIGHT,
    Command.FORWARD,
    Command.TURN_RIGHT,
    Production.L,
    Command.FORWARD,
    Production.L,
)


def commands_count(degree: int) -> int:
    """Number of command symbols in L(degree) or R(degree).

    Each production holds 7 fixed symbols plus four sub-productions, so
    c(d) = 4 * c(d - 1) + 7, which solves to (4^d - 1) / 3 * 7.

    Args:
        degree: Production degree

    Returns:
        Symbol count, 0 for degree <= 0
    """
    if degree <= 0:
        return 0
    return ((1 << (2 * degree)) - 1) // 3 * 7


def axiom_length(degree: int) -> int:
    """Number of command symbols in the axiom of a degree-N curve."""
    return 4 * commands_count(degree - 1) + 5


def expand_production(production: Production, degree: int) -> str:
    """Expand a production naively by recursive substitution.

    Exponential in degree; used as a reference for small degrees.

    Args:
        production: Production to expand
        degree: Production degree

    Returns:
        The production's command string
    """
    if degree <= 0:
        return ""
    return "".join(
        expand_production(symbol, degree - 1)
        if isinstance(symbol, Production)
        else symbol.value
        for symbol in PRODUCTION_RULES[production]
    )


def expand_axiom(degree: int) -> str:
    """Expand the axiom of a degree-N curve naively."""
    return "".join(
        expand_production(symbol, degree - 1)
        if isinstance(symbol, Production)
        else symbol.value
        for symbol in AXIOM
    )
