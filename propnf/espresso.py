"""This module :mod:`propnf.espresso` provides two-level minimization of
disjunctive normal forms using the famous Espresso algorithm. Technically, we
use the python package `PyEDA <https://pyeda.readthedocs.io/en/latest/>`_,
which in turn wraps a C extension of the Berkeley Espresso library
[BraytonEtAl-1984]_. Variable identifiers are abstracted to PyEDA variables
and mapped back afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable

from pyeda.boolalg import expr, minimization  # type: ignore

from .bnf import Clause, Literal
from .expr import χ

from .support.tracing import trace  # noqa


@dataclass
class BooleanAbstraction(Generic[χ]):
    """Translation of clauses into PyEDA expressions and back. Each instance
    maintains its own mapping of identifiers to PyEDA variables.
    """

    _index: int = 0
    _idents_to_pyeda: dict[χ, expr.Variable] = field(default_factory=dict)
    _pyeda_to_idents: dict[expr.Variable, χ] = field(default_factory=dict)

    def from_pyeda(self, f: expr.Expression) -> list[Clause[χ]]:
        """The clauses of a PyEDA expression in disjunctive normal form.
        """
        match f:
            case expr._Zero():
                return []
            case expr._One():
                return [()]
            case expr.OrOp(xs=xs):
                return [self._from_pyeda_conjunction(x) for x in xs]
            case _:
                return [self._from_pyeda_conjunction(f)]

    def _from_pyeda_conjunction(self, f: expr.Expression) -> Clause[χ]:
        match f:
            case expr.AndOp(xs=xs):
                return tuple(self._from_pyeda_literal(x) for x in xs)
            case _:
                return (self._from_pyeda_literal(f),)

    def _from_pyeda_literal(self, f: expr.Expression) -> Literal[χ]:
        match f:
            case expr.Variable():
                return Literal(self._pyeda_to_idents[f])
            case expr.Complement():
                # The complement of a variable is not covered by our
                # dictionary.
                return Literal(self._pyeda_to_idents[~ f], negated=True)
            case _:
                assert False, f

    def to_pyeda(self, clauses: Iterable[Clause[χ]]) -> expr.Expression:
        """The disjunction of the conjunctions of the literals in `clauses`
        as a PyEDA expression.
        """
        terms = []
        for clause in clauses:
            literals = [self._to_pyeda_literal(literal) for literal in clause]
            terms.append(expr.And(*literals) if literals else expr.One)
        return expr.Or(*terms) if terms else expr.Zero

    def _to_pyeda_literal(self, literal: Literal[χ]) -> expr.Expression:
        if literal.ident not in self._idents_to_pyeda:
            new_exprvar = expr.exprvar('v', self._index)
            self._index += 1
            self._idents_to_pyeda[literal.ident] = new_exprvar
            self._pyeda_to_idents[new_exprvar] = literal.ident
        variable = self._idents_to_pyeda[literal.ident]
        return ~ variable if literal.negated else variable


def espresso(clauses: Iterable[Clause[χ]]) -> list[Clause[χ]]:
    """Minimize the disjunctive normal form given by `clauses`.

    >>> a, b, c = Literal('a'), Literal('b'), Literal('c')
    >>> espresso([(a, b), (a, ~ b)])
    [(Literal(ident='a', negated=False),)]
    >>> espresso([(a, ~ a)])
    []
    """
    abstraction: BooleanAbstraction[χ] = BooleanAbstraction()
    f = abstraction.to_pyeda(clauses).to_dnf()
    if not isinstance(f, expr.Constant):
        f, = minimization.espresso_exprs(f)
    return abstraction.from_pyeda(f)
