"""Distributive expansion towards conjunctive and disjunctive normal forms.

Both rules compute the full cartesian product of the arguments of their
children and may therefore grow expressions exponentially. For `k` children
with `n` arguments each, the result has ``n ** k`` clauses:

>>> from propnf import *
>>> x = [[Variable(f'x{i}{j}') for j in range(3)] for i in range(4)]
>>> f = Disjunction(Conjunction(row) for row in x)
>>> len(CNFRule().apply(f).expr.args)
81
"""

from __future__ import annotations

from itertools import product
from typing import ClassVar

from ..expr import χ, Conjunction, Disjunction, Expr
from .rule import operands, Rewritten, Rule, RuleResult, Unchanged

from ..support.tracing import trace  # noqa


class DistributiveRule(Rule):
    """Distribute the dual of :attr:`outer` over :attr:`outer`. Subclasses
    fix :attr:`outer`.
    """

    outer: ClassVar[type[Conjunction] | type[Disjunction]]

    def apply(self, expr: Expr[χ]) -> RuleResult[χ]:
        inner = self.outer.dual()
        if not isinstance(expr, self.outer):
            return Unchanged(expr)
        if not any(isinstance(arg, inner) for arg in expr.args):
            return Unchanged(expr)
        # The last argument varies fastest.
        choices = (tuple(operands(arg, inner)) for arg in expr.args)
        return Rewritten(inner(self.outer(combination) for combination in product(*choices)))


class CNFRule(DistributiveRule):
    """Transform a disjunction with at least one conjunction among its
    arguments into a conjunction of disjunctions. Arguments that are not
    conjunctions count as singleton conjunctions.

    >>> from propnf import *
    >>> a, b, c, d = map(Variable, 'abcd')
    >>> print(CNFRule().apply(Disjunction([Conjunction([a, b]), c, Conjunction([d])])).expr)
    (a or c or d) and (b or c or d)
    >>> CNFRule().apply(Disjunction([a, Disjunction([b, c])]))
    Unchanged(expr=Disjunction([Variable('a'), Disjunction([Variable('b'), Variable('c')])]))
    """

    outer = Disjunction


class DNFRule(DistributiveRule):
    """Transform a conjunction with at least one disjunction among its
    arguments into a disjunction of conjunctions. This is dual to
    :class:`CNFRule`.

    >>> from propnf import *
    >>> a, b, c = map(Variable, 'abc')
    >>> print(DNFRule().apply(Conjunction([Disjunction([a, b]), Negation(c)])).expr)
    (a and not c) or (b and not c)
    """

    outer = Conjunction
