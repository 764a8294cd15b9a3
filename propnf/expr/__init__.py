r"""Implementation of propositional formulas as immutable expression trees.

An abstract base class :class:`Expr` implements representations of and
methods on propositional formulas. Operators are mapped to classes as
follows:

+----------------------------+-------------------+----------------------+----------------------+
| :math:`\top`, :math:`\bot` | :math:`\lnot`     | :math:`\land`        | :math:`\lor`         |
+----------------------------+-------------------+----------------------+----------------------+
| :class:`Constant`          | :class:`Negation` | :class:`Conjunction` | :class:`Disjunction` |
+----------------------------+-------------------+----------------------+----------------------+

Atomic propositions are instances of :class:`Variable`. Its identifiers can be
of any hashable type:

>>> f = Disjunction([Conjunction([Variable('a'), Variable('b')]), Negation(Variable('c'))])
>>> print(f)
(a and b) or not c
>>> print(Conjunction([Variable(1), Negation(Variable(2))]))
1 and not 2

Conjunction and disjunction have arbitrary arity. Their arguments are kept in
the given order, and nothing is simplified during construction:

>>> Conjunction([Conjunction([]), Negation(Negation(T))])
Conjunction([Conjunction([]), Negation(Negation(T))])

Rewriting these expressions into normal forms is the business of
:mod:`propnf.rules` and :mod:`propnf.simplify`.
"""  # noqa

from .expr import χ, Expr  # noqa

from .boolean import Conjunction, Constant, Disjunction, Negation, Variable, T, F  # noqa


__all__ = [
    'Expr',

    'Constant', 'Variable', 'Negation', 'Conjunction', 'Disjunction', 'T', 'F'
]
