r"""Rewrite rules on propositional expressions.

A :class:`Rule` rewrites the root of an expression or declines. Rules are
combined with :class:`CompositeRule`, which tries them in order. The
traversal of the whole expression up to a fixpoint is done by
:func:`propnf.simplify.simplify`.

+-----------------------+-----------------------------------------------+
| rule                  | rewrites                                      |
+-----------------------+-----------------------------------------------+
| :class:`DefaultRule`  | double negation, nested :math:`\land`,        |
|                       | nested :math:`\lor`                           |
+-----------------------+-----------------------------------------------+
| :class:`NNFRule`      | De Morgan                                     |
+-----------------------+-----------------------------------------------+
| :class:`ConstantRule` | truth values, trivial arities                 |
+-----------------------+-----------------------------------------------+
| :class:`CNFRule`      | :math:`\lor` over :math:`\land`               |
+-----------------------+-----------------------------------------------+
| :class:`DNFRule`      | :math:`\land` over :math:`\lor`               |
+-----------------------+-----------------------------------------------+

Frequently used compositions are available as :data:`NNF`, :data:`CNF`, and
:data:`DNF`.
"""

from .rule import CompositeRule, operands, Rewritten, Rule, RuleResult, Unchanged  # noqa

from .default import ConstantRule, DefaultRule, NNFRule  # noqa

from .distributive import CNFRule, DistributiveRule, DNFRule  # noqa


NNF = CompositeRule(DefaultRule(), NNFRule())
"""Flattening and negation push-down. The fixpoint is a flat negation normal
form.
"""

CNF = CompositeRule(DefaultRule(), NNFRule(), CNFRule())
"""The fixpoint is a conjunctive normal form.
"""

DNF = CompositeRule(DefaultRule(), NNFRule(), DNFRule())
"""The fixpoint is a disjunctive normal form.
"""


__all__ = [
    'Rule', 'CompositeRule', 'Rewritten', 'Unchanged',

    'DefaultRule', 'NNFRule', 'ConstantRule', 'CNFRule', 'DNFRule',

    'NNF', 'CNF', 'DNF'
]
