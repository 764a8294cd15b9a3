"""Local rules that do not change the number of variable occurrences:
flattening of nested operators, elimination of double negations, De Morgan,
and truth values. Flattening and negation push-down are separate rules,
which can be combined with :class:`.CompositeRule`.
"""

from __future__ import annotations

from ..expr import χ, Conjunction, Constant, Disjunction, Expr, Negation
from .rule import operands, Rewritten, Rule, RuleResult, Unchanged

from ..support.tracing import trace  # noqa


class DefaultRule(Rule):
    """Eliminate double negations and flatten nested conjunctions and
    disjunctions. The following rewrites are tried in this order:

    1. Transform ``Negation(Negation(arg))`` into ``arg``.

    2. Transform ``Conjunction([..., Conjunction(args), ...])`` into
       ``Conjunction([..., *args, ...])``. All direct children that are
       conjunctions are spliced within one step.

    3. The same for ``Disjunction`` instead of ``Conjunction``.

    >>> from propnf import *
    >>> a, b, c = map(Variable, 'abc')
    >>> DefaultRule().apply(Conjunction([a, Conjunction([b, Conjunction([c])])]))
    Rewritten(expr=Conjunction([Variable('a'), Variable('b'), Conjunction([Variable('c')])]))
    >>> DefaultRule().apply(Negation(Conjunction([a, b])))
    Unchanged(expr=Negation(Conjunction([Variable('a'), Variable('b')])))
    """

    def apply(self, expr: Expr[χ]) -> RuleResult[χ]:
        match expr:
            case Negation(arg=Negation(arg=arg)):
                return Rewritten(arg)
            case Conjunction(args=args) | Disjunction(args=args) \
                    if any(arg.op is expr.op for arg in args):
                return Rewritten(expr.op(
                    flat_arg for arg in args for flat_arg in operands(arg, expr.op)))
        return Unchanged(expr)


class NNFRule(Rule):
    """Push a negation through a conjunction or disjunction using De Morgan's
    laws:

    1. Transform ``Negation(Conjunction(args))`` into
       ``Disjunction([Negation(arg) for arg in args])``.

    2. Transform ``Negation(Disjunction(args))`` into
       ``Conjunction([Negation(arg) for arg in args])``.

    Together with :class:`DefaultRule`, exhaustive application yields a
    negation normal form.

    >>> from propnf import *
    >>> a, b = Variable('a'), Variable('b')
    >>> NNFRule().apply(Negation(Disjunction([a, Negation(b)])))
    Rewritten(expr=Conjunction([Negation(Variable('a')), Negation(Negation(Variable('b')))]))
    """

    def apply(self, expr: Expr[χ]) -> RuleResult[χ]:
        match expr:
            case Negation(arg=Conjunction() | Disjunction() as arg):
                return Rewritten(arg.dual()(Negation(x) for x in arg.args))
        return Unchanged(expr)


class ConstantRule(Rule):
    """Evaluate truth values:

    1. Transform ``Negation(T)`` into ``F``, and ``Negation(F)`` into ``T``.

    2. Evaluate ``Conjunction([..., F, ...])`` to ``F``, and
       ``Disjunction([..., T, ...])`` to ``T``.

    3. Remove ``T`` from conjunctions, and ``F`` from disjunctions.

    4. Evaluate ``Conjunction([])`` to ``T``, and ``Disjunction([])`` to
       ``F``.

    5. Transform conjunctions and disjunctions with only one argument into
       that argument.

    Every rewrite strictly decreases the number of nodes.

    >>> from propnf import *
    >>> a = Variable('a')
    >>> ConstantRule().apply(Disjunction([a, F, Negation(F)]))
    Rewritten(expr=Disjunction([Variable('a'), Negation(F)]))
    >>> ConstantRule().apply(Disjunction([a, F, T]))
    Rewritten(expr=T)
    >>> ConstantRule().apply(Conjunction([a]))
    Rewritten(expr=Variable('a'))
    """

    def apply(self, expr: Expr[χ]) -> RuleResult[χ]:
        match expr:
            case Negation(arg=Constant(value=value)):
                return Rewritten(Constant(not value))
            case Conjunction(args=args) | Disjunction(args=args):
                definite = expr.definite_element()
                neutral = expr.neutral_element()
                if definite in args:
                    return Rewritten(definite)
                if neutral in args:
                    return Rewritten(expr.op(arg for arg in args if arg != neutral))
                if not args:
                    return Rewritten(neutral)
                if len(args) == 1:
                    return Rewritten(args[0])
        return Unchanged(expr)
