"""This module :mod:`propnf.rules.rule` provides the abstract interface of
rewrite rules, the results of rule applications, and the composition of
rules.

A rule performs one local rewrite step at the root of an expression. It
never visits children on its own; this is done by :func:`.simplify`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Iterator, TypeAlias

from ..expr import χ, Conjunction, Disjunction, Expr

from ..support.tracing import trace  # noqa


@dataclass(frozen=True)
class Rewritten(Generic[χ]):
    """The result of a successful rewrite step. :attr:`expr` is the
    replacement.
    """

    expr: Expr[χ]

    @property
    def changed(self) -> bool:
        return True


@dataclass(frozen=True)
class Unchanged(Generic[χ]):
    """The result of a declined rewrite step. :attr:`expr` is the argument
    expression (or an equal one). This is a signal for continuing the search,
    not an error.
    """

    expr: Expr[χ]

    @property
    def changed(self) -> bool:
        return False


RuleResult: TypeAlias = Rewritten[χ] | Unchanged[χ]


class Rule(ABC):
    """A rewrite rule. Implementations must be free of side effects and must
    terminate on every finite input. Rule sets passed to :func:`.simplify`
    must in addition reach a fixpoint. Supplying rules that rewrite back and
    forth forever is an error of the caller, which is not detected.

    >>> from propnf import DefaultRule, NNFRule
    >>> DefaultRule() | NNFRule()
    CompositeRule(DefaultRule(), NNFRule())
    """

    @abstractmethod
    def apply(self, expr: Expr[χ]) -> RuleResult[χ]:
        """Rewrite the root of `expr` if the rule matches. Return
        :class:`Rewritten` with the replacement, or :class:`Unchanged` with
        `expr`.
        """
        ...

    def __call__(self, expr: Expr[χ]) -> RuleResult[χ]:
        return self.apply(expr)

    def __or__(self, other: Rule) -> CompositeRule:
        """Override the :obj:`| <object.__or__>` operator to apply
        :class:`CompositeRule`.
        """
        return CompositeRule(self, other)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'


class CompositeRule(Rule):
    """Left-biased composition of rules. The first rule that rewrites the
    root wins, and the remaining rules are not tried. Each rule is applied to
    the unchanged output of its predecessor.

    >>> from propnf import *
    >>> rule = CompositeRule(DefaultRule(), NNFRule())
    >>> a, b = Variable('a'), Variable('b')
    >>> rule.apply(Negation(Negation(Conjunction([a, b]))))
    Rewritten(expr=Conjunction([Variable('a'), Variable('b')]))
    >>> rule.apply(Negation(Conjunction([a, b])))
    Rewritten(expr=Disjunction([Negation(Variable('a')), Negation(Variable('b'))]))
    >>> rule.apply(a)
    Unchanged(expr=Variable('a'))

    With more than two rules, ``CompositeRule(A, B, C)`` behaves like
    ``CompositeRule(A, CompositeRule(B, C))``.
    """

    def __init__(self, *rules: Rule) -> None:
        if not rules:
            raise ValueError('CompositeRule needs at least one rule')
        for rule in rules:
            if not isinstance(rule, Rule):
                raise TypeError(f'{rule!r} is not a Rule')
        self.rules = rules

    def apply(self, expr: Expr[χ]) -> RuleResult[χ]:
        result: RuleResult[χ] = Unchanged(expr)
        for rule in self.rules:
            result = rule.apply(result.expr)
            if result.changed:
                break
        return result

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({", ".join(map(repr, self.rules))})'


def operands(expr: Expr[χ], op: type[Conjunction[χ]] | type[Disjunction[χ]]) \
        -> Iterator[Expr[χ]]:
    """Iterate over the arguments of `expr` if `expr` is an instance of `op`.
    Otherwise, yield `expr` itself. This splices nested arguments into a
    flat sequence without building intermediate lists.

    >>> from propnf import *
    >>> a, b = Variable('a'), Variable('b')
    >>> list(operands(Conjunction([a, b]), Conjunction))
    [Variable('a'), Variable('b')]
    >>> list(operands(Conjunction([a, b]), Disjunction))
    [Conjunction([Variable('a'), Variable('b')])]
    """
    if isinstance(expr, op):
        yield from expr.args
    else:
        yield expr
