"""This module :mod:`propnf.bnf` provides conjunctive and disjunctive normal
forms as lists of clauses over literals. In contrast to :mod:`propnf.rules`,
the translation :func:`to_cnf`, :func:`to_dnf` is a direct structural
recursion, which does not use :func:`.simplify`.

>>> from propnf import *
>>> a, b, c, d = map(Variable, 'abcd')
>>> cnf = to_cnf(Disjunction([Conjunction([a, b, c]), Negation(d)]))
>>> print(cnf)
(a or not d) and (b or not d) and (c or not d)
>>> cnf.to_expr() == simplify(Disjunction([Conjunction([a, b, c]), Negation(d)]), CNFRule())
True
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from itertools import product
from typing import ClassVar, Generic, Iterable, Iterator, Self, TypeAlias

from .expr import χ, Conjunction, Constant, Disjunction, Expr, Negation, Variable

from .support.tracing import trace  # noqa


@dataclass(frozen=True)
class Literal(Generic[χ]):
    """A variable identifier together with a flag indicating negation.

    >>> ~ Literal('a')
    Literal(ident='a', negated=True)
    >>> (~ Literal('a')).to_expr()
    Negation(Variable('a'))
    """

    ident: χ
    negated: bool = False

    def __invert__(self) -> Literal[χ]:
        return Literal(self.ident, not self.negated)

    def __str__(self) -> str:
        return f'not {self.ident}' if self.negated else str(self.ident)

    def to_expr(self) -> Expr[χ]:
        if self.negated:
            return Negation(Variable(self.ident))
        return Variable(self.ident)


Clause: TypeAlias = tuple[Literal[χ], ...]
"""A clause is a tuple of literals. It is read as a disjunction within a
:class:`ConjunctiveNormalForm` and as a conjunction within a
:class:`DisjunctiveNormalForm`.
"""


@dataclass(frozen=True)
class NormalForm(Generic[χ]):
    """Common base class of :class:`ConjunctiveNormalForm` and
    :class:`DisjunctiveNormalForm`. Clauses can be passed as arbitrary
    iterables. They are stored as tuples.
    """

    clauses: tuple[Clause[χ], ...]

    outer: ClassVar[type[Conjunction] | type[Disjunction]]

    def __post_init__(self) -> None:
        clauses = tuple(tuple(clause) for clause in self.clauses)
        for clause in clauses:
            for literal in clause:
                if not isinstance(literal, Literal):
                    raise TypeError(f'{literal!r} is not a Literal')
        object.__setattr__(self, 'clauses', clauses)

    def __iter__(self) -> Iterator[Clause[χ]]:
        return iter(self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def __str__(self) -> str:
        return str(self.to_expr())

    @abstractmethod
    def dual(self) -> NormalForm[χ]:
        ...

    def _negated_clauses(self) -> Iterator[Clause[χ]]:
        for clause in self.clauses:
            yield tuple(~ literal for literal in clause)

    def minimize(self) -> Self:
        """An equivalent normal form of the same kind with a small number of
        clauses and literals, computed with the Espresso heuristic. The order
        of clauses and literals in the result is not specified.

        .. seealso:: :func:`.espresso.espresso` -- the underlying procedure
        """
        from .espresso import espresso
        match self:
            case DisjunctiveNormalForm():
                return self.__class__(espresso(self.clauses))
            case ConjunctiveNormalForm():
                return self.__class__(self.dual().minimize()._negated_clauses())
            case _:
                assert False, type(self)

    def to_expr(self) -> Expr[χ]:
        """Translate into an :class:`.Expr` of depth at most 3, preserving
        the order of clauses and literals.
        """
        inner = self.outer.dual()
        return self.outer(inner(literal.to_expr() for literal in clause)
                          for clause in self.clauses)

    def variables(self) -> Iterator[χ]:
        """An iterator over the identifiers of all literals, in clause order
        and with repetitions.
        """
        for clause in self.clauses:
            for literal in clause:
                yield literal.ident


@dataclass(frozen=True)
class ConjunctiveNormalForm(NormalForm[χ]):
    """A conjunction of disjunctions of literals. There are no clauses for
    ``T``, and there is one empty clause for ``F``.

    >>> to_cnf(Constant(True))
    ConjunctiveNormalForm(clauses=())
    >>> to_cnf(Constant(False))
    ConjunctiveNormalForm(clauses=((),))
    """

    outer = Conjunction

    def dual(self) -> DisjunctiveNormalForm[χ]:
        """A disjunctive normal form of the negation of `self`.

        >>> from propnf import *
        >>> a, b, c = map(Variable, 'abc')
        >>> print(to_cnf(Conjunction([Disjunction([a, Negation(b)]), c])).dual())
        (not a and b) or (not c)
        """
        return DisjunctiveNormalForm(self._negated_clauses())


@dataclass(frozen=True)
class DisjunctiveNormalForm(NormalForm[χ]):
    """A disjunction of conjunctions of literals. There are no clauses for
    ``F``, and there is one empty clause for ``T``.
    """

    outer = Disjunction

    def dual(self) -> ConjunctiveNormalForm[χ]:
        """A conjunctive normal form of the negation of `self`.
        """
        return ConjunctiveNormalForm(self._negated_clauses())


def to_cnf(expr: Expr[χ]) -> ConjunctiveNormalForm[χ]:
    """Compute a conjunctive normal form of `expr`. Disjunctions are expanded
    by the cartesian product of the clauses of their arguments, with the last
    argument varying fastest. Nothing else is simplified; in particular,
    clauses are not deduplicated.

    >>> from propnf import *
    >>> a, b, c = map(Variable, 'abc')
    >>> print(to_cnf(Negation(Conjunction([a, Disjunction([b, Negation(c)])]))))
    (not a or not b) and (not a or c)
    """
    return ConjunctiveNormalForm(_clauses(expr, Conjunction))


def to_dnf(expr: Expr[χ]) -> DisjunctiveNormalForm[χ]:
    """Compute a disjunctive normal form of `expr`. This is dual to
    :func:`to_cnf`.

    >>> from propnf import *
    >>> a, b, c, d = map(Variable, 'abcd')
    >>> f = Disjunction([Conjunction([a, b, c]), Negation(d)])
    >>> print(to_dnf(f))
    (a and b and c) or (not d)
    >>> print(to_dnf(Conjunction([Disjunction([a, b]), Disjunction([c, d])])))
    (a and c) or (a and d) or (b and c) or (b and d)
    """
    return DisjunctiveNormalForm(_clauses(expr, Disjunction))


def _clauses(expr: Expr[χ], outer: type[Conjunction[χ]] | type[Disjunction[χ]]) \
        -> list[Clause[χ]]:
    # Clauses of a normal form of expr with toplevel operator outer.
    match expr:
        case Constant():
            if expr == outer.neutral_element():
                return []
            return [()]
        case Variable(ident=ident):
            return [(Literal(ident),)]
        case Negation(arg=arg):
            return [tuple(~ literal for literal in clause)
                    for clause in _clauses(arg, outer.dual())]
        case Conjunction() | Disjunction() if isinstance(expr, outer):
            return [clause for arg in expr.args for clause in _clauses(arg, outer)]
        case Conjunction() | Disjunction():
            return [_concat(combination)
                    for combination in product(*(_clauses(arg, outer) for arg in expr.args))]
        case _:
            assert False, type(expr)


def _concat(clauses: Iterable[Clause[χ]]) -> Clause[χ]:
    return tuple(literal for clause in clauses for literal in clause)
