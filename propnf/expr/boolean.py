"""We introduce the concrete node types of propositional formulas as
subclasses of :class:`.Expr`. Constructors never simplify. In particular,
nested conjunctions and disjunctions are kept as they are, and
double negations are not removed. This is the business of the rules in
:mod:`propnf.rules`.
"""
from __future__ import annotations

from typing import Any, final, Iterable

from .expr import χ, Expr

from ..support.tracing import trace  # noqa


@final
class Constant(Expr[χ]):
    r"""A class whose instances are the truth values :math:`\top` and
    :math:`\bot`. Module level instances :data:`T` and :data:`F` are
    provided for convenience.

    >>> Constant(True)
    T
    >>> Constant(False) == F
    True
    >>> Constant(0)
    Traceback (most recent call last):
    ...
    TypeError: 0 is not a bool
    """

    def __init__(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f'{value!r} is not a bool')
        super().__init__()
        self._args = (value,)

    @property
    def value(self) -> bool:
        """The truth value.
        """
        return self.args[0]


T: Constant[Any] = Constant(True)
"""Support use as a constant without parentheses.

>>> T == Constant(True)
True
"""

F: Constant[Any] = Constant(False)
"""Support use as a constant without parentheses.

>>> F.value
False
"""


@final
class Variable(Expr[χ]):
    """A class whose instances are propositional variables. Identifiers can be
    of any hashable type.

    >>> Variable('a')
    Variable('a')
    >>> Variable(1) == Variable(1)
    True
    """

    def __init__(self, ident: χ) -> None:
        super().__init__()
        self._args = (ident,)

    @property
    def ident(self) -> χ:
        """The identifier of the variable.
        """
        return self.args[0]


@final
class Negation(Expr[χ]):
    r"""A class whose instances are negated expressions in the sense that their
    toplevel operator is :math:`\neg`.

    >>> Negation(Negation(Variable('a')))
    Negation(Negation(Variable('a')))
    """

    def __init__(self, arg: Expr[χ]) -> None:
        if not isinstance(arg, Expr):
            raise TypeError(f'{arg!r} is not an expression')
        super().__init__()
        self._args = (arg,)

    @property
    def arg(self) -> Expr[χ]:
        """The one argument of the operator :math:`\\neg`.
        """
        return self.args[0]


class _JunctionMixin:

    @staticmethod
    def _check(args: Iterable[Any]) -> tuple[Expr, ...]:
        args = tuple(args)
        for arg in args:
            if not isinstance(arg, Expr):
                raise TypeError(f'{arg!r} is not an expression')
        return args


@final
class Conjunction(_JunctionMixin, Expr[χ]):
    r"""A class whose instances are conjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\wedge` of
    arbitrary arity. The order of arguments is kept.

    >>> Conjunction([Variable('a'), Conjunction([])])
    Conjunction([Variable('a'), Conjunction([])])
    >>> Conjunction(Variable(i) for i in range(2))
    Conjunction([Variable(0), Variable(1)])
    """

    def __init__(self, args: Iterable[Expr[χ]] = ()) -> None:
        super().__init__()
        self._args = self._check(args)

    @classmethod
    def dual(cls) -> type[Disjunction[χ]]:
        r"""A class method yielding the class :class:`Disjunction`, which
        implements the dual operator :math:`\vee` of :math:`\wedge`.
        """
        return Disjunction

    @classmethod
    def definite_element(cls) -> Constant[χ]:
        r"""A class method yielding :data:`F`, which makes every conjunction
        containing it false. The definite is the dual of the neutral.
        """
        return Constant(False)

    @classmethod
    def neutral_element(cls) -> Constant[χ]:
        r"""A class method yielding :data:`T`, which is the value of the empty
        conjunction.
        """
        return Constant(True)


@final
class Disjunction(_JunctionMixin, Expr[χ]):
    r"""A class whose instances are disjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\vee` of
    arbitrary arity. The order of arguments is kept.

    >>> Disjunction([Variable('a'), Negation(Variable('b'))])
    Disjunction([Variable('a'), Negation(Variable('b'))])
    """

    def __init__(self, args: Iterable[Expr[χ]] = ()) -> None:
        super().__init__()
        self._args = self._check(args)

    @classmethod
    def dual(cls) -> type[Conjunction[χ]]:
        r"""A class method yielding the class :class:`Conjunction`, which
        implements the dual operator :math:`\wedge` of :math:`\vee`.
        """
        return Conjunction

    @classmethod
    def definite_element(cls) -> Constant[χ]:
        r"""A class method yielding :data:`T`, which makes every disjunction
        containing it true.
        """
        return Constant(True)

    @classmethod
    def neutral_element(cls) -> Constant[χ]:
        r"""A class method yielding :data:`F`, which is the value of the empty
        disjunction.
        """
        return Constant(False)
