from __future__ import annotations

from abc import abstractmethod
from typing import Any, Final, Generic, Iterator, Optional, Self, TypeVar
from typing_extensions import TypeIs

from IPython.lib import pretty
import sympy

from ..support.tracing import trace  # noqa


χ = TypeVar('χ')
"""A type variable denoting the type of variable identifiers. Identifiers
must be hashable. Typical choices are :class:`str` and :class:`int`. Identifiers
of different types are never equal as variables, e.g., ``Variable(1)`` and
``Variable(True)``.
"""


class Expr(Generic[χ]):
    r"""This abstract base class implements representations of and methods on
    propositional formulas recursively built from:

    1. Truth values :math:`\top` and :math:`\bot`

    2. Variables

    3. Negation :math:`\lnot`

    4. Conjunction :math:`\land` and disjunction :math:`\lor` of arbitrary
       arity, including arity 0

    As an abstract base class, :class:`Expr` is not supposed to have
    instances itself. Instances of its subclasses are immutable. Equality
    is structural and respects the order of arguments:

    >>> from propnf import Conjunction, Variable
    >>> a, b = Variable('a'), Variable('b')
    >>> Conjunction([a, b]) == Conjunction([a, b])
    True
    >>> Conjunction([a, b]) == Conjunction([b, a])
    False

    .. note::

        :class:`Expr` depends on a type variable :data:`.χ` for the type of
        variable identifiers. It appears in type annotations used by static
        type checkers but is not relevant for interactive use or use as a
        library.
    """

    _args: tuple[Any, ...]
    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property can be used with instances of subclasses of
        :class:`Expr`. It yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of an expression as a tuple. For
        :class:`.Conjunction`, :class:`.Disjunction`, and :class:`.Negation`
        these are expressions. For :class:`.Constant` it is the truth value,
        and for :class:`.Variable` it is the identifier.
        """
        return self._args

    def __and__(self, other: Expr[χ]) -> Expr[χ]:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`.Conjunction`. Nested conjunctions are not flattened.

        >>> from propnf import Variable
        >>> a, b, c = Variable('a'), Variable('b'), Variable('c')
        >>> a & b & c
        Conjunction([Conjunction([Variable('a'), Variable('b')]), Variable('c')])
        """
        return Conjunction([self, other])

    def __eq__(self, other: object) -> bool:
        """A recursive test for structural equality of `self` and `other`.

        >>> from propnf import Negation, Variable
        >>> e1 = Negation(Variable('a'))
        >>> e2 = Negation(Variable('a'))
        >>> e1 == e2
        True
        >>> e1 is e2
        False
        """
        if self is other:
            return True
        if not isinstance(other, Expr):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        if Expr.is_variable(self):
            # Identifiers of different types are different, e.g., 1 and True.
            return type(self.ident) is type(other.args[0]) and self.ident == other.args[0]
        return self.args == other.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__name__, self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """Subclasses set `_args` after calling this initializer.
        """
        self._hash = None

    def __invert__(self) -> Expr[χ]:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`.Negation`.

        >>> from propnf import Variable
        >>> ~ Variable('a')
        Negation(Variable('a'))
        """
        return Negation(self)

    def __or__(self, other: Expr[χ]) -> Expr[χ]:
        """Override the :obj:`| <object.__or__>` operator to apply
        :class:`.Disjunction`. Nested disjunctions are not flattened.

        >>> from propnf import Variable
        >>> Variable('a') | Variable('b')
        Disjunction([Variable('a'), Variable('b')])
        """
        return Disjunction([self, other])

    def __repr__(self) -> str:
        """A representation of `self` that is suitable for use as an input.
        """
        match self:
            case Constant(value=value):
                return 'T' if value else 'F'
            case Variable(ident=ident):
                return f'Variable({ident!r})'
            case Negation(arg=arg):
                return f'Negation({arg!r})'
            case Conjunction() | Disjunction():
                return f'{self.op.__name__}([{", ".join(map(repr, self.args))}])'
            case _:
                assert False, type(self)

    def __str__(self) -> str:
        """Infix representation used in printing.

        >>> from propnf import *
        >>> a, b, c, d = map(Variable, 'abcd')
        >>> print(Disjunction([Conjunction([a, Conjunction([b, c])]), Negation(d)]))
        (a and (b and c)) or not d
        >>> print(Negation(Negation(Conjunction([a, T]))))
        not not (a and T)
        """
        SYMBOL: Final = {Conjunction: 'and', Disjunction: 'or', Negation: 'not'}
        PRECEDENCE: Final = {Conjunction: 50, Disjunction: 50, Negation: 99}
        SPACING: Final = ' '
        match self:
            case Conjunction() | Disjunction():
                if not self.args:
                    return f'{SYMBOL[self.op]}()'
                L = []
                for arg in self.args:
                    arg_as_str = str(arg)
                    if PRECEDENCE[self.op] >= PRECEDENCE.get(arg.op, 100):
                        arg_as_str = f'({arg_as_str})'
                    L.append(arg_as_str)
                return f'{SPACING}{SYMBOL[self.op]}{SPACING}'.join(L)
            case Negation(arg=arg):
                arg_as_str = str(arg)
                if arg.op in (Conjunction, Disjunction):
                    arg_as_str = f'({arg_as_str})'
                return f'{SYMBOL[Negation]}{SPACING}{arg_as_str}'
            case Constant(value=value):
                return 'T' if value else 'F'
            case Variable(ident=ident):
                return str(ident)
            case _:
                assert False, type(self)

    def as_latex(self) -> str:
        r"""LaTeX representation as a string, which can be used elsewhere.

        >>> from propnf import *
        >>> a, b = Variable('a'), Variable('b')
        >>> Disjunction([Conjunction([a, b]), Negation(a), F]).as_latex()
        '(a \\, \\wedge \\, b) \\, \\vee \\, \\neg a \\, \\vee \\, \\bot'

        .. seealso:: :meth:`_repr_latex_` -- LaTeX representation for Jupyter notebooks
        """
        SYMBOL: Final = {Conjunction: '\\wedge', Disjunction: '\\vee', Negation: '\\neg'}
        PRECEDENCE: Final = {Conjunction: 50, Disjunction: 50, Negation: 99}
        SPACING: Final = ' \\, '
        match self:
            case Conjunction() | Disjunction():
                if not self.args:
                    return self.neutral_element().as_latex()
                L = []
                for arg in self.args:
                    arg_as_latex = arg.as_latex()
                    if PRECEDENCE[self.op] >= PRECEDENCE.get(arg.op, 100):
                        arg_as_latex = f'({arg_as_latex})'
                    L.append(arg_as_latex)
                return f'{SPACING}{SYMBOL[self.op]}{SPACING}'.join(L)
            case Negation(arg=arg):
                arg_as_latex = arg.as_latex()
                if arg.op in (Conjunction, Disjunction):
                    arg_as_latex = f'({arg_as_latex})'
                return f'{SYMBOL[Negation]} {arg_as_latex}'
            case Constant(value=value):
                return '\\top' if value else '\\bot'
            case Variable(ident=ident):
                return str(ident)
            case _:
                assert False, type(self)

    def atoms(self) -> Iterator[Variable[χ]]:
        """An iterator over all occurrences of variables in `self`, in tree
        order and with repetitions. Compare :meth:`variables`, which yields
        the identifiers.

        >>> from propnf import *
        >>> a, b = Variable('a'), Variable('b')
        >>> list(Conjunction([a, Negation(Disjunction([b, a, T]))]).atoms())
        [Variable('a'), Variable('b'), Variable('a')]
        """
        match self:
            case Constant():
                yield from ()
            case Variable():
                yield self
            case Negation() | Conjunction() | Disjunction():
                for arg in self.args:
                    yield from arg.atoms()
            case _:
                assert False, type(self)

    def depth(self) -> int:
        """The nesting depth of `self`. Constants and variables have depth 0.

        >>> from propnf import *
        >>> a, b = Variable('a'), Variable('b')
        >>> Conjunction([a, Negation(Disjunction([a, b]))]).depth()
        3
        >>> Conjunction([]).depth()
        1
        """
        match self:
            case Constant() | Variable():
                return 0
            case Negation(arg=arg):
                return arg.depth() + 1
            case Conjunction() | Disjunction():
                return max((arg.depth() for arg in self.args), default=0) + 1
            case _:
                assert False, type(self)

    @staticmethod
    def is_conjunction(f: Expr[χ]) -> TypeIs[Conjunction[χ]]:
        return isinstance(f, Conjunction)

    @staticmethod
    def is_constant(f: Expr[χ]) -> TypeIs[Constant[χ]]:
        return isinstance(f, Constant)

    @staticmethod
    def is_disjunction(f: Expr[χ]) -> TypeIs[Disjunction[χ]]:
        return isinstance(f, Disjunction)

    @staticmethod
    def is_negation(f: Expr[χ]) -> TypeIs[Negation[χ]]:
        return isinstance(f, Negation)

    @staticmethod
    def is_variable(f: Expr[χ]) -> TypeIs[Variable[χ]]:
        return isinstance(f, Variable)

    def is_cnf(self) -> bool:
        """Test whether `self` is in conjunctive normal form, i.e., a
        conjunction of clauses, where a clause is a disjunction of literals.
        Literals and single clauses count as degenerate conjunctions.

        >>> from propnf import *
        >>> a, b, c = map(Variable, 'abc')
        >>> Conjunction([Disjunction([a, Negation(b)]), c]).is_cnf()
        True
        >>> Disjunction([Conjunction([a, b]), c]).is_cnf()
        False
        """
        if _is_clause(self, Disjunction):
            return True
        return Expr.is_conjunction(self) \
            and all(_is_clause(arg, Disjunction) for arg in self.args)

    def is_dnf(self) -> bool:
        """Test whether `self` is in disjunctive normal form. This is dual to
        :meth:`is_cnf`.

        >>> from propnf import *
        >>> a, b, c = map(Variable, 'abc')
        >>> Disjunction([Conjunction([a, Negation(b)]), c]).is_dnf()
        True
        >>> Negation(Disjunction([a, b])).is_dnf()
        False
        """
        if _is_clause(self, Conjunction):
            return True
        return Expr.is_disjunction(self) \
            and all(_is_clause(arg, Conjunction) for arg in self.args)

    def is_literal(self) -> bool:
        """Test whether `self` is a constant, a variable, or the negation of a
        constant or a variable.
        """
        if Expr.is_negation(self):
            return isinstance(self.arg, (Constant, Variable))
        return isinstance(self, (Constant, Variable))

    def is_nnf(self) -> bool:
        """Test whether `self` is in negation normal form, i.e., negation is
        only applied to constants and variables.

        >>> from propnf import *
        >>> a, b = Variable('a'), Variable('b')
        >>> Disjunction([Negation(a), Conjunction([b, Negation(T)])]).is_nnf()
        True
        >>> Negation(Negation(a)).is_nnf()
        False
        """
        match self:
            case Constant() | Variable():
                return True
            case Negation():
                return self.is_literal()
            case Conjunction() | Disjunction():
                return all(arg.is_nnf() for arg in self.args)
            case _:
                assert False, type(self)

    def _repr_latex_(self) -> str:
        """A LaTeX representation for Jupyter notebooks. In general, the
        underlying method :meth:`as_latex` should be used instead.
        """
        return f'$\\displaystyle {self.as_latex()}$'

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        op = self.op.__name__
        match self:
            case Conjunction() | Disjunction():
                with p.group(len(op) + 2, op + '([', '])'):
                    for idx, arg in enumerate(self.args):
                        if idx:
                            p.text(',')
                            p.breakable()
                        p.pretty(arg)
            case Negation(arg=arg):
                with p.group(len(op) + 1, op + '(', ')'):
                    p.pretty(arg)
            case _:
                p.text(repr(self))

    def size(self) -> int:
        """The number of nodes of `self`.

        >>> from propnf import *
        >>> a, b = Variable('a'), Variable('b')
        >>> Conjunction([a, Negation(Disjunction([a, b]))]).size()
        6
        """
        match self:
            case Constant() | Variable():
                return 1
            case Negation(arg=arg):
                return arg.size() + 1
            case Conjunction() | Disjunction():
                return sum(arg.size() for arg in self.args) + 1
            case _:
                assert False, type(self)

    def to_sympy(self) -> sympy.logic.boolalg.Boolean:
        """Convert to a Boolean expression of :mod:`sympy.logic`. Variables are
        mapped to :class:`sympy.Symbol`. String identifiers are used as names.
        Other identifiers are named by their type and representation, such as
        ``<int 1>``, so that ``Variable(1)`` and ``Variable('1')`` remain
        different.

        >>> from propnf import *
        >>> a, b = Variable('a'), Variable('b')
        >>> f = Disjunction([Conjunction([a, b]), Negation(a), F]).to_sympy()
        >>> A, B = sympy.symbols('a b')
        >>> f == sympy.Or(sympy.And(A, B), sympy.Not(A))
        True
        """
        match self:
            case Constant(value=value):
                return sympy.true if value else sympy.false
            case Variable(ident=ident):
                if isinstance(ident, str):
                    return sympy.Symbol(ident)
                return sympy.Symbol(f'<{type(ident).__name__} {ident!r}>')
            case Negation(arg=arg):
                return sympy.Not(arg.to_sympy())
            case Conjunction():
                return sympy.And(*(arg.to_sympy() for arg in self.args))
            case Disjunction():
                return sympy.Or(*(arg.to_sympy() for arg in self.args))
            case _:
                assert False, type(self)

    def variables(self) -> Iterator[χ]:
        """An iterator over the identifiers of all variables occurring in
        `self`, in tree order and with repetitions.

        >>> from propnf import *
        >>> a, b = Variable('a'), Variable('b')
        >>> f = Conjunction([a, Negation(Disjunction([b, a, T]))])
        >>> list(f.variables())
        ['a', 'b', 'a']
        >>> set(f.variables()) == {'a', 'b'}
        True
        """
        match self:
            case Constant():
                yield from ()
            case Variable(ident=ident):
                yield ident
            case Negation() | Conjunction() | Disjunction():
                for arg in self.args:
                    yield from arg.variables()
            case _:
                assert False, type(self)


def _is_clause(f: Expr[χ], op: type[Conjunction[χ]] | type[Disjunction[χ]]) -> bool:
    if f.is_literal():
        return True
    return isinstance(f, op) and all(arg.is_literal() for arg in f.args)


# The following imports are intentionally late to avoid circularity.
from .boolean import Conjunction, Constant, Disjunction, Negation, Variable
from .boolean import F, T  # noqa, used in doctests only
