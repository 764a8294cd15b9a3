"""This module :mod:`propnf.simplify` provides the traversal that applies a
:class:`.Rule` to all subexpressions of an expression until a fixpoint is
reached.

>>> from propnf import *
>>> a, b, c, d = map(Variable, 'abcd')
>>> f = Disjunction([Conjunction([a, Conjunction([Negation(Negation(b)), c])]),
...                  Negation(Negation(Negation(d)))])
>>> g = simplify(f, DefaultRule())
>>> g
Disjunction([Conjunction([Variable('a'), Variable('b'), Variable('c')]), Negation(Variable('d'))])
>>> print(simplify(g, CNFRule()))
(a or not d) and (b or not d) and (c or not d)
>>> simplify(g, DNFRule()) == g
True
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Generic, Optional

from .expr import χ, Conjunction, Constant, Disjunction, Expr, Negation, Variable
from .rules import Rewritten, Rule, RuleResult, Unchanged
from .support.excepthook import NoTraceException
from .support.logging import DeltaTimeFormatter, Timer

from .support.tracing import trace  # noqa

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    '%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.setLevel(logging.WARNING)


class NonTermination(NoTraceException):
    """Raised by :class:`Simplify` when the number of rewriting passes exceeds
    :attr:`Options.max_passes`. This typically indicates a rule set that
    rewrites back and forth.
    """
    pass


@dataclass
class Options:
    """This class holds options that can be provided to
    :meth:`.Simplify.__call__` as keyword arguments.
    """

    log_level: int = logging.NOTSET
    """The `log_level` of the logger used by :class:`.Simplify`.
    """

    max_passes: Optional[int] = None
    """An upper bound on the number of passes that rewrite something. The
    default :obj:`None` means no bound. Non-termination of the rule set is
    then an error of the caller, and the computation does not return.
    """

    def __post_init__(self) -> None:
        if self.max_passes is not None and self.max_passes < 0:
            raise ValueError(f'negative max_passes {self.max_passes}')


@dataclass
class Simplify(Generic[χ]):
    """A callable class that rewrites an expression with a rule up to a
    fixpoint. After a call, the instance holds statistics on that call.

    >>> from propnf import *
    >>> a, b = Variable('a'), Variable('b')
    >>> s = Simplify()
    >>> s(Negation(Conjunction([a, Negation(Disjunction([a, b]))])), NNF)
    Disjunction([Negation(Variable('a')), Variable('a'), Variable('b')])
    >>> s.passes, s.rewrites
    (3, 3)
    """

    options: Optional[Options] = None
    """The options that have been passed to :meth:`.__call__`.
    """

    passes: int = 0
    """The number of passes over the expression that rewrote something. The
    final pass, which does not rewrite anything, is not counted.
    """

    rewrites: int = 0
    """The number of successful rule applications.
    """

    time_total: Optional[float] = None
    """The wall time of the last call in seconds.
    """

    def __call__(self, expr: Expr[χ], rule: Rule, **options) -> Expr[χ]:
        """Apply `rule` with :meth:`try_simplify` until it does not rewrite
        anything anymore.

        :param expr:
          The expression to be rewritten.

        :param rule:
          A rule or a composition of rules. The rule set must reach a
          fixpoint on `expr`.

        :param `**options`:
          Keyword arguments with keywords corresponding to attributes of
          :class:`.Options`.

        :returns:
          The fixpoint.

        :raises NonTermination:
          If `max_passes` is set and exceeded.
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        self.options = Options(**options)
        self.passes = 0
        self.rewrites = 0
        save_level = logger.getEffectiveLevel()
        try:
            logger.setLevel(self.options.log_level)
            logger.info(f'{rule!r}, {self.options}')
            result = self.fixpoint(expr, rule)
            logger.info(f'finished after {self.passes} passes, {self.rewrites} rewrites')
        except KeyboardInterrupt:
            logger.info('keyboard interrupt')
            raise NoTraceException('KeyboardInterrupt')
        finally:
            logger.setLevel(save_level)
        self.time_total = timer.get()
        return result

    def fixpoint(self, expr: Expr[χ], rule: Rule) -> Expr[χ]:
        assert self.options is not None
        max_passes = self.options.max_passes
        while True:
            result = self.try_simplify(expr, rule)
            expr = result.expr
            if not result.changed:
                return expr
            self.passes += 1
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f'pass {self.passes}: size {expr.size()}, depth {expr.depth()}')
            if max_passes is not None and self.passes > max_passes:
                raise NonTermination(f'no fixpoint after {max_passes} passes')

    def try_simplify(self, expr: Expr[χ], rule: Rule) -> RuleResult[χ]:
        """One pass over `expr`. The rule is first applied at the root. If it
        rewrites, the replacement is returned without visiting it. Otherwise,
        the pass recurses into all arguments. The result is
        :class:`.Rewritten` if and only if some subexpression has been
        rewritten.
        """
        result = rule.apply(expr)
        if result.changed:
            self.rewrites += 1
            return result
        expr = result.expr
        match expr:
            case Constant() | Variable():
                return Unchanged(expr)
            case Negation(arg=arg):
                result = self.try_simplify(arg, rule)
                if result.changed:
                    return Rewritten(Negation(result.expr))
                return Unchanged(expr)
            case Conjunction(args=args) | Disjunction(args=args):
                results = [self.try_simplify(arg, rule) for arg in args]
                if any(result.changed for result in results):
                    return Rewritten(expr.op(result.expr for result in results))
                return Unchanged(expr)
            case _:
                assert False, type(expr)


def try_simplify(expr: Expr[χ], rule: Rule) -> RuleResult[χ]:
    """Apply `rule` once to every subexpression of `expr` that is not part of
    a replacement produced in the same pass.

    >>> from propnf import *
    >>> a, b = Variable('a'), Variable('b')
    >>> try_simplify(Conjunction([Negation(Negation(a)), Disjunction([b, Disjunction([a])])]),
    ...              DefaultRule())
    Rewritten(expr=Conjunction([Variable('a'), Disjunction([Variable('b'), Variable('a')])]))
    >>> try_simplify(Conjunction([a, b]), DefaultRule())
    Unchanged(expr=Conjunction([Variable('a'), Variable('b')]))
    """
    return Simplify().try_simplify(expr, rule)


def simplify(expr: Expr[χ], rule: Rule, **options) -> Expr[χ]:
    """Rewrite `expr` with `rule` up to a fixpoint. Termination is a property
    of `rule`. The rules provided by :mod:`propnf.rules` terminate in all
    compositions that do not contain both :class:`.CNFRule` and
    :class:`.DNFRule`. Otherwise, `max_passes` can be used as a safeguard.

    The traversal recurses along the nesting of `expr`. Expressions nested
    more deeply than about the interpreter's recursion limit, see
    :func:`sys.getrecursionlimit`, raise :exc:`RecursionError`. Flat
    conjunctions and disjunctions of any length are fine.

    >>> from propnf import *
    >>> a, b = Variable('a'), Variable('b')
    >>> simplify(Negation(Conjunction([a, b])), CompositeRule(DefaultRule(), NNFRule()))
    Disjunction([Negation(Variable('a')), Negation(Variable('b'))])

    .. seealso::
        :class:`.Simplify` -- keyword arguments `**options`
    """
    simplify_: Simplify[χ] = Simplify()
    return simplify_(expr, rule, **options)
