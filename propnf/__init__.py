__version__ = '0.1.0'

___copyright__ = 'Copyright 2024, the propnf authors'
___license__ = 'GPL-2.0-or-later'
___status__ = 'Prototype'

from . import expr

from .expr import (Expr, Constant, Variable, Negation, Conjunction,  # noqa
                   Disjunction, T, F)

from . import rules

from .rules import (Rule, CompositeRule, Rewritten, Unchanged, DefaultRule,  # noqa
                    NNFRule, ConstantRule, CNFRule, DNFRule, NNF, CNF, DNF)

from .simplify import NonTermination, Simplify, simplify, try_simplify  # noqa

from .bnf import (Literal, ConjunctiveNormalForm, DisjunctiveNormalForm,  # noqa
                  to_cnf, to_dnf)

__all__ = expr.__all__ + rules.__all__ + [
    'NonTermination', 'Simplify', 'simplify', 'try_simplify',

    'Literal', 'ConjunctiveNormalForm', 'DisjunctiveNormalForm', 'to_cnf', 'to_dnf'
]
