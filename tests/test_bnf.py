import random

import pytest
import sympy
from sympy.logic.inference import satisfiable

from propnf import (CNFRule, Conjunction, ConjunctiveNormalForm, Disjunction,
                    DisjunctiveNormalForm, F, Literal, Negation, T, Variable,
                    simplify, to_cnf, to_dnf)


a, b, c, d = map(Variable, 'abcd')
A, B, C, D = map(Literal, 'abcd')


def random_expr(rng, depth):
    if depth == 0 or rng.random() < 0.25:
        if rng.random() < 0.1:
            return rng.choice([T, F])
        return Variable(rng.choice('pqrs'))
    match rng.randrange(3):
        case 0:
            return Negation(random_expr(rng, depth - 1))
        case 1:
            return Conjunction(random_expr(rng, depth - 1) for _ in range(rng.randrange(4)))
        case _:
            return Disjunction(random_expr(rng, depth - 1) for _ in range(rng.randrange(4)))


def equivalent(f, g):
    return satisfiable(sympy.Xor(f.to_sympy(), g.to_sympy())) is False


def clause_sets(nf):
    return {frozenset(clause) for clause in nf}


class TestLiteral:

    def test_negation(self):
        assert ~A == Literal('a', negated=True)
        assert ~~A == A
        assert str(~A) == 'not a'
        assert (~A).to_expr() == Negation(a)


class TestNormalForm:

    def test_clauses_are_tuples(self):
        cnf = ConjunctiveNormalForm([[A, ~B], iter([C])])
        assert cnf.clauses == ((A, ~B), (C,))
        assert len(cnf) == 2
        assert list(cnf) == [(A, ~B), (C,)]
        assert list(cnf.variables()) == ['a', 'b', 'c']

    def test_bad_clause(self):
        with pytest.raises(TypeError):
            DisjunctiveNormalForm([(A, b)])

    def test_to_expr(self):
        cnf = ConjunctiveNormalForm([(A, ~B), (C,)])
        assert cnf.to_expr() == Conjunction([Disjunction([a, Negation(b)]), Disjunction([c])])
        dnf = DisjunctiveNormalForm([(A, ~B), ()])
        assert dnf.to_expr() == Disjunction([Conjunction([a, Negation(b)]), Conjunction([])])

    def test_dual(self):
        cnf = ConjunctiveNormalForm([(A, ~B), (C,)])
        assert cnf.dual() == DisjunctiveNormalForm([(~A, B), (~C,)])
        assert cnf.dual().dual() == cnf


class TestTranslation:

    def test_constants(self):
        assert to_cnf(T).clauses == ()
        assert to_cnf(F).clauses == ((),)
        assert to_dnf(T).clauses == ((),)
        assert to_dnf(F).clauses == ()

    def test_empty_junctions(self):
        assert to_cnf(Conjunction([])) == to_cnf(T)
        assert to_cnf(Disjunction([])) == to_cnf(F)
        assert to_dnf(Conjunction([])) == to_dnf(T)
        assert to_dnf(Disjunction([])) == to_dnf(F)

    def test_literals(self):
        assert to_cnf(a).clauses == ((A,),)
        assert to_dnf(Negation(Negation(Negation(a)))).clauses == ((~A,),)

    def test_worked_example(self):
        f = Disjunction([Conjunction([a, b, c]), Negation(d)])
        assert to_cnf(f).clauses == ((A, ~D), (B, ~D), (C, ~D))
        assert to_dnf(f).clauses == ((A, B, C), (~D,))
        assert to_cnf(f).to_expr() == simplify(f, CNFRule())

    def test_nested(self):
        f = Conjunction([a, Disjunction([b, Conjunction([c, d])])])
        assert to_cnf(f).clauses == ((A,), (B, C), (B, D))
        assert to_dnf(f).clauses == ((A, B), (A, C, D))

    def test_duality(self):
        for f in self.exprs(seed=4):
            assert to_cnf(Negation(f)) == to_dnf(f).dual()
            assert to_dnf(Negation(f)) == to_cnf(f).dual()

    def test_equivalence(self):
        for f in self.exprs(seed=5):
            cnf, dnf = to_cnf(f).to_expr(), to_dnf(f).to_expr()
            assert cnf.is_cnf() and dnf.is_dnf()
            assert equivalent(cnf, f)
            assert equivalent(dnf, f)

    @staticmethod
    def exprs(seed, count=30, depth=3):
        rng = random.Random(seed)
        return [random_expr(rng, depth) for _ in range(count)]


class TestMinimize:

    @pytest.fixture(autouse=True)
    def pyeda(self):
        pytest.importorskip('pyeda')

    def test_dnf(self):
        dnf = DisjunctiveNormalForm([(A, B), (A, ~B), (A, C)])
        assert clause_sets(dnf.minimize()) == {frozenset([A])}

    def test_cnf(self):
        cnf = ConjunctiveNormalForm([(A, B), (A, ~B)])
        minimized = cnf.minimize()
        assert isinstance(minimized, ConjunctiveNormalForm)
        assert clause_sets(minimized) == {frozenset([A])}

    def test_constants(self):
        assert DisjunctiveNormalForm([(A, ~A)]).minimize().clauses == ()
        assert DisjunctiveNormalForm([(A,), (~A,)]).minimize().clauses == ((),)
        assert ConjunctiveNormalForm([(A,), (~A,)]).minimize().clauses == ((),)
        assert ConjunctiveNormalForm([]).minimize().clauses == ()

    def test_generic_identifiers(self):
        dnf = DisjunctiveNormalForm([(Literal(1), Literal(2)), (Literal(1), Literal(2, True))])
        assert clause_sets(dnf.minimize()) == {frozenset([Literal(1)])}

    def test_equivalence(self):
        rng = random.Random(6)
        for _ in range(20):
            f = random_expr(rng, 3)
            dnf, cnf = to_dnf(f), to_cnf(f)
            assert equivalent(dnf.minimize().to_expr(), f)
            assert equivalent(cnf.minimize().to_expr(), f)
            assert len(dnf.minimize()) <= max(len(dnf), 1)
