import pytest

from propnf import (CNFRule, CompositeRule, Conjunction, ConstantRule,
                    DefaultRule, Disjunction, DNFRule, F, Negation, NNFRule,
                    Rewritten, Rule, T, Unchanged, Variable)
from propnf.rules import operands


a, b, c, d = map(Variable, 'abcd')


class Recording(Rule):
    """Records its arguments and rewrites `a` into `b`."""

    def __init__(self):
        self.calls = []

    def apply(self, expr):
        self.calls.append(expr)
        if expr == a:
            return Rewritten(b)
        return Unchanged(expr)


class TestResults:

    def test_changed_flag(self):
        assert Rewritten(a).changed
        assert not Unchanged(a).changed

    def test_equality(self):
        assert Rewritten(a) == Rewritten(Variable('a'))
        assert Rewritten(a) != Unchanged(a)


class TestCompositeRule:

    def test_short_circuit(self):
        first, second = Recording(), Recording()
        assert CompositeRule(first, second).apply(a) == Rewritten(b)
        assert first.calls == [a]
        assert second.calls == []

    def test_fallback_receives_unchanged_output(self):
        first, second = Recording(), Recording()
        assert CompositeRule(first, second).apply(c) == Unchanged(c)
        assert first.calls == [c]
        assert second.calls == [c]

    def test_priority(self):
        # DefaultRule removes the double negation before NNFRule could apply
        f = Negation(Negation(Conjunction([a, b])))
        assert CompositeRule(DefaultRule(), NNFRule()).apply(f) == Rewritten(Conjunction([a, b]))
        assert CompositeRule(NNFRule(), DefaultRule()).apply(f) == Rewritten(Conjunction([a, b]))
        g = Negation(Conjunction([Conjunction([a]), b]))
        assert CompositeRule(DefaultRule(), NNFRule()).apply(g) \
            == Rewritten(Disjunction([Negation(Conjunction([a])), Negation(b)]))

    def test_three_rules(self):
        first, second, third = Recording(), Recording(), Recording()
        rule = CompositeRule(first, second, third)
        assert rule.apply(d) == Unchanged(d)
        assert [len(r.calls) for r in (first, second, third)] == [1, 1, 1]
        nested = CompositeRule(first, CompositeRule(second, third))
        assert nested.apply(a) == rule.apply(a)

    def test_pipe(self):
        rule = DefaultRule() | NNFRule() | CNFRule()
        assert rule.apply(Disjunction([Conjunction([a, b]), c])) \
            == Rewritten(Conjunction([Disjunction([a, c]), Disjunction([b, c])]))

    def test_bad_arguments(self):
        with pytest.raises(ValueError):
            CompositeRule()
        with pytest.raises(TypeError):
            CompositeRule(DefaultRule(), lambda expr: Unchanged(expr))

    def test_repr(self):
        assert repr(CompositeRule(DefaultRule(), NNFRule(), CNFRule())) \
            == 'CompositeRule(DefaultRule(), NNFRule(), CNFRule())'


class TestOperands:

    def test_splice(self):
        assert list(operands(Disjunction([a, b]), Disjunction)) == [a, b]
        assert list(operands(Disjunction([]), Disjunction)) == []
        assert list(operands(a, Conjunction)) == [a]


class TestDefaultRule:

    rule = DefaultRule()

    def test_double_negation(self):
        assert self.rule.apply(Negation(Negation(a))) == Rewritten(a)
        assert self.rule(Negation(Negation(Negation(a)))) == Rewritten(Negation(a))

    def test_flatten_conjunction(self):
        f = Conjunction([Conjunction([a, b]), c, Conjunction([]), Conjunction([d])])
        assert self.rule.apply(f) == Rewritten(Conjunction([a, b, c, d]))

    def test_flatten_one_level(self):
        f = Disjunction([a, Disjunction([b, Disjunction([c])])])
        assert self.rule.apply(f) == Rewritten(Disjunction([a, b, Disjunction([c])]))

    def test_mixed_nesting_is_kept(self):
        f = Conjunction([a, Disjunction([b, c])])
        assert self.rule.apply(f) == Unchanged(f)

    @pytest.mark.parametrize('f', [
        T, a, Negation(a), Negation(Conjunction([a, b])), Conjunction([]), Disjunction([a])])
    def test_declines(self, f):
        assert self.rule.apply(f) == Unchanged(f)


class TestNNFRule:

    rule = NNFRule()

    def test_de_morgan(self):
        assert self.rule.apply(Negation(Conjunction([a, b]))) \
            == Rewritten(Disjunction([Negation(a), Negation(b)]))
        assert self.rule.apply(Negation(Disjunction([a, Negation(b)]))) \
            == Rewritten(Conjunction([Negation(a), Negation(Negation(b))]))

    def test_empty(self):
        assert self.rule.apply(Negation(Conjunction([]))) == Rewritten(Disjunction([]))

    @pytest.mark.parametrize('f', [
        a, Negation(a), Negation(Negation(a)), Negation(T), Conjunction([a, b])])
    def test_declines(self, f):
        assert self.rule.apply(f) == Unchanged(f)


class TestConstantRule:

    rule = ConstantRule()

    def test_negated_constants(self):
        assert self.rule.apply(Negation(T)) == Rewritten(F)
        assert self.rule.apply(Negation(F)) == Rewritten(T)

    def test_definite(self):
        assert self.rule.apply(Conjunction([a, F, b])) == Rewritten(F)
        assert self.rule.apply(Disjunction([a, T])) == Rewritten(T)

    def test_neutral(self):
        assert self.rule.apply(Conjunction([T, a, T, b])) == Rewritten(Conjunction([a, b]))
        assert self.rule.apply(Disjunction([F])) == Rewritten(Disjunction([]))

    def test_arity(self):
        assert self.rule.apply(Conjunction([])) == Rewritten(T)
        assert self.rule.apply(Disjunction([])) == Rewritten(F)
        assert self.rule.apply(Disjunction([Negation(a)])) == Rewritten(Negation(a))

    @pytest.mark.parametrize('f', [T, a, Negation(a), Conjunction([a, b])])
    def test_declines(self, f):
        assert self.rule.apply(f) == Unchanged(f)


class TestDistributiveRules:

    def test_cnf_order(self):
        f = Disjunction([Conjunction([a, b]), Conjunction([c, d])])
        assert CNFRule().apply(f) == Rewritten(Conjunction([
            Disjunction([a, c]), Disjunction([a, d]), Disjunction([b, c]), Disjunction([b, d])]))

    def test_dnf_order(self):
        f = Conjunction([a, Disjunction([b, c]), Negation(d)])
        assert DNFRule().apply(f) == Rewritten(Disjunction([
            Conjunction([a, b, Negation(d)]), Conjunction([a, c, Negation(d)])]))

    def test_worked_example(self):
        f = Disjunction([Conjunction([a, b, c]), Negation(d)])
        assert CNFRule().apply(f) == Rewritten(Conjunction([
            Disjunction([a, Negation(d)]),
            Disjunction([b, Negation(d)]),
            Disjunction([c, Negation(d)])]))
        assert DNFRule().apply(f) == Unchanged(f)

    @pytest.mark.parametrize('k, n', [(1, 1), (1, 4), (2, 3), (3, 2), (4, 3)])
    def test_product_size(self, k, n):
        f = Disjunction(Conjunction(Variable((i, j)) for j in range(n)) for i in range(k))
        result = CNFRule().apply(f)
        assert result.changed
        assert len(result.expr.args) == n ** k
        assert all(len(clause.args) == k for clause in result.expr.args)

    def test_empty_conjunction(self):
        f = Disjunction([a, Conjunction([])])
        assert CNFRule().apply(f) == Rewritten(Conjunction([]))

    def test_declines(self):
        f = Disjunction([a, Disjunction([b, c])])
        assert CNFRule().apply(f) == Unchanged(f)
        assert DNFRule().apply(f) == Unchanged(f)
        assert CNFRule().apply(Negation(Disjunction([Conjunction([a])]))).changed is False
