import unittest

from rationals.automaton import Automaton
from rationals.properties import (ContainsEpsilon, UnaryTest, contains_epsilon, is_empty,
    is_deterministic, includes, equivalent)
from rationals.regex import regex_automaton
from rationals.transformations import union, determinize
from rationals.transition import Transition

class TestContainsEpsilon(unittest.TestCase):
    def test_scenarios(self):
        self.assertTrue(ContainsEpsilon().test(Automaton.epsilon_automaton()))
        self.assertFalse(ContainsEpsilon().test(Automaton.label_automaton('a')))
        self.assertFalse(contains_epsilon(Automaton()))

    def test_terminal_behind_epsilon_chain(self):
        # the terminal state is two epsilon transitions away from the second initial state
        fa = Automaton()
        fa.add_state(True, False)
        i = fa.add_state(True, False)
        p = fa.add_state()
        t = fa.add_state(False, True)
        fa.add_transition(Transition(i, None, p))
        fa.add_transition(Transition(p, None, t))
        self.assertTrue(contains_epsilon(fa))
        self.assertTrue(fa.accept(''))

    def test_agrees_with_accept(self):
        for pattern in ('a*', 'a+', 'a?b?', '(a|b)c', '(a*b*)*', 'a(b|)'):
            fa = regex_automaton(pattern)
            self.assertEqual(contains_epsilon(fa), fa.accept(''), pattern)

    def test_state_flags_cannot_drift_from_terminal_set(self):
        fa = Automaton()
        p = fa.add_state(True, False)
        with self.assertRaises(AttributeError):
            p.terminal = True
        self.assertFalse(contains_epsilon(fa))
        self.assertEqual(contains_epsilon(fa), fa.accept([]))

    def test_unary_test_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            UnaryTest().test(Automaton())

class TestEmptiness(unittest.TestCase):
    def test_is_empty(self):
        self.assertTrue(is_empty(Automaton()))
        self.assertFalse(is_empty(Automaton.epsilon_automaton()))
        self.assertFalse(is_empty(regex_automaton('a*b')))

    def test_unreachable_terminal(self):
        fa = Automaton()
        fa.add_state(True, False)
        fa.add_state(False, True)
        self.assertTrue(is_empty(fa))

class TestDeterminism(unittest.TestCase):
    def test_is_deterministic(self):
        self.assertTrue(is_deterministic(Automaton.word_automaton('abc')))
        self.assertFalse(is_deterministic(union(Automaton.word_automaton('a'), Automaton.word_automaton('b'))))
        self.assertTrue(is_deterministic(determinize(regex_automaton('(a|b)*a'))))

    def test_two_transitions_over_one_label(self):
        fa = Automaton()
        p = fa.add_state(True, False)
        fa.add_transition(Transition(p, 'a', fa.add_state()))
        fa.add_transition(Transition(p, 'a', fa.add_state()))
        self.assertFalse(is_deterministic(fa))

class TestInclusion(unittest.TestCase):
    def test_includes(self):
        self.assertTrue(includes(regex_automaton('ab'), regex_automaton('a*b')))
        self.assertFalse(includes(regex_automaton('a*b'), regex_automaton('ab')))
        self.assertTrue(includes(Automaton(), regex_automaton('a')))
        self.assertFalse(includes(Automaton.epsilon_automaton(), regex_automaton('a')))

    def test_letters_unknown_to_the_right_operand(self):
        self.assertFalse(includes(regex_automaton('ac'), regex_automaton('a*b')))

    def test_equivalent(self):
        self.assertTrue(equivalent(regex_automaton('(a|b)*'), regex_automaton('(a*b*)*')))
        self.assertTrue(equivalent(regex_automaton('a+'), regex_automaton('aa*')))
        self.assertFalse(equivalent(regex_automaton('a*'), regex_automaton('a+')))

    def test_inclusion_agrees_with_enumeration(self):
        a, b = regex_automaton('(ab)*'), regex_automaton('(a|b)*b|')
        self.assertTrue(includes(a, b))
        self.assertTrue(a.enumerate_accepted(6) <= b.enumerate_accepted(6))
