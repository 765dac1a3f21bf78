import unittest

from rationals.automaton import Automaton
from rationals.converters import to_ascii, to_dot
from rationals.transformations import intersection
from rationals.transition import Transition, EPSILON_SYMBOL

class TestAscii(unittest.TestCase):
    def test_epsilon_is_rendered(self):
        fa = Automaton()
        p = fa.add_state(True, False)
        q = fa.add_state(False, True)
        fa.add_transition(Transition(p, None, q))
        text = to_ascii(fa)
        self.assertIn('(0 , %s , 1)' % EPSILON_SYMBOL, text)
        self.assertIn('initials: 0\n', text)

    def test_rendering_is_deterministic(self):
        fa = Automaton.word_automaton('abcabc')
        self.assertEqual(to_ascii(fa), to_ascii(fa))
        self.assertEqual(to_ascii(fa.clone()), to_ascii(fa))

class TestDot(unittest.TestCase):
    def test_dot(self):
        fa = Automaton.word_automaton('a"')
        text = to_dot(fa, name='quoted')
        self.assertTrue(text.startswith('digraph quoted {'))
        self.assertTrue(text.endswith('}'))
        self.assertIn('q0 -> q1 [label="a"];', text)
        self.assertIn('q1 -> q2 [label="\\""];', text)
        self.assertIn('q2 [label="2", shape=doublecircle];', text)
        self.assertIn('init0 -> q0;', text)

    def test_product_states(self):
        fa = intersection(Automaton.word_automaton('a'), Automaton.word_automaton('a'))
        self.assertIn('[label="0.0"]', to_dot(fa))
