"""
Tests of language properties.

>>> from rationals.automaton import Automaton
>>> contains_epsilon(Automaton.epsilon_automaton())
True
>>> contains_epsilon(Automaton.label_automaton('a'))
False
>>> is_empty(Automaton()), is_empty(Automaton.label_automaton('a'))
(True, False)
>>> a, ab = Automaton.word_automaton('a'), Automaton.word_automaton('ab')
>>> includes(a, ab), equivalent(ab, Automaton.word_automaton('ab'))
(False, True)
"""

from .toolbox import epsilon_closure, contains_a_terminal_state

class UnaryTest:
    def test(self, a):
        raise NotImplementedError()

class BinaryTest:
    def test(self, a, b):
        raise NotImplementedError()

class ContainsEpsilon(UnaryTest):
    """
    Checks whether the automaton recognizes the empty word, that is,
    whether a terminal state lies in the epsilon closure
    of the initial states.
    """
    def test(self, a):
        if contains_a_terminal_state(a.initials()):
            return True
        return contains_a_terminal_state(epsilon_closure(a.initials(), a))

class IsEmpty(UnaryTest):
    """Checks whether the automaton recognizes no word at all."""
    def test(self, a):
        return not contains_a_terminal_state(a.accessible_states())

class IsDeterministic(UnaryTest):
    """
    Checks that the automaton has at most one initial state, no epsilon
    transitions and at most one transition per state and letter.
    """
    def test(self, a):
        if len(a.initials()) > 1:
            return False
        for state in a.states():
            if a.delta(state, None):
                return False
            for label in a.alphabet():
                if len(a.delta(state, label)) > 1:
                    return False
        return True

class Inclusion(BinaryTest):
    """
    Checks whether the language of A is included in the language of B.

    Both automata are determinized on the fly, pairs of reachable
    subsets are explored until a pair is found that A accepts and B
    does not.
    """
    def test(self, a, b):
        def _closed(fa, states):
            return frozenset(epsilon_closure(states, fa))

        start = (_closed(a, a.initials()), _closed(b, b.initials()))
        seen = set([start])
        q = [start]
        while q:
            left, right = q.pop()
            if contains_a_terminal_state(left) and not contains_a_terminal_state(right):
                return False
            for label in a.alphabet():
                next_left = _closed(a, a.step(left, label))
                if not next_left:
                    continue
                pair = (next_left, _closed(b, b.step(right, label)))
                if pair not in seen:
                    seen.add(pair)
                    q.append(pair)
        return True

class Equivalence(BinaryTest):
    """Checks whether both automata recognize the same language."""
    def test(self, a, b):
        inclusion = Inclusion()
        return inclusion.test(a, b) and inclusion.test(b, a)

def contains_epsilon(a):
    return ContainsEpsilon().test(a)

def is_empty(a):
    return IsEmpty().test(a)

def is_deterministic(a):
    return IsDeterministic().test(a)

def includes(a, b):
    """Returns True if the language of `a` is included in that of `b`."""
    return Inclusion().test(a, b)

def equivalent(a, b):
    return Equivalence().test(a, b)
