"""
Transitions are immutable triples `(start, label, end)`. The label can be
any hashable object; `None` stands for the empty word.

>>> from rationals.state import DefaultStateFactory
>>> f = DefaultStateFactory()
>>> p, q = f.create(True, False), f.create(False, True)
>>> print(Transition(p, 'a', q))
(0 , a , 1)
>>> print(Transition(p, None, q))
(0 , ε , 1)

Equality compares the endpoints by identity and the labels by value.

>>> Transition(p, 'a', q) == Transition(p, 'a', q)
True
>>> Transition(p, 'a', q) == Transition(q, 'a', p)
False
>>> Transition(p, None, q) == Transition(p, 'a', q)
False
>>> len({Transition(p, None, q), Transition(p, None, q)})
1
"""

EPSILON_SYMBOL = 'ε'

class Transition:
    __slots__ = ('_start', '_label', '_end', '_hash')

    def __init__(self, start, label, end):
        self._start = start
        self._label = label
        self._end = end
        self._hash = None

    @property
    def start(self):
        return self._start

    @property
    def label(self):
        return self._label

    @property
    def end(self):
        return self._end

    def is_epsilon(self):
        return self._label is None

    def reversed(self):
        """Returns the transition going from `end` to `start`."""
        return Transition(self._end, self._label, self._start)

    def _relabeled(self, label):
        # Only Automaton.update_transition_with may call this; the automaton
        # swaps the returned transition in place of this one in its indexes.
        return Transition(self._start, label, self._end)

    def __eq__(self, other):
        if not isinstance(other, Transition):
            return NotImplemented
        if self._start is not other._start or self._end is not other._end:
            return False
        if self._label is None or other._label is None:
            return self._label is other._label
        return self._label == other._label

    def __hash__(self):
        if self._hash is None:
            self._hash = hash((self._start, self._label, self._end))
        return self._hash

    def __repr__(self):
        return 'Transition(%r, %r, %r)' % (self._start, self._label, self._end)

    def __str__(self):
        label = EPSILON_SYMBOL if self._label is None else self._label
        return '(%s , %s , %s)' % (self._start, label, self._end)
