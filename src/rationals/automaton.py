"""
Finite automaton engine. An automaton is a 5-tuple (X, Q, I, T, D) where
X is the alphabet, Q the set of states, I and T the sets of initial
and terminal states and D the set of transitions.

Labels are in no way interpreted; any hashable object may serve as a label,
only equality and hashing are used. Epsilon transitions are labeled
with None.

>>> ab = Automaton.word_automaton(['a', 'b'])
>>> ab.accept(['a', 'b'])
True
>>> ab.accept(['a']), ab.accept(['b']), ab.accept([]), ab.accept(['a', 'b', 'c'])
(False, False, False, False)
>>> sorted(ab.enumerate(2))
[(), ('a',), ('a', 'b')]

States belong to the automaton that created them. They cannot be used
to build transitions of another automaton.

>>> other = Automaton.epsilon_automaton()
>>> start = next(iter(ab.initials()))
>>> ab.add_transition(Transition(start, 'c', next(iter(other.states()))))
Traceback (most recent call last):
    ...
rationals.errors.NoSuchStateError: no such state in this automaton: State(0, initial, terminal)

Queries never fail, unknown states simply have no transitions.

>>> ab.delta(next(iter(other.states())))
set()
"""

import itertools
import logging

from .errors import NoSuchStateError, NoSuchTransitionError
from .state import State, DefaultStateFactory, ordered
from .transition import Transition
from .toolbox import epsilon_closure

logger = logging.getLogger(__name__)

_ANY = object()

class Automaton:
    """
    A finite automaton over an arbitrary alphabet.

    Transitions are kept in two indexes: the forward index maps
    a `(state, label)` key to the transitions leaving `state` over `label`,
    the reverse index maps `(state, label)` to the reversed transitions
    arriving to `state` over `label`. The alphabet is the set of non-epsilon
    labels currently in use.

    The sets returned by `states`, `initials`, `terminals` and `alphabet`
    are the live sets of the automaton and must not be modified.
    """
    def __init__(self, state_factory=None):
        self.state_factory = state_factory if state_factory is not None else DefaultStateFactory()
        self._alphabet = set()
        self._label_uses = {}
        self._states = self.state_factory.state_set()
        self._initials = self.state_factory.state_set()
        self._terminals = self.state_factory.state_set()
        self._transitions = {}
        self._reverse = {}

    @classmethod
    def epsilon_automaton(cls):
        """
        Returns an automaton recognizing only the empty word.

        >>> e = Automaton.epsilon_automaton()
        >>> e.accept([]), e.accept(['a'])
        (True, False)
        """
        fa = cls()
        fa.add_state(True, True)
        return fa

    @classmethod
    def label_automaton(cls, label):
        """
        Returns an automaton recognizing the one-letter word `label`.

        >>> a = Automaton.label_automaton('a')
        >>> a.accept(['a']), a.accept([]), a.accept(['a', 'a'])
        (True, False, False)
        """
        fa = cls()
        start = fa.add_state(True, False)
        end = fa.add_state(False, True)
        fa.add_transition(Transition(start, label, end))
        return fa

    @classmethod
    def word_automaton(cls, word):
        """
        Returns an automaton recognizing exactly `word`. The states form
        a chain starting with the only initial state and ending with
        the only terminal state. The empty word yields a single state
        that is both initial and terminal.

        >>> len(Automaton.word_automaton('abc').states())
        4
        >>> len(Automaton.word_automaton('').states())
        1
        """
        fa = cls()
        word = list(word)
        start = fa.add_state(True, not word)
        for i, label in enumerate(word):
            end = fa.add_state(False, i == len(word) - 1)
            fa.add_transition(Transition(start, label, end))
            start = end
        return fa

    def add_state(self, initial=False, terminal=False, **attrs):
        """
        Creates a new state of this automaton. Additional keyword arguments
        are passed to the state factory, which must return a `State`.
        """
        state = self.state_factory.create(initial, terminal, **attrs)
        if not isinstance(state, State):
            raise TypeError('state factory returned %r, expected a State' % (state,))
        self._states.add(state)
        if state.initial:
            self._initials.add(state)
        if state.terminal:
            self._terminals.add(state)
        return state

    def alphabet(self):
        return self._alphabet

    def states(self):
        return self._states

    def initials(self):
        return self._initials

    def terminals(self):
        return self._terminals

    def transition_count(self):
        return sum(len(ts) for ts in self._transitions.values())

    def _state_set(self, states):
        if isinstance(states, State):
            states = (states,)
        return self.state_factory.state_set(states)

    def _labels(self):
        return itertools.chain(self._alphabet, (None,))

    @staticmethod
    def _index_add(index, key, transition):
        ts = index.setdefault(key, set())
        if transition in ts:
            return False
        ts.add(transition)
        return True

    @staticmethod
    def _index_remove(index, key, transition):
        ts = index.get(key)
        if ts is None or transition not in ts:
            return False
        ts.remove(transition)
        if not ts:
            del index[key]
        return True

    def _insert(self, transition):
        if not self._index_add(self._transitions, (transition.start, transition.label), transition):
            return
        self._index_add(self._reverse, (transition.end, transition.label), transition.reversed())
        label = transition.label
        if label is not None:
            self._label_uses[label] = self._label_uses.get(label, 0) + 1
            self._alphabet.add(label)

    def _remove(self, transition):
        if not self._index_remove(self._transitions, (transition.start, transition.label), transition):
            return False
        self._index_remove(self._reverse, (transition.end, transition.label), transition.reversed())
        label = transition.label
        if label is not None:
            self._label_uses[label] -= 1
            if not self._label_uses[label]:
                del self._label_uses[label]
                self._alphabet.discard(label)
        return True

    def add_transition(self, transition):
        """
        Adds the transition to the automaton unless an equal transition
        is already present. Raises `NoSuchStateError` if one of
        the endpoints is not a state of this automaton.
        """
        for state in (transition.start, transition.end):
            if state not in self._states:
                raise NoSuchStateError(state)
        self._insert(transition)

    def delta(self, state=_ANY, label=_ANY):
        """
        Looks up transitions in the forward index.

        Without arguments, returns all transitions of the automaton.
        With a state, returns the transitions leaving the state, including
        epsilon transitions; an iterable of states can be passed instead
        of a single state. With a state and a label, returns the transitions
        leaving the state over exactly that label (None for epsilon).
        With only a label, returns every transition over that label.

        A new set is returned on each call.
        """
        if state is _ANY:
            res = set()
            for (start, l), ts in self._transitions.items():
                if label is _ANY or l == label:
                    res.update(ts)
            return res
        return self._find(self._transitions, state, label)

    def delta_minus_one(self, state, label=_ANY):
        """
        Looks up the reverse index. The returned transitions are reversed:
        for every transition (q, l, state) of the automaton, the result
        contains (state, l, q).
        """
        return self._find(self._reverse, state, label)

    def _find(self, index, state, label):
        if label is not _ANY:
            return set(index.get((state, label), ()))
        res = set()
        states = (state,) if isinstance(state, State) else state
        for st in states:
            for l in self._labels():
                res.update(index.get((st, l), ()))
        return res

    def delta_from(self, start, end):
        """Returns the transitions going from `start` to `end`."""
        return set(t for t in self.delta(start) if t.end is end)

    def couples(self):
        """
        Groups the transitions by their endpoints, returning a dict
        mapping `(start, end)` pairs to sets of transitions.
        """
        res = {}
        for (start, label), ts in self._transitions.items():
            for t in ts:
                res.setdefault((start, t.end), set()).add(t)
        return res

    def _access(self, start, index):
        res = self._state_set(start)
        q = list(res)
        while q:
            state = q.pop()
            for label in self._labels():
                for t in index.get((state, label), ()):
                    if t.end not in res:
                        res.add(t.end)
                        q.append(t.end)
        return res

    def accessible_states(self, states=None):
        """
        Returns the states reachable from `states` (by default, from the initial
        states) by a path of any length, epsilon transitions included.
        The result always contains `states`.
        """
        return self._access(self._initials if states is None else states, self._transitions)

    def co_accessible_states(self, states=None):
        """
        Returns the states from which some state of `states` (by default,
        a terminal state) is reachable.
        """
        return self._access(self._terminals if states is None else states, self._reverse)

    def accessible_and_co_accessible_states(self):
        res = self.accessible_states()
        res &= self.co_accessible_states()
        return res

    def project_on(self, alphabet):
        """
        Restricts the automaton to `alphabet` in place. Transitions labeled
        by a letter outside `alphabet` are replaced with epsilon transitions
        connecting the same states.

        >>> fa = Automaton.word_automaton('abc')
        >>> fa.project_on({'a', 'c'})
        >>> sorted(fa.alphabet())
        ['a', 'c']
        >>> fa.accept('ac'), fa.accept('abc')
        (True, False)
        """
        alphabet = set(alphabet)
        dropped = [t for t in self.delta() if t.label is not None and t.label not in alphabet]
        for t in dropped:
            self._remove(t)
            self._insert(Transition(t.start, None, t.end))
        logger.debug('projection replaced %d transitions with epsilon transitions', len(dropped))

    def update_transition_with(self, transition, label):
        """
        Relabels a transition of this automaton. The transition is replaced
        in both indexes by a new transition with the same endpoints,
        which is returned. The passed transition object is left untouched
        and no longer belongs to the automaton.

        Raises `NoSuchTransitionError` if the automaton does not contain
        the transition.
        """
        if not self._remove(transition):
            raise NoSuchTransitionError(transition)
        relabeled = transition._relabeled(label)
        self._insert(relabeled)
        return relabeled

    def clone(self):
        """
        Returns a copy of this automaton made of new states and transitions.
        The copy has the same shape, but shares no state with the original.
        """
        fa = Automaton()
        state_map = {}
        for state in ordered(self._states):
            state_map[state] = fa.add_state(state.initial, state.terminal)
        for t in self.delta():
            fa.add_transition(Transition(state_map[t.start], t.label, state_map[t.end]))
        return fa

    def step(self, states, label):
        """
        Returns the states reached from the epsilon closure of `states`
        by a single transition labeled with `label`. Epsilon transitions
        are never consumed, so stepping over None yields no state.
        """
        res = self.state_factory.state_set()
        if label is None:
            return res
        for state in epsilon_closure(self._state_set(states), self):
            for t in self._transitions.get((state, label), ()):
                res.add(t.end)
        return res

    def steps(self, word, states=None):
        """
        Returns the set of states the automaton is in after reading `word`
        from `states`, a state or a set of states. By default the run starts
        in the epsilon closure of the initial states.

        The resulting set is not epsilon-closed.
        """
        if states is None:
            current = epsilon_closure(self._initials, self)
        else:
            current = self._state_set(states)
        for label in word:
            current = self.step(current, label)
            if not current:
                break
        return current

    def accept(self, word):
        """Returns True if `word` belongs to the language of the automaton."""
        reached = epsilon_closure(self.steps(word), self)
        return any(state in self._terminals for state in reached)

    def accept_from(self, state, word):
        """
        Returns True if there is a path labeled with `word` leaving `state`.
        The path does not need to end in a terminal state.
        """
        return bool(self.steps(word, state))

    def steps_project(self, word):
        """
        Like `steps`, but letters that are not in the alphabet of
        the automaton are skipped instead of stopping the run.
        """
        current = self._state_set(self._initials)
        for label in word:
            if label not in self._alphabet:
                continue
            current = self.step(current, label)
            if not current:
                break
        return current

    def prefix_projection(self, word):
        """
        Returns True if the projection of `word` on the alphabet of this
        automaton is a prefix of a word the automaton can read.

        >>> Automaton.word_automaton('ab').prefix_projection('xaxx')
        True
        """
        return bool(self.steps_project(word))

    def trace_states(self, word, start=None):
        """
        Returns the list of state sets visited after each letter of `word`
        that belongs to the alphabet, starting from `start` or from
        the initial states. Returns None if the run dies before the end
        of the word.

        >>> fa = Automaton.word_automaton('ab')
        >>> [sorted(s.index for s in states) for states in fa.trace_states('ab')]
        [[1], [2]]
        >>> fa.trace_states('bb') is None
        True
        """
        current = self._state_set(self._initials if start is None else start)
        res = []
        for label in word:
            if label not in self._alphabet:
                continue
            current = self.step(current, label)
            res.append(current)
            if not current:
                return None
        return res

    def longest_prefix_with_projection(self, word):
        """
        Returns the length of the longest prefix of `word` the automaton
        can read, counting letters outside the alphabet as read.

        >>> Automaton.word_automaton('ab').longest_prefix_with_projection('axbb')
        3
        """
        length = 0
        current = self._state_set(self._initials)
        for label in word:
            if label is not None and label in self._alphabet:
                current = self.step(current, label)
                if not current:
                    break
            length += 1
        return length

    def enumerate(self, n):
        """
        Returns the set of all words of length at most `n` that can be read
        starting in an initial state, as tuples of labels. The words are
        prefixes of the language, they are not necessarily accepted;
        use `enumerate_accepted` to get words of the language.
        """
        if n < 0:
            raise ValueError('the word length must not be negative, got %d' % n)
        res = set()
        if not self._initials:
            return res
        res.add(())
        seen = set((state, ()) for state in self._initials)
        q = list(seen)
        while q:
            state, word = q.pop()
            for t in self.delta(state):
                if t.label is None:
                    next_word = word
                elif len(word) < n:
                    next_word = word + (t.label,)
                else:
                    continue
                item = (t.end, next_word)
                if item not in seen:
                    seen.add(item)
                    res.add(next_word)
                    q.append(item)
        return res

    def enumerate_accepted(self, n):
        """
        Returns the words of length at most `n` accepted by the automaton.

        >>> fa = Automaton.word_automaton('ab')
        >>> sorted(fa.enumerate_accepted(3))
        [('a', 'b')]
        """
        return set(word for word in self.enumerate(n) if self.accept(word))

    def __repr__(self):
        return '<Automaton: %d states, %d transitions, alphabet of %d>' % (
            len(self._states), self.transition_count(), len(self._alphabet))
