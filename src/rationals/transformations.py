"""
Transformations implementing the algebra of rational languages. Each
transformation builds a new automaton from one or two existing automata;
the inputs are never modified and the result shares no state with them.

>>> ab, c = Automaton.word_automaton('ab'), Automaton.word_automaton('c')
>>> u = union(ab, c)
>>> u.accept('ab'), u.accept('c'), u.accept('a'), u.accept('')
(True, True, False, False)
>>> sorted(''.join(w) for w in concatenation(ab, c).enumerate_accepted(5))
['abc']
>>> sorted(''.join(w) for w in star(c).enumerate_accepted(3))
['', 'c', 'cc', 'ccc']

Automata built by different means can be compared after minimization.

>>> nature = Automaton.word_automaton('nature')
>>> endnature = Automaton.word_automaton('endnature')
>>> fa = minimize(union(nature, endnature))
>>> len(fa.states())
10
"""

import logging

from .automaton import Automaton
from .errors import NoSuchStateError
from .state import ProductStateFactory, ordered
from .toolbox import epsilon_closure, contains_a_terminal_state
from .transition import Transition

logger = logging.getLogger(__name__)

class UnaryTransformation:
    """Builds a new automaton from a single automaton."""
    def transform(self, a):
        raise NotImplementedError()

class BinaryTransformation:
    """Builds a new automaton from a pair of automata."""
    def transform(self, a, b):
        raise NotImplementedError()

def _never(state):
    return False

def _log_result(transformation, fa):
    logger.debug('%s: %d states, %d transitions', type(transformation).__name__,
        len(fa.states()), fa.transition_count())
    return fa

def copy_states(target, source, initial=None, terminal=None, states=None):
    """
    Adds a new state to `target` for every state of `source` (or for every
    state in `states`, if given) and returns the table mapping the old
    states to the new ones.

    The flags of the new states are copied from the old states, unless
    the `initial` or `terminal` function is passed, in which case it is
    called with the old state to compute the flag.
    """
    table = {}
    for state in ordered(source.states() if states is None else states):
        table[state] = target.add_state(
            state.initial if initial is None else initial(state),
            state.terminal if terminal is None else terminal(state))
    return table

def copy_transitions(target, source, table, reverse=False):
    """
    Adds the transitions of `source` to `target`, mapping their endpoints
    through `table`. Transitions whose endpoints cannot be mapped are
    dropped. If `reverse` is set, the transitions are reversed.
    """
    for t in source.delta():
        start, end = table.get(t.start), table.get(t.end)
        if reverse:
            start, end = end, start
        try:
            target.add_transition(Transition(start, t.label, end))
        except NoSuchStateError:
            logger.debug('dropping transition %s', t)

class Union(BinaryTransformation):
    """
    The union C = A + B. The states, initial states, terminal states
    and transitions of C are the unions of those of A and B.
    """
    def transform(self, a, b):
        res = a.clone()
        table = copy_states(res, b)
        copy_transitions(res, b, table)
        return _log_result(self, res)

class Concatenation(BinaryTransformation):
    """
    The concatenation C = A . B. Terminal states of A are linked
    by epsilon transitions to the initial states of B.
    """
    def transform(self, a, b):
        res = Automaton()
        left = copy_states(res, a, terminal=_never)
        right = copy_states(res, b, initial=_never)
        copy_transitions(res, a, left)
        copy_transitions(res, b, right)
        for terminal in ordered(a.terminals()):
            for initial in ordered(b.initials()):
                res.add_transition(Transition(left[terminal], None, right[initial]))
        return _log_result(self, res)

class Star(UnaryTransformation):
    """
    The Kleene star A*. A new state, both initial and terminal,
    is connected by epsilon transitions to the initial states of A
    and the terminal states of A are connected back to it.
    """
    def transform(self, a):
        res = Automaton()
        hub = res.add_state(True, True)
        table = copy_states(res, a, initial=_never, terminal=_never)
        copy_transitions(res, a, table)
        for initial in ordered(a.initials()):
            res.add_transition(Transition(hub, None, table[initial]))
        for terminal in ordered(a.terminals()):
            res.add_transition(Transition(table[terminal], None, hub))
        return _log_result(self, res)

class Reverse(UnaryTransformation):
    """The mirror automaton: transitions are reversed, initial and terminal states swapped."""
    def transform(self, a):
        res = Automaton()
        table = copy_states(res, a,
            initial=lambda state: state.terminal,
            terminal=lambda state: state.initial)
        copy_transitions(res, a, table, reverse=True)
        return _log_result(self, res)

def _closure_is_terminal(fa, state):
    return contains_a_terminal_state(epsilon_closure((state,), fa))

class Intersection(BinaryTransformation):
    """
    The product automaton recognizing the intersection of the languages.

    The states of the result are `ProductState` objects standing for
    pairs of states of A and B; only the pairs accessible from a pair
    of initial states are built. Epsilon transitions of the operands
    are closed over, the result has none.
    """
    def transform(self, a, b):
        factory = ProductStateFactory()
        res = Automaton(factory)
        q = []

        def _get_state(left, right):
            state = factory.lookup(left, right)
            if state is None:
                state = res.add_state(
                    left in a.initials() and right in b.initials(),
                    _closure_is_terminal(a, left) and _closure_is_terminal(b, right),
                    pair=(left, right))
                q.append(state)
            return state

        for left in ordered(a.initials()):
            for right in ordered(b.initials()):
                _get_state(left, right)

        alphabet = a.alphabet() & b.alphabet()
        while q:
            current = q.pop()
            for label in alphabet:
                for left in ordered(a.step(current.left, label)):
                    for right in ordered(b.step(current.right, label)):
                        res.add_transition(Transition(current, label, _get_state(left, right)))
        return _log_result(self, res)

class EpsilonRemoval(UnaryTransformation):
    """
    Builds an automaton without epsilon transitions recognizing the same
    language. A state becomes terminal if a terminal state is in its
    epsilon closure and gets a transition over `l` to every state
    reachable by epsilon transitions followed by `l`.
    """
    def transform(self, a):
        res = Automaton()
        table = copy_states(res, a, terminal=lambda state: _closure_is_terminal(a, state))
        for state in ordered(a.states()):
            for label in a.alphabet():
                for target in ordered(a.step(state, label)):
                    res.add_transition(Transition(table[state], label, table[target]))
        return _log_result(self, res)

class Determinize(UnaryTransformation):
    """
    Subset construction. Every state of the result stands for an
    epsilon-closed set of states of the input. Only accessible subsets
    are built and the empty subset is never materialized, so the result
    is deterministic but not necessarily complete.
    """
    def transform(self, a):
        res = Automaton()
        state_map = {}
        inv_state_map = {}
        q = []

        def _get_state(states, initial=False):
            states = frozenset(states)
            if states not in state_map:
                state = res.add_state(initial, contains_a_terminal_state(states))
                state_map[states] = state
                inv_state_map[state] = states
                q.append(state)
            return state_map[states]

        _get_state(epsilon_closure(a.initials(), a), initial=True)
        while q:
            current = q.pop()
            for label in a.alphabet():
                target = epsilon_closure(a.step(inv_state_map[current], label), a)
                if target:
                    res.add_transition(Transition(current, label, _get_state(target)))
        return _log_result(self, res)

class Prune(UnaryTransformation):
    """Keeps only the states that are both accessible and co-accessible."""
    def transform(self, a):
        res = Automaton()
        table = copy_states(res, a, states=a.accessible_and_co_accessible_states())
        copy_transitions(res, a, table)
        return _log_result(self, res)

class Minimize(UnaryTransformation):
    """
    Builds the minimal deterministic automaton of the language.

    The input is determinized and pruned, then the states are partitioned
    by the terminal flag and the partition is refined until all states
    in a class agree on the class reached over every letter. A missing
    transition counts as reaching a class of its own; since the pruned
    automaton has no dead states, this is the class of the implicit sink.
    """
    def transform(self, a):
        dfa = Prune().transform(Determinize().transform(a))
        states = ordered(dfa.states())
        alphabet = list(dfa.alphabet())

        def _target(state, label):
            for t in dfa.delta(state, label):
                return t.end
            return None

        partition_map = dict((state, int(state.terminal)) for state in states)
        class_count = len(set(partition_map.values()))
        while True:
            signatures = {}
            new_partition_map = {}
            for state in states:
                sig = (partition_map[state],) + tuple(
                    partition_map.get(_target(state, label)) for label in alphabet)
                new_partition_map[state] = signatures.setdefault(sig, len(signatures))
            partition_map = new_partition_map
            if len(signatures) == class_count:
                break
            class_count = len(signatures)

        classes = {}
        for state in states:
            classes.setdefault(partition_map[state], []).append(state)

        res = Automaton()
        new_state_map = {}
        for cls, members in sorted(classes.items()):
            new_state_map[cls] = res.add_state(
                any(state.initial for state in members), members[0].terminal)
        for t in dfa.delta():
            res.add_transition(Transition(
                new_state_map[partition_map[t.start]], t.label, new_state_map[partition_map[t.end]]))
        return _log_result(self, res)

def union(a, b):
    return Union().transform(a, b)

def concatenation(a, b):
    return Concatenation().transform(a, b)

def star(a):
    return Star().transform(a)

def reverse(a):
    return Reverse().transform(a)

def intersection(a, b):
    return Intersection().transform(a, b)

def remove_epsilons(a):
    return EpsilonRemoval().transform(a)

def determinize(a):
    return Determinize().transform(a)

def prune(a):
    return Prune().transform(a)

def minimize(a):
    return Minimize().transform(a)
