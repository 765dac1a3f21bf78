"""
Closure and reachability helpers shared by the automaton and the language
tests. The functions are stateless and only read from the automaton.

>>> from rationals.automaton import Automaton
>>> from rationals.transition import Transition
>>> a = Automaton()
>>> p, q, r = a.add_state(True, False), a.add_state(), a.add_state(False, True)
>>> a.add_transition(Transition(p, None, q))
>>> a.add_transition(Transition(q, 'x', r))
>>> sorted(s.index for s in epsilon_closure([p], a))
[0, 1]
>>> contains_a_terminal_state(epsilon_closure([p], a))
False
>>> reaches_terminal([p], a)
True
"""

def epsilon_closure(states, automaton):
    """
    Returns the smallest superset of `states` closed under the epsilon
    transitions of `automaton`. The input is not modified.
    """
    res = automaton.state_factory.state_set(states)
    q = list(res)
    while q:
        state = q.pop()
        for t in automaton.delta(state, None):
            if t.end not in res:
                res.add(t.end)
                q.append(t.end)
    return res

def contains_a_terminal_state(states):
    return any(state.terminal for state in states)

def reaches_terminal(states, automaton):
    """Returns True if some terminal state is reachable from `states`."""
    return contains_a_terminal_state(automaton.accessible_states(states))
