"""
States and the factories that create them.

A state is an opaque token. Two states are the same state only if they are
the same object, regardless of their flags.

>>> f = DefaultStateFactory()
>>> p = f.create(True, False)
>>> q = f.create(True, False)
>>> p == q, p == p
(False, True)
>>> p, q
(State(0, initial), State(1, initial))

States are only ever created by a factory, which also decides what kind
of container holds sets of states. Product automata use a factory that
remembers the pair of states each product state stands for.

>>> pf = ProductStateFactory()
>>> r = pf.create(False, True, (p, q))
>>> r.left is p, r.right is q
(True, True)
>>> pf.lookup(p, q) is r
True
>>> pf.lookup(q, p) is None
True
"""

class State:
    """
    A state of a finite automaton.

    The `initial` and `terminal` flags are fixed at creation and mirror
    the membership of the state in the initial and terminal sets of its
    automaton. The `index` is the creation order within the factory and
    only serves to name the state when printing.
    """
    __slots__ = ('_initial', '_terminal', 'index')

    def __init__(self, initial=False, terminal=False, index=0):
        self._initial = bool(initial)
        self._terminal = bool(terminal)
        self.index = index

    @property
    def initial(self):
        return self._initial

    @property
    def terminal(self):
        return self._terminal

    def __repr__(self):
        flags = [name for name, on in (('initial', self.initial), ('terminal', self.terminal)) if on]
        return 'State(%s)' % ', '.join([str(self.index)] + flags)

    def __str__(self):
        return str(self.index)

class StateFactory:
    """
    Creates the states of a single automaton.

    Subclasses override `create` to produce specialized states and
    `state_set` to provide the container used for sets of such states.
    Whatever `create` returns must be an instance of `State` or of
    a subclass; `Automaton.add_state` rejects anything else.
    """
    def __init__(self):
        self._next_index = 0

    def _allocate_index(self):
        index = self._next_index
        self._next_index += 1
        return index

    def create(self, initial, terminal):
        raise NotImplementedError()

    def state_set(self, states=()):
        """Returns a new container of states, optionally prefilled."""
        return set(states)

class DefaultStateFactory(StateFactory):
    def create(self, initial, terminal):
        return State(initial, terminal, self._allocate_index())

class ProductState(State):
    """A state standing for the pair (`left`, `right`) of component states."""
    __slots__ = ('left', 'right')

    def __init__(self, initial, terminal, index, left, right):
        State.__init__(self, initial, terminal, index)
        self.left = left
        self.right = right

    def __str__(self):
        return '%s.%s' % (self.left, self.right)

class ProductStateFactory(StateFactory):
    """
    Creates `ProductState` objects. The factory keeps the pair-to-state
    table so that product constructions can look up the state
    for a pair they have already visited.
    """
    def __init__(self):
        StateFactory.__init__(self)
        self._pairs = {}

    def create(self, initial, terminal, pair=(None, None)):
        left, right = pair
        state = ProductState(initial, terminal, self._allocate_index(), left, right)
        if left is not None and right is not None:
            self._pairs[left, right] = state
        return state

    def lookup(self, left, right):
        return self._pairs.get((left, right))

def ordered(states):
    """Returns the states as a list sorted by creation order."""
    return sorted(states, key=lambda state: state.index)
