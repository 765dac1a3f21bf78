"""
A finite automaton engine for rational languages over arbitrary alphabets.
"""

from .automaton import Automaton
from .errors import RationalsError, NoSuchStateError, NoSuchTransitionError, RegexSyntaxError
from .state import State, StateFactory, DefaultStateFactory, ProductState, ProductStateFactory
from .transition import Transition
from .transformations import (union, concatenation, star, reverse, intersection,
    remove_epsilons, determinize, prune, minimize)
from .properties import contains_epsilon, is_empty, is_deterministic, includes, equivalent

__version__ = '0.3'
