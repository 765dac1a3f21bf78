"""
Exceptions raised by the automaton engine and its front ends.
"""

class RationalsError(Exception):
    """Base class of all errors raised by this package."""

class NoSuchStateError(RationalsError):
    """
    Raised by `Automaton.add_transition` if an endpoint of the transition
    is not a state of the automaton, typically because the state
    was created by another automaton.
    """
    def __init__(self, state, message=None):
        RationalsError.__init__(self, message or 'no such state in this automaton: %r' % (state,))
        self.state = state

class NoSuchTransitionError(RationalsError):
    """Raised when relabeling a transition the automaton does not hold."""
    def __init__(self, transition):
        RationalsError.__init__(self, 'no such transition in this automaton: %s' % (transition,))
        self.transition = transition

class RegexSyntaxError(RationalsError):
    """Raised by the regex front end if the pattern is malformed."""
    def __init__(self, message, pos=None):
        RationalsError.__init__(self, message)
        self.message = message
        self.pos = pos

    def format(self, severity='error'):
        return '%s: %s: %s' % (self.pos, severity, self.message)

    def __str__(self):
        return self.format()
