"""
Renderers turning an automaton into text. They only use the read accessors
`states`, `initials`, `terminals`, `alphabet` and `delta`.

>>> from rationals.automaton import Automaton
>>> print(to_ascii(Automaton.word_automaton('ab')))
alphabet: a, b
states: 0, 1, 2
initials: 0
terminals: 2
transitions:
  (0 , a , 1)
  (1 , b , 2)
"""

from jinja2 import Template

from .state import ordered
from .transition import EPSILON_SYMBOL

ascii_templ = Template(r"""
alphabet: {{ alphabet|join(', ') }}
states: {{ states|join(', ') }}
initials: {{ initials|join(', ') }}
terminals: {{ terminals|join(', ') }}
transitions:
{%- for t in transitions %}
  {{ t }}
{%- endfor %}
""".lstrip())

dot_templ = Template(r"""
digraph {{ name }} {
  rankdir=LR;
  node [shape=circle];
{%- for s in states %}
  q{{ s.index }} [label="{{ s.label }}"{% if s.terminal %}, shape=doublecircle{% endif %}];
{%- endfor %}
{%- for s in initials %}
  init{{ s.index }} [shape=point, label=""];
  init{{ s.index }} -> q{{ s.index }};
{%- endfor %}
{%- for t in transitions %}
  q{{ t.start.index }} -> q{{ t.end.index }} [label="{{ t.label }}"];
{%- endfor %}
}
""".lstrip())

def _label_str(label):
    return EPSILON_SYMBOL if label is None else str(label)

def _sorted_transitions(fa):
    return sorted(fa.delta(), key=lambda t: (t.start.index, _label_str(t.label), t.end.index))

def _dot_escape(s):
    return s.replace('\\', '\\\\').replace('"', '\\"')

def to_ascii(fa):
    return ascii_templ.render(
        alphabet=sorted(str(label) for label in fa.alphabet()),
        states=[str(state) for state in ordered(fa.states())],
        initials=[str(state) for state in ordered(fa.initials())],
        terminals=[str(state) for state in ordered(fa.terminals())],
        transitions=_sorted_transitions(fa))

def to_dot(fa, name='automaton'):
    """Renders the automaton in the Graphviz dot language."""
    return dot_templ.render(
        name=name,
        states=[{'index': state.index, 'label': _dot_escape(str(state)), 'terminal': state in fa.terminals()}
            for state in ordered(fa.states())],
        initials=ordered(fa.initials()),
        transitions=[{'start': t.start, 'end': t.end, 'label': _dot_escape(_label_str(t.label))}
            for t in _sorted_transitions(fa)])
