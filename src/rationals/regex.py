"""
A small regular expression front end. Patterns are parsed into a tree
of `Lit`, `Cat`, `Alt` and `Rep` nodes (None stands for the empty word),
which is then turned into an automaton over single characters using
the transformations.

>>> parse_regex('ab|c*')
Alt(Cat(Lit(['a']), Lit(['b'])), Rep(Lit(['c'])))
>>> parse_regex('x?')
Alt(None, Lit(['x']))
>>> parse_regex('[a-c]+')
Cat(Lit(['a', 'b', 'c']), Rep(Lit(['a', 'b', 'c'])))

>>> fa = regex_automaton('ab|c*')
>>> fa.accept('ab'), fa.accept('ccc'), fa.accept(''), fa.accept('a')
(True, True, True, False)

Malformed patterns are reported with the offending position.

>>> parse_regex('a(b')
Traceback (most recent call last):
    ...
rationals.errors.RegexSyntaxError: 3: error: expected ')'
"""

from functools import reduce

from .automaton import Automaton
from .errors import RegexSyntaxError
from .transformations import union, concatenation, star, minimize

class Lit:
    def __init__(self, charset):
        self.charset = frozenset(charset)

    def __repr__(self):
        return 'Lit(%r)' % (sorted(self.charset),)

class Rep:
    def __init__(self, term):
        self.term = term

    def __repr__(self):
        return 'Rep({0})'.format(repr(self.term))

class Alt:
    def __init__(self, *terms):
        self.terms = terms

    def __repr__(self):
        return 'Alt({0})'.format(', '.join((repr(t) for t in self.terms)))

class Cat:
    def __init__(self, *terms):
        self.terms = tuple(terms)

    def __repr__(self):
        return 'Cat({0})'.format(', '.join((repr(t) for t in self.terms)))

_escape_map = {
    'd': '0123456789',
    's': ' \n\r\t\v\f',
    'w': 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_',
    }

def _regex_lexer(input):
    esc = False
    for pos, ch in enumerate(input):
        if esc:
            yield ('esc', ch, pos - 1)
            esc = False
        elif ch == '\\':
            esc = True
        elif ch in '+*[]()-|?':
            yield (ch, ch, pos)
        else:
            yield ('c', ch, pos)
    if esc:
        yield ('c', '\\', len(input) - 1)

class _RegexParser:
    """
    Recursive descent parser for the grammar

        alt   ::= cat ('|' cat)*
        cat   ::= rep*
        rep   ::= atom ('*' | '+' | '?')*
        atom  ::= '(' alt ')' | '[' range_elem* ']' | c | esc
    """
    def __init__(self, input):
        self.tokens = list(_regex_lexer(input))
        self.end = len(input)
        self.index = 0

    def _peek(self):
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return (None, None, self.end)

    def _next(self):
        tok = self._peek()
        self.index += 1
        return tok

    def parse(self):
        res = self._alt()
        kind, value, pos = self._peek()
        if kind is not None:
            raise RegexSyntaxError('unexpected %r' % value, pos)
        return res

    def _alt(self):
        terms = [self._cat()]
        while self._peek()[0] == '|':
            self._next()
            terms.append(self._cat())
        return terms[0] if len(terms) == 1 else Alt(*terms)

    def _cat(self):
        terms = []
        while self._peek()[0] not in (None, '|', ')'):
            terms.append(self._rep())
        if not terms:
            return None
        return terms[0] if len(terms) == 1 else Cat(*terms)

    def _rep(self):
        res = self._atom()
        while self._peek()[0] in ('*', '+', '?'):
            kind = self._next()[0]
            if kind == '*':
                res = Rep(res)
            elif kind == '+':
                res = Cat(res, Rep(res))
            else:
                res = Alt(None, res)
        return res

    def _atom(self):
        kind, value, pos = self._next()
        if kind == '(':
            res = self._alt()
            if self._peek()[0] != ')':
                raise RegexSyntaxError("expected ')'", self._peek()[2])
            self._next()
            return res
        if kind == '[':
            return Lit(self._range(pos))
        if kind == 'esc':
            return Lit(_escape_map.get(value, value))
        if kind in ('c', '-', ']'):
            return Lit(value)
        raise RegexSyntaxError('nothing to repeat' if kind in ('*', '+', '?') else 'unexpected %r' % value, pos)

    def _range(self, start):
        chars = ''
        while True:
            kind, value, pos = self._next()
            if kind is None:
                raise RegexSyntaxError("unterminated character class", start)
            if kind == ']':
                break
            if kind == 'esc':
                chars += _escape_map.get(value, value)
                continue
            if self._peek()[0] == '-' and self.index + 1 < len(self.tokens) and self.tokens[self.index + 1][0] != ']':
                self._next()
                _, hi, _ = self._next()
                if ord(hi) < ord(value):
                    raise RegexSyntaxError('invalid range %s-%s' % (value, hi), pos)
                chars += ''.join(chr(c) for c in range(ord(value), ord(hi) + 1))
            else:
                chars += value
        if not chars:
            raise RegexSyntaxError('empty character class', start)
        return chars

def parse_regex(input):
    return _RegexParser(input).parse()

def make_automaton(regex):
    """Builds an automaton recognizing the language of a parsed regex."""
    if regex is None:
        return Automaton.epsilon_automaton()
    if isinstance(regex, Lit):
        return reduce(union, (Automaton.label_automaton(ch) for ch in sorted(regex.charset)))
    if isinstance(regex, Cat):
        return reduce(concatenation, (make_automaton(term) for term in regex.terms))
    if isinstance(regex, Alt):
        return reduce(union, (make_automaton(term) for term in regex.terms))
    if isinstance(regex, Rep):
        return star(make_automaton(regex.term))
    raise TypeError('not a regex node: %r' % (regex,))

def regex_automaton(input, minimal=False):
    """
    Parses the pattern and returns an automaton recognizing its language,
    minimized if `minimal` is set.
    """
    fa = make_automaton(parse_regex(input))
    return minimize(fa) if minimal else fa
