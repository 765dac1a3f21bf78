from .converters import to_ascii, to_dot
from .errors import RegexSyntaxError
from .regex import regex_automaton
from .transition import EPSILON_SYMBOL
import logging, sys

def _main(argv=None):
    from argparse import ArgumentParser
    ap = ArgumentParser(prog='rationals', description='Build a finite automaton from a regular expression and query it.')
    ap.add_argument('-w', '--word', action='append', default=[], help='Print whether the word is accepted (can be repeated)')
    ap.add_argument('-e', '--enumerate', type=int, metavar='N', help='List the accepted words of length at most N')
    ap.add_argument('-m', '--minimize', action="store_true", help='Minimize the automaton before using it')
    ap.add_argument('--ascii', action="store_true", help='Print the automaton as text')
    ap.add_argument('--dot', action="store_true", help='Print the automaton in the Graphviz dot language')
    ap.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging verbosity')
    ap.add_argument('pattern')
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format='%(levelname)s %(name)s: %(message)s')

    if args.enumerate is not None and args.enumerate < 0:
        ap.error('the word length must not be negative')

    try:
        fa = regex_automaton(args.pattern, minimal=args.minimize)
    except RegexSyntaxError as e:
        print(e, file=sys.stderr)
        return 1

    if args.ascii:
        print(to_ascii(fa))
    if args.dot:
        print(to_dot(fa))

    if args.enumerate is not None:
        for word in sorted(fa.enumerate_accepted(args.enumerate), key=lambda w: (len(w), w)):
            print(''.join(word) or EPSILON_SYMBOL)

    ret = 0
    for word in args.word:
        accepted = fa.accept(word)
        print('%s: %s' % (word or EPSILON_SYMBOL, 'accept' if accepted else 'reject'))
        if not accepted:
            ret = 1
    return ret

if __name__ == '__main__':
    sys.exit(_main())
