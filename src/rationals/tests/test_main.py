import contextlib
import io
import unittest

from rationals.__main__ import _main

def _run(*argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        ret = _main(list(argv))
    return ret, out.getvalue(), err.getvalue()

class TestMain(unittest.TestCase):
    def test_words(self):
        ret, out, err = _run('-w', 'ab', '-w', 'abab', 'ab(ab)*')
        self.assertEqual(ret, 0)
        self.assertEqual(out.splitlines(), ['ab: accept', 'abab: accept'])

    def test_rejected_word(self):
        ret, out, err = _run('-w', 'ba', 'ab')
        self.assertEqual(ret, 1)
        self.assertEqual(out, 'ba: reject\n')

    def test_enumerate(self):
        ret, out, err = _run('-e', '2', '-m', 'a*')
        self.assertEqual(ret, 0)
        self.assertEqual(out.splitlines(), ['ε', 'a', 'aa'])

    def test_syntax_error(self):
        ret, out, err = _run('a)')
        self.assertEqual(ret, 1)
        self.assertEqual(err, "1: error: unexpected ')'\n")

    def test_renderers(self):
        ret, out, err = _run('--ascii', '--dot', 'ab')
        self.assertEqual(ret, 0)
        self.assertIn('transitions:', out)
        self.assertIn('digraph automaton {', out)

    def test_negative_length(self):
        with self.assertRaises(SystemExit):
            _run('-e', '-1', 'a')
