def load_tests(loader, tests, ignore):
    import doctest

    import rationals.automaton
    import rationals.converters
    import rationals.properties
    import rationals.regex
    import rationals.state
    import rationals.toolbox
    import rationals.transformations
    import rationals.transition

    from . import (test_automaton, test_acceptance, test_transition, test_transformations,
        test_properties, test_converters, test_regex, test_main)

    tests.addTests(doctest.DocTestSuite(rationals.automaton))
    tests.addTests(doctest.DocTestSuite(rationals.converters))
    tests.addTests(doctest.DocTestSuite(rationals.properties))
    tests.addTests(doctest.DocTestSuite(rationals.regex))
    tests.addTests(doctest.DocTestSuite(rationals.state))
    tests.addTests(doctest.DocTestSuite(rationals.toolbox))
    tests.addTests(doctest.DocTestSuite(rationals.transformations))
    tests.addTests(doctest.DocTestSuite(rationals.transition))

    for module in (test_automaton, test_acceptance, test_transition, test_transformations,
            test_properties, test_converters, test_regex, test_main):
        tests.addTests(loader.loadTestsFromModule(module))

    return tests

if __name__ == '__main__':
    import unittest
    unittest.main()
