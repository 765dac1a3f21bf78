#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup
setup(name='rationals',
    version='0.3',
    description='Finite automata and the algebra of rational languages over arbitrary alphabets',
    install_requires=['Jinja2>=2.7.0'],
    packages=['rationals', 'rationals.tests'],
    package_dir={'': 'src'},
    entry_points = {
        'console_scripts': [
            'rationals = rationals.__main__:_main',
            ],
        },
    test_suite = "rationals.tests",
    classifiers=[
        # Supported python versions
        'Programming Language :: Python :: 3',

        # Topics
        'Topic :: Software Development :: Libraries',
    ]
    )
