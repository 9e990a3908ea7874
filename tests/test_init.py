import re

import plurale


def test_shortcuts(default_inflector):
    assert plurale.plural('apple') == 'apples'
    assert plurale.singular('apples') == 'apple'
    assert plurale.is_plural('apples') is True
    assert plurale.is_singular('apple') is True
    assert plurale.quantify('apple', 2, inclusive=True) == '2 apples'


def test_registration(default_inflector):
    plurale.add_plural_rule(re.compile('gex$', re.I), 'gexii')
    plurale.add_singular_rule(re.compile('singles$', re.I), 'singular')
    plurale.add_irregular_rule('irregular', 'regular')
    plurale.add_uncountable_rule('paper')

    assert plurale.plural('regex') == 'regexii'
    assert plurale.singular('singles') == 'singular'
    assert plurale.plural('irregular') == 'regular'
    assert plurale.plural('paper') == 'paper'
    assert default_inflector.plural('paper') == 'paper'


def test_registrations_are_reset(default_inflector):
    assert plurale.plural('paper') == 'papers'
    assert plurale.plural('regex') == 'regexes'
