from tornado.template import Template

from plurale.core import Inflector
from plurale.template.filters import (Pluralize, Quantity, escape, pluralize,
    quantity, singularize)


def test_escape():
    assert '<b>' | escape == '&lt;b&gt;'


def test_pluralize():
    assert 'apple' | pluralize == 'apples'
    assert 'Child' | pluralize == 'Children'


def test_singularize():
    assert 'apples' | singularize == 'apple'


def test_output_is_escaped():
    assert '<b>' | pluralize == '&lt;b&gt;s'


def test_quantity():
    assert 'apple' | quantity(2) == '2 apples'
    assert 'apples' | quantity(1) == '1 apple'
    assert 'apple' | quantity(3, inclusive=False) == 'apples'


def test_custom_inflector():
    inflector = Inflector(payload=None)
    inflector.add_irregular_rule('cactus', 'cacti')

    assert 'cactus' | Pluralize(inflector) == 'cacti'
    assert 'apple' | Pluralize(inflector, escape_source=None) == 'apple'
    assert 'cactus' | Quantity(4, inflector=inflector) == '4 cacti'


def test_default_inflector_registrations(default_inflector):
    default_inflector.add_irregular_rule('irregular', 'regular')
    assert 'irregular' | pluralize == 'regular'


def test_tornado_template():
    template = Template('{{ word | pluralize }}, {{ word | quantity(3) }}')
    result = template.generate(word='child', pluralize=pluralize,
        quantity=quantity)
    assert result == b'children, 3 children'
