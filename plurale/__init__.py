'''
English nouns inflection by ordered pattern rules and exception tables.

Module level functions use the default inflector instance:

>>> import plurale
>>> plurale.plural('apple')
'apples'
>>> plurale.singular('Children')
'Child'

Create plurale.Inflector() for an independent set of rules.
'''

from .core import Configurator, Direction, Inflector, Rule, PLURAL, SINGULAR
from .exceptions import ConfigError, PluraleError, RuleError

inflector = Inflector()

plural = inflector.plural
singular = inflector.singular
is_plural = inflector.is_plural
is_singular = inflector.is_singular
quantify = inflector.quantify

add_plural_rule = inflector.add_plural_rule
add_singular_rule = inflector.add_singular_rule
add_uncountable_rule = inflector.add_uncountable_rule
add_irregular_rule = inflector.add_irregular_rule
