import ast
import configparser
import logging
import re

from . import rules as default_rules
from .exceptions import ConfigError, RuleError
from .helpers import log
from .helpers.strings import restore_case


backreference = re.compile(r'\$(\d{1,2})')


class Rule(object):
    '''
    Inflection rule: compiled regular expression and replacement template.

    Template may refer to the whole match as $0 and to groups as $1, $2 ...
    References to missing or not participating groups are replaced by empty
    string.

    >>> rule = Rule(re.compile('(quiz)$', re.I), '$1zes')
    >>> rule.apply('Quiz')
    'Quizzes'
    '''

    __slots__ = ('pattern', 'replacement')

    def __init__(self, pattern, replacement):
        self.pattern = pattern
        self.replacement = replacement

    def __repr__(self):
        return '<{0}.Rule({1}, "{2}")>'.format(
            self.__module__, self.pattern.pattern, self.replacement)

    def __eq__(self, other):
        return isinstance(other, Rule) and self.pattern == other.pattern \
            and self.replacement == other.replacement

    def __hash__(self):
        return hash((self.pattern, self.replacement))

    def matches(self, word):
        return self.pattern.search(word) is not None

    def interpolate(self, match):
        def group(ref):
            index = int(ref.group(1))
            if index > match.re.groups:
                return ''
            return match.group(index) or ''
        return backreference.sub(group, self.replacement)

    def apply(self, word):
        def replace(match):
            result = self.interpolate(match)
            if not match.group(0):
                # empty match takes case from the preceding character
                start = match.start()
                return restore_case(word[start - 1:start], result)
            return restore_case(match.group(0), result)
        return self.pattern.sub(replace, word, count=1)


class Direction(object):
    '''
    Wiring of the inflector tables for one direction: "keep" map holds
    exceptions already in target form, "replace" map maps exceptions from
    the source form, "rules" is the rule list to scan.
    '''

    def __init__(self, name, keep, replace, rules):
        self.name = name
        self.keep = keep
        self.replace = replace
        self.rules = rules

    def __repr__(self):
        return '<{0}.Direction({1})>'.format(self.__module__, self.name)

    def bind(self, inflector):
        return (getattr(inflector, self.keep),
            getattr(inflector, self.replace), getattr(inflector, self.rules))

PLURAL = Direction('plural', keep='irregular_plurals',
    replace='irregular_singles', rules='plural_rules')
SINGULAR = Direction('singular', keep='irregular_singles',
    replace='irregular_plurals', rules='singular_rules')


class Inflector(object):
    '''
    Inflector converts words between singular and plural form and tells
    which form the word has.

    It owns two ordered rule lists, two irregular words maps and the set of
    uncountable words. All of them are filled from payload on creation
    (payload is any object with attributes named as in "plurale.rules"
    module, which is used by default) and may be extended later:

    >>> inflector = Inflector()
    >>> inflector.plural('Apple')
    'Apples'
    >>> inflector.add_irregular_rule('irregular', 'regular')
    >>> inflector.plural('irregular')
    'regular'

    Rules are tried from the most recently added, so custom rules override
    the defaults. Pass payload=None to get an empty inflector.
    To load custom rules from config file use Inflector.from_config(path).
    '''

    def __init__(self, payload=default_rules):
        self.payload = payload
        self.reset()

    def __repr__(self):
        return '<{0}.Inflector({1} plural rules, {2} singular rules, ' \
            '{3} irregular, {4} uncountable)>'.format(
                self.__module__, len(self.plural_rules),
                len(self.singular_rules), len(self.irregular_singles),
                len(self.uncountables)
            )

    @classmethod
    def from_config(cls, path):
        log_config, defaults, registrations = Configurator(path).data
        log.configure(**log_config)

        inflector = cls(default_rules if defaults else None)
        for method, args in registrations:
            getattr(inflector, method)(*args)
        logging.info('Inflector loaded from %s: %d registrations' % (path,
            len(registrations)))
        return inflector

    def reset(self):
        ''' Drop all registered rules and load payload again '''
        self.plural_rules = []
        self.singular_rules = []
        self.irregular_singles = {}
        self.irregular_plurals = {}
        self.uncountables = set()

        if self.payload is None:
            return

        for pattern, replacement in self.payload.plural_rules:
            self.plural_rules.append(
                Rule(re.compile(pattern, re.IGNORECASE), replacement))
        for pattern, replacement in self.payload.singular_rules:
            self.singular_rules.append(
                Rule(re.compile(pattern, re.IGNORECASE), replacement))
        for single, plural in self.payload.irregular_rules:
            self.irregular_singles[single.lower()] = plural.lower()
            self.irregular_plurals[plural.lower()] = single.lower()
        for word in self.payload.uncountable_words:
            self.uncountables.add(word.lower())
        for pattern in self.payload.uncountable_patterns:
            rule = Rule(re.compile(pattern, re.IGNORECASE), '$0')
            self.plural_rules.append(rule)
            self.singular_rules.append(rule)

        logging.debug('Inflector payload loaded: %r' % self)

    # inflection

    def plural(self, word):
        return self.transform(word, PLURAL)

    def singular(self, word):
        return self.transform(word, SINGULAR)

    def is_plural(self, word):
        return self.classify(word, PLURAL)

    def is_singular(self, word):
        return self.classify(word, SINGULAR)

    def quantify(self, word, count, inclusive=False):
        ''' Singular word for count of one, plural otherwise '''
        inflected = self.singular(word) if count == 1 else self.plural(word)
        return '{0} {1}'.format(count, inflected) if inclusive else inflected

    # registration

    def add_plural_rule(self, rule, replacement):
        self.plural_rules.append(Rule(self.sanitize_rule(rule), replacement))
        logging.debug('Plural rule added: %r' % self.plural_rules[-1])

    def add_singular_rule(self, rule, replacement):
        self.singular_rules.append(Rule(self.sanitize_rule(rule), replacement))
        logging.debug('Singular rule added: %r' % self.singular_rules[-1])

    def add_uncountable_rule(self, word):
        if isinstance(word, str):
            self.uncountables.add(word.lower())
            logging.debug('Uncountable word added: %s' % word)
            return

        # pattern makes identity rules for both directions
        self.add_plural_rule(word, '$0')
        self.add_singular_rule(word, '$0')

    def add_irregular_rule(self, single, plural):
        single = single.lower()
        plural = plural.lower()

        self.irregular_singles[single] = plural
        self.irregular_plurals[plural] = single
        logging.debug('Irregular rule added: %s -> %s' % (single, plural))

    def sanitize_rule(self, rule):
        '''
        Strings are compiled to case insensitive expressions matching the
        whole word, compiled expressions are used as is
        '''
        if isinstance(rule, str):
            try:
                return re.compile('^{0}$'.format(rule), re.IGNORECASE)
            except re.error as error:
                raise RuleError.pattern_exc(rule, error)
        return rule

    # engine

    def transform(self, word, direction):
        keep, replace, rules = direction.bind(self)
        token = word.lower()

        # already in target form
        if token in keep:
            return restore_case(word, token)

        # direct replacement
        if token in replace:
            return restore_case(word, replace[token])

        return self.apply_rules(token, word, rules)

    def classify(self, word, direction):
        keep, replace, rules = direction.bind(self)
        token = word.lower()

        if token in keep:
            return True
        if token in replace:
            return False
        return self.apply_rules(token, token, rules) == token

    def apply_rules(self, token, word, rules):
        # empty string or doesn't need fixing
        if not token or token in self.uncountables:
            return word

        # the last added rule goes first
        for rule in reversed(rules):
            if rule.matches(word):
                return rule.apply(word)
        return word


class Configurator(object):
    '''
    Reads inflector config file. Option values are python literals, e.g.

        [global]
        debug = True
        defaults = True

        [plural]
        words = [('regex', 'regexii')]
        patterns = [('gex$', 'gexii')]

        [irregular]
        person = people

        [uncountable]
        words = ['paper']
        patterns = ['pok[eé]mon$']

    "words" of plural and singular sections are anchored to the whole word,
    "patterns" are case insensitive expressions applied as is.
    '''

    def __init__(self, path):
        self.path = path

        # parse config
        config = configparser.ConfigParser(interpolation=None)
        config.optionxform = str
        if not config.read(path, encoding='utf-8'):
            logging.debug('Config file %s not found, defaults used' % path)

        # define default values
        log_config = {'level': 'info', 'colored': False}
        defaults = True
        registrations = []

        for section in config.sections():
            # transform incoming options
            opts = [(k, self.transform_str(v)) \
                for k, v in config.items(section)]

            if section == 'global':
                opts = dict(opts)
                log_config['colored'] = bool(opts.get('colored_output', False))
                if opts.get('debug', False):
                    log_config['level'] = 'debug'
                defaults = bool(opts.get('defaults', True))
            elif section in ('plural', 'singular'):
                method = 'add_{0}_rule'.format(section)
                for k, v in opts:
                    for pattern, replacement in self.pairs(section, k, v):
                        if k == 'patterns':
                            pattern = self.compile(section, k, pattern)
                        registrations.append((method, (pattern, replacement)))
            elif section == 'irregular':
                for k, v in opts:
                    if not isinstance(v, str):
                        raise ConfigError.value_exc(path, section, k, v)
                    registrations.append(('add_irregular_rule', (k, v)))
            elif section == 'uncountable':
                for k, v in opts:
                    for word in self.words(section, k, v):
                        if k == 'patterns':
                            word = self.compile(section, k, word)
                        registrations.append(('add_uncountable_rule', (word,)))
            else:
                raise ConfigError.section_exc(path, section)

        self._data = (log_config, defaults, registrations)

    @property
    def data(self):
        for item in self._data:
            yield item

    def transform_str(self, string):
        try:
            return ast.literal_eval(string)
        except (ValueError, SyntaxError):
            return string

    def words(self, section, option, value):
        if option not in ('words', 'patterns') \
            or not isinstance(value, (list, tuple)) \
            or not all(isinstance(item, str) for item in value):
                raise ConfigError.value_exc(self.path, section, option, value)
        return value

    def pairs(self, section, option, value):
        if option not in ('words', 'patterns') \
            or not isinstance(value, (list, tuple)) \
            or not all(isinstance(item, (list, tuple)) and len(item) == 2 \
                and all(isinstance(s, str) for s in item) for item in value):
                    raise ConfigError.value_exc(self.path, section, option,
                        value)
        return value

    def compile(self, section, option, pattern):
        try:
            return re.compile(pattern, re.IGNORECASE)
        except re.error:
            raise ConfigError.value_exc(self.path, section, option, pattern)
