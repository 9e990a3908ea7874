from .helpers.strings import trim


class PluraleError(Exception):
    ''' Basically exception class. '''

    def __init__(self, msg):
        super(PluraleError, self).__init__(trim(msg))


class RuleError(PluraleError):
    @classmethod
    def pattern_exc(self, pattern, error):
        return self(
            '''Can not compile rule pattern "{0}".\nDescription: {1}''' \
            .format(pattern, error)
        )


class ConfigError(PluraleError):
    @classmethod
    def section_exc(self, path, section):
        return self(
            '''Config file "{0}" contains unknown section "{1}". Known \
            sections are "global", "plural", "singular", "irregular" and \
            "uncountable".'''.format(path, section)
        )

    @classmethod
    def value_exc(self, path, section, option, value):
        return self(
            '''Option "{2}" of section "{1}" in config file "{0}" has the \
            wrong value "{3}".'''.format(path, section, option, value)
        )
