from tornado.escape import xhtml_escape


class TemplateFilter(object):
    autoescape = True

    def __ror__(self, string):
        return self.transform(string)

    def __call__(self, *args, **kwargs):
        self.__init__(*args, **kwargs)
        return self


class Escape(TemplateFilter):
    def __init__(self, escaper=xhtml_escape):
        self.escaper = escaper

    def transform(self, string):
        return self.escaper(string)

escape = Escape()


class InflectionFilter(TemplateFilter):
    '''
    Base filter for inflections. Inflector is taken from "plurale" package
    unless given
    '''

    def __init__(self, inflector=None, escape_source=escape):
        self.inflector = inflector
        self.escape_source = escape_source

    def get_inflector(self):
        if self.inflector is None:
            from .. import inflector
            return inflector
        return self.inflector

    def transform(self, string):
        string = self.inflect(self.get_inflector(), string)
        return string | self.escape_source if self.escape_source else string


class Pluralize(InflectionFilter):
    def inflect(self, inflector, string):
        return inflector.plural(string)

pluralize = Pluralize()


class Singularize(InflectionFilter):
    def inflect(self, inflector, string):
        return inflector.singular(string)

singularize = Singularize()


class Quantity(InflectionFilter):
    def __init__(self, count=0, inclusive=True, inflector=None,
            escape_source=escape):
        self.count = count
        self.inclusive = inclusive
        super(Quantity, self).__init__(inflector, escape_source)

    def inflect(self, inflector, string):
        return inflector.quantify(string, self.count, self.inclusive)

quantity = Quantity()
