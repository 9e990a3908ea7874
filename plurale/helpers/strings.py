import re

def capfirst(string):
    return string[:1].upper() + string[1:]

def trim(string, char=' ', replace=None, repeat=2):
    replace = replace if replace is not None else char
    return re.sub(char + '{%d,}' % repeat, replace, string.strip(char))

def restore_case(word, token):
    ''' Returns token written in the same case style as word '''

    # exact match
    if word == token:
        return token

    # lower cased words, e.g. "hello"
    if word == word.lower():
        return token.lower()

    # upper cased words, e.g. "WHISKY"
    if word == word.upper():
        return token.upper()

    # title cased words, e.g. "Title"
    if word[0] == word[0].upper():
        return capfirst(token.lower())

    # mixed case falls back to lower
    return token.lower()
