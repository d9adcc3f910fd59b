import re

RX_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')
RX_NON_ALNUM = re.compile(r'[^a-z0-9]+')


def camel_to_lower(name, sep='-'):
    ''' CamelCaseName => camel-case-name '''
    return RX_CAMEL_BOUNDARY.sub(sep, name).lower()


def camel_to_title(name):
    return RX_CAMEL_BOUNDARY.sub(' ', name)


def select_value(*values, default=None):
    ''' Return the first value that is neither None nor an empty string. '''
    for value in values:
        if value is None or value == '':
            continue
        return value

    return default


def tokenize(text):
    ''' Lower-cased alphanumeric tokens of a free text value. '''
    if not text:
        return ()

    return tuple(t for t in RX_NON_ALNUM.split(str(text).lower()) if t)
