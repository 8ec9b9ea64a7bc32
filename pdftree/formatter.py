# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Convert single values into the pieces of text that make
up a line of the tree:  a short symbol, a type name, the
value itself and some extra information.

Nothing in here looks at anything but the value it is
given.  Following references and descending into
containers is done by the walker.
'''

from .objects import (PdfName, PdfString, PdfArray, PdfDict, PdfStream,
                      PdfReference)
from .settings import DisplaySettings, StreamDisplay
from .errors import log


class ObjectInfo(object):
    ''' Display information for one value.

            kind = style role for the symbol, and the value kind
            symbol = two character (or shorter) glyph
            type_name = name shown with display_type_names
            value = text of the value, empty for containers
            extra_info = text shown after the value, may be empty
    '''
    __slots__ = 'kind symbol type_name value extra_info'.split()

    def __init__(self, kind, symbol, type_name, value='', extra_info=''):
        self.kind = kind
        self.symbol = symbol
        self.type_name = type_name
        self.value = value
        self.extra_info = extra_info


# kind -> (symbol, type name)
kinds = dict(
    null=('Nu', 'Null'),
    bool=('b', 'Bool'),
    integer=('Z', 'Integer_Number'),
    real=('R', 'Real_Number'),
    name=('Nm', 'Name'),
    literal=('az', 'Literal_String'),
    hex=('0x', 'Hexadecimal_String'),
    array=('[]', 'Array'),
    dict=('{}', 'Dictionary'),
    stream=('S', 'Stream'),
    reference=('IR', 'Indirect_Reference'),
)


def elide(items, limit):
    ''' Apply a display limit to a sequence.

        Yields (index, item) for every item that should be
        shown.  If items have to be left out, one (None, count)
        pair stands in for all of them, where count is the
        number of items left out.

        A limit of None or 0 shows everything.  Otherwise the
        limit is at least 2:  the first limit - 1 items are shown,
        then the marker, then the last item.
    '''
    count = len(items)
    if limit:
        limit = max(limit, 2)
    if not limit or count <= limit:
        for index, item in enumerate(items):
            yield index, item
        return
    for index in range(limit - 1):
        yield index, items[index]
    yield None, count - limit
    yield count - 1, items[count - 1]


def format_bytes(data, limit, unit='bytes'):
    ''' Format bytes as a list of hex pairs, leaving out the
        middle of long sequences.
    '''
    result = []
    for index, item in elide(data, limit):
        if index is None:
            result.append('...skipped %d %s...' % (item, unit))
        else:
            result.append('%02x' % item)
    return '[%s]' % ', '.join(result)


def format_real(value):
    return ('%.9f' % value).rstrip('0').rstrip('.')


def value_kind(obj, isinstance=isinstance):
    ''' Return the kind of a graph value.  The order matters:
        bool is an int, and a PdfStream is a PdfDict.
    '''
    if obj is None:
        return 'null'
    if isinstance(obj, bool):
        return 'bool'
    if isinstance(obj, int):
        return 'integer'
    if isinstance(obj, float):
        return 'real'
    if isinstance(obj, PdfName):
        return 'name'
    if isinstance(obj, PdfString):
        return 'hex' if obj.hexadecimal else 'literal'
    if isinstance(obj, PdfStream):
        return 'stream'
    if isinstance(obj, PdfDict):
        return 'dict'
    if isinstance(obj, PdfArray):
        return 'array'
    if isinstance(obj, PdfReference):
        return 'reference'
    raise TypeError('Not a PDF value: %r' % (obj,))


def object_info(obj, settings=None):
    ''' Return the ObjectInfo for a value.
    '''
    if settings is None:
        settings = DisplaySettings()
    kind = value_kind(obj)
    symbol, type_name = kinds[kind]
    info = ObjectInfo(kind, symbol, type_name)

    if kind == 'null':
        info.value = '<null>'
    elif kind == 'bool':
        info.value = 'true' if obj else 'false'
    elif kind == 'integer':
        info.value = str(obj)
    elif kind == 'real':
        info.value = format_real(obj)
    elif kind == 'name':
        info.value = "'%s'" % obj
    elif kind == 'literal':
        info.value = "'%s'" % obj.to_text()
    elif kind == 'hex':
        info.value = format_bytes(obj, settings.hex_display_limit)
    elif kind == 'array':
        info.extra_info = '(length: %d values)' % len(obj)
    elif kind == 'stream':
        mode = settings.display_stream
        if mode == StreamDisplay.HEX:
            info.value = format_bytes(obj.stream, settings.hex_display_limit)
        elif mode == StreamDisplay.TREE:
            log.error('Setting `display-stream` = `tree` '
                      'is not implemented yet.')
        info.extra_info = '(length: %d bytes)' % len(obj.stream)
    elif kind == 'reference':
        info.value = '(%d,%d)' % obj
    return info
