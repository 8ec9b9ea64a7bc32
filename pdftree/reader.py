# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Build a PdfGraph from a PDF file.

Reading the file, repairing broken cross reference tables
and decompressing streams is all done by pdfrw.  This module
only converts pdfrw's objects into graph values.

pdfrw replaces indirect objects by their values as soon as
they are looked at.  To keep the shape of the graph, the
conversion never looks anything up:  dictionaries and arrays
are read with the plain dict and list methods, so unread
objects are still PdfIndirect placeholders, and containers
that have been read already still carry their object number
in their indirect attribute.
'''

import binascii
import re

from pdfrw import PdfReader
from pdfrw.objects import (PdfDict as RawDict, PdfArray as RawArray,
                           PdfString as RawString, PdfIndirect)
from pdfrw.objects.pdfname import BasePdfName

from .objects import (PdfName, PdfString, PdfArray, PdfDict, PdfStream,
                      PdfReference, PdfGraph)
from .errors import log

keywords = {'true': True, 'false': False, 'null': None}

match_int = re.compile(r'[+-]?\d+$').match
match_real = re.compile(r'[+-]?(?:\d+\.\d*|\.\d+)$').match


def parse_scalar(token):
    ''' Convert the text of a number or keyword token.
        Raises ValueError for anything else (such as
        a content stream operator).
    '''
    if token in keywords:
        return keywords[token]
    if match_int(token):
        return int(token)
    if match_real(token):
        return float(token)
    raise ValueError('Not a PDF number or keyword: %r' % (token,))


def decode_hex(token):
    ''' Decode the body of a <hex> string token.  A missing
        final digit is 0, which pdfrw does not handle.
    '''
    digits = ''.join(token[1:-1].split())
    if len(digits) % 2:
        digits += '0'
    return binascii.unhexlify(digits)


def to_string(token):
    ''' Convert a pdfrw string token.  A token that cannot be
        decoded is logged and kept as the literal text of the token.
    '''
    hexadecimal = token.startswith('<')
    try:
        if hexadecimal and token.endswith('>'):
            data = decode_hex(token)
        else:
            data = token.to_bytes()
    except ValueError as err:
        log.warning('Could not decode string %r: %s', str(token), err)
        return PdfString(str(token).encode('latin-1', 'replace'))
    return PdfString(data, hexadecimal)


def to_value(obj, isinstance=isinstance):
    ''' Convert a single pdfrw token or Python scalar into
        a graph value.
    '''
    if obj is None or isinstance(obj, (bool, int, float)):
        return obj
    if isinstance(obj, BasePdfName):
        return PdfName(obj[1:])
    if isinstance(obj, RawString):
        return to_string(obj)
    try:
        return parse_scalar(str(obj))
    except ValueError:
        log.warning('Unexpected token %r, keeping it as a string', obj)
        return PdfString(str(obj))


def convert(obj, top=False, isinstance=isinstance, tuple=tuple):
    ''' Convert a pdfrw object into a graph value.  Unless top
            is true, an indirect object becomes a PdfReference.
    '''
    if isinstance(obj, PdfIndirect):
        return PdfReference(*obj)
    if not isinstance(obj, (RawDict, RawArray)):
        # Scalars that were already resolved cannot be told apart
        # from direct ones:  pdfrw caches scalar tokens, so their
        # indirect attribute may belong to some other object.
        return to_value(obj)
    indirect = obj.indirect
    if not top and isinstance(indirect, tuple):
        return PdfReference(*indirect)
    if isinstance(obj, RawArray):
        return PdfArray(convert(x) for x in list.__iter__(obj))
    items = [(PdfName(key[1:]), convert(value))
             for key, value in dict.items(obj)]
    stream = obj.stream
    if stream is None:
        return PdfDict(items)
    if not isinstance(stream, bytes):
        stream = stream.encode('latin-1')
    return PdfStream(items, stream=stream)


def graph_from_reader(reader):
    ''' Convert a pdfrw PdfReader into a PdfGraph.  Objects
        that pdfrw could not find are left out, so references
        to them show up as dangling.
    '''
    objects = {}
    for key, obj in reader.indirect_objects.items():
        if obj is None or isinstance(obj, PdfIndirect):
            log.warning('Object %s %s R could not be loaded', *key)
            continue
        objects[key] = convert(obj, True)
    return PdfGraph(convert(reader, True), objects, reader.version)


def load(fname=None, fdata=None, decompress=True, **kw):
    ''' Read a PDF file (by name, file object, or data) and
        return its PdfGraph.  Extra keyword arguments go to
        pdfrw.PdfReader.
    '''
    reader = PdfReader(fname, fdata=fdata, decompress=decompress, **kw)
    reader.read_all()
    return graph_from_reader(reader)
