# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Split a decoded content stream into operations.

Tokenizing is done by pdfrw's PdfTokens.  Operands are
collected until an operator (any token that is not a value)
is found, and the operator and its operands become one
Operation.

Inline images need special handling, because the image data
between ID and EI is binary and cannot be tokenized.

A content stream that cannot be tokenized is not fatal:  the
problem is logged, and the operations found so far are
returned.
'''

import re

from pdfrw import PdfTokens, PdfParseError
from pdfrw.objects import PdfObject, PdfString as RawString
from pdfrw.objects.pdfname import BasePdfName

from .objects import PdfArray, PdfDict, PdfString
from .reader import parse_scalar, to_value
from .errors import log

# Deeper nesting than this is treated as a broken stream
max_nesting = 100

# End of inline image data:  whitespace, EI, whitespace or end of data
find_image_end = re.compile(r'[\x00\t\n\f\r ]EI(?=[\x00\t\n\f\r ]|$)').search


class Operation(object):
    ''' One operator from a content stream, with its operands.
    '''
    __slots__ = 'operator operands'.split()

    def __init__(self, operator, operands=()):
        self.operator = operator
        self.operands = list(operands)

    def __eq__(self, other):
        return (isinstance(other, Operation) and
                self.operator == other.operator and
                self.operands == other.operands)

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return 'Operation(%r, %r)' % (self.operator, self.operands)


def is_operator(token, isinstance=isinstance):
    ''' True if a token is an operator rather than an operand.
    '''
    if not isinstance(token, PdfObject):
        return False
    try:
        parse_scalar(token)
    except ValueError:
        return True
    return False


def read_value(token, source, depth=0):
    ''' Convert an operand token, reading the rest of the
        array or dictionary it starts if necessary.
    '''
    if token in ('[', '<<') and depth >= max_nesting:
        source.exception('Arrays and dictionaries nested too deeply')
    if token == '[':
        result = PdfArray()
        for token in source:
            if token == ']':
                return result
            result.append(read_value(token, source, depth + 1))
        source.exception('Unterminated array')
    if token == '<<':
        result = PdfDict()
        for token in source:
            if token == '>>':
                return result
            if not isinstance(token, BasePdfName):
                source.exception('Expected PDF /name object')
            result[token[1:]] = read_value(source.next(), source, depth + 1)
        source.exception('Unterminated dictionary')
    if isinstance(token, (PdfObject, BasePdfName, RawString)):
        if not is_operator(token):
            return to_value(token)
        source.exception('Unexpected operator inside array or dictionary')
    source.exception('Unexpected delimiter')


def read_inline_image(source, operands):
    ''' Called just after the ID token.  Skip the source past
        the image data, and return the operands of the ID
        operation:  the image parameters and the image data.
    '''
    fdata = source.fdata
    start = source.tokstart + 3     # 'ID' and one whitespace character
    match = find_image_end(fdata, start)
    if match is None:
        source.warning('Inline image data is not followed by EI')
        end = len(fdata)
    else:
        end = match.start()
    source.floc = end
    params = PdfDict(zip(operands[0::2], operands[1::2]))
    data = PdfString(fdata[start:end].encode('latin-1'), hexadecimal=True)
    return [params, data]


def parse_content(data):
    ''' Return the list of operations in a decoded content stream.
    '''
    source = PdfTokens(data.decode('latin-1'))
    operations = []
    operands = []
    try:
        for token in source:
            if is_operator(token):
                if token == 'ID':
                    operands = read_inline_image(source, operands)
                operations.append(Operation(str(token), operands))
                operands = []
            elif token in ('[', '<<') or isinstance(
                    token, (PdfObject, BasePdfName, RawString)):
                operands.append(read_value(token, source))
            else:
                source.warning('Unexpected delimiter in content stream')
    except (PdfParseError, ValueError, StopIteration) as err:
        log.warning('Could not parse content stream: %s', err)
    else:
        if operands:
            log.warning('Dropping %d operands without an operator at '
                        'end of content stream', len(operands))
    return operations
