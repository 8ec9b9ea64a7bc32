# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
What each content stream operator means.

The operators are listed in Table A.1 of the PDF 1.7
reference.  Each entry in the operators table is built by
one of three functions:

    fixed(description, *names) -- the operator takes the named
        operands, in this order.  Every one of them is required.

    unbounded(description, prefix) -- the operator takes any
        number of operands, which are numbered with the prefix.

    special(description, formatter, *names) -- the formatter
        turns the operation into a single line of text.

describe() looks an operation up in the table and pairs its
operands with their names.
'''

from collections import OrderedDict

from .objects import PdfArray
from .formatter import object_info, value_kind
from .errors import log, UnknownOperator, MissingOperand, BadOperand


class Operator(object):
    ''' One entry of the operator table.

            description = what the operator does
            operands = names of the operands
            prefix = operand name prefix, for operators taking
                     any number of operands
            formatter = function(operation, settings) returning the
                        text for the operation, or None
    '''
    __slots__ = 'description operands prefix formatter'.split()

    def __init__(self, description, operands=(), prefix=None,
                 formatter=None):
        self.description = description
        self.operands = operands
        self.prefix = prefix
        self.formatter = formatter


class OperationInfo(object):
    ''' An operation with the meaning of its operands.
        Exactly one of arguments (an OrderedDict of operand
        name to value) and text is set.
    '''
    __slots__ = 'operator description arguments text'.split()

    def __init__(self, operator, description, arguments=None, text=None):
        self.operator = operator
        self.description = description
        self.arguments = arguments
        self.text = text


def fixed(description, *names):
    return Operator(description, names)


def unbounded(description, prefix):
    return Operator(description, prefix=prefix)


def special(description, formatter, *names):
    return Operator(description, names, formatter=formatter)


def get_operand(operation, index):
    operands = operation.operands
    if index >= len(operands):
        raise MissingOperand('Value %d for operation %s is missing.' %
                             (index, operation.operator))
    return operands[index]


def show_text_array(operation, settings):
    ''' Join the strings of a TJ array into a single string.
        Negative adjustments usually separate words, so they
        become spaces.
    '''
    array = get_operand(operation, 0)
    if not isinstance(array, PdfArray):
        raise BadOperand('Operand of `TJ` is not an array.')
    result = []
    for item in array:
        kind = value_kind(item)
        if kind == 'literal':
            result.append(item.to_text())
        elif kind == 'hex':
            result.append(object_info(item, settings).value)
        elif kind in ('integer', 'real'):
            if item < 0:
                result.append(' ')
        else:
            log.warning('Only strings and numbers expected in `TJ` operator.')
    return ''.join(result)


operators = {
    # General graphics state
    'w': fixed('Set line width.', 'lineWidth'),
    'J': fixed('Set line cap style.', 'lineCap'),
    'j': fixed('Set line join style.', 'lineJoin'),
    'M': fixed('Set miter limit.', 'miterLimit'),
    'd': fixed('Set line dash pattern.', 'dashArray', 'dashPhase'),
    'ri': fixed('Set color rendering intent.', 'intent'),
    'i': fixed('Set flatness tolerance.', 'flatness'),
    'gs': fixed('(PDF 1.2) Set parameters from graphics state '
                'parameter dictionary.', 'dictName'),

    # Special graphics state
    'q': fixed('Save graphics state.'),
    'Q': fixed('Restore graphics state.'),
    'cm': fixed('Concatenate matrix to current transformation matrix. '
                '`[a b 0; c d 0; e f 1]`', 'a', 'b', 'c', 'd', 'e', 'f'),

    # Path construction
    'm': fixed('Begin new subpath.', 'x', 'y'),
    'l': fixed('Append straight line segment to path.', 'x', 'y'),
    'c': fixed('Append curved segment to path (three control points).',
               'x1', 'y1', 'x2', 'y2', 'x3', 'y3'),
    'v': fixed('Append curved segment to path (initial point replicated).',
               'x2', 'y2', 'x3', 'y3'),
    'y': fixed('Append curved segment to path (final point replicated).',
               'x1', 'y1', 'x3', 'y3'),
    'h': fixed('Close subpath.'),
    're': fixed('Append rectangle to path.', 'x', 'y', 'width', 'height'),

    # Path painting
    'S': fixed('Stroke path.'),
    's': fixed('Close and stroke path.'),
    'f': fixed('Fill path using nonzero winding number rule.'),
    'F': fixed('Fill path using nonzero winding number rule (obsolete).'),
    'f*': fixed('Fill path using even-odd rule.'),
    'B': fixed('Fill and stroke path using nonzero winding number rule.'),
    'B*': fixed('Fill and stroke path using even-odd rule.'),
    'b': fixed('Close, fill, and stroke path using nonzero winding '
               'number rule.'),
    'b*': fixed('Close, fill, and stroke path using even-odd rule.'),
    'n': fixed('End path without filling or stroking.'),

    # Clipping paths
    'W': fixed('Set clipping path using nonzero winding number rule.'),
    'W*': fixed('Set clipping path using even-odd rule.'),

    # Text objects
    'BT': fixed('Begin text object.'),
    'ET': fixed('End text object.'),

    # Text state
    'Tc': fixed('Set character spacing.', 'charSpace'),
    'Tw': fixed('Set word spacing.', 'wordSpace'),
    'Tz': fixed('Set horizontal text scaling.', 'scale'),
    'TL': fixed('Set text leading.', 'leading'),
    'Tf': fixed('Set text font and size.', 'font', 'size'),
    'Tr': fixed('Set text rendering mode.', 'render'),
    'Ts': fixed('Set text rise.', 'rise'),

    # Text positioning
    'Td': fixed('Move text position.', 'Tx', 'Ty'),
    'TD': fixed('Move text position and set leading.', 'Tx', 'Ty'),
    'Tm': fixed('Set text matrix and text line matrix. '
                '`[a b 0; c d 0; e f 1]`', 'a', 'b', 'c', 'd', 'e', 'f'),
    'T*': fixed('Move to start of next text line.'),

    # Text showing
    'Tj': fixed('Show text.', 'string'),
    'TJ': special('Show text, allowing individual glyph positioning.',
                  show_text_array, 'array'),
    "'": fixed('Move to next line and show text.', 'string'),
    '"': fixed('Set word and character spacing, move to next line, '
               'and show text.', 'aWord', 'aChar', 'string'),

    # Type 3 fonts
    'd0': fixed('Set glyph width in Type 3 font.', 'wx', 'wy'),
    'd1': fixed('Set glyph width and bounding box in Type 3 font.',
                'wx', 'wy', 'llx', 'lly', 'urx', 'ury'),

    # Color
    'CS': fixed('(PDF 1.1) Set color space for stroking operations.',
                'name'),
    'cs': fixed('(PDF 1.1) Set color space for nonstroking operations.',
                'name'),
    'SC': unbounded('(PDF 1.1) Set color for stroking operations.', 'c'),
    'SCN': unbounded('(PDF 1.2) Set color for stroking operations '
                     '(ICCBased and special colour spaces).', 'c'),
    'sc': unbounded('(PDF 1.1) Set color for nonstroking operations.', 'c'),
    'scn': unbounded('(PDF 1.2) Set color for nonstroking operations '
                     '(ICCBased and special colour spaces).', 'c'),
    'G': fixed('Set gray level for stroking operations. '
               '(0=black, 1=white)', 'gray'),
    'g': fixed('Set gray level for nonstroking operations. '
               '(0=black, 1=white)', 'gray'),
    'RG': fixed('Set RGB color for stroking operations.',
                'red', 'green', 'blue'),
    'rg': fixed('Set RGB color for nonstroking operations.',
                'red', 'green', 'blue'),
    'K': fixed('Set CMYK color for stroking operations.',
               'cyan', 'magenta', 'yellow', 'key/black'),
    'k': fixed('Set CMYK color for nonstroking operations.',
               'cyan', 'magenta', 'yellow', 'key/black'),

    # Shading patterns
    'sh': fixed('(PDF 1.3) Paint area defined by shading pattern.', 'name'),

    # Inline images (content.py hands the parameters and data to ID)
    'BI': fixed('Begin inline image object.'),
    'ID': fixed('Begin inline image data.', 'parameters', 'data'),
    'EI': fixed('End inline image object.'),

    # XObjects
    'Do': fixed('Invoke named XObject.', 'name'),

    # Marked content
    'MP': fixed('(PDF 1.2) Define marked-content point.', 'tag'),
    'DP': fixed('(PDF 1.2) Define marked-content point with property list.',
                'tag', 'properties'),
    'BMC': fixed('(PDF 1.2) Begin marked-content sequence.', 'tag'),
    'BDC': fixed('(PDF 1.2) Begin marked-content sequence with '
                 'property list.', 'tag', 'properties'),
    'EMC': fixed('(PDF 1.2) End marked-content sequence.'),

    # Compatibility
    'BX': fixed('(PDF 1.1) Begin compatibility section.'),
    'EX': fixed('(PDF 1.1) End compatibility section.'),
}


def describe(operation, settings=None):
    ''' Return the OperationInfo for an operation.

        Raises UnknownOperator if the operator is not in the
        table, MissingOperand if a named operand is missing,
        and BadOperand if a formatter cannot use an operand.
        Operands beyond the named ones are only logged, and
        are listed as Unknown_<index>.
    '''
    operator = operation.operator
    entry = operators.get(operator)
    if entry is None:
        raise UnknownOperator('Operator %s is unknown' % operator)

    operands = operation.operands
    names = entry.operands
    if entry.prefix is None and len(operands) > len(names):
        log.warning('`%s` operation does not support more than %d values.',
                    operator, len(names))

    if entry.formatter is not None:
        return OperationInfo(operator, entry.description,
                             text=entry.formatter(operation, settings))

    arguments = OrderedDict()
    if entry.prefix is not None:
        for index, value in enumerate(operands):
            arguments['%s%d' % (entry.prefix, index)] = value
    else:
        for index, name in enumerate(names):
            arguments[name] = get_operand(operation, index)
        for index in range(len(names), len(operands)):
            arguments['Unknown_%d' % index] = operands[index]
    return OperationInfo(operator, entry.description, arguments)
