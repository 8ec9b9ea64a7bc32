# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Print the operations of a content stream as part of the tree.

Every operation is printed in one of two ways:

  - basic: the operator followed by its operands in parentheses,
    e.g. "Tf(Nm 'F1', Z 12)"

  - enhanced: the operator (and optionally its description) on
    one line, then one line per named operand, using the
    operator table in operators.py.

An operation that cannot be described (unknown operator or
missing operands) is logged and printed the basic way.
'''

from .content import parse_content
from .formatter import object_info
from .operators import describe
from .errors import log, OperationError

# Only streams stored under one of these keys are decoded
# unless decoding is forced.
content_labels = frozenset('Contents N R D AP'.split())


def format_operand(printer, obj):
    ''' Format a value for the inside of a single line.
    '''
    paint = printer.style.paint
    info = object_info(obj, printer.settings)
    kind = info.kind
    if kind == 'array':
        return '%s%s%s' % (paint(kind, '['), format_operands(printer, obj),
                           paint(kind, ']'))
    if kind in ('dict', 'stream'):
        items = ('%s:%s' % (key, format_operand(printer, value))
                 for key, value in obj.items())
        return '%s%s%s' % (paint(kind, '{'), ', '.join(items),
                           paint(kind, '}'))
    return '%s %s' % (paint(kind, info.symbol), paint('value', info.value))


def format_operands(printer, operands):
    return ', '.join(format_operand(printer, x) for x in operands)


def print_content_stream(printer, stream, cursor):
    ''' Print the operations in a stream, if the stream is
        known to hold content (or decoding is forced).
    '''
    settings = printer.settings
    paint = printer.style.paint
    path = cursor.current_path()
    if not (settings.force_stream_decoding or
            (path and path[-1] in content_labels)):
        cursor.print_subitem(paint(
            'expand', '... (no content stream, force decoding with '
                      '`force-stream-decoding` flag)'), True)
        return
    if stream.Filter is not None:
        log.error('Stream at %s is still encoded with %s',
                  '.'.join(path), format_operand(printer, stream.Filter))
        cursor.print_subitem(paint(
            'error', 'Error in PDF: Stream is still encoded, '
                     'cannot decode content.'), True)
        return

    operations = parse_content(stream.stream)
    count = len(operations)
    for index, operation in enumerate(operations):
        print_operation(printer, operation, cursor, index + 1 == count)


def print_operation(printer, operation, cursor, last):
    if printer.settings.stream_enhanced_operations:
        try:
            info = describe(operation, printer.settings)
        except OperationError as err:
            log.warning('PDF Error: %s', err)
        else:
            print_enhanced_operation(printer, info, cursor, last)
            return
    print_basic_operation(printer, operation, cursor, last)


def print_basic_operation(printer, operation, cursor, last):
    cursor.print_subitem('%s(%s)' % (
        operation.operator, format_operands(printer, operation.operands)),
        last)


def print_enhanced_operation(printer, info, cursor, last):
    paint = printer.style.paint
    if printer.settings.stream_enhanced_operator_info:
        text = '%s: %s' % (info.operator, paint('extra', info.description))
    else:
        text = info.operator
    cursor.print_subitem(text, last)

    cursor = cursor.push(info.operator, last)
    if info.text is not None:
        cursor.print_subitem("'%s' %s" % (paint('value', info.text),
                                          paint('skipped', '(abbreviated)')),
                             True)
        return
    count = len(info.arguments)
    for index, (name, value) in enumerate(info.arguments.items()):
        cursor.print_subitem('%s: %s' % (name, format_operand(printer, value)),
                             index + 1 == count)
