# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
The legend printed above the tree:  one line per kind of
value, showing the symbol used for it in the tree.
'''

from .objects import (PdfName, PdfString, PdfArray, PdfDict, PdfStream,
                      PdfReference)
from .formatter import object_info
from .settings import DisplaySettings
from .styles import PlainStyle

examples = [
    None,
    True,
    0,
    0.0,
    PdfName(''),
    PdfString(b''),
    PdfString(b'', hexadecimal=True),
    PdfArray(),
    PdfDict(),
    PdfStream(),
    PdfReference(0, 0),
]


def table_line(obj, style, width, settings=DisplaySettings()):
    info = object_info(obj, settings)
    symbol = info.symbol.ljust(2)
    plain_text = '%s %s' % (symbol, info.type_name)
    styled_text = '%s %s' % (style.paint(info.kind, symbol), info.type_name)
    return '┃ %s%s┃' % (styled_text, ' ' * (width - len(plain_text) - 1))


def legend_lines(style=None, width=30):
    style = style or PlainStyle()
    half = '━' * ((width - 8) // 2)
    yield '┏%s Legend %s┓' % (half, half)
    for obj in examples:
        yield table_line(obj, style, width)
    yield '┗%s┛' % ('━' * width)


def print_legend(write, style=None, width=30):
    ''' Print the legend, one line per call to write.
    '''
    for line in legend_lines(style, width):
        write(line)
