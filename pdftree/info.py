# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
A short summary of a document, printed before the tree.
'''

from .styles import PlainStyle


def info_lines(graph, style=None):
    style = style or PlainStyle()
    paint = style.paint
    objects = graph.objects
    items = [
        ('Version', graph.version or 'unknown'),
        ('Trailer', ', '.join(graph.trailer) or '(empty)'),
        ('Objects amount', len(objects)),
        ('Max Object Id', max([x[0] for x in objects] or [0])),
    ]
    yield '--- %s ---' % paint('title', 'PDF Info')
    for label, value in items:
        yield '%s: %s' % (label, paint('value', str(value)))


def print_pdf_info(graph, write, style=None):
    for line in info_lines(graph, style):
        write(line)
