# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Traversal state for the tree printer.

A TreeCursor describes one point in the tree:  the labels
and line drawing state of every level above it, and the
object numbers of the indirect objects it is inside of.
Cursors are never changed.  Descending creates a new cursor,
so sibling branches cannot see each other's state.

What has to be shared by the whole tree (the line counter,
the output stream and the style) lives in a single
TreeOutput, which every cursor of the tree points to.
The tree is printed depth first by a single thread, so the
line numbers come out in order.
'''

import sys

from .settings import CursorSettings
from .styles import PlainStyle
from .errors import ExpandPathMismatch

ARROW_LAST_CHAR = '└'      # Last child
ARROW_CHAR = '├'           # Child with more siblings below
INDENT_CHAR = '│'          # Ancestor with more siblings below
LINE_NUMBER_CHAR = '┃'


class TreeOutput(object):
    ''' The line counter and output of one tree.
    '''

    def __init__(self, settings=None, style=None, stream=None):
        self.settings = settings or CursorSettings()
        self.style = style or PlainStyle()
        self.stream = stream
        self.line_number = 0

    def next_line_number(self):
        self.line_number += 1
        return self.line_number

    def write(self, text):
        stream = self.stream
        if stream is None:
            stream = sys.stdout
        stream.write(text + '\n')


class DepthInfo(object):
    ''' One level of the tree above a cursor.

        name = dictionary key or operator (None for array
               items and resolved references)
        indent_line = draw a vertical line at this level,
                      because more siblings follow
    '''
    __slots__ = 'name indent_line'.split()

    def __init__(self, name, indent_line):
        self.name = name
        self.indent_line = indent_line


class TreeCursor(object):

    def __init__(self, output, depth=(), ancestors=frozenset()):
        self.output = output
        self.depth = depth
        self.ancestors = ancestors

    @classmethod
    def new(cls, settings=None, style=None, stream=None):
        ''' Create the root cursor of a new, independent tree.
        '''
        return cls(TreeOutput(settings, style, stream))

    def push(self, name, is_last):
        ''' Return a cursor one level further down.  The line
            drawn at the new level stops if is_last is true.
        '''
        depth = self.depth + (DepthInfo(name, not is_last),)
        return type(self)(self.output, depth, self.ancestors)

    def record_ancestor(self, ref):
        ''' Return a copy of this cursor that is inside the
            indirect object ref.
        '''
        ancestors = self.ancestors | frozenset([tuple(ref)])
        return type(self)(self.output, self.depth, ancestors)

    def is_ancestor(self, ref):
        return tuple(ref) in self.ancestors

    def depth_count(self):
        return len(self.depth)

    def current_path(self):
        ''' The labels of all named levels above the cursor.
        '''
        return [x.name for x in self.depth if x.name is not None]

    def next_expand_label(self, settings):
        ''' Return the label of the expand path that has to be
            chosen at this level, or None if every child should
            be printed.  Raises ExpandPathMismatch if the cursor
            is not on the expand path.
        '''
        expand = settings.expand
        if not expand:
            return None
        path = self.current_path()
        for index, label in enumerate(expand):
            if index >= len(path):
                return label
            if path[index] != label:
                raise ExpandPathMismatch(
                    'Path %s is not on expand path %s' %
                    ('.'.join(path), '.'.join(expand)))
        return None

    def print_subitem(self, text, last):
        ''' Print one line of the tree below this cursor.
        '''
        output = self.output
        settings = output.settings
        paint = output.style.paint

        parts = []
        if settings.print_line_numbers:
            number = str(output.next_line_number())
            parts.append(number.rjust(settings.line_number_padding))
            parts.append(LINE_NUMBER_CHAR)
        for item in self.depth:
            parts.append(paint('tree', INDENT_CHAR) if item.indent_line
                         else ' ')
            parts.append(' ')
        parts.append(paint('tree', ARROW_LAST_CHAR if last else ARROW_CHAR))
        parts.append(' ')
        parts.append(text)
        output.write(''.join(parts))
