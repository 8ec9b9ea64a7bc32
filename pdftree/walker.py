# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Walk a PdfGraph and print it as a tree.

Starting at the trailer, every dictionary entry and array
item gets one line, followed by the lines of its contents.
Indirect references are followed, so the whole document
that can be reached from the trailer is printed, subject to:

  - max_depth: a dictionary or array that deep is replaced
    by a marker line
  - expand: only the subtree on the given path of keys
    is printed
  - array_display_limit: long arrays have their middle
    replaced by a marker line
  - display_font: /Font dictionaries are only printed on request
  - display_parent: a reference back to an object that is
    being printed (such as /Parent in the page tree) is only
    followed on request

Only references back to an ancestor are cut.  An object that
can be reached along two different paths is printed twice.
'''

from .cursor import TreeCursor
from .formatter import object_info, value_kind, elide
from .legend import print_legend
from .settings import DisplaySettings, CursorSettings
from .streamview import print_content_stream
from .styles import PlainStyle
from .errors import log, DanglingReference, ExpandPathMismatch


class TreePrinter(object):
    ''' Prints one PdfGraph.

            graph = the PdfGraph to print
            settings = DisplaySettings
            cursor_settings = CursorSettings
            style = PlainStyle or AnsiStyle instance
            stream = file-like object to print to (default stdout)
    '''

    def __init__(self, graph, settings=None, cursor_settings=None,
                 style=None, stream=None):
        self.graph = graph
        self.settings = settings or DisplaySettings()
        self.cursor_settings = cursor_settings or CursorSettings()
        self.style = style or PlainStyle()
        self.stream = stream

    def print_tree(self, title=None):
        ''' Print the legend (if enabled), the title and the tree.
        '''
        cursor = TreeCursor.new(self.cursor_settings, self.style,
                                self.stream)
        write = cursor.output.write
        if self.settings.display_legend:
            print_legend(write, self.style)
        if title is not None:
            write(self.style.paint('title', title))
        self.print_dictionary(self.graph.trailer, cursor)

    def object_line(self, label, obj):
        ''' Return the text of the line for one value, with its
            dictionary key (or None for array items).
        '''
        info = object_info(obj, self.settings)
        paint = self.style.paint
        type_name = ''
        if self.settings.display_type_names:
            type_name = paint('helper', ':') + paint('type', info.type_name)

        parts = [paint(info.kind, info.symbol.ljust(2))]
        if label is not None:
            parts.append(label + type_name)
            if info.value:
                parts.append(paint('helper', '='))
        elif not info.value:
            parts.append(type_name)
        parts.append(paint('value', info.value))
        parts.append(paint('extra', info.extra_info))
        return ' '.join(x for x in parts if x)

    def depth_reached(self, cursor):
        ''' True (after printing a marker) if the cursor is too
            deep to print the contents of a container.
        '''
        if cursor.depth_count() < self.settings.max_depth:
            return False
        cursor.print_subitem(self.style.paint(
            'expand', '... (reached `max-depth`)'), True)
        return True

    def print_content(self, obj, cursor):
        ''' Print whatever is below the line of a value.
        '''
        kind = value_kind(obj)
        if kind == 'array':
            self.print_array(obj, cursor)
        elif kind == 'dict':
            self.print_dictionary(obj, cursor)
        elif kind == 'stream':
            print_content_stream(self, obj, cursor)
        elif kind == 'reference':
            self.print_reference(obj, cursor)

    def print_dictionary(self, pdfdict, cursor):
        if not pdfdict or self.depth_reached(cursor):
            return
        settings = self.settings
        paint = self.style.paint
        try:
            expand_label = cursor.next_expand_label(settings)
        except ExpandPathMismatch as err:
            log.debug('Took wrong path in tree somewhere: %s', err)
            return

        items = list(pdfdict.items())
        if expand_label is not None:
            items = [x for x in items if x[0] == expand_label]
        count = len(items)
        for index, (label, value) in enumerate(items):
            is_last = index + 1 == count
            cursor.print_subitem(self.object_line(label, value), is_last)
            child = cursor.push(label, is_last)
            if label == 'Font' and not settings.display_font:
                child.print_subitem(paint(
                    'expand', '... (display with `display-font` flag)'), True)
                continue
            self.print_content(value, child)

    def print_array(self, array, cursor):
        if not array or self.depth_reached(cursor):
            return
        paint = self.style.paint
        count = len(array)
        for index, item in elide(array, self.settings.array_display_limit):
            if index is None:
                cursor.print_subitem(paint(
                    'skipped', '...skipped %d items...' % item), False)
                continue
            is_last = index + 1 == count
            cursor.print_subitem(self.object_line(None, item), is_last)
            self.print_content(item, cursor.push(None, is_last))

    def print_reference(self, ref, cursor):
        ''' Look up a reference and print the object it points to,
            unless that object is already being printed further up.
        '''
        paint = self.style.paint
        try:
            obj = self.graph.resolve(ref)
        except DanglingReference as err:
            log.warning('PDF Error: %s', err)
            cursor.print_subitem(paint(
                'error', 'Error in PDF: Indirect Reference not found.'), True)
            return
        if cursor.is_ancestor(ref) and not self.settings.display_parent:
            cursor.print_subitem(paint(
                'expand', '... (display with `display-parent` flag)'), True)
            return
        cursor.print_subitem(self.object_line(None, obj), True)
        self.print_content(obj, cursor.push(None, True).record_ancestor(ref))


def print_pdf_tree(graph, settings=None, cursor_settings=None, title=None,
                   style=None, stream=None):
    ''' Print a PdfGraph as a tree.
    '''
    TreePrinter(graph, settings, cursor_settings, style,
                stream).print_tree(title)
