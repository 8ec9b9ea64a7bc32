#! /usr/bin/env python
# encoding: utf-8
# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m tests.test_walker
'''

import io

from pdftree import (TreePrinter, print_pdf_tree, DisplaySettings,
                     CursorSettings, PlainStyle)
from pdftree.objects import (PdfName, PdfArray, PdfDict, PdfReference,
                             PdfGraph)

import unittest


def render(graph, line_numbers=False, **kw):
    kw.setdefault('display_legend', False)
    out = io.StringIO()
    TreePrinter(graph, DisplaySettings(**kw),
                CursorSettings(print_line_numbers=line_numbers),
                PlainStyle(), out).print_tree()
    return out.getvalue().splitlines()


def page_tree():
    trailer = PdfDict([('Size', 4), ('Root', PdfReference(1, 0))])
    objects = {
        (1, 0): PdfDict([('Type', PdfName('Catalog')),
                         ('Pages', PdfReference(2, 0))]),
        (2, 0): PdfDict([('Type', PdfName('Pages')),
                         ('Kids', PdfArray([PdfReference(3, 0)])),
                         ('Count', 1)]),
        (3, 0): PdfDict([('Type', PdfName('Page')),
                         ('Parent', PdfReference(2, 0))]),
    }
    return PdfGraph(trailer, objects)


def diamond():
    trailer = PdfDict([('A', PdfReference(1, 0)), ('B', PdfReference(1, 0))])
    return PdfGraph(trailer, {(1, 0): PdfDict(X=1)})


class TestWalker(unittest.TestCase):

    def test_page_tree(self):
        expected = [
            "├ Z  Size = 4",
            "└ IR Root = (1,0)",
            "  └ {}",
            "    ├ Nm Type = 'Catalog'",
            "    └ IR Pages = (2,0)",
            "      └ {}",
            "        ├ Nm Type = 'Pages'",
            "        ├ [] Kids (length: 1 values)",
            "        │ └ IR (3,0)",
            "        │   └ {}",
            "        │     ├ Nm Type = 'Page'",
            "        │     └ IR Parent = (2,0)",
            "        │       └ ... (display with `display-parent` flag)",
            "        └ Z  Count = 1",
        ]
        self.assertEqual(render(page_tree()), expected)

    def test_diamond_printed_twice(self):
        expected = [
            "├ IR A = (1,0)",
            "│ └ {}",
            "│   └ Z  X = 1",
            "└ IR B = (1,0)",
            "  └ {}",
            "    └ Z  X = 1",
        ]
        self.assertEqual(render(diamond()), expected)

    def test_line_numbers(self):
        lines = render(diamond(), line_numbers=True)
        self.assertEqual(lines[0], "   1┃├ IR A = (1,0)")
        numbers = [int(x.split('┃')[0]) for x in lines]
        self.assertEqual(numbers, list(range(1, 7)))

    def test_cycle(self):
        graph = PdfGraph(PdfDict(Root=PdfReference(1, 0)),
                         {(1, 0): PdfDict(Next=PdfReference(1, 0))})
        self.assertEqual(render(graph), [
            "└ IR Root = (1,0)",
            "  └ {}",
            "    └ IR Next = (1,0)",
            "      └ ... (display with `display-parent` flag)",
        ])
        self.assertEqual(render(graph, display_parent=True, max_depth=4), [
            "└ IR Root = (1,0)",
            "  └ {}",
            "    └ IR Next = (1,0)",
            "      └ {}",
            "        └ ... (reached `max-depth`)",
        ])

    def test_cycle_entered_twice(self):
        trailer = PdfDict([('A', PdfReference(1, 0)),
                           ('B', PdfReference(2, 0))])
        objects = {
            (1, 0): PdfDict(Next=PdfReference(2, 0)),
            (2, 0): PdfDict(Next=PdfReference(1, 0)),
        }
        self.assertEqual(render(PdfGraph(trailer, objects)), [
            "├ IR A = (1,0)",
            "│ └ {}",
            "│   └ IR Next = (2,0)",
            "│     └ {}",
            "│       └ IR Next = (1,0)",
            "│         └ ... (display with `display-parent` flag)",
            "└ IR B = (2,0)",
            "  └ {}",
            "    └ IR Next = (1,0)",
            "      └ {}",
            "        └ IR Next = (2,0)",
            "          └ ... (display with `display-parent` flag)",
        ])

    def test_array_cycle_terminates(self):
        graph = PdfGraph(PdfDict(Root=PdfReference(1, 0)),
                         {(1, 0): PdfArray([PdfReference(1, 0)])})
        lines = render(graph, display_parent=True, max_depth=6)
        self.assertEqual(lines[-1].strip(), "└ ... (reached `max-depth`)")
        self.assertEqual(len(lines), 7)

    def test_dangling_reference(self):
        trailer = PdfDict([('Info', PdfReference(99, 0)), ('Size', 5)])
        with self.assertLogs('pdftree', 'WARNING'):
            lines = render(PdfGraph(trailer))
        self.assertEqual(lines, [
            "├ IR Info = (99,0)",
            "│ └ Error in PDF: Indirect Reference not found.",
            "└ Z  Size = 5",
        ])

    def test_expand(self):
        trailer = PdfDict([('Root', PdfReference(1, 0)),
                           ('Info', PdfReference(2, 0))])
        objects = {
            (1, 0): PdfDict([('Type', PdfName('Catalog')),
                             ('Pages', PdfReference(3, 0))]),
            (2, 0): PdfDict(Producer=1),
            (3, 0): PdfDict(Count=0),
        }
        graph = PdfGraph(trailer, objects)
        self.assertEqual(render(graph, expand='Root.Pages'), [
            "└ IR Root = (1,0)",
            "  └ {}",
            "    └ IR Pages = (3,0)",
            "      └ {}",
            "        └ Z  Count = 0",
        ])
        self.assertEqual(render(graph, expand='Root.Missing'), [
            "└ IR Root = (1,0)",
            "  └ {}",
        ])

    def test_expand_direct(self):
        child = PdfDict([('B', PdfDict(X=1)), ('C', 2)])
        graph = PdfGraph(PdfDict([('A', child), ('D', 3)]))
        self.assertEqual(render(graph, expand='A.B'), [
            "└ {} A",
            "  └ {} B",
            "    └ Z  X = 1",
        ])

    def test_max_depth(self):
        trailer = PdfDict([('A', PdfDict(B=1)), ('C', PdfDict()),
                           ('D', PdfArray([1]))])
        self.assertEqual(render(PdfGraph(trailer), max_depth=1), [
            "├ {} A",
            "│ └ ... (reached `max-depth`)",
            "├ {} C",
            "└ [] D (length: 1 values)",
            "  └ ... (reached `max-depth`)",
        ])

    def test_font(self):
        trailer = PdfDict([('Font', PdfDict(F1=PdfReference(5, 0))),
                           ('X', 1)])
        graph = PdfGraph(trailer, {(5, 0): PdfDict(Type=PdfName('Font'))})
        self.assertEqual(render(graph), [
            "├ {} Font",
            "│ └ ... (display with `display-font` flag)",
            "└ Z  X = 1",
        ])
        self.assertEqual(render(graph, display_font=True), [
            "├ {} Font",
            "│ └ IR F1 = (5,0)",
            "│   └ {}",
            "│     └ Nm Type = 'Font'",
            "└ Z  X = 1",
        ])

    def test_array_limit(self):
        graph = PdfGraph(PdfDict(K=PdfArray(range(7))))
        self.assertEqual(render(graph, array_display_limit=3), [
            "└ [] K (length: 7 values)",
            "  ├ Z  0",
            "  ├ Z  1",
            "  ├ ...skipped 4 items...",
            "  └ Z  6",
        ])
        self.assertEqual(len(render(graph, array_display_limit=0)), 8)

    def test_type_names(self):
        graph = PdfGraph(PdfDict(Size=3))
        self.assertEqual(render(graph, display_type_names=True),
                         ["└ Z  Size:Integer_Number = 3"])

    def test_legend_and_title(self):
        out = io.StringIO()
        cursor_settings = CursorSettings(print_line_numbers=False)
        print_pdf_tree(PdfGraph(PdfDict(Size=3)),
                       cursor_settings=cursor_settings,
                       title='my.pdf', stream=out)
        lines = out.getvalue().splitlines()
        self.assertTrue(lines[0].startswith('┏'))
        self.assertEqual(lines[12], '┗' + '━' * 30 + '┛')
        self.assertEqual(lines[13:], ['my.pdf', '└ Z  Size = 3'])


def main():
    unittest.main()


if __name__ == '__main__':
    main()
