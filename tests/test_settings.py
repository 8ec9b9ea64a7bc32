#! /usr/bin/env python
# encoding: utf-8
# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m tests.test_settings
'''

from pdftree.settings import DisplaySettings, CursorSettings, StreamDisplay
from pdftree.errors import PdfTreeError

import unittest


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        settings = DisplaySettings()
        self.assertEqual(settings.max_depth, 20)
        self.assertEqual(settings.expand, None)
        self.assertEqual(settings.array_display_limit, 5)
        self.assertEqual(settings.hex_display_limit, 16)
        self.assertEqual(settings.display_stream, StreamDisplay.NONE)
        self.assertTrue(settings.display_legend)
        self.assertFalse(settings.display_parent)
        cursor = CursorSettings()
        self.assertTrue(cursor.print_line_numbers)
        self.assertEqual(cursor.line_number_padding, 4)

    def test_normalize(self):
        settings = DisplaySettings(expand='Root.Pages', array_display_limit=0,
                                   max_depth=None, display_stream='structured')
        self.assertEqual(settings.expand, ('Root', 'Pages'))
        self.assertEqual(settings.array_display_limit, None)
        self.assertEqual(settings.max_depth, 20)
        self.assertEqual(settings.display_stream, StreamDisplay.TREE)
        settings = DisplaySettings(expand=['Root'])
        self.assertEqual(settings.expand, ('Root',))

    def test_read_only(self):
        settings = DisplaySettings()
        with self.assertRaises(AttributeError):
            settings.max_depth = 3
        self.assertEqual(settings.max_depth, 20)

    def test_unknown_setting(self):
        self.assertRaises(TypeError, DisplaySettings, max_dept=3)
        self.assertRaises(TypeError, CursorSettings, max_depth=3)

    def test_stream_display(self):
        self.assertEqual(StreamDisplay.parse('HEX'), StreamDisplay.HEX)
        self.assertEqual(StreamDisplay.parse('no_display'),
                         StreamDisplay.NONE)
        self.assertRaises(PdfTreeError, StreamDisplay.parse, 'pretty')
        self.assertRaises(PdfTreeError, DisplaySettings, display_stream=None)


def main():
    unittest.main()


if __name__ == '__main__':
    main()
