#! /usr/bin/env python
# encoding: utf-8
# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m tests.test_streamview
'''

import io

from pdftree import TreePrinter, DisplaySettings, CursorSettings, PlainStyle
from pdftree.objects import PdfName, PdfDict, PdfStream, PdfGraph

import unittest

text_ops = b'BT /F1 12 Tf (Hi) Tj ET'


def render(data, label='Contents', stream_dict=(), **kw):
    stream = PdfStream(stream_dict, stream=data)
    out = io.StringIO()
    TreePrinter(PdfGraph(PdfDict([(label, stream)])),
                DisplaySettings(display_legend=False, **kw),
                CursorSettings(print_line_numbers=False),
                PlainStyle(), out).print_tree()
    lines = out.getvalue().splitlines()
    return lines[1:]


class TestContentStream(unittest.TestCase):

    def test_enhanced(self):
        self.assertEqual(render(text_ops), [
            "  ├ BT: Begin text object.",
            "  ├ Tf: Set text font and size.",
            "  │ ├ font: Nm 'F1'",
            "  │ └ size: Z 12",
            "  ├ Tj: Show text.",
            "  │ └ string: az 'Hi'",
            "  └ ET: End text object.",
        ])

    def test_without_operator_info(self):
        lines = render(text_ops, stream_enhanced_operator_info=False)
        self.assertEqual(lines[0], "  ├ BT")
        self.assertEqual(lines[1], "  ├ Tf")
        self.assertEqual(lines[-1], "  └ ET")

    def test_basic(self):
        self.assertEqual(render(text_ops, stream_enhanced_operations=False), [
            "  ├ BT()",
            "  ├ Tf(Nm 'F1', Z 12)",
            "  ├ Tj(az 'Hi')",
            "  └ ET()",
        ])

    def test_nested_operands(self):
        data = b'/Span <</MCID 0>> BDC [1 2] 0 d'
        self.assertEqual(render(data, stream_enhanced_operations=False), [
            "  ├ BDC(Nm 'Span', {MCID:Z 0})",
            "  └ d([Z 1, Z 2], Z 0)",
        ])

    def test_fallback_is_basic(self):
        data = b'1 XX 0 0 1 re'
        with self.assertLogs('pdftree', 'WARNING'):
            enhanced = render(data)
        basic = render(data, stream_enhanced_operations=False)
        self.assertEqual(enhanced, basic)
        self.assertEqual(basic, ["  ├ XX(Z 1)", "  └ re(Z 0, Z 0, Z 1)"])

    def test_show_text_array(self):
        self.assertEqual(render(b'[(Hel) -300 (lo)] TJ'), [
            "  └ TJ: Show text, allowing individual glyph positioning.",
            "    └ 'Hel lo' (abbreviated)",
        ])

    def test_not_a_content_stream(self):
        hint = ("  └ ... (no content stream, force decoding with "
                "`force-stream-decoding` flag)")
        self.assertEqual(render(text_ops, label='Data'), [hint])
        lines = render(text_ops, label='Data', force_stream_decoding=True)
        self.assertEqual(lines[0], "  ├ BT: Begin text object.")

    def test_still_encoded(self):
        with self.assertLogs('pdftree', 'ERROR'):
            lines = render(b'x\x9c', stream_dict=[('Filter',
                                                   PdfName('FlateDecode'))])
        self.assertEqual(lines, ["  └ Error in PDF: Stream is still "
                                 "encoded, cannot decode content."])

    def test_malformed_stream(self):
        self.assertEqual(render(b"q <4> Tj", stream_enhanced_operations=False),
                         ["  ├ q()", "  └ Tj(0x [40])"])
        data = b"q " + b"[" * 5000 + b" 1 " + b"]" * 5000 + b" Tj"
        with self.assertLogs("pdftree", "WARNING"):
            lines = render(data)
        self.assertEqual(lines, ["  └ q: Save graphics state."])

    def test_empty_stream(self):
        self.assertEqual(render(b''), [])


def main():
    unittest.main()


if __name__ == '__main__':
    main()
