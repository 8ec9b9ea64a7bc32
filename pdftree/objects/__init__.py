# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Values that can occur in a PDF object graph.

Null, booleans, integers and reals are plain Python None, bool,
int and float.  Everything else is a thin subclass of a builtin,
so the graph can be built and inspected with ordinary Python.
'''
from .pdfname import PdfName
from .pdfstring import PdfString
from .pdfarray import PdfArray
from .pdfdict import PdfDict, PdfStream
from .pdfreference import PdfReference
from .pdfgraph import PdfGraph

__all__ = """PdfName PdfString PdfArray PdfDict PdfStream
             PdfReference PdfGraph""".split()
