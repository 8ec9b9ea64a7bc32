# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

from .walker import TreePrinter, print_pdf_tree
from .info import print_pdf_info
from .settings import DisplaySettings, CursorSettings, StreamDisplay
from .styles import PlainStyle, AnsiStyle
from .objects import (PdfName, PdfString, PdfArray, PdfDict, PdfStream,
                      PdfReference, PdfGraph)
from .errors import PdfTreeError

__version__ = '0.1'

__all__ = """TreePrinter print_pdf_tree print_pdf_info DisplaySettings
             CursorSettings StreamDisplay PlainStyle AnsiStyle PdfName
             PdfString PdfArray PdfDict PdfStream PdfReference PdfGraph
             PdfTreeError""".split()
