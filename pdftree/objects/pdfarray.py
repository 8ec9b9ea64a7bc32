# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details


class PdfArray(list):
    ''' A PdfArray maps the PDF array object into a Python list.
        Elements are any values of the graph, including
        unresolved PdfReference objects.
    '''

    def __init__(self, source=()):
        list.__init__(self, source)
