# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details


class PdfName(str):
    ''' A PdfName is a PDF name object.  It is stored
        decoded and without the leading slash, so
        PdfName('Type') compares equal to 'Type' and can be
        used directly as a dictionary key.
    '''

    def __repr__(self):
        return 'PdfName(%s)' % str.__repr__(self)
