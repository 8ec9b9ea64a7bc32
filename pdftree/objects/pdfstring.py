# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

import codecs


class PdfString(bytes):
    ''' A PdfString holds the raw bytes of a PDF string.

        PDF has two ways to write a string into a file:
        literal strings "(...)" and hexadecimal strings "<...>".
        The bytes are the same either way, but a hexadecimal
        string usually holds binary data rather than text, so
        the form is kept in the hexadecimal attribute.
    '''
    hexadecimal = False

    def __new__(cls, data=b'', hexadecimal=False):
        if not isinstance(data, bytes):
            data = data.encode('utf-8')
        self = bytes.__new__(cls, data)
        if hexadecimal:
            self.hexadecimal = True
        return self

    def to_text(self, bom=codecs.BOM_UTF16_BE):
        ''' Decode for display.  UTF-16 text is recognized
            by its byte order mark; anything else is treated
            as UTF-8, replacing undecodable bytes.
        '''
        if self.startswith(bom):
            return self[len(bom):].decode('utf-16-be', 'replace')
        return self.decode('utf-8', 'replace')

    def __repr__(self):
        return 'PdfString(%s%s)' % (bytes.__repr__(self),
                                    ', hexadecimal=True' if self.hexadecimal
                                    else '')
