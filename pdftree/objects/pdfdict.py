# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

from .pdfname import PdfName


class PdfDict(dict):
    ''' PdfDict objects are dictionaries keyed by PdfName.

        - Keys are stored without the leading slash.  Plain
          strings are converted to PdfName when stored.

        - Insertion order is the order of the source file,
          and that is the order the tree is printed in.

        - Keys that conform to Python naming conventions can
          also be read as attributes:  mydict.Type is the same
          thing as mydict.get('Type').  Missing keys read as None.

        - Values are never resolved.  A value that lives
          elsewhere in the graph is a PdfReference, and the
          PdfGraph is needed to look it up.
    '''

    def __init__(self, *args, **kw):
        dict.__init__(self)
        if args:
            if len(args) == 1:
                args = args[0]
            self.update(args)
        self.update(kw)

    def __setitem__(self, name, value, setter=dict.__setitem__,
                    PdfName=PdfName, isinstance=isinstance):
        if not isinstance(name, PdfName):
            name = PdfName(name)
        setter(self, name, value)

    def update(self, source=(), **kw):
        if hasattr(source, 'items'):
            source = source.items()
        for key, value in source:
            self[key] = value
        for key, value in kw.items():
            self[key] = value

    def __getattr__(self, name):
        if name.startswith('__'):
            raise AttributeError(name)
        return self.get(name)


class PdfStream(PdfDict):
    ''' A PdfStream is a stream dictionary together with its
        payload.  The stream attribute holds the payload bytes,
        which the loader is expected to have decompressed.
    '''
    stream = b''

    def __init__(self, *args, **kw):
        stream = kw.pop('stream', None)
        PdfDict.__init__(self, *args, **kw)
        if stream is not None:
            self.stream = bytes(stream)
