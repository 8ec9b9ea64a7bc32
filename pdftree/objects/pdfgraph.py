# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

from .pdfdict import PdfDict
from ..errors import DanglingReference


class PdfGraph(object):
    ''' A fully loaded document:  the trailer dictionary and
        the table of indirect objects, keyed by
        (object number, generation number).

        The graph is only ever read.  Loading, repairing and
        decompressing it is somebody else's job (see reader.py).
        version is the header version string ('1.4'), if known.
    '''

    def __init__(self, trailer=None, objects=None, version=None):
        self.trailer = PdfDict() if trailer is None else trailer
        self.objects = {}
        for key, value in (objects or {}).items():
            self.objects[tuple(key)] = value
        self.version = version

    def __contains__(self, ref):
        return tuple(ref) in self.objects

    def resolve(self, ref):
        ''' Return the object a reference points to.
        '''
        try:
            return self.objects[tuple(ref)]
        except KeyError:
            raise DanglingReference(ref)
