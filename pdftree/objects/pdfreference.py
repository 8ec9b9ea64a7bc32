# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details


class PdfReference(tuple):
    ''' An indirect reference to an object in the graph.
        The object itself is the (object number, generation number)
        tuple, which is also the key into the object table.
    '''

    def __new__(cls, objnum, generation=0):
        return tuple.__new__(cls, (int(objnum), int(generation)))

    objnum = property(lambda self: self[0])
    generation = property(lambda self: self[1])

    def __repr__(self):
        return 'PdfReference(%d, %d)' % self
