# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Tree printer exceptions and error handling.

None of these is fatal to a run.  The printer logs them and
renders an inline marker in place of the affected subtree.
'''

import logging


fmt = logging.Formatter('[%(levelname)s] %(filename)s:%(lineno)d %(message)s')

handler = logging.StreamHandler()
handler.setFormatter(fmt)

log = logging.getLogger('pdftree')
log.setLevel(logging.WARNING)
log.addHandler(handler)


class PdfTreeError(Exception):
    "Abstract base class of exceptions thrown by this module"

    def __init__(self, msg):
        self.msg = msg

    def __str__(self):
        return self.msg


class DanglingReference(PdfTreeError):
    "Indirect reference to an object that is not in the object table"

    def __init__(self, ref):
        self.ref = ref
        PdfTreeError.__init__(
            self, 'Indirect reference %s %s R not found' % tuple(ref))


class ExpandPathMismatch(PdfTreeError):
    "Current path has left the path given to expand"


class OperationError(PdfTreeError):
    "Content stream operation could not be decoded"


class UnknownOperator(OperationError):
    "Operator is not in the operator table"


class MissingOperand(OperationError):
    "Operation has fewer operands than its operator requires"


class BadOperand(OperationError):
    "Operand has the wrong type for its operator"
