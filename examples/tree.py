#!/usr/bin/env python

'''
usage:   tree.py my.pdf [expand.path]
         eg. tree.py my.pdf Root.Pages.Kids

Prints the objects of my.pdf as a tree.  If an expand path is
given, only the subtree under that path is printed.
'''

import sys

from colorama import init

from pdftree import (print_pdf_tree, print_pdf_info, DisplaySettings,
                     AnsiStyle)
from pdftree.reader import load


def tree(inpfn, expand=None):
    graph = load(inpfn)
    style = AnsiStyle()
    print_pdf_info(graph, print, style)
    print_pdf_tree(graph, DisplaySettings(expand=expand), title=inpfn,
                   style=style)


if __name__ == '__main__':
    args = sys.argv[1:]
    if not 1 <= len(args) <= 2:
        sys.exit(__doc__)
    init()
    tree(*args)
