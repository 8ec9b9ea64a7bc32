# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Settings for one run of the tree printer.

Both settings classes follow the same pattern:  the class
attributes are the defaults, keyword arguments to the
constructor override them, and the instance cannot be
changed afterwards.  Normalization (splitting the expand
path, treating a limit of 0 as "no limit") happens once,
in the constructor.
'''

from .errors import PdfTreeError


class StreamDisplay(object):
    ''' How the payload of a stream is shown on its header line.
    '''
    NONE = 'none'
    HEX = 'hex'
    TREE = 'tree'   # Not implemented; renders nothing

    aliases = {'no': NONE, 'no_display': NONE, 'none': NONE,
               'hex': HEX, 'tree': TREE, 'structured': TREE}

    @classmethod
    def parse(cls, value):
        try:
            return cls.aliases[value.lower()]
        except (KeyError, AttributeError):
            raise PdfTreeError('Unknown stream display format: %r' % (value,))


class _Settings(object):

    def __init__(self, **kw):
        for key, value in kw.items():
            if key.startswith('_') or not hasattr(self, key):
                raise TypeError('%s got an unexpected setting %r' %
                                (type(self).__name__, key))
            vars(self)[key] = value

    def __setattr__(self, name, value):
        raise AttributeError('%s is read-only' % type(self).__name__)

    def __repr__(self):
        items = sorted(vars(self).items())
        return '%s(%s)' % (type(self).__name__,
                           ', '.join('%s=%r' % x for x in items))


class DisplaySettings(_Settings):
    ''' What the tree shows, and how much of it.

        max_depth -- dictionaries this deep print a marker
                     instead of their contents
        expand -- only print the subtree under this path of
                  labels, given as 'Root.Pages.Kids' or a sequence
        display_type_names -- append ':Type_Name' to each label
        array_display_limit -- maximum items printed per array
                               (None or 0 for all, minimum 2)
        hex_display_limit -- maximum bytes printed per
                             hexadecimal string (same rules)
        display_stream -- one of the StreamDisplay values
        display_font -- descend into /Font dictionaries
        display_parent -- follow references back to an ancestor
        display_legend -- print the legend before the tree
        stream_enhanced_operations -- describe content stream
                                      operations using the operator table
        stream_enhanced_operator_info -- add the operator description
        force_stream_decoding -- decode every stream, not only
                                 the ones known to hold content
    '''
    max_depth = 20
    expand = None
    display_type_names = False
    array_display_limit = 5
    hex_display_limit = 16
    display_stream = StreamDisplay.NONE
    display_font = False
    display_parent = False
    display_legend = True
    stream_enhanced_operations = True
    stream_enhanced_operator_info = True
    force_stream_decoding = False

    def __init__(self, **kw):
        _Settings.__init__(self, **kw)
        settings = vars(self)
        expand = self.expand
        if expand is not None:
            if isinstance(expand, str):
                expand = expand.split('.')
            settings['expand'] = tuple(expand)
        for key in ('array_display_limit', 'hex_display_limit'):
            settings[key] = getattr(self, key) or None
        if self.max_depth is None:
            settings['max_depth'] = type(self).max_depth
        settings['display_stream'] = StreamDisplay.parse(self.display_stream)


class CursorSettings(_Settings):
    ''' How each printed line is decorated.

        print_line_numbers -- prefix every line with its number
        line_number_padding -- minimum width of the line number
    '''
    print_line_numbers = True
    line_number_padding = 4
