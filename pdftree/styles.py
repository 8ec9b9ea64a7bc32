# A part of pdftree
# Copyright (C) 2026 The pdftree authors
# MIT license -- See LICENSE.txt for details

'''
Text decoration for the tree printer.

The printer never builds escape sequences itself.  It asks a
style object to paint a piece of text in a named role, and
the style decides what that looks like.  PlainStyle leaves the
text alone (for tests, pipes and files); AnsiStyle colors it
for a terminal using colorama.

Roles are the parts of the tree (tree, helper, type, value,
expand, extra, skipped, error, title) and the value kinds
returned by formatter.object_info (null, bool, integer, ...),
which color the symbol in front of each value.
'''

from colorama import Fore, Style


class PlainStyle(object):

    def paint(self, role, text):
        return text


class AnsiStyle(PlainStyle):

    styles = dict(
        tree=Fore.CYAN + Style.DIM,
        helper=Fore.CYAN,
        type=Style.DIM,
        value=Style.BRIGHT,
        expand=Style.DIM,
        extra='',
        skipped=Fore.BLUE,
        error=Fore.RED + Style.BRIGHT,
        title=Style.BRIGHT,

        null=Fore.MAGENTA + Style.BRIGHT,
        bool=Fore.BLACK + Style.BRIGHT,
        integer=Fore.RED + Style.BRIGHT,
        real=Fore.MAGENTA + Style.BRIGHT,
        name=Fore.GREEN + Style.BRIGHT,
        literal=Fore.YELLOW + Style.BRIGHT,
        hex=Fore.LIGHTYELLOW_EX + Style.BRIGHT,
        array=Fore.BLUE + Style.BRIGHT,
        dict=Fore.CYAN + Style.BRIGHT,
        stream=Fore.GREEN + Style.BRIGHT,
        reference=Fore.WHITE + Style.DIM,
    )

    def paint(self, role, text):
        prefix = self.styles.get(role)
        if not prefix or not text:
            return text
        return '%s%s%s' % (prefix, text, Style.RESET_ALL)
