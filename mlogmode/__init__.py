# --                                                            ; {{{1
#
# File        : mlogmode/__init__.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2026-10-19
#
# Copyright   : Copyright (C) 2026  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Syntax highlighting for mlog, the language of Mindustry's logic
processors.

See mlogmode.rules for the classifier, mlogmode.lexer for the Pygments
lexer and mlogmode.vocab for the vocabulary file format.
"""                                                             # }}}1

__version__ = "0.1.0"

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
