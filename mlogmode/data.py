# --                                                            ; {{{1
#
# File        : mlogmode/data.py
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
Categories, vocabulary sets, annotations and exceptions.

>>> a = Annotation(0, 4, FUNCTION_NAME)
>>> a
Annotation(start=0, end=4, category='function-name')
>>> a.show("loop:")
"0-4 function-name 'loop'"
>>> a.shift(10)
Annotation(start=10, end=14, category='function-name')
"""                                                             # }}}1

import sys

from collections import namedtuple

# === Exceptions ===

class MlogModeError(Exception):
  """Base class for mlogmode errors"""

class VocabularyError(MlogModeError):                           # {{{1
  """
  Malformed vocabulary.

  >>> print(VocabularyError("duplicate set: units", "x.vocab"))
  x.vocab: duplicate set: units
  """
  def __init__(self, msg, source = None):
    super().__init__(msg if source is None else
                     "{}: {}".format(source, msg))
                                                                # }}}1

# === Categories ===

FUNCTION_NAME, VARIABLE, KEYWORD  = "function-name", "variable", "keyword"
COMMENT, TYPE                     = "comment", "type"
CONSTANT, BUILTIN                 = "constant", "builtin"

CATEGORIES = (FUNCTION_NAME, VARIABLE, KEYWORD, COMMENT, TYPE,
              CONSTANT, BUILTIN)

# === Data Types ===

class VocabSet(namedtuple("VocabSet",
                          "name category transform words".split())):
  """Vocabulary set; words are transformed when the table is built."""

class Annotation(namedtuple("Annotation",
                            "start end category".split())):
  """Classified span of a line; end is exclusive."""

  def show(self, line):
    return "{}-{} {} {!r}".format(self.start, self.end, self.category,
                                  line[self.start:self.end])

  def shift(self, n):
    return self._replace(start = self.start + n, end = self.end + n)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
