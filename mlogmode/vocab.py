# --                                                            ; {{{1
#
# File        : mlogmode/vocab.py
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
Vocabulary files.

A vocabulary file declares named sets of words, each w/ a category and
an optional naming transform (none, sigil or content):

>>> sets = parse('''
... # instructions
... keywords : keyword { set op jump }
... blocks : type content { "Memory Cell" Router }
... ''')
>>> sets[0]
VocabSet(name='keywords', category='keyword', transform='none', words=('set', 'op', 'jump'))
>>> sets[1].words
('Memory Cell', 'Router')

>>> [ x.name for x in load_default() ]
['keywords', 'operations', 'globals', 'constants', 'sensors', 'units', 'blocks']
"""                                                             # }}}1

import logging, os, sys

import pyparsing as P

from . import data as D
from . import misc as M

log = logging.getLogger(__name__)

DEFAULT_VOCAB = os.path.join(os.path.dirname(__file__), "lib",
                             "mlog.vocab")

def _make_parser():                                             # {{{1
  s, r, n     = P.Suppress, P.Regex, lambda x, name: x.set_name(name)

  comm        = n(r(M.RX_COMMENT), "comment")
  name        = n(r(r"[A-Za-z_][A-Za-z0-9_-]*"), "set name")
  category    = n(r(r"[a-z-]+"), "category") \
                .add_condition(lambda t: t[0] in D.CATEGORIES,
                               message = "unknown category",
                               fatal = True)
  transform   = n(P.one_of(list(M.TRANSFORMS), as_keyword = True),
                  "transform")
  word        = n(P.QuotedString('"') | r(r'[^\s{}"#]+'), "word")

  decl        = (name + s(":") + category +
                 P.Optional(transform, default = "none") +
                 s("{") + P.Group(P.ZeroOrMore(word)) + s("}")) \
                .set_parse_action(_make_set)
  return P.ZeroOrMore(decl).ignore(comm)
                                                                # }}}1

def _make_set(t):
  return [D.VocabSet(t[0], t[1], t[2], tuple(t[3]))]

_parser = _make_parser()

def parse(s, source = None):                                    # {{{1
  """
  Parse vocabulary file contents into a list of VocabSets.

  >>> parse("")
  []
  >>> parse("units : type sigil { dagger mace }")[0].transform
  'sigil'
  >>> try: parse("x : colour { a }")
  ... except D.VocabularyError as e: print("unknown category" in str(e))
  True
  >>> try: parse("x : keyword { a", "x.vocab")
  ... except D.VocabularyError as e: print(str(e).split(":")[0])
  x.vocab
  >>> try: parse("x : keyword { }\\nx : type { }")
  ... except D.VocabularyError as e: print(e)
  duplicate set: x
  """

  try:
    sets = list(_parser.parse_string(s, parse_all = True))
  except P.ParseBaseException as e:
    raise D.VocabularyError(str(e), source) from e
  seen = set()
  for x in sets:
    if x.name in seen:
      raise D.VocabularyError("duplicate set: " + x.name, source)
    seen.add(x.name)
  return sets
                                                                # }}}1

def load_file(name):
  """Load vocabulary sets from a file."""
  with open(name, encoding = "utf-8") as f:
    sets = parse(f.read(), source = name)
  log.debug("loaded %d vocabulary set(s) from %s", len(sets), name)
  return sets

def load_default():
  """Load the vocabulary shipped w/ mlogmode."""
  return load_file(DEFAULT_VOCAB)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
