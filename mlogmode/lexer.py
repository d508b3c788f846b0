# --                                                            ; {{{1
#
# File        : mlogmode/lexer.py
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
Pygments lexer for mlog, backed by the rule table classifier.

>>> for t in MlogLexer().get_tokens("loop:\njump loop always\n"):
...   print(t)
(Token.Name.Function, 'loop')
(Token.Text, ':\n')
(Token.Keyword, 'jump')
(Token.Text, ' ')
(Token.Name.Function, 'loop')
(Token.Text, ' ')
(Token.Name.Builtin, 'always')
(Token.Text, '\n')

Only "\n" ends a line:

>>> toks = list(MlogLexer().get_tokens('print "a\x1cjump loop"\n'))
>>> [ v for t, v in toks if t is Name.Function ]
[]
>>> "".join( v for t, v in toks )
'print "a\x1cjump loop"\n'
"""                                                             # }}}1

import fnmatch, os, re, sys

from pygments.lexer import Lexer
from pygments.token import Text, Comment, Keyword, Name

from . import data as D
from . import misc as M
from . import rules as R
from . import vocab as V

__all__ = ['MlogLexer']

TOKENS = {
  D.FUNCTION_NAME : Name.Function,
  D.VARIABLE      : Name.Variable,
  D.KEYWORD       : Keyword,
  D.COMMENT       : Comment.Single,
  D.TYPE          : Keyword.Type,
  D.CONSTANT      : Name.Constant,
  D.BUILTIN       : Name.Builtin,
}

class MlogLexer(Lexer):                                         # {{{1
  r"""
  Lexer for `mlog <https://mindustrygame.github.io>`_, the language
  of Mindustry's logic processors.

  Options: ``table`` (a rule table) or ``vocab`` (the path of a
  vocabulary file); the default is the vocabulary shipped w/
  mlogmode.

  >>> lx = MlogLexer(table = R.build_table([]))
  >>> list(lx.get_tokens("end # x"))
  [(Token.Text, 'end '), (Token.Comment.Single, '# x'), (Token.Text, '\n')]
  """

  name = 'mlog'
  aliases = ['mlog', 'masm']
  filenames = ['*.mlog', '*.masm']
  mimetypes = ['text/x-mlog']

  # line comments only
  comment_start, comment_end = M.COMMENT_START, ""

  def __init__(self, **options):
    Lexer.__init__(self, **options)
    self.table = options.get("table")
    if self.table is None:
      vocab = options.get("vocab")
      self.table = R.build_table(V.load_file(vocab)) if vocab \
                   else R.default_table()

  def analyse_text(text):
    if re.search(r"^\s*(printflush|drawflush|ucontrol|sensor)\s",
                 text, re.M):
      return 0.3
    return 0.0

  def get_tokens_unprocessed(self, text):
    for pos, line, anns in R.classify_text(self.table, text):
      i, end = pos, pos + len(line)
      for a in anns:
        if a.start > i: yield i, Text, text[i:a.start]
        yield a.start, TOKENS[a.category], text[a.start:a.end]
        i = a.end
      if i < end: yield i, Text, text[i:end]
                                                                # }}}1

def match_filename(name):                                       # {{{1
  """
  Is the file opened in mlog mode?

  >>> match_filename("src/main.mlog"), match_filename("x.masm")
  (True, True)
  >>> match_filename("x.txt"), match_filename("mlog")
  (False, False)
  """

  base = os.path.basename(name)
  return any( fnmatch.fnmatch(base, p) for p in MlogLexer.filenames )
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
