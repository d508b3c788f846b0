# --                                                            ; {{{1
#
# File        : mlogmode/repl.py
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
Interactive classification: type a line, see its annotations.
"""                                                             # }}}1

import sys

from . import rules as R

def prompt(s = "mlog> "): return input(s)

def repl(table = None, prompt = prompt):                        # {{{1
  """
  Read-Classify-Print loop.  Each line is classified on its own, just
  like the editor does.

  >>> lines = iter(["loop:", "jump loop always", ""])
  >>> def fake_prompt(s = ""):
  ...   for x in lines: return x
  ...   raise EOFError
  >>> repl(prompt = fake_prompt)
  0-4 function-name 'loop'
  0-4 keyword 'jump'
  5-9 function-name 'loop'
  10-16 builtin 'always'
  <BLANKLINE>
  """
  if table is None: table = R.default_table()
  if sys.stdin.isatty():
    try:
      import readline
    except ImportError:
      pass
  while True:
    try:
      line = prompt()
    except EOFError:
      print(); break
    for a in R.classify(table, line):
      print(a.show(line))
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
