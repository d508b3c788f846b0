# --                                                            ; {{{1
#
# File        : mlogmode/rules.py
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
Rule tables & the line classifier.

A rule table is an immutable, ordered tuple of rules: first the
structural rules (comment, label definition, label reference), then
one membership rule per vocabulary set.  Rules are tried in order and
the first rule to claim a character wins.

>>> t = default_table()
>>> [ r.name for r in t ]       # doctest: +NORMALIZE_WHITESPACE
['comment', 'label-definition', 'label-reference', 'keywords',
 'operations', 'globals', 'constants', 'sensors', 'units', 'blocks']

>>> for a in classify(t, "loop:"): print(a)
Annotation(start=0, end=4, category='function-name')
>>> for a in classify(t, "jump loop equal x 5"): print(a)
Annotation(start=0, end=4, category='keyword')
Annotation(start=5, end=9, category='function-name')
Annotation(start=10, end=15, category='builtin')
>>> classify(t, "# set x 5")
[Annotation(start=0, end=9, category='comment')]

>>> line = "ucontrol build x y @titanium-conveyor 0 0"
>>> for a in classify(t, line): print(a.show(line))
0-8 keyword 'ucontrol'
9-14 builtin 'build'
19-37 type '@titanium-conveyor'
>>> line = "sensor r vault1 @copper  # items"
>>> for a in classify(t, line): print(a.show(line))
0-6 keyword 'sensor'
16-23 builtin '@copper'
25-32 comment '# items'

Every word of the vocabulary, on its own, gets the category of the
first set it is a member of:

>>> sr = [ r for r in t if isinstance(r, SetRule) ]
>>> def first(w): return next( r.category for r in sr if w in r.members )
>>> all( classify(t, w) == [D.Annotation(0, len(w), first(w))]
...      for r in sr for w in r.members )
True
"""                                                             # }}}1

import sys, threading

from collections import namedtuple

from . import data as D
from . import misc as M
from . import vocab as V

# === Rules ===

class PatternRule(namedtuple("PatternRule",
                             "name category pattern group".split())):
  """Structural rule: annotates one group of each match."""

  def spans(self, line):
    for m in self.pattern.finditer(line):
      i, j = m.span(self.group)
      if i < j: yield i, j

class SetRule(namedtuple("SetRule", "name category members".split())):
  """Membership rule: annotates whole tokens that are members."""

  def spans(self, line):
    for m in M.RX_TOKEN_C.finditer(line):
      if m.group() in self.members: yield m.span()

STRUCTURAL_RULES = (
  PatternRule("comment"         , D.COMMENT      , M.RX_COMMENT_C  , 0),
  PatternRule("label-definition", D.FUNCTION_NAME, M.RX_LABEL_DEF_C, 1),
  PatternRule("label-reference" , D.FUNCTION_NAME, M.RX_LABEL_REF_C, 1),
)

# === Rule Tables ===

def build_table(sets):                                          # {{{1
  """
  Build a rule table from vocabulary sets (in order); each set's
  transform is applied to its words here, once.

  Sets may overlap; the earlier set decides:

  >>> a = D.VocabSet("a", D.KEYWORD, "none", ("unit",))
  >>> b = D.VocabSet("b", D.TYPE, "none", ("unit", "mace"))
  >>> for x in classify(build_table([a, b]), "unit mace"): print(x)
  Annotation(start=0, end=4, category='keyword')
  Annotation(start=5, end=9, category='type')
  >>> for x in classify(build_table([b, a]), "unit mace"): print(x)
  Annotation(start=0, end=4, category='type')
  Annotation(start=5, end=9, category='type')

  >>> c = D.VocabSet("c", D.TYPE, "content", ("Memory Cell", " "))
  >>> sorted(build_table([c])[-1].members)
  ['@memory-cell']
  >>> len(build_table([]))
  3
  """

  rules = list(STRUCTURAL_RULES)
  for s in sets:
    f = M.TRANSFORMS[s.transform]
    members = frozenset( w for w in map(f, s.words) if w )
    rules.append(SetRule(s.name, s.category, members))
  return tuple(rules)
                                                                # }}}1

_default_table, _default_lock = None, threading.Lock()

def default_table():                                            # {{{1
  """
  The rule table for the vocabulary shipped w/ mlogmode; built once,
  on first use, even when first used from several threads at once.

  >>> import mlogmode.rules as RR
  >>> RR._default_table, out = None, []
  >>> ts = [ threading.Thread(target = lambda: out.append(RR.default_table()))
  ...        for _ in range(4) ]
  >>> for x in ts: x.start()
  >>> for x in ts: x.join()
  >>> len(out), len(set(map(id, out)))
  (4, 1)
  """
  global _default_table
  with _default_lock:
    if _default_table is None:
      _default_table = build_table(V.load_default())
  return _default_table
                                                                # }}}1

# === Classification ===

def classify(table, line, offset = 0):                          # {{{1
  """
  Classify a single line; returns non-overlapping annotations, sorted
  by start.  The offset is added to each span.

  Only whole tokens match:

  >>> t = default_table()
  >>> classify(t, "set buildingCost 5")
  [Annotation(start=0, end=3, category='keyword')]
  >>> classify(t, "@copper-wall @copperx")
  [Annotation(start=0, end=12, category='type')]
  >>> classify(t, "set@copper @copper@ x@copper")
  []

  Labels:

  >>> classify(t, "  end:  ")
  [Annotation(start=2, end=5, category='function-name')]
  >>> classify(t, "loop: # not a label")
  [Annotation(start=6, end=19, category='comment')]
  >>> classify(t, "# loop:")
  [Annotation(start=0, end=7, category='comment')]
  >>> classify(t, "jump 12 always")
  [Annotation(start=0, end=4, category='keyword'), Annotation(start=8, end=14, category='builtin')]

  Nothing to see:

  >>> classify(t, ""), classify(t, " \\t ")
  ([], [])

  Offsets & determinism:

  >>> classify(t, "end", offset = 10)
  [Annotation(start=10, end=13, category='keyword')]
  >>> line = "op add x @unit @thisx # foo"
  >>> classify(t, line) == classify(t, line)
  True
  """

  taken, out = bytearray(len(line)), []
  for rule in table:
    for i, j in rule.spans(line):
      if any(taken[i:j]): continue
      taken[i:j] = b"\x01" * (j - i)
      out.append(D.Annotation(i + offset, j + offset, rule.category))
  out.sort()
  return out
                                                                # }}}1

def classify_text(table, text):                                 # {{{1
  """
  Classify each line of text independently; yields (line start, line,
  annotations) w/ absolute offsets.  Lines end at "\\n" only, as they
  do in the editor.

  >>> t = default_table()
  >>> for pos, line, anns in classify_text(t, "loop:\\n  end\\n"):
  ...   print(pos, repr(line), anns)
  0 'loop:\\n' [Annotation(start=0, end=4, category='function-name')]
  6 '  end\\n' [Annotation(start=8, end=11, category='keyword')]
  >>> list(classify_text(t, "x\\x0bloop:\\n"))
  [(0, 'x\\x0bloop:\\n', [])]
  >>> [ (p, l) for p, l, _ in classify_text(t, "a\\r\\n\\nb") ]
  [(0, 'a\\r\\n'), (3, '\\n'), (4, 'b')]
  >>> list(classify_text(t, ""))
  []
  """

  for m in M.RX_LINE_C.finditer(text):
    pos, line = m.start(), m.group()
    if line: yield pos, line, classify(table, line.rstrip("\r\n"), pos)
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
