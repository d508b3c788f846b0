# --                                                            ; {{{1
#
# File        : mlogmode/misc.py
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
Lexical conventions of mlog: what a token, a label and a comment look
like, and the naming transforms used to turn vocabulary entries into
the form they take in source text.

>>> [ m.group() for m in RX_TOKEN_C.finditer("sensor r @copper-wall @health") ]
['sensor', 'r', '@copper-wall', '@health']

A sigil inside a word belongs to that word, on either side:

>>> [ m.group() for m in RX_TOKEN_C.finditer("x@copper set@ foo.bar -1") ]
['x@copper', 'set@', 'foo', 'bar']
"""                                                             # }}}1

import regex, sys

                                                                # {{{1
SIGIL, COMMENT_START, JUMP = "@", "#", "jump"

RX_L, RX_N        = r"\p{L}", r"\p{N}"
_RX_WORD          = RX_L + RX_N + "_"
RX_TOKEN_HEAD     = "[" + _RX_WORD + "]"
RX_TOKEN_BODY     = "[" + _RX_WORD + "-]"

# NB: a token is never part of a longer one; hence the lookbehind
RX_TOKEN          = "(?<![" + _RX_WORD + SIGIL + "-])" + SIGIL + "?" \
                  + RX_TOKEN_HEAD + "[" + _RX_WORD + SIGIL + "-]*"
RX_TOKEN_C        = regex.compile(RX_TOKEN)

RX_LABEL          = "[" + RX_L + "_]" + RX_TOKEN_BODY + "*"
RX_LABEL_C        = regex.compile(RX_LABEL)
RX_LABEL_DEF      = r"\A\s*(" + RX_LABEL + r"):\s*\Z"
RX_LABEL_DEF_C    = regex.compile(RX_LABEL_DEF)
RX_LABEL_REF      = r"\A\s*" + JUMP + r"\s+(" + RX_LABEL + r")(?![^\s#])"
RX_LABEL_REF_C    = regex.compile(RX_LABEL_REF)

RX_COMMENT        = "#.*"
RX_COMMENT_C      = regex.compile(RX_COMMENT)

RX_LINE_C         = regex.compile(r"[^\n]*\n?")

RX_CAMEL_C        = regex.compile(r"(?<=[\p{Ll}\p{N}])(?=\p{Lu})")
RX_WORDSEP_C      = regex.compile(r"[\s_-]+")
                                                                # }}}1

def isident(s):                                                 # {{{1
  """
  Is the string a valid label name?

  >>> isident("loop")
  True
  >>> isident("loop_2")
  True
  >>> isident("draw-loop")
  True
  >>> isident("2loop")
  False
  >>> isident("@counter")
  False
  >>> isident("")
  False
  """

  return bool(RX_LABEL_C.fullmatch(s))
                                                                # }}}1

def plain_name(s):
  """Use the word as written."""
  return s

def sigil_name(s):                                              # {{{1
  """
  Prefix the word with the sigil (unless it already has one).

  >>> sigil_name("dagger")
  '@dagger'
  >>> sigil_name("@dagger")
  '@dagger'
  """

  return s if s.startswith(SIGIL) else SIGIL + s
                                                                # }}}1

def content_name(s):                                            # {{{1
  """
  Turn a canonical content name into its source form: words are split
  on whitespace, underscores, hyphens and camelCase humps, lowercased,
  joined w/ hyphens and prefixed w/ the sigil.

  >>> content_name("Titanium Conveyor")
  '@titanium-conveyor'
  >>> content_name("largeLogicDisplay")
  '@large-logic-display'
  >>> content_name("RTG Generator")
  '@rtg-generator'
  >>> content_name("@memory-cell")
  '@memory-cell'
  >>> content_name("  ")
  ''
  """

  s = RX_CAMEL_C.sub(" ", s.strip().lstrip(SIGIL))
  words = [ w.lower() for w in RX_WORDSEP_C.split(s) if w ]
  return SIGIL + "-".join(words) if words else ""
                                                                # }}}1

TRANSFORMS = dict(none = plain_name, sigil = sigil_name,
                  content = content_name)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
