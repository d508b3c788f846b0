# --                                                            ; {{{1
#
# File        : mlogmode/__main__.py
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
Command line tool: classify or highlight mlog files.

>>> import tempfile
>>> with tempfile.TemporaryDirectory() as d:
...   p = os.path.join(d, "main.mlog")
...   with open(p, "w") as f: _ = f.write("loop:\n  end # done\n")
...   main(p) == 0 and None
main.mlog:1:0-4: function-name 'loop'
main.mlog:2:2-5: keyword 'end'
main.mlog:2:6-12: comment '# done'
"""                                                             # }}}1

import argparse, logging, os, sys

from . import __version__
from . import data as D
from . import lexer as L
from . import repl as REPL
from . import rules as R
from . import vocab as V

_me   = "mlogmode"
_desc = "classify or highlight mlog (Mindustry logic) source"

FORMATS = "annotations terminal html".split()

def main(*args):                                                # {{{1
  r"""
  Main program.

  Bad vocabularies & unreadable files are reported on stderr w/ exit
  status 1:

  >>> import contextlib, io, tempfile
  >>> d = tempfile.mkdtemp()
  >>> p = os.path.join(d, "bad.vocab")
  >>> with open(p, "w") as f: _ = f.write("x : colour { a }")
  >>> err = io.StringIO()
  >>> with contextlib.redirect_stderr(err): rc = main("--vocab", p)
  >>> rc, err.getvalue().startswith("*** Error *** " + p + ": unknown category")
  (1, True)
  >>> err = io.StringIO()
  >>> with contextlib.redirect_stderr(err):
  ...   rc = main(os.path.join(d, "missing.mlog"))
  >>> rc, err.getvalue().startswith("*** Error *** ")
  (1, True)
  >>> import shutil; shutil.rmtree(d)
  """
  p = _argument_parser(); n = p.parse_args(args)
  if n.test: return test(verbose = n.verbose)
  logging.basicConfig(level = logging.DEBUG if n.verbose
                              else logging.WARNING,
                      format = "%(name)s: %(message)s")
  try:
    table = R.build_table(V.load_file(n.vocab)) if n.vocab \
            else R.default_table()
    if n.rules:
      show_rules(table)
    elif n.interactive or (not n.files and sys.stdin.isatty()):
      REPL.repl(table)
    elif not n.files:
      output(table, sys.stdin.read(), "<stdin>", n.format)
    else:
      for name in _files(n.files):
        with open(name, encoding = "utf-8") as f:
          output(table, f.read(), _display_name(name, n.files),
                 n.format)
  except (D.MlogModeError, OSError) as e:
    print("*** Error ***", e, file = sys.stderr)
    return 1
  return 0
                                                                # }}}1

def _argument_parser():                                         # {{{1
  p = argparse.ArgumentParser(description = _desc, prog = _me)
  p.add_argument("files", metavar = "FILE", nargs = "*",
                 help = "files or directories to classify")
  p.add_argument("--vocab", metavar = "FILE",
                 help = "vocabulary file (instead of the builtin one)")
  p.add_argument("--format", "-f", choices = FORMATS,
                 default = "annotations",
                 help = "output format (default: %(default)s)")
  p.add_argument("--rules", action = "store_true",
                 help = "show the rule table")
  p.add_argument("--interactive", "-i", action = "store_true",
                 help = "classify lines typed at a prompt")
  p.add_argument("--version", action = "version",
                 version = "%(prog)s {}".format(__version__))
  p.add_argument("--test", action = "store_true",
                 help = "run tests (instead of classifying)")
  p.add_argument("--verbose", "-v", action = "store_true",
                 help = "run tests verbosely; debug logging")
  return p
                                                                # }}}1

def _files(paths):                                              # {{{1
  """
  Files to classify: directories are searched recursively for files
  opened in mlog mode; other paths are used as given.

  >>> import shutil, tempfile
  >>> d = tempfile.mkdtemp(); os.mkdir(os.path.join(d, "sub"))
  >>> for f in "a.mlog b.masm c.txt sub/d.mlog sub/e.py".split():
  ...   with open(os.path.join(d, f), "w") as fh: _ = fh.write("end\\n")
  >>> [ os.path.relpath(x, d) for x in _files([d]) ]
  ['a.mlog', 'b.masm', 'sub/d.mlog']
  >>> list(_files(["x.txt"]))
  ['x.txt']
  >>> shutil.rmtree(d)
  """
  for path in paths:
    if os.path.isdir(path):
      for d, dirs, files in os.walk(path):
        dirs.sort()
        for f in sorted(files):
          if L.match_filename(f): yield os.path.join(d, f)
    else:
      yield path
                                                                # }}}1

def _display_name(name, paths):
  return os.path.basename(name) if len(paths) == 1 and \
         not os.path.isdir(paths[0]) else name

def output(table, text, name, fmt = "annotations"):             # {{{1
  """
  Print annotations (one per line) or highlighted text.

  >>> output(R.default_table(), "set x @pi\\n", "-")
  -:1:0-3: keyword 'set'
  -:1:6-9: constant '@pi'

  >>> import contextlib, io
  >>> out = io.StringIO()
  >>> with contextlib.redirect_stdout(out):
  ...   output(R.default_table(), "end # x\\n", "-", "html")
  >>> '<span class="k">end</span>' in out.getvalue()
  True
  >>> '<span class="c1"># x</span>' in out.getvalue()
  True
  >>> out = io.StringIO()
  >>> with contextlib.redirect_stdout(out):
  ...   output(R.default_table(), "end\\n", "-", "terminal")
  >>> s = out.getvalue(); "end" in s and "\\x1b[" in s
  True
  """

  if fmt == "annotations":
    for lineno, (pos, line, anns) in \
        enumerate(R.classify_text(table, text), 1):
      for a in anns:
        print("{}:{}:{}".format(name, lineno,
                                a.shift(-pos).show(line)
                                 .replace(" ", ": ", 1)))
  else:
    from pygments import highlight
    from pygments.formatters import HtmlFormatter, TerminalFormatter
    fm = TerminalFormatter() if fmt == "terminal" \
         else HtmlFormatter(full = True, title = name)
    sys.stdout.write(highlight(text, L.MlogLexer(table = table), fm))
                                                                # }}}1

def show_rules(table):                                          # {{{1
  """
  Print the rule table.

  >>> show_rules(R.build_table(V.parse("k : keyword { set op }")))
  ... # doctest: +NORMALIZE_WHITESPACE
  comment            comment        /#.*/
  label-definition   function-name  /\\A\\s*([\\p{L}_][\\p{L}\\p{N}_-]*):\\s*\\Z/
  label-reference    function-name  /\\A\\s*jump\\s+([\\p{L}_][\\p{L}\\p{N}_-]*)(?![^\\s#])/
  k                  keyword        2 word(s)
  """

  for r in table:
    what = "{} word(s)".format(len(r.members)) \
           if isinstance(r, R.SetRule) else "/{}/".format(r.pattern.pattern)
    print("{:18} {:14} {}".format(r.name, r.category, what))
                                                                # }}}1

def test(verbose = False):                                      # {{{1
  """Run doctest on all modules."""
  import doctest, importlib, pkgutil
  tot_f, tot_t = 0, 0
  for x in pkgutil.iter_modules([os.path.dirname(__file__)]):
    m = importlib.import_module("."+x.name, __package__)
    if verbose: print("Testing module {} ...".format(x.name))
    f, t = doctest.testmod(m, verbose = verbose)
    tot_f += f; tot_t += t
    if verbose: print()
  if verbose:
    print("Summary:")
    print("{} passed and {} failed.".format(tot_t - tot_f, tot_f))
    if tot_f == 0: print("Test passed.")
    else: print("***Test Failed*** {} failures.".format(tot_f))
  return 0 if tot_f == 0 else 1
                                                                # }}}1

def main_():
  """Entry point for main program."""
  return main(*sys.argv[1:])

if __name__ == "__main__":
  sys.exit(main_())

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
