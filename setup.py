from setuptools import setup, find_packages
import mlogmode

setup(
  name              = "mlogmode",
  description       = "syntax highlighting for mlog (Mindustry logic)",
  version           = mlogmode.__version__,
  author            = "Felix C. Stegerman",
  author_email      = "flx@obfusk.net",
  license           = "GPLv3+",
  classifiers       = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
    "Topic :: Software Development",
    "Topic :: Text Editors :: Text Processing",
    "Topic :: Text Processing :: Filters",
  ],
  keywords          = "mlog mindustry pygments lexer syntax highlighting",
  packages          = find_packages(include = ["mlogmode"]),
  entry_points      = {
    "console_scripts" : ["mlogmode=mlogmode.__main__:main_"],
    "pygments.lexers" : ["mlog=mlogmode.lexer:MlogLexer"],
  },
  python_requires   = ">=3.6",
  install_requires  = ["pygments", "pyparsing>=3", "regex"],
  extras_require    = { "test": ["coverage", "pytest"] },
  package_data      = { "mlogmode": ["lib/*.vocab"] },
)
