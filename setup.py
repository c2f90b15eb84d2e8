import re
from setuptools import setup

__version__ ,= re.findall('__version__: str = "(.*)"', open('llsets/__init__.py').read())

setup(
    name = "llsets",
    version = __version__,
    packages = ['llsets', 'llsets.analysis', 'llsets.tools', 'llsets.grammars'],

    requires = [],
    install_requires = [],
    python_requires = ">=3.11",

    extras_require = {
        "test": ["pytest"],
    },

    package_data = {'': ['*.md', '*.toml']},

    test_suite = 'tests.__main__',

    # metadata for upload to PyPI
    description = "nullable and FIRST set analysis of context-free grammars",
    license = "MIT",
    keywords = "grammar LL1 FIRST nullable parser analysis",
    long_description='''
llsets analyses context-free grammars ahead of predictive (LL(1)) parser construction.

Main Features:
 - Symbol, production and grammar model with strict and permissive construction
 - Nullable non-terminals, computed as a monotone fixed point
 - FIRST sets, resolved over the strongly connected components of the
   dependency graph, so left recursion (direct, mutual or indirect) is handled
 - TOML grammar files
 - Command-line front end
''',

    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Compilers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
    ],
    entry_points = {
        'console_scripts': [
            'llsets = llsets.tools.analyze:main'
        ]
    },
)
