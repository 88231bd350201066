"""
Sphinx configuration for the chaumian documentation.
"""
import os
import sys
sys.path.insert(0, os.path.abspath('../src'))

# Project metadata is kept in a single place (``setup.py``).
with open('../setup.py') as setup_file:
    setup_source = setup_file.read()
project = setup_source.split("name = '")[1].split("'")[0]
version = setup_source.split("version = '")[1].split("'")[0]
release = version
author = setup_source.split("author='")[1].split("'")[0]
copyright = '2024, ' + author # pylint: disable=redefined-builtin

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
    'sphinx.ext.intersphinx'
]
templates_path = ['_templates']
exclude_patterns = ['_build']

autodoc_member_order = 'bysource'
autodoc_default_options = {
    'special-members': True,
    'exclude-members': ','.join([
        '__new__', '__init__', '__weakref__', '__module__', '__hash__',
        '__dict__', '__annotations__', '__abstractmethods__'
    ])
}
autodoc_preserve_defaults = True

# Make the two backends available to doctests run by ``sphinx.ext.doctest``.
doctest_global_setup = 'from chaumian.secp256k1 import *'

BACKENDS = ('python', 'libsecp256k1')
BACKEND_CLASSES = ('point', 'scalar', 'field')

def skip_backend_duplicates(app, what, name, obj, skip, options):
    # The ``point``, ``scalar`` and ``field`` classes inside each backend
    # share their interface with the exported classes; document them once.
    if name in BACKENDS and obj is not None:
        for attribute in BACKEND_CLASSES:
            cls = getattr(obj, attribute, None)
            if cls is not None:
                setattr(obj, attribute, type(cls.__name__, cls.__bases__, {
                    key: value for (key, value) in cls.__dict__.items()
                    if key in ('__module__', '__new__')
                }))
    return skip

def hide_abstract_bases(app, name, obj, options, bases):
    # Only the ``bytes`` base is meaningful to readers; the abstract
    # contract classes are documented in the ``algebra`` module.
    if bases and bases[0] is not bytes:
        bases[:] = [object]

def setup(app):
    app.connect('autodoc-skip-member', skip_backend_duplicates)
    app.connect('autodoc-process-bases', hide_abstract_bases)

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'ecdsa': ('https://ecdsa.readthedocs.io/en/latest', None)
}

html_theme = 'sphinx_rtd_theme'
