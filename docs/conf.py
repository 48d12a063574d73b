#!/usr/bin/env python3
import sys
import os
import os.path as path
import datetime

### -- General options -- ###

# Make autodoc and import work.
if path.exists(path.join('..', 'tmiline')):
    sys.path.insert(0, os.path.abspath('..'))
import tmiline


# General information about the project.
project = tmiline.__name__
copyright = '2026-{current}, the tmiline authors'.format(current=datetime.date.today().year)
version = release = tmiline.__version__

# Sphinx extensions to use.
extensions = [
    # Generate API description from code.
    'sphinx.ext.autodoc',
    # Generate unit tests from docstrings.
    'sphinx.ext.doctest',
    # Link to Sphinx documentation for related projects.
    'sphinx.ext.intersphinx',
    # Include full source code with documentation.
    'sphinx.ext.viewcode'
]

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None)
}

templates_path = ['_templates']
exclude_patterns = ['_build']
source_suffix = '.rst'
master_doc = 'index'
pygments_style = 'trac'


### -- HTML output -- ###

if os.environ.get('READTHEDOCS', None) != 'True':
    import sphinx_rtd_theme
    html_theme = "sphinx_rtd_theme"
    html_theme_path = [ sphinx_rtd_theme.get_html_theme_path() ]

html_show_sphinx = False
htmlhelp_basename = 'tmilinedoc'


### -- Manual page output -- ###

man_pages = [
    ('index', 'tmiline', 'tmiline Documentation', ['the tmiline authors'], 1)
]


### -- Autodoc -- ###

def skip(app, what, name, obj, skip, options):
    if skip:
        return True
    if name.startswith('_') and name != '__init__':
        return True
    return False

def setup(app):
    app.connect('autodoc-skip-member', skip)
