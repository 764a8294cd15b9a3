# mypy: ignore_errors

# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# Project information
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

project = 'propnf'
copyright = '2024, the propnf authors'
author = 'the propnf authors'
release = '0.1'

# General configuration
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

exclude_patterns = []

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
]

autodoc_class_signature = 'separated'

autodoc_default_options = {
    'member-order': 'bysource',
    'show-inheritance': True,
}

autodoc_type_aliases = {
    'Clause': 'propnf.bnf.Clause',
    'RuleResult': 'propnf.rules.RuleResult',
}

intersphinx_mapping = {
    'sympy': ('https://docs.sympy.org/latest', None),
    'python': ('https://docs.python.org/3', None),
    'pyeda': ('https://pyeda.readthedocs.io/en/latest', None),
}

language = 'en'

python_use_unqualified_type_names = True

templates_path = ['_templates']

# Options for HTML output
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_last_updated_fmt = ''

html_logo = None

html_static_path = ['_static']

html_theme = 'sphinx_book_theme'

html_theme_options = {
    'collapse_navbar': False,
    'home_page_in_toc': True,
    'max_navbar_depth': 4,
    'show_navbar_depth': 2,
    'show_toc_level': 1,  # default is 1
    'use_repository_button': False
}

html_title = 'propnf'
