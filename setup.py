# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='propnf',
    version='0.1.0',
    description="Rule-based rewriting of propositional formulas into normal forms",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=['tests']),
    python_requires='>=3.11',
    install_requires=[
        'ipython',
        'pyeda',
        'sympy',
        'typing_extensions'
    ],
    extras_require={
        'doc': ['sphinx', 'sphinx_book_theme'],
        'test': ['pytest']
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
        "Operating System :: OS Independent",
    ],
)
