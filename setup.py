#! /usr/bin/env python
"""
setup.py for latticeRDF
"""

# System imports
import io
from os import path
from setuptools import setup, find_packages

PACKAGES = find_packages(exclude=['tests*', 'scripts*', 'docs*'])

# versioning

THIS_DIRECTORY = path.abspath(path.dirname(__file__))
ABOUT = {}
with io.open(path.join(THIS_DIRECTORY, 'latticeRDF', 'version.py')) as f:
    exec(f.read(), ABOUT)

ISRELEASED = False
VERSION = ABOUT['__version__']

with io.open(path.join(THIS_DIRECTORY, 'README.md')) as f:
    LONG_DESCRIPTION = f.read()

INFO = {
        'name': 'latticeRDF',
        'description': 'Radial distribution functions of particle types '
                       'on periodic lattice simulations.',
        'packages': PACKAGES,
        'include_package_data': True,
        'python_requires': '>=3.10',
        'install_requires': ['numpy', 'numba', 'tqdm', 'matplotlib'],
        'extras_require': {'test': ['pytest']},
        'version': VERSION,
        'license': 'MIT',
        'long_description': LONG_DESCRIPTION,
        'long_description_content_type': 'text/markdown',
        'classifiers': ['Development Status :: 4 - Beta',
                        'Intended Audience :: Science/Research',
                        'License :: OSI Approved :: MIT License',
                        'Natural Language :: English',
                        'Operating System :: OS Independent',
                        'Programming Language :: Python :: 3.10',
                        'Topic :: Scientific/Engineering',
                        'Topic :: Scientific/Engineering :: Physics']
        }

####################################################################
# this is where setup starts
####################################################################


def setup_package():
    """
    Runs package setup
    """
    setup(**INFO)


if __name__ == '__main__':
    setup_package()
