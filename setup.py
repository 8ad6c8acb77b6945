#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import find_packages, setup


# Load the __version__ variable
exec(open('taproom/__version__.py').read())


with open('README.rst') as readme_file:
    long_description = readme_file.read()


setup_kwargs = {
    'name': "taproom",
    'version': __version__,  # noqa
    'description': "Beer catalogue client built on a minimal Deferred",
    'long_description': long_description,
    'author': "taproom contributors",
    'license': "MIT",
    'classifiers': [
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries"
    ],
    'keywords': "deferred promise async http",
    'packages': find_packages(exclude=['tests', 'tests.*']),
    'python_requires': '>=3.6',
    'install_requires': [
        'appdirs>=1.4',
        'requests>=2.6.0'
    ],
    'extras_require': {
        'test': ['pytest', 'tox']
    },
    'entry_points': {
        "console_scripts": [
            "taproom=taproom:main"
        ]
    },
    'zip_safe': False
}


setup(**setup_kwargs)
