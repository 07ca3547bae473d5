"""langlex installation script."""

from codecs import open
from os import path

from setuptools import find_packages, setup

import langlex

VERSION = str(langlex.__version__)

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='langlex',
    version=VERSION,

    description='Keyword and identifier tokenizer for a small language',
    long_description=long_description,
    long_description_content_type='text/markdown',

    license='MIT',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: Software Development :: Compilers',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
    ],

    keywords='lexer tokenizer keywords compiler',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.6',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },

    entry_points={
        'console_scripts': [
            'langlex=langlex.main:main',
        ],
    },
)
