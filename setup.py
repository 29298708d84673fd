#! /usr/bin/python3

""" Package information for testsorted. """

from setuptools import setup

with open("README.rst", "r") as fh:
    theReadMe = fh.read()

with open("version.txt", "r") as fh:
    theVersion = fh.read().strip()

setup(
    name='testsorted',
    py_modules=['testsorted'],
    version=theVersion,

    description='A fake test binary that prints a sorted case list',
    long_description=theReadMe,
    long_description_content_type='text/x-rst',
    author='testsorted authors',
    license="GPLv3",
    keywords=['test', 'sort', 'caselist'],

    python_requires='>=3.7',

    extras_require={
        'test': ['pytest>=7'],
    },

    entry_points={
        'console_scripts': [
            'test-sorted=testsorted:main',
        ],
    },
)
