#!/usr/bin/python3

# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

#
# A setup.py file
#

from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

version = "1.0"

with open(path.join(here, 'README.md'), 'r') as f:
    long_description = f.read()

setup(
    name='dsfilters',
    license='GPLv3+',
    version=version,
    description='Search filter frequency analysis of 389 Directory Server ' +
                'and OpenLDAP access logs',
    long_description=long_description,
    long_description_content_type='text/markdown',

    author='Red Hat Inc.',
    author_email='389-devel@lists.fedoraproject.org',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: System Administrators',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Systems Administration :: Authentication/Directory :: LDAP',
        'Topic :: System :: Logging'],

    keywords='389 directory server ldap access log filter index',
    packages=find_packages(exclude=['tests*']),
    python_requires='>=3.7',

    scripts=[
        'cli/analyze-filters',
        ],

    install_requires=[
        'argcomplete',
        ],

    extras_require={
        'test': ['pytest'],
        },
)
