#!/usr/bin/env python
# -*- encoding: utf-8 -*-

#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

from pathlib import Path

from setuptools import find_packages
from setuptools import setup

__version__ = "11.0.0"

ROOT_DIR = Path(__file__).resolve().parent

requirement_files = ["etc/requirements/base.txt"]

all_requirements = [
    r.strip()
    for req_file in requirement_files
    for r in ROOT_DIR.joinpath(req_file).read_text().splitlines()
    if r.strip() and not r.strip().startswith("#")
]

setup(
    name="scorecardio",
    version=__version__,
    license="Apache-2.0",
    description="ScoreCard.io",
    long_description="OpenSSF Scorecard lookup service.",
    author="nexB Inc.",
    url="https://github.com/nexB/scancode.io",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    include_package_data=True,
    zip_safe=False,
    python_requires=">= 3.9",
    install_requires=all_requirements,
    extras_require={
        "dev": [
            "pytest",
            "pytest-django",
        ],
    },
    entry_points={
        "console_scripts": [
            "scorecardio = scorecardio:command_line",
        ],
    },
    classifiers=[
        # complete classifiers list
        # http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Information Technology",
        "Framework :: Django",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: POSIX",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Security",
        "Topic :: Utilities",
    ],
    keywords=[
        "open source",
        "security",
        "supply chain",
        "scorecard",
        "openssf",
        "dependency",
    ],
)
