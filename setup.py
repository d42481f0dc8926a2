#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: setup.py
# Author: Wadih Khairallah
# Description: 
# Created: 2026-10-12 09:02:11
# Modified: 2026-10-19 10:40:06

from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).parent

def read_requirements():
    return [
        line.strip()
        for line in (here / "requirements.txt").read_text().splitlines()
        if line and not line.startswith("#")
    ]

def get_version():
    version_file = here / "peerlens" / "__version__.py"
    version_ns = {}
    exec(version_file.read_text(), version_ns)
    return version_ns["__version__"]

setup(
    name="peerlens",
    version=get_version(),
    author="Wadih Khairallah",
    author_email="woodyk@gmail.com",
    description="Content analysis and similarity detection for peer review.",
    long_description=(here / "README.md").read_text(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["peerlens", "peerlens.*"]),
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "peerlens = peerlens.cli:main",
        ],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
