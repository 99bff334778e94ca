#!/usr/bin/env python

import re
import setuptools
from pathlib import Path


def read_version() -> str:
    content = Path(__file__).parent.joinpath("src", "keyprune", "version.py").read_text()
    return re.search(r'^__version__ = "([^"]+)"', content, re.MULTILINE).group(1)


setuptools.setup(
    name="key-pruner",
    version=read_version(),
    description="Recursively removes keys from nested data structures.",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.9",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "rich~=13.0",
    ],
    extras_require={
        "test": ["pytest~=8.0"],
    },
    entry_points={
        "console_scripts": [
            "key-pruner = keyprune.cli:main",
        ]
    },
)
