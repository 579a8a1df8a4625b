#!/usr/bin/env python3
"""Setup script for jaro_winkler package.
"""

from setuptools import find_packages, setup

setup(
    name="jaro_winkler",
    version="1.0.0",
    description="Jaro and Jaro-Winkler similarity for strings, bytes and token sequences",
    author="Jaro Winkler Team",
    packages=find_packages(include=["jaro_winkler*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "rapidfuzz>=3.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "types-PyYAML>=6.0.0",
        ],
    },
)
