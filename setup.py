#!/usr/bin/env python3
"""
Setup script for docgeom.
Bounding box geometry for document analysis results.
"""

from setuptools import find_packages, setup

setup(
    name="docgeom",
    version="0.1.0",
    description="Bounding box geometry for words, lines, cells and tables of analyzed documents",
    packages=find_packages(include=["docgeom", "docgeom.*"]),
    python_requires=">=3.11",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
)
