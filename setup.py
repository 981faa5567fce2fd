#!/usr/bin/env python3
"""
Build shprint as a Python library

The top level directories are namespace packages without __init__.py, so
they're listed explicitly.
"""
from setuptools import setup

setup(
    name="shprint",
    version="0.1",
    description="Format-preserving pretty printer for shell syntax trees",
    packages=["asdl", "core", "frontend", "mycpp", "tools"],
    python_requires=">=3.6",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
        "dev": ["mypy"],
    },
)
