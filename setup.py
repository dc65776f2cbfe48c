#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

setup(
    name="build_log_parser",
    version="0.1.0",
    description="Compiler warning parser for build logs",
    author="Max Qian",
    author_email="lightapt@example.com",
    package_dir={"": "python/tools"},
    packages=find_packages(where="python/tools"),
    python_requires=">=3.11",
    install_requires=[
        "loguru>=0.5.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Build Tools",
    ],
)
