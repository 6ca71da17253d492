#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="pwpattern",
    version="0.1.0",
    description="Password generator with alphabets, custom pools and templates",
    packages=find_packages(include=["pwpattern", "pwpattern.*"]),
    python_requires=">=3.7",
    install_requires=[
        "prompt_toolkit",
        "blessed",
        "pyperclip",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "pwpattern = pwpattern.main:main",
        ],
    },
)
