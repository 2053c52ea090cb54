#!/usr/bin/env python3
import setuptools

setuptools.setup(
    name="order-imports",
    version="0.1.0",
    packages=["order_imports"],
    python_requires=">=3.8",
    install_requires=[
        "click>=8.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "order-imports = order_imports.cli:main",
        ],
    },
    author="",
    description="Command-line tool to group and sort import blocks in Go source files",
    license="MIT",
)
