#!/usr/bin/env python3
"""
Setup script for the OB Order Tracker.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="ob-order-tracker",
    version="1.0.0",
    author="Field Sales Analytics Team",
    description="Field sales order capture and achievement reporting for order bookers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "streamlit",
        "plotly",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "ob-tracker=ob_order_tracker.cli.order_tracker_cli:main",
        ],
    },
)
