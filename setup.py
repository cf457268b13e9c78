#!/usr/bin/env python3
"""
Setup script for the Pizza Sales Dashboard.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pizza-sales-dashboard",
    version="1.0.0",
    author="Pizza Sales Analytics Team",
    description="Month and product filtering with chart-ready aggregates for pizza sales data",
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
        "numpy",
        "requests",
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
            "pizza-dashboard-cli=pizza_sales_dashboard.cli.dashboard_cli:main",
        ],
    },
)
