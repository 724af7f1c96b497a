"""expr-calc - Arithmetic Expression Calculator."""
from setuptools import setup, find_packages

setup(
    name="expr-calc",
    version="1.0.0",
    description="Recursive-descent arithmetic expression calculator with history",
    author="Morten Elmstroem Hansen",
    packages=find_packages(include=["expr_calc", "expr_calc.*"]),
    install_requires=[
        "click>=8.1.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "expr-calc=expr_calc.cli:main",
            "calc=expr_calc.cli:main",  # Short alias
        ],
    },
    python_requires=">=3.10",
)
