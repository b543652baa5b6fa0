"""
setup.py

Установка Marble Solitaire Solver.

Использование:
    pip install -e .            # пакет и Flask API
    pip install -e .[test]      # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="marble_solitaire_solver",
    version="1.0.0",
    description="Backtracking solver for the 33-hole marble solitaire",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.9",
    install_requires=[
        "flask>=2.2",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "marble-solver=main:main",
        ],
    },
    zip_safe=False,
)
