"""
setup.py

Сборка пакета.

Использование:
    pip install -e .[test]
    python main.py
"""

from setuptools import setup, find_packages

setup(
    name="triangle_peg_solver",
    version="1.0.0",
    description="Backtracking solver for the 15-hole triangle peg puzzle (Cracker Barrel)",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "triangle-peg-solver=main:main",
        ],
    },
    zip_safe=False,
)
