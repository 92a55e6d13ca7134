# setup.py
from setuptools import setup, find_packages

setup(
    name="tally",
    version="0.1.0",
    description="A small prefix-notation expression language with a macro-driven simplifier",
    packages=find_packages(include=["tally", "tally.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tally=tally.__main__:main"],
    },
    zip_safe=False,
)
