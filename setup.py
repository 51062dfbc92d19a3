# setup.py
from setuptools import setup, find_packages

setup(
    name="natpl",
    version="0.1.0",
    description="Evaluation core of a unit-aware calculator language",
    packages=find_packages(include=["natpl", "natpl.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
