# setup.py - Package metadata
from setuptools import setup, find_packages

setup(
    name="predicate_filters",
    version="0.1.0",
    description="Sets as predicates and filters over finite carriers",
    packages=find_packages(include=["predicate_filters", "predicate_filters.*"]),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
