"""
Setup script for the value_sampler package.
"""

from setuptools import setup, find_packages

setup(
    name="value_sampler",
    version="0.1.0",
    description="Sampling from uniform and weighted discrete distributions",
    packages=find_packages(exclude=["value_sampler.tests", "value_sampler.tests.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.7",
)
