# setup.py
from setuptools import setup, find_packages

setup(
    name="shape-schema",              # the *distribution* name on PyPI
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),  # will find shape_schema/
    python_requires=">=3.10",
    install_requires=["pandas"],      # DataFrame rows + the "dataframe" category
    extras_require={
        "test": ["pytest"],
    },
    description="Schema-based validation and coercion for decoded Python data",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
