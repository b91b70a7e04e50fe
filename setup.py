from setuptools import setup, find_packages

setup(
    name="quicksort-lab",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "scipy>=1.10.0",
        "matplotlib>=3.7.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    description="Quicksort variants (in-place, functional, randomized) with a reproducible benchmark harness",
    python_requires=">=3.10",
)
