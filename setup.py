from setuptools import setup, find_packages

setup(
    name="ciplan",
    version="0.1.0",
    description="Build modes for the CI workflow step",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords=["ci", "cargo"],
    python_requires=">=3.11",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "returns>=0.19",
        "toml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "ciplan = ciplan.main:main",
        ]
    },
    setup_requires=[
        "setuptools>=42",
    ],
)
