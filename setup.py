from setuptools import setup, find_namespace_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="marsclock",
    version="0.1.0",
    description="Convert Earth (UTC) time to local Martian sol time.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["marsclock", "marsclock.*"]),
    python_requires=">=3.9",
    install_requires=[
        "cytoolz",
        "more-itertools>=8.10",
        "numpy",
        "pandas",
        "python-dateutil",
    ],
    extras_require={
        "tests": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["marsclock = marsclock.clock:main"],
    },
)
