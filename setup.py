import os

from setuptools import find_packages, setup

setup(
    name="vouch",
    version="0.1.0",
    packages=find_packages(include=["vouch", "vouch.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic[email]>=2.10.6,<3.0.0",
        "pydantic-core",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="Vouch Contributors",
    description="Small composable validators and an object field combinator",
    long_description=open("README.md").read()
    if os.path.exists("README.md")
    else "",
    long_description_content_type="text/markdown",
)
