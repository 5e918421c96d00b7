"""Package setup for schlep-sdk."""

from setuptools import setup, find_packages

setup(
    name="schlep-sdk",
    version="0.2.0",
    description="Typed Python client for the Schlep-engine API",
    packages=find_packages(include=["schlep_sdk", "schlep_sdk.*"]),
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.25.0",
        "pydantic>=2.0.0",
        "websockets>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
)
