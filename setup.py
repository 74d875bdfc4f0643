"""
Setup script for career-roadmap project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="career-roadmap",
    version="0.1.0",
    packages=find_packages(include=["career_roadmap", "career_roadmap.*"]),
    package_data={"career_roadmap": ["data/*.json"]},
    python_requires=">=3.11",
    install_requires=[
        "python-dotenv",
        "requests",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
