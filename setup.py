#!/usr/bin/env python

import os
import re

from setuptools import setup, find_packages


def find_version(*segments):
    root = os.path.abspath(os.path.dirname(__file__))
    abspath = os.path.join(root, *segments)
    with open(abspath, "r") as file:
        content = file.read()
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", content, re.MULTILINE)
    if match:
        return match.group(1)
    raise RuntimeError("Unable to find version string!")


setup(
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    description="Adapts Docker manifest v2.1 (schema 1) images to the modern image capability set.",
    extras_require={
        "dev": [
            "black",
            "pylint",
            "pytest",
            "twine",
            "wheel",
        ],
        "test": ["pytest", "pytest-xdist"],
    },
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "canonicaljson",
    ],
    keywords="docker docker-registry image manifest oci schema1",
    license="Apache License 2.0",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    name="docker_schema1_image",
    packages=find_packages(exclude=["tests", "tests.*"]),
    tests_require=[
        "pytest",
    ],
    test_suite="tests",
    version=find_version("docker_schema1_image", "__init__.py"),
)
