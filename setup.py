#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os.path
import re
from pkgutil import walk_packages

from setuptools import setup


def find_packages(path=["."], prefix=""):
    yield prefix
    prefix = prefix + "."
    for _, name, ispkg in walk_packages(path, prefix):
        if ispkg:
            yield name


def read_requirements(filename):
    requirements = []
    with open(filename) as requirements_file:
        for req in requirements_file.read().splitlines():
            # skip comments, hash lines and includes
            if not req.strip() or re.match(r"\s*(#|--hash|-r)", req):
                continue
            requirements.append(req.split(" ")[0])
    return requirements


with open(os.path.join("pagemodel", "version.txt"), "r") as version_file:
    version = version_file.read().strip()

with open("README.rst", "rb") as readme_file:
    readme = readme_file.read().decode("utf-8")

with open("HISTORY.rst", "rb") as history_file:
    history = history_file.read().decode("utf-8")

setup(
    name="pagemodel",
    version=version,
    description="Page objects for Selenium and Appium UI tests",
    long_description=readme + "\n\n" + history,
    long_description_content_type="text/x-rst",
    author="pagemodel contributors",
    packages=list(find_packages(["pagemodel"], "pagemodel")),
    package_dir={"pagemodel": "pagemodel"},
    package_data={"pagemodel": ["version.txt"]},
    entry_points={
        "pytest11": [
            "pagemodel=pagemodel.pytest_plugin",
        ]
    },
    include_package_data=True,
    install_requires=read_requirements("requirements/prod.txt"),
    extras_require={"test": read_requirements("requirements/dev.txt")},
    license="BSD license",
    zip_safe=False,
    keywords="pagemodel selenium appium robotframework page-object",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Framework :: Pytest",
        "Framework :: Robot Framework :: Library",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Testing",
    ],
    python_requires=">=3.8",
)
