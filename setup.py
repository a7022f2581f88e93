"""Module used for python packaging

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
"""

import os
import re
import sys

from setuptools import find_packages, setup


def computeVersion():
    path = os.path.join(ROOT, 'kine', 'version.py')
    with open(path) as f:
        match = re.search(r"VERSION = '([^']+)'", f.read())

    assert match is not None
    return match.group(1)


if sys.version_info[:2] < (3, 7):
    print("Error: Kine requires Python 3.7")
    sys.exit(1)

ROOT = os.path.realpath(os.path.join(os.path.dirname(__file__)))

VERSION = computeVersion()


dev_requires = ["wheel", "isort", "mypy", "twine", "black", "pre-commit"]
test_requires = ["pytest"]

with open(os.path.join(ROOT, "requirements.txt")) as f:
    install_requires = f.read().splitlines()

setup(
    name="kine",
    version=VERSION,
    description="Double or halve the number of shards of a kinesis stream.",
    long_description=open(os.path.join(ROOT, "README.md")).read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    zip_safe=False,
    install_requires=install_requires,
    extras_require={"dev": dev_requires, "test": test_requires},
    license="BSD 3",
    include_package_data=True,
    entry_points={"console_scripts": ["kine = kine.runner:main"]},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
    ],
)
