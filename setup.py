#!/usr/bin/env python

from setuptools import setup


VERSION = "0.1a1"

setup(
    name="xmlscribe",
    version=VERSION,
    packages=["_xmlscribe", "_xmlscribe.plugins", "xmlscribe"],
    python_requires=">=3.10",
    install_requires=["pluggy", "typing_extensions; python_version < '3.11'"],
    extras_require={"tests": ["lxml", "pytest"]},
)
