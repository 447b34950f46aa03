from __future__ import annotations

import os

from setuptools import setup


def read_version() -> str:
    """Read the version, preferring the PKG_VERSION environment variable."""
    env_version = os.getenv("PKG_VERSION", "").strip()
    if env_version:
        return env_version.lstrip("v")
    return "1.0.0"


setup(
    name="bitmask-codec",
    version=read_version(),
    description="Encode sets of small integer identifiers as fixed-width bitmasks.",
    long_description="Encode sets of small integer identifiers as fixed-width bitmasks.",
    long_description_content_type="text/plain",
    packages=["bitmask"],
    python_requires=">=3.8",
    install_requires=[],
)
